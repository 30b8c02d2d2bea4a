"""Azure identity environment and resource group locations."""

from __future__ import annotations

import os
from collections.abc import MutableMapping

AZ_IDENTITY_ENVS = (
    "AZURE_TENANT_ID",
    "AZURE_SUBSCRIPTION_ID",
    "AZURE_CLIENT_ID",
    "AZURE_CLIENT_SECRET",
)

LOCATIONS_SUPPORTING_RESOURCE_GROUP = (
    "eastasia",
    "southeastasia",
    "australiaeast",
    "australiasoutheast",
    "brazilsouth",
    "canadacentral",
    "canadaeast",
    "switzerlandnorth",
    "germanywestcentral",
    "eastus2",
    "eastus",
    "centralus",
    "northcentralus",
    "francecentral",
    "uksouth",
    "ukwest",
    "centralindia",
    "southindia",
    "jioindiawest",
    "italynorth",
    "japaneast",
    "japanwest",
    "koreacentral",
    "koreasouth",
    "mexicocentral",
    "northeurope",
    "norwayeast",
    "polandcentral",
    "qatarcentral",
    "spaincentral",
    "swedencentral",
    "uaenorth",
    "westcentralus",
    "westeurope",
    "westus2",
    "westus",
    "southcentralus",
    "westus3",
    "southafricanorth",
    "australiacentral",
    "australiacentral2",
    "israelcentral",
    "westindia",
    "newzealandnorth",
)


def set_identity_envs(environ: MutableMapping[str, str] | None = None) -> None:
    """Copy each ``ARM_*`` identity variable to its ``AZURE_*`` name.

    A missing ``ARM_*`` variable sets the ``AZURE_*`` one to an empty string.
    """
    env = os.environ if environ is None else environ
    for name in AZ_IDENTITY_ENVS:
        env[name] = env.get(name.replace("AZURE", "ARM"), "")


def supports_resource_group(location: str) -> bool:
    """Whether a resource group can be created in ``location``."""
    return location in LOCATIONS_SUPPORTING_RESOURCE_GROUP


def suitable_resource_group_location(location: str) -> str:
    """``location`` if it supports resource groups, otherwise the first one that does."""
    if supports_resource_group(location):
        return location
    return LOCATIONS_SUPPORTING_RESOURCE_GROUP[0]