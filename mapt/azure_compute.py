"""Selection of Azure VM sizes from resource SKU listings."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

# Standard D, E and F series support nested virtualization.
_NESTED_VIRT_PATTERNS = (
    re.compile(r"standardD.*v[3-6]Family\Z"),
    re.compile(r"standardE.*v[3-6]Family\Z"),
    re.compile(r"standardF.*v\dFamily\Z"),
)
# Constrained-vCPU sizes such as Standard_E4-2s_v5.
_LOWER_CPU_PATTERN = re.compile(r"Standard.*-.*_v\d\Z")

_INT_RE = re.compile(r"[+-]?\d+")
_UINT_RE = re.compile(r"\d+")
_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}

_INT_CAPS = {"vCPUs": "vcpus", "vCPUsPerCore": "vcpus_per_core", "MemoryGB": "memory"}
_BOOL_CAPS = {
    "AcceleratedNetworkingEnabled": "accelerated_networking_enabled",
    "EncryptionAtHostSupported": "encryption_at_host_supported",
    "LowPriorityCapable": "low_priority_capable",
    "PremiumIO": "premium_io",
}
_LIST_CAPS = {
    "HyperVGenerations": "hyperv_generations",
    "VMDeploymentTypes": "vm_deployment_types",
}


def _parse_int32(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(text)
    value = int(text)
    if not -(2**31) <= value < 2**31:
        raise ValueError(text)
    return value


def _parse_bool(text: str) -> bool:
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(text)


def _parse_volume_mb(text: str) -> int:
    if not _UINT_RE.fullmatch(text):
        raise ValueError(text)
    value = int(text)
    if value >= 2**64:
        raise ValueError(text)
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


@dataclass
class VirtualMachine:
    """The capabilities of one Azure VM size."""

    name: str
    family: str
    vcpus: int = 0
    vcpus_per_core: int = 0
    memory: int = 0
    hyperv_generations: list[str] = field(default_factory=list)
    arch: str = ""
    low_priority_capable: bool = False
    max_resource_volume_mb: int = 0
    vm_deployment_types: list[str] = field(default_factory=list)
    premium_io: bool = False
    accelerated_networking_enabled: bool = False
    encryption_at_host_supported: bool = False

    @classmethod
    def from_sku(cls, sku: Mapping[str, Any]) -> VirtualMachine | None:
        """Build from a resource SKU record.

        Returns None for non-VM resources, restricted SKUs, or capabilities
        whose values cannot be parsed.
        """
        resource_type = sku.get("resourceType")
        if resource_type is not None and resource_type != "virtualMachines":
            return None
        if sku.get("restrictions"):
            return None
        values: dict[str, Any] = {}
        try:
            for capability in sku.get("capabilities") or ():
                name, value = capability["name"], capability["value"]
                if name in _INT_CAPS:
                    values[_INT_CAPS[name]] = _parse_int32(value)
                elif name in _BOOL_CAPS:
                    values[_BOOL_CAPS[name]] = _parse_bool(value)
                elif name in _LIST_CAPS:
                    values[_LIST_CAPS[name]] = value.split(",")
                elif name == "CpuArchitectureType":
                    values["arch"] = value
                elif name == "MaxResourceVolumeMB":
                    values["max_resource_volume_mb"] = _parse_volume_mb(value)
        except ValueError:
            return None
        return cls(name=sku["name"], family=sku["family"], **values)

    def nested_virt_supported(self) -> bool:
        """Whether the VM family supports nested virtualization."""
        return any(p.search(self.family) for p in _NESTED_VIRT_PATTERNS)

    def hyperv_gen2_supported(self) -> bool:
        """Whether Hyper-V generation 2 images can run on this size."""
        return "V2" in self.hyperv_generations

    def empty_disk_supported(self) -> bool:
        """Whether the size comes without a local resource disk."""
        return self.max_resource_volume_mb == 0

    def base_features_supported(self) -> bool:
        """Whether all features required for provisioning are present."""
        return (
            self.accelerated_networking_enabled
            and self.premium_io
            and self.encryption_at_host_supported
            and self.empty_disk_supported()
            and self.hyperv_gen2_supported()
        )


def _matches(
    vm: VirtualMachine, cpus: int, memory_gib: int, arch: str, nested_virt: bool
) -> bool:
    if nested_virt and not vm.nested_virt_supported():
        return False
    return (
        vm.vcpus >= cpus
        and vm.memory >= memory_gib
        and vm.arch == arch
        and vm.base_features_supported()
        and not _LOWER_CPU_PATTERN.search(vm.name)
    )


def filter_vms(
    skus: Iterable[Mapping[str, Any]],
    cpus: int,
    memory_gib: int,
    arch: str,
    nested_virt: bool,
    max_results: int,
) -> list[str]:
    """Names of VM sizes meeting the request, fewest vCPUs first, without duplicates."""
    machines = [vm for vm in map(VirtualMachine.from_sku, skus) if vm is not None]
    machines.sort(key=lambda vm: vm.vcpus)
    names: list[str] = []
    for vm in machines:
        if len(names) >= max_results:
            break
        if vm.name not in names and _matches(vm, cpus, memory_gib, arch, nested_virt):
            names.append(vm.name)
    return names


def filter_offered_by_location(
    skus: Iterable[Mapping[str, Any]], vm_sizes: Iterable[str], location: str
) -> list[str]:
    """Those of ``vm_sizes`` whose SKU lists ``location``, in SKU order, once each."""
    wanted = set(vm_sizes)
    offerings: list[str] = []
    for sku in skus:
        name = sku["name"]
        if name in wanted and name not in offerings and location in (sku.get("locations") or ()):
            offerings.append(name)
    return offerings