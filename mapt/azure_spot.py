"""Choosing the best Azure spot offering from price history and eviction rates."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, TypeVar

from mapt.util import random_item

logger = logging.getLogger("mapt")

T = TypeVar("T")

_PRICE_QUERY = (
    "SpotResources | where type =~ 'microsoft.compute/skuspotpricehistory/ostype/location' "
    "and sku.name in~ ({vm_types}) and properties.osType =~ '{os_type}'"
    "| project skuName=tostring(sku.name),osType=tostring(properties.osType),"
    "location,latestSpotPriceUSD=todouble(properties.spotPrices[0].priceUSD)"
    "| order by latestSpotPriceUSD asc"
)

_EVICTION_QUERY = (
    "SpotResources | where type =~ 'microsoft.compute/skuspotevictionrate/location' "
    "and sku.name in~ ({vm_types})"
    "| project skuName=tostring(sku.name),location,spotEvictionRate=tostring(properties.evictionRate) "
)


class EvictionRate(IntEnum):
    """Eviction rate bands, ordered from least to most likely eviction."""

    LOWEST = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    HIGHEST = 4


DEFAULT_EVICTION_RATE = EvictionRate.LOWEST

_EVICTION_RATE_NAMES = {
    "lowest": EvictionRate.LOWEST,
    "low": EvictionRate.LOW,
    "medium": EvictionRate.MEDIUM,
    "high": EvictionRate.HIGH,
    "highest": EvictionRate.HIGHEST,
}

_EVICTION_RATE_VALUES = {
    EvictionRate.LOWEST: "0-5",
    EvictionRate.LOW: "5-10",
    EvictionRate.MEDIUM: "10-15",
    EvictionRate.HIGH: "15-20",
    EvictionRate.HIGHEST: "20+",
}


@dataclass(frozen=True)
class PriceHistory:
    """Latest spot price of a VM size at a location."""

    vm_type: str
    os_type: str
    location: str
    price: float

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> PriceHistory:
        """Build from a resource graph result row."""
        return cls(
            vm_type=str(record.get("skuName", "")),
            os_type=str(record.get("osType", "")),
            location=str(record.get("location", "")),
            price=float(record.get("latestSpotPriceUSD", 0.0)),
        )


@dataclass(frozen=True)
class EvictionRateRecord:
    """Spot eviction rate band of a VM size at a location."""

    vm_type: str
    location: str
    eviction_rate: str

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> EvictionRateRecord:
        """Build from a resource graph result row."""
        return cls(
            vm_type=str(record.get("skuName", "")),
            location=str(record.get("location", "")),
            eviction_rate=str(record.get("spotEvictionRate", "")),
        )


@dataclass(frozen=True)
class SpotChoice:
    """A selected spot offering."""

    vm_type: str
    location: str
    price: float
    eviction_rate: str = ""


def _quoted_list(values: Iterable[str]) -> str:
    return ",".join(f"'{v}'" for v in values)


def build_price_query(vm_types: Iterable[str], os_type: str) -> str:
    """Resource graph query for spot prices, cheapest first."""
    return _PRICE_QUERY.format(vm_types=_quoted_list(vm_types), os_type=os_type)


def build_eviction_query(vm_types: Iterable[str]) -> str:
    """Resource graph query for spot eviction rates."""
    return _EVICTION_QUERY.format(vm_types=_quoted_list(vm_types))


def os_type_for(os_name: str | None) -> str:
    """Map an operating system name to the spot OS type; empty if unknown."""
    if os_name is None:
        return "linux"
    if os_name in ("fedora", "RHEL", "rhel", "ubuntu"):
        return "linux"
    if os_name in ("windows", "Windows"):
        return "windows"
    return ""


def parse_eviction_rate(name: str) -> EvictionRate | None:
    """Eviction rate for a case-insensitive band name, or None if unknown."""
    return _EVICTION_RATE_NAMES.get(name.lower())


def higher_eviction_rate(current: EvictionRate) -> EvictionRate | None:
    """The band preceding ``current`` in order; None when ``current`` is the first."""
    ordered = sorted(EvictionRate)
    index = ordered.index(EvictionRate(current))
    if index == 0:
        return None
    return ordered[index - 1]


def eviction_rate_value(rate: EvictionRate) -> str:
    """The percentage range reported for an eviction rate band."""
    return _EVICTION_RATE_VALUES[EvictionRate(rate)]


def exclude_regions(records: Iterable[T], excluded_regions: Iterable[str] | None) -> list[T]:
    """Drop records whose ``location`` is among ``excluded_regions``."""
    excluded = set(excluded_regions or ())
    if not excluded:
        return list(records)
    return [r for r in records if getattr(r, "location") not in excluded]


def _always_offered(location: str) -> bool:
    return True


def best_spot_choice(
    prices: Sequence[PriceHistory],
    evictions: Iterable[EvictionRateRecord],
    max_tolerance: EvictionRate = DEFAULT_EVICTION_RATE,
    image_offered: Callable[[str], bool] | None = None,
) -> SpotChoice:
    """Pick a random offering among those in the lowest eviction band.

    ``image_offered`` tells whether the image is available at a location.
    Raises LookupError when no offering fits within ``max_tolerance``.
    """
    offered = image_offered or _always_offered
    rates = {(e.location, e.vm_type): e.eviction_rate for e in evictions}
    current = EvictionRate.LOWEST
    while True:
        wanted = eviction_rate_value(current)
        choices = [
            SpotChoice(p.vm_type, p.location, p.price, wanted)
            for p in prices
            if rates.get((p.location, p.vm_type)) == wanted and offered(p.location)
        ]
        if choices:
            return random_item(choices)
        if current == max_tolerance:
            raise LookupError("could not find any spot with minimum eviction rate")
        higher = higher_eviction_rate(current)
        if higher is None:
            raise LookupError("could not find any spot")
        current = higher


def spot_choice_by_price(
    prices: Sequence[PriceHistory],
    image_offered: Callable[[str], bool] | None = None,
) -> SpotChoice:
    """Pick an offering on price alone.

    With more than three candidates the cheapest and dearest thirds are
    skipped and one of the rest is picked at random.
    """
    offered = image_offered or _always_offered
    choices = [SpotChoice(p.vm_type, p.location, p.price) for p in prices if offered(p.location)]
    if not choices:
        raise LookupError("could not find any spot")
    if len(choices) > 3:
        third = len(choices) // 3
        return random_item(choices[third : len(choices) - third])
    return random_item(choices)