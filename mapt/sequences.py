"""Helpers for sorting, grouping and transforming collections."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def sort_by_float(items: list[T], key: Callable[[T], float]) -> None:
    """Sort ``items`` in place, ascending by the float returned by ``key``."""
    items.sort(key=key)


def split(items: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Group ``items`` into lists keyed by ``key(item)``, keeping input order."""
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def convert_map(
    source: Mapping[Any, Any],
    convert_key: Callable[[Any], Any],
    convert_value: Callable[[Any], Any],
) -> dict[Any, Any]:
    """Build a new dict by converting every key and value of ``source``."""
    return {convert_key(k): convert_value(v) for k, v in source.items()}