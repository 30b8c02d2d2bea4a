"""Small general-purpose helpers: conditional selection, string splitting, randomness."""

from __future__ import annotations

import math
import random
import secrets
from collections.abc import Callable, Sequence
from typing import TypeVar

T = TypeVar("T")


def choose(cond: bool, if_true: T, if_false: T) -> T:
    """Return ``if_true`` when ``cond`` holds, otherwise ``if_false``."""
    return if_true if cond else if_false


def choose_lazy(cond: bool, if_true: Callable[[], T], if_false: T) -> T:
    """Like :func:`choose`, but ``if_true`` is a callable evaluated only when needed."""
    return if_true() if cond else if_false


def split_string(source: str, delimiter: str) -> list[str]:
    """Split ``source`` on ``delimiter``; an empty leading part yields an empty list."""
    parts = source.split(delimiter)
    return parts if parts[0] else []


def average(values: Sequence[float]) -> float:
    """Arithmetic mean of ``values``; NaN for an empty sequence."""
    if not values:
        return math.nan
    return sum(values) / len(values)


def random_between(maximum: int, minimum: int) -> int:
    """Random integer in the closed range ``[minimum, maximum]``."""
    if maximum < minimum:
        raise ValueError(f"invalid range: maximum {maximum} is below minimum {minimum}")
    return random.randint(minimum, maximum)


def random_item(items: Sequence[T]) -> T:
    """Pick a random element; raises IndexError on an empty sequence."""
    if not items:
        raise IndexError("cannot pick an item from an empty sequence")
    return items[random_between(len(items) - 1, 0)]


def random_id(name: str) -> str:
    """Return ``name`` followed by eight random hexadecimal digits."""
    return f"{name}{secrets.token_hex(4)}"