"""An in-memory key/value cache whose entries expire."""

from __future__ import annotations

import pickle
import time
from collections.abc import Callable
from typing import Any

DEFAULT_EXPIRE_SECONDS = 60


class Cache:
    """Stores serialised copies of values for a limited time.

    An ``expire_seconds`` of zero or less keeps entries forever.
    """

    def __init__(
        self,
        expire_seconds: float = DEFAULT_EXPIRE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._expire_seconds = expire_seconds
        self._clock = clock
        self._store: dict[str, tuple[bytes, float | None]] = {}

    def add(self, key: str, value: Any) -> None:
        """Store a copy of ``value`` under ``key``, replacing any previous entry."""
        payload = pickle.dumps(value)
        expires_at = (
            self._clock() + self._expire_seconds if self._expire_seconds > 0 else None
        )
        self._store[key] = (payload, expires_at)

    def get(self, key: str) -> Any:
        """Return a copy of the value for ``key``; raises KeyError if absent or expired."""
        try:
            payload, expires_at = self._store[key]
        except KeyError:
            raise KeyError(key) from None
        if expires_at is not None and expires_at <= self._clock():
            del self._store[key]
            raise KeyError(key)
        return pickle.loads(payload)