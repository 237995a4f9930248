"""A bounded in-memory cache with a time-to-live per entry."""

from __future__ import annotations

import threading
import time
from typing import Any, Hashable, NamedTuple

from cachetools import TLRUCache


class _Entry(NamedTuple):
    value: Any
    ttl: float


def _expires_at(_key: Hashable, entry: _Entry, now: float) -> float:
    return now + entry.ttl


class VariableTTLCache:
    """Thread-safe LRU cache where every entry carries its own TTL in seconds."""

    def __init__(self, max_size: int) -> None:
        if max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self._cache: TLRUCache = TLRUCache(
            maxsize=max_size, ttu=_expires_at, timer=time.monotonic
        )
        self._lock = threading.Lock()

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the live value stored under ``key``, or ``default``."""
        with self._lock:
            entry = self._cache.get(key)
        return default if entry is None else entry.value

    def set(self, key: Hashable, value: Any, ttl: float) -> None:
        """Store ``value`` under ``key`` for ``ttl`` seconds."""
        with self._lock:
            self._cache[key] = _Entry(value, ttl)

    def delete(self, key: Hashable) -> None:
        """Remove ``key`` if present."""
        with self._lock:
            self._cache.pop(key, None)