"""Data cache implementation."""

import asyncio
import time
from typing import Any


class DataCache:
    """TTL-based cache for AWS listings that rarely change between ticks.

    Reads are lock-free: asyncio is single-threaded and ``get`` only reads the
    dict. Writes take the lock so concurrent fetch tasks cannot interleave.
    Expired entries stay in place until the next ``set`` prunes them.
    """

    def __init__(self, ttl_seconds: float) -> None:
        self._ttl = ttl_seconds
        self._cache: dict[tuple[str, ...], tuple[float, Any]] = {}
        self._lock = asyncio.Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def _is_expired(self, stored_at: float) -> bool:
        return time.monotonic() - stored_at > self._ttl

    async def get(self, key: tuple[str, ...]) -> Any:
        """Return cached data, or None when absent or expired."""
        if self._ttl <= 0:
            return None
        entry = self._cache.get(key)
        if entry is None:
            return None
        stored_at, data = entry
        if self._is_expired(stored_at):
            return None
        return data

    async def set(self, key: tuple[str, ...], data: Any) -> None:
        """Store data under ``key`` and prune expired entries."""
        if self._ttl <= 0:
            return
        async with self._lock:
            self._cache[key] = (time.monotonic(), data)
            expired = [k for k, (stored_at, _) in self._cache.items() if self._is_expired(stored_at)]
            for k in expired:
                del self._cache[k]

    async def clear(self, prefix: str | None = None) -> None:
        """Drop every entry, or only those whose key starts with ``prefix``."""
        async with self._lock:
            if prefix is None:
                self._cache.clear()
                return
            for k in [k for k in self._cache if k and k[0] == prefix]:
                del self._cache[k]

    def __len__(self) -> int:
        return len(self._cache)
