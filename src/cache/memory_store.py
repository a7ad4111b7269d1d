# src/cache/memory_store.py — v1
"""In-process cache store (CACHE_BACKEND=memory, the default).

A dict of CacheEntry guarded by one lock. The lock is held only around dict
operations, so readers never observe a half-written entry. Expired entries
are misses; they are removed on lookup, and swept in bulk once the store
grows past ``sweep_threshold``.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Callable

from bunkai.cache.base_cache_store import BaseCacheStore
from bunkai.cache.models import CacheEntry
from bunkai.core.models import SentenceAnalysis

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MemoryCacheStore(BaseCacheStore):
    """TTL cache held in process memory."""

    def __init__(
        self,
        ttl_seconds: int = 3600,
        sweep_threshold: int = 100,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._ttl = timedelta(seconds=ttl_seconds)
        self._sweep_threshold = sweep_threshold
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    async def get(self, key: str) -> SentenceAnalysis | None:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.is_expired(now, self._ttl):
                del self._entries[key]
                logger.debug("Cache entry expired: %s", key)
                return None
            return entry.value

    async def set(self, key: str, value: SentenceAnalysis) -> None:
        entry = CacheEntry(key=key, value=value, created_at=self._clock())
        with self._lock:
            self._entries[key] = entry
            if len(self._entries) > self._sweep_threshold:
                self._sweep_locked(entry.created_at)

    async def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    async def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    async def size(self) -> int:
        with self._lock:
            return len(self._entries)

    async def sweep(self) -> int:
        """Remove all expired entries now. Returns how many were removed."""
        with self._lock:
            return self._sweep_locked(self._clock())

    def _sweep_locked(self, now: datetime) -> int:
        expired = [k for k, e in self._entries.items() if e.is_expired(now, self._ttl)]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug("Cache sweep removed %d expired entries", len(expired))
        return len(expired)
