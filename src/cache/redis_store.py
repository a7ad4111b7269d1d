# src/cache/redis_store.py — v2
"""Redis-based cache store (CACHE_BACKEND=redis).

Requires 'redis' package: pip install redis.
Suitable for multi-instance deployments sharing one cache. Entries are
written with SETEX, so Redis itself enforces the TTL.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from bunkai.cache.base_cache_store import BaseCacheStore
from bunkai.cache.models import CacheEntry
from bunkai.core.models import SentenceAnalysis

logger = logging.getLogger(__name__)

_KEY_PREFIX = "bunkai:analysis:"


class RedisCacheStore(BaseCacheStore):
    """Redis-backed TTL cache."""

    def __init__(
        self,
        redis_url: str,
        ttl_seconds: int = 3600,
        client: Any = None,
    ) -> None:
        if client is None:
            try:
                import redis.asyncio as aioredis
            except ImportError as e:
                raise ImportError(
                    "redis package required: pip install redis"
                ) from e
            client = aioredis.Redis.from_url(redis_url, decode_responses=True)

        self._client = client
        self._ttl_seconds = ttl_seconds

    async def get(self, key: str) -> SentenceAnalysis | None:
        data = await self._client.get(f"{_KEY_PREFIX}{key}")
        if data is None:
            return None
        try:
            return CacheEntry.model_validate_json(data).value
        except ValueError as e:
            logger.warning("Failed to deserialize cache entry %s: %s", key, e)
            return None

    async def set(self, key: str, value: SentenceAnalysis) -> None:
        entry = CacheEntry(key=key, value=value, created_at=datetime.now(timezone.utc))
        await self._client.setex(
            f"{_KEY_PREFIX}{key}", self._ttl_seconds, entry.model_dump_json()
        )

    async def delete(self, key: str) -> None:
        await self._client.delete(f"{_KEY_PREFIX}{key}")

    async def clear(self) -> None:
        keys = [k async for k in self._client.scan_iter(match=f"{_KEY_PREFIX}*")]
        if keys:
            await self._client.delete(*keys)

    async def size(self) -> int:
        count = 0
        async for _ in self._client.scan_iter(match=f"{_KEY_PREFIX}*"):
            count += 1
        return count

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._client.aclose()
