# src/cache/cache_factory.py — v3
"""Factory for cache store instantiation."""

from __future__ import annotations

from bunkai.cache.base_cache_store import BaseCacheStore
from bunkai.config.settings import ConfigurationError, Settings


def create_cache_store(settings: Settings | None = None) -> BaseCacheStore | None:
    """Instantiate the configured cache backend.

    Args:
        settings: Application settings. Defaults to the in-memory backend.

    Returns:
        Configured BaseCacheStore, or None when caching is disabled.
    """
    if settings is None:
        from bunkai.cache.memory_store import MemoryCacheStore
        return MemoryCacheStore()

    if not settings.cache_enabled:
        return None

    if settings.cache_backend == "memory":
        from bunkai.cache.memory_store import MemoryCacheStore
        return MemoryCacheStore(
            ttl_seconds=settings.cache_ttl_seconds,
            sweep_threshold=settings.cache_sweep_threshold,
        )

    if settings.cache_backend == "redis":
        from bunkai.cache.redis_store import RedisCacheStore
        if not settings.cache_redis_url:
            raise ConfigurationError(
                "CACHE_REDIS_URL must be set when CACHE_BACKEND=redis"
            )
        return RedisCacheStore(
            redis_url=settings.cache_redis_url,
            ttl_seconds=settings.cache_ttl_seconds,
        )

    raise ConfigurationError(f"Unsupported cache backend: {settings.cache_backend!r}")
