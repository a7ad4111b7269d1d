# tests/unit/cache/test_redis_store.py — v2
"""Tests for cache/redis_store.py — in-memory fake async Redis client."""

from __future__ import annotations

import fnmatch

import pytest

from bunkai.cache.redis_store import RedisCacheStore


class FakeAsyncRedis:
    """Subset of redis.asyncio.Redis used by the store."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.ttls: dict[str, int] = {}
        self.closed = False

    async def get(self, key):
        return self.data.get(key)

    async def setex(self, key, ttl, value):
        self.data[key] = value
        self.ttls[key] = ttl

    async def delete(self, *keys):
        for key in keys:
            self.data.pop(key, None)

    async def scan_iter(self, match=None):
        for key in list(self.data):
            if match is None or fnmatch.fnmatch(key, match):
                yield key

    async def aclose(self):
        self.closed = True


@pytest.fixture
def fake_redis() -> FakeAsyncRedis:
    return FakeAsyncRedis()


class TestRedisCacheStore:
    def test_import_error_without_redis(self):
        """Clear ImportError when redis is not available."""
        import sys
        saved = {k: sys.modules.get(k) for k in ("redis", "redis.asyncio")}
        sys.modules["redis"] = None  # type: ignore[assignment]
        sys.modules["redis.asyncio"] = None  # type: ignore[assignment]
        try:
            with pytest.raises(ImportError, match="redis"):
                RedisCacheStore(redis_url="redis://localhost")
        finally:
            for name, module in saved.items():
                if module is not None:
                    sys.modules[name] = module
                else:
                    sys.modules.pop(name, None)

    @pytest.mark.asyncio
    async def test_set_and_get(self, fake_redis, sample_analysis):
        store = RedisCacheStore("redis://x", ttl_seconds=120, client=fake_redis)
        await store.set("anthropic:m:文", sample_analysis)
        assert fake_redis.ttls["bunkai:analysis:anthropic:m:文"] == 120
        assert await store.get("anthropic:m:文") == sample_analysis

    @pytest.mark.asyncio
    async def test_miss(self, fake_redis):
        store = RedisCacheStore("redis://x", client=fake_redis)
        assert await store.get("absent") is None

    @pytest.mark.asyncio
    async def test_corrupt_entry_is_miss(self, fake_redis):
        fake_redis.data["bunkai:analysis:k"] = "not json"
        store = RedisCacheStore("redis://x", client=fake_redis)
        assert await store.get("k") is None

    @pytest.mark.asyncio
    async def test_clear_only_touches_prefix(self, fake_redis, sample_analysis):
        fake_redis.data["other:key"] = "keep"
        store = RedisCacheStore("redis://x", client=fake_redis)
        await store.set("a", sample_analysis)
        await store.set("b", sample_analysis)
        assert await store.size() == 2
        await store.clear()
        assert await store.size() == 0
        assert fake_redis.data == {"other:key": "keep"}

    @pytest.mark.asyncio
    async def test_delete_and_close(self, fake_redis, sample_analysis):
        store = RedisCacheStore("redis://x", client=fake_redis)
        await store.set("a", sample_analysis)
        await store.delete("a")
        assert await store.get("a") is None
        await store.close()
        assert fake_redis.closed
