# tests/unit/cache/test_cache_factory.py — v4
"""Tests for cache/cache_factory.py and cache/keys.py."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from bunkai.cache.cache_factory import create_cache_store
from bunkai.cache.keys import build_cache_key
from bunkai.cache.memory_store import MemoryCacheStore
from bunkai.config.settings import ConfigurationError, Settings


class TestCreateCacheStore:
    def test_default_memory(self):
        assert isinstance(create_cache_store(), MemoryCacheStore)

    def test_memory_from_settings(self):
        s = Settings(_env_file=None, cache_ttl_seconds=30, cache_sweep_threshold=7)
        store = create_cache_store(s)
        assert isinstance(store, MemoryCacheStore)
        assert store._ttl.total_seconds() == 30
        assert store._sweep_threshold == 7

    def test_disabled(self):
        assert create_cache_store(Settings(_env_file=None, cache_enabled=False)) is None

    def test_redis(self):
        s = Settings(
            _env_file=None, cache_backend="redis", cache_redis_url="redis://localhost:6379/0"
        )
        with patch("bunkai.cache.redis_store.RedisCacheStore") as store_cls:
            create_cache_store(s)
        store_cls.assert_called_once_with(
            redis_url="redis://localhost:6379/0", ttl_seconds=3600
        )

    def test_redis_without_url(self):
        s = Settings(_env_file=None, cache_enabled=False, cache_backend="redis")
        s = s.model_copy(update={"cache_enabled": True})
        with pytest.raises(ConfigurationError, match="CACHE_REDIS_URL"):
            create_cache_store(s)


class TestBuildCacheKey:
    def test_format(self):
        assert build_cache_key("anthropic", "claude", "私は") == "anthropic\x1fclaude\x1f私は"

    def test_sentence_not_normalized(self):
        assert build_cache_key("a", "m", "文") != build_cache_key("a", "m", " 文")

    def test_colon_in_model_does_not_collide(self):
        assert build_cache_key("openrouter", "x:free", "s") != build_cache_key(
            "openrouter", "x", "free:s"
        )
