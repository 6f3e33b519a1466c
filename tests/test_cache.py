"""
Search cache tests (mocked Redis).

Demonstrates:
1. Hits decode the stored JSON, misses return ``None``.
2. Writes use the configured TTL.
3. Redis failures degrade to a cache miss instead of failing the search.
"""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from src.infrastructure.cache import SearchCache


class TestSearchCache:
    def test_key_rounds_inputs(self):
        assert (
            SearchCache.key(48.2082001, 16.37380004, 10)
            == "search:nearby:48.20820:16.37380:10.00"
        )

    @pytest.mark.asyncio
    async def test_miss_returns_none(self):
        mock_redis = AsyncMock()
        mock_redis.get = AsyncMock(return_value=None)

        cache = SearchCache(mock_redis, ttl_seconds=30)
        assert await cache.get("k") is None

    @pytest.mark.asyncio
    async def test_hit_decodes_json(self):
        mock_redis = AsyncMock()
        mock_redis.get = AsyncMock(return_value=json.dumps({"count": 0}))

        cache = SearchCache(mock_redis, ttl_seconds=30)
        assert await cache.get("k") == {"count": 0}

    @pytest.mark.asyncio
    async def test_set_uses_ttl(self):
        mock_redis = AsyncMock()

        cache = SearchCache(mock_redis, ttl_seconds=45)
        await cache.set("k", {"count": 1})

        mock_redis.set.assert_awaited_once_with("k", '{"count": 1}', ex=45)

    @pytest.mark.asyncio
    async def test_read_failure_is_a_miss(self):
        mock_redis = AsyncMock()
        mock_redis.get = AsyncMock(side_effect=RedisConnectionError("down"))

        cache = SearchCache(mock_redis)
        assert await cache.get("k") is None

    @pytest.mark.asyncio
    async def test_write_failure_is_ignored(self):
        mock_redis = AsyncMock()
        mock_redis.set = AsyncMock(side_effect=RedisConnectionError("down"))

        cache = SearchCache(mock_redis)
        await cache.set("k", {"count": 1})  # does not raise
