"""
Redis-backed cache for nearby-search responses.

Keys round the query to 5 decimals (~1 m) and the radius to 2 decimals, so
repeated searches from the same spot share an entry.  A hit returns the
stored response as-is: its ``search_params`` and distances are those of the
first request that filled the entry, not the caller's unrounded query.
Entries expire after ``search_cache_ttl_seconds``; there is no explicit
invalidation.

The cache is optional: any Redis error is logged and treated as a miss, so
a Redis outage only costs a database round-trip.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import redis.asyncio as aioredis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


class SearchCache:
    def __init__(self, client: aioredis.Redis, ttl_seconds: int = 30):
        self.redis = client
        self.ttl = ttl_seconds

    @staticmethod
    def key(latitude: float, longitude: float, radius_km: float) -> str:
        return f"search:nearby:{latitude:.5f}:{longitude:.5f}:{radius_km:.2f}"

    async def get(self, key: str) -> Optional[dict[str, Any]]:
        try:
            cached = await self.redis.get(key)
        except RedisError as exc:
            logger.warning("Search cache read failed (%s); continuing uncached", exc)
            return None
        if cached is None:
            return None
        return json.loads(cached)

    async def set(self, key: str, payload: dict[str, Any]) -> None:
        try:
            await self.redis.set(key, json.dumps(payload), ex=self.ttl)
        except RedisError as exc:
            logger.warning("Search cache write failed (%s)", exc)
