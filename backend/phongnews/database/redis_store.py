"""
KV store over a Redis connection (self-hosted Redis, or fakeredis in tests).
"""
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

from phongnews.core.errors import StoreError
from phongnews.database.base import KVStore, decode_value, encode_value


class RedisStore(KVStore):
    """Async KV store backed by ``redis.asyncio``."""

    def __init__(self, redis: Redis):
        self.redis = redis

    @classmethod
    def from_url(cls, url: str, timeout: float = 10.0) -> "RedisStore":
        return cls(Redis.from_url(url, decode_responses=True, socket_timeout=timeout))

    async def get(self, key: str) -> Any:
        try:
            raw = await self.redis.get(key)
        except RedisError as e:
            raise StoreError(f"GET {key} failed: {e}") from e
        return decode_value(raw)

    async def set(self, key: str, value: Any) -> None:
        try:
            await self.redis.set(key, encode_value(value))
        except RedisError as e:
            raise StoreError(f"SET {key} failed: {e}") from e

    async def ping(self) -> bool:
        try:
            return bool(await self.redis.ping())
        except RedisError as e:
            raise StoreError(f"PING failed: {e}") from e

    async def close(self) -> None:
        await self.redis.aclose()
