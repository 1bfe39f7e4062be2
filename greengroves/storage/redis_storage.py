"""Redis-backed key-value storage, shared across processes."""

from __future__ import annotations

import redis.asyncio as aioredis


class RedisStorage:
    """Stores each key as ``{namespace}:{key}`` in Redis."""

    def __init__(self, redis_client: aioredis.Redis, namespace: str = "greengroves") -> None:
        self._redis = redis_client
        self.namespace = namespace

    @classmethod
    def from_url(cls, redis_url: str, namespace: str = "greengroves") -> RedisStorage:
        return cls(aioredis.from_url(redis_url, decode_responses=True), namespace)

    def _key(self, key: str) -> str:
        return f"{self.namespace}:{key}"

    async def get(self, key: str) -> str | None:
        value = await self._redis.get(self._key(key))
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str) -> None:
        await self._redis.set(self._key(key), value)

    async def delete(self, key: str) -> None:
        await self._redis.delete(self._key(key))

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._redis.aclose()
