from redis import asyncio as redis
from redis.exceptions import RedisError

from domain.exceptions.currency import CacheError
from infrastructure.cache.base import CacheStore


class RedisCacheStore(CacheStore):
    def __init__(self, redis_client: redis.Redis):
        self.redis = redis_client

    @classmethod
    def from_url(cls, redis_url: str, connect_timeout: float = 5.0) -> "RedisCacheStore":
        client = redis.Redis.from_url(
            redis_url,
            decode_responses=True,
            socket_connect_timeout=connect_timeout,
            socket_timeout=connect_timeout,
        )
        return cls(client)

    @property
    def name(self) -> str:
        return "redis"

    async def get(self, key: str) -> str | None:
        try:
            return await self.redis.get(key)
        except (RedisError, OSError) as e:
            raise CacheError(f"Redis GET {key} failed: {e}") from e

    async def set(self, key: str, value: str, ttl: int) -> None:
        try:
            await self.redis.set(key, value, ex=ttl)
        except (RedisError, OSError) as e:
            raise CacheError(f"Redis SET {key} failed: {e}") from e

    async def exists(self, key: str) -> bool:
        try:
            return await self.redis.exists(key) > 0
        except (RedisError, OSError) as e:
            raise CacheError(f"Redis EXISTS {key} failed: {e}") from e

    async def ping(self) -> None:
        try:
            await self.redis.ping()
        except (RedisError, OSError) as e:
            raise CacheError(f"Redis PING failed: {e}") from e

    async def close(self) -> None:
        await self.redis.aclose()
