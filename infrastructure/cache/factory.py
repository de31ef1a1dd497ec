import logging

from domain.exceptions.currency import CacheError
from infrastructure.cache.base import CacheStore
from infrastructure.cache.memory_cache import InMemoryCacheStore
from infrastructure.cache.redis_cache import RedisCacheStore

logger = logging.getLogger(__name__)


async def connect_cache_store(redis_url: str, connect_timeout: float = 5.0) -> CacheStore:
    """Pick the cache backend once, at startup.

    Redis is used when it answers a PING; otherwise the process runs on the
    in-memory store until restart.
    """
    store = RedisCacheStore.from_url(redis_url, connect_timeout=connect_timeout)
    try:
        await store.ping()
    except CacheError as e:
        logger.warning(f"Redis unavailable at startup, using in-memory cache: {e}")
        await store.close()
        return InMemoryCacheStore()

    logger.info("Connected to Redis cache")
    return store
