# nosec B101


import pytest
from unittest.mock import AsyncMock, patch

from redis.exceptions import ConnectionError as RedisConnectionError

from infrastructure.cache.factory import connect_cache_store
from infrastructure.cache.memory_cache import InMemoryCacheStore
from infrastructure.cache.redis_cache import RedisCacheStore


@pytest.mark.asyncio
async def test_uses_redis_when_ping_succeeds():
    mock_redis = AsyncMock()

    with patch('infrastructure.cache.redis_cache.redis.Redis.from_url', return_value=mock_redis) as from_url:
        store = await connect_cache_store('redis://localhost:6379', connect_timeout=2)

    assert isinstance(store, RedisCacheStore)
    mock_redis.ping.assert_awaited_once()
    assert from_url.call_args.kwargs['decode_responses'] is True
    assert from_url.call_args.kwargs['socket_connect_timeout'] == 2


@pytest.mark.asyncio
async def test_falls_back_to_memory_when_redis_unreachable():
    mock_redis = AsyncMock()
    mock_redis.ping.side_effect = RedisConnectionError('Connection refused')

    with patch('infrastructure.cache.redis_cache.redis.Redis.from_url', return_value=mock_redis):
        store = await connect_cache_store('redis://localhost:6379')

    assert isinstance(store, InMemoryCacheStore)
    mock_redis.aclose.assert_awaited_once()
