# nosec B101


import pytest

from infrastructure.cache.memory_cache import InMemoryCacheStore


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return InMemoryCacheStore(clock=clock)


@pytest.mark.asyncio
async def test_set_then_get(store):
    await store.set('k', 'v', 60)

    assert await store.get('k') == 'v'
    assert await store.exists('k') is True


@pytest.mark.asyncio
async def test_missing_key_returns_none(store):
    assert await store.get('nope') is None
    assert await store.exists('nope') is False


@pytest.mark.asyncio
async def test_entry_expires_after_ttl(store, clock):
    await store.set('k', 'v', 60)

    clock.now += 59
    assert await store.get('k') == 'v'

    clock.now += 1
    assert await store.get('k') is None
    assert len(store) == 0


@pytest.mark.asyncio
async def test_overwrite_resets_expiry(store, clock):
    await store.set('k', 'old', 10)
    clock.now += 5
    await store.set('k', 'new', 10)
    clock.now += 8

    assert await store.get('k') == 'new'


@pytest.mark.asyncio
async def test_non_positive_ttl_drops_key(store):
    await store.set('k', 'v', 60)
    await store.set('k', 'v', 0)

    assert await store.get('k') is None


@pytest.mark.asyncio
async def test_ping_always_succeeds_and_close_clears(store):
    await store.set('k', 'v', 60)

    await store.ping()
    await store.close()

    assert len(store) == 0
    assert store.name == 'memory'
