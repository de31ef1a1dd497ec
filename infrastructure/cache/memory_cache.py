import time
from collections.abc import Callable

from infrastructure.cache.base import CacheStore


class InMemoryCacheStore(CacheStore):
    """Process-local fallback used when Redis is unreachable at startup.

    Entries expire after their TTL and are evicted lazily on access. Nothing
    survives a restart and nothing is shared between worker processes.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._data: dict[str, tuple[str, float]] = {}

    @property
    def name(self) -> str:
        return "memory"

    def _live_value(self, key: str) -> str | None:
        entry = self._data.get(key)
        if entry is None:
            return None

        value, expires_at = entry
        if self._clock() >= expires_at:
            self._data.pop(key, None)
            return None
        return value

    async def get(self, key: str) -> str | None:
        return self._live_value(key)

    async def set(self, key: str, value: str, ttl: int) -> None:
        if ttl <= 0:
            self._data.pop(key, None)
            return
        self._data[key] = (value, self._clock() + ttl)

    async def exists(self, key: str) -> bool:
        return self._live_value(key) is not None

    async def ping(self) -> None:
        return None

    async def close(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)
