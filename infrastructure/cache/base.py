from abc import ABC, abstractmethod


class CacheStore(ABC):
    """Key/value store with per-key expiry.

    Implementations raise ``CacheError`` on backend failure. A missing key is
    not a failure: ``get`` returns ``None``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    async def get(self, key: str) -> str | None:
        ...

    @abstractmethod
    async def set(self, key: str, value: str, ttl: int) -> None:
        """Store ``value`` under ``key`` for ``ttl`` seconds."""

    @abstractmethod
    async def exists(self, key: str) -> bool:
        ...

    @abstractmethod
    async def ping(self) -> None:
        ...

    async def close(self) -> None:
        return None
