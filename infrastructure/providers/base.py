from abc import ABC, abstractmethod
from datetime import date

from domain.models.currency import Currency, ExchangeRate, HistoricalRate


class ExchangeRateProvider(ABC):
    """Contract for one upstream rate source.

    Every method returns a fully populated domain entity or raises
    ``ProviderError``. A capability the source does not offer raises
    ``UnsupportedCapabilityError``. Implementations do not retry.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    def is_configured(self) -> bool:
        return True

    @abstractmethod
    async def get_latest_rate(self, base: str, target: str) -> ExchangeRate:
        ...

    @abstractmethod
    async def get_historical_rate(self, base: str, target: str, on: date) -> HistoricalRate:
        ...

    @abstractmethod
    async def get_supported_currencies(self) -> list[Currency]:
        ...

    @abstractmethod
    async def health_check(self) -> None:
        """Raise ``ProviderError`` when the source is not reachable."""

    async def close(self) -> None:
        return None
