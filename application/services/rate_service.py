import asyncio
import json
import logging
from collections.abc import Callable
from datetime import UTC, date, datetime
from typing import Any, TypeVar

from config.settings import CacheTTLConfig
from domain.exceptions.currency import CacheError, ProviderError
from domain.models.currency import Currency, ExchangeRate, HistoricalRate
from domain.models.health import (
    CACHE_DEPENDENCY,
    HealthReport,
    HealthStatus,
    determine_overall_status,
)
from domain.validation import validate_currency_pair
from infrastructure.cache.base import CacheStore
from infrastructure.providers.base import ExchangeRateProvider

T = TypeVar("T")

SUPPORTED_CURRENCIES_KEY = "currencies:supported"
DEFAULT_PROVIDER_NAME = "open.er-api.com"


def latest_rate_key(base: str, target: str) -> str:
    return f"rate:{base}:{target}:latest"


def historical_rate_key(base: str, target: str, on: date) -> str:
    return f"rate:{base}:{target}:{on.isoformat()}"


class RateService:
    """Cache-aside access to exchange rates and currency metadata.

    The provider stays the source of truth. Entries go stale only by TTL
    expiry; there is no invalidation. Cache failures of any kind degrade to a
    miss. Provider failures propagate as ``ProviderError`` without retry and
    without falling back to an older cached value.
    """

    def __init__(
        self,
        cache: CacheStore,
        provider: ExchangeRateProvider | None,
        ttl: CacheTTLConfig,
        logger: logging.Logger | None = None,
    ):
        self.cache = cache
        self.provider = provider
        self.ttl = ttl
        self.logger = logger or logging.getLogger(__name__)

    @property
    def provider_name(self) -> str:
        return self.provider.name if self.provider is not None else DEFAULT_PROVIDER_NAME

    def _require_provider(self) -> ExchangeRateProvider:
        if self.provider is None or not self.provider.is_configured:
            raise ProviderError(
                "no exchange rate provider is configured",
                provider=self.provider_name,
                kind="unconfigured",
            )
        return self.provider

    async def get_latest_rate(self, base: str, target: str) -> ExchangeRate:
        validate_currency_pair(base, target)
        provider = self._require_provider()

        return await self._cache_aside(
            key=latest_rate_key(base, target),
            ttl=self.ttl.latest_rate,
            decode=ExchangeRate.from_dict,
            encode=ExchangeRate.to_dict,
            fetch=lambda: provider.get_latest_rate(base, target),
        )

    async def get_historical_rate(self, base: str, target: str, on: date) -> HistoricalRate:
        validate_currency_pair(base, target)
        provider = self._require_provider()

        return await self._cache_aside(
            key=historical_rate_key(base, target, on),
            ttl=self.ttl.historical_rate,
            decode=HistoricalRate.from_dict,
            encode=HistoricalRate.to_dict,
            fetch=lambda: provider.get_historical_rate(base, target, on),
        )

    async def get_supported_currencies(self) -> list[Currency]:
        provider = self._require_provider()

        return await self._cache_aside(
            key=SUPPORTED_CURRENCIES_KEY,
            ttl=self.ttl.currency_list,
            decode=lambda items: [Currency.from_dict(item) for item in items],
            encode=lambda currencies: [c.to_dict() for c in currencies],
            fetch=provider.get_supported_currencies,
        )

    async def _cache_aside(
        self,
        key: str,
        ttl: int,
        decode: Callable[[Any], T],
        encode: Callable[[T], Any],
        fetch: Callable[[], Any],
    ) -> T:
        cached = await self._read_cache(key, decode)
        if cached is not None:
            return cached

        try:
            value = await fetch()
        except ProviderError as e:
            self.logger.error(
                f"Provider fetch failed for {key}: {e}",
                extra={"extra_data": {"cache_key": key, "provider": e.provider, "kind": e.kind}},
            )
            raise

        await self._write_cache(key, encode(value), ttl)
        return value

    async def _read_cache(self, key: str, decode: Callable[[Any], T]) -> T | None:
        """Return the decoded entry, or ``None`` on miss, backend error or bad payload."""
        try:
            raw = await self.cache.get(key)
        except CacheError as e:
            self.logger.warning(
                f"Cache read failed for {key}, treating as miss: {e}",
                extra={"extra_data": {"operation": "get", "cache_key": key, "hit": False}},
            )
            return None

        if raw is None:
            self.logger.debug(
                f"Cache get for {key}: MISS",
                extra={"extra_data": {"operation": "get", "cache_key": key, "hit": False}},
            )
            return None

        try:
            value = decode(json.loads(raw))
        except (ValueError, KeyError, TypeError) as e:
            self.logger.warning(
                f"Cache entry for {key} could not be decoded, treating as miss: {e}",
                extra={"extra_data": {"operation": "get", "cache_key": key, "hit": False}},
            )
            return None

        self.logger.debug(
            f"Cache get for {key}: HIT",
            extra={"extra_data": {"operation": "get", "cache_key": key, "hit": True}},
        )
        return value

    async def _write_cache(self, key: str, payload: Any, ttl: int) -> None:
        """Write-through after a fetch. Side effect only: failures are logged and dropped
        so that a fresh provider value is always returned to the caller."""
        try:
            await self.cache.set(key, json.dumps(payload), ttl)
        except CacheError as e:
            self.logger.warning(
                f"Cache write failed for {key}: {e}",
                extra={"extra_data": {"operation": "set", "cache_key": key, "ttl": ttl}},
            )

    async def health_check(self) -> dict[str, HealthStatus]:
        cache_status, provider_status = await asyncio.gather(
            self._check_cache(), self._check_provider()
        )
        return {CACHE_DEPENDENCY: cache_status, self.provider_name: provider_status}

    async def health_report(self) -> HealthReport:
        dependencies = await self.health_check()
        return HealthReport(
            status=determine_overall_status(dependencies),
            dependencies=dependencies,
            timestamp=datetime.now(UTC),
        )

    async def _check_cache(self) -> HealthStatus:
        try:
            await self.cache.ping()
        except Exception as e:
            self.logger.error(f"Cache health check failed: {e}")
            return HealthStatus.UNHEALTHY
        return HealthStatus.HEALTHY

    async def _check_provider(self) -> HealthStatus:
        if self.provider is None or not self.provider.is_configured:
            return HealthStatus.UNCONFIGURED

        try:
            await self.provider.health_check()
        except Exception as e:
            self.logger.error(f"Provider health check failed: {e}")
            return HealthStatus.UNHEALTHY
        return HealthStatus.HEALTHY
