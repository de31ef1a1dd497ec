"""
Shared fixtures for the exchange rate service tests.
"""

from datetime import UTC, date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from config.settings import CacheTTLConfig
from domain.models.currency import Currency, ExchangeRate, HistoricalRate
from infrastructure.cache.base import CacheStore
from infrastructure.providers.base import ExchangeRateProvider

PROVIDER_NAME = "open.er-api.com"
FETCHED_AT = datetime(2024, 2, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def ttl_config():
    return CacheTTLConfig(latest_rate=300, historical_rate=86400, currency_list=86400)


@pytest.fixture
def usd_eur_rate():
    return ExchangeRate(
        base_currency="USD",
        target_currency="EUR",
        rate=Decimal("0.92"),
        provider=PROVIDER_NAME,
        fetched_at=FETCHED_AT,
    )


@pytest.fixture
def usd_eur_historical_rate():
    return HistoricalRate(
        base_currency="USD",
        target_currency="EUR",
        rate=Decimal("0.9251"),
        date=date(2024, 1, 15),
        provider=PROVIDER_NAME,
        fetched_at=FETCHED_AT,
    )


@pytest.fixture
def supported_currencies():
    return [
        Currency(code="EUR", name="Euro", symbol="€"),
        Currency(code="GBP", name="British Pound Sterling", symbol="£"),
        Currency(code="USD", name="United States Dollar", symbol="$"),
    ]


@pytest.fixture
def mock_provider(usd_eur_rate, usd_eur_historical_rate, supported_currencies):
    provider = AsyncMock(spec=ExchangeRateProvider)
    provider.name = PROVIDER_NAME
    provider.is_configured = True
    provider.get_latest_rate.return_value = usd_eur_rate
    provider.get_historical_rate.return_value = usd_eur_historical_rate
    provider.get_supported_currencies.return_value = supported_currencies
    provider.health_check.return_value = None
    return provider


@pytest.fixture
def mock_cache():
    """A cache that always misses and accepts writes."""
    cache = AsyncMock(spec=CacheStore)
    cache.name = "mock"
    cache.get.return_value = None
    cache.set.return_value = None
    cache.exists.return_value = False
    cache.ping.return_value = None
    return cache
