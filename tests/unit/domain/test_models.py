# nosec B101


import pytest

from domain.models.currency import Currency, ExchangeRate, HistoricalRate
from domain.models.health import HealthStatus, OverallStatus, determine_overall_status


def test_exchange_rate_snapshot_is_json_friendly(usd_eur_rate):
    data = usd_eur_rate.to_dict()

    assert data == {
        'base_currency': 'USD',
        'target_currency': 'EUR',
        'rate': '0.92',
        'provider': 'open.er-api.com',
        'fetched_at': '2024-02-01T12:00:00+00:00',
        'is_stale': False,
    }
    assert ExchangeRate.from_dict(data) == usd_eur_rate


def test_historical_rate_snapshot_carries_date(usd_eur_historical_rate):
    data = usd_eur_historical_rate.to_dict()

    assert data['date'] == '2024-01-15'
    assert HistoricalRate.from_dict(data) == usd_eur_historical_rate


def test_currency_snapshot_without_symbol():
    currency = Currency.from_dict({'code': 'XOF', 'name': 'XOF'})

    assert currency.symbol is None
    assert currency.is_supported is True


@pytest.mark.parametrize('rate', ['0', '-1.5', 'abc'])
def test_rate_snapshot_with_invalid_rate_rejected(usd_eur_rate, rate):
    data = usd_eur_rate.to_dict()
    data['rate'] = rate

    with pytest.raises(ValueError):
        ExchangeRate.from_dict(data)


def test_rate_snapshot_missing_field_rejected(usd_eur_rate):
    data = usd_eur_rate.to_dict()
    del data['provider']

    with pytest.raises(KeyError):
        ExchangeRate.from_dict(data)


class TestOverallStatus:
    def test_all_healthy(self):
        status = determine_overall_status(
            {'cache': HealthStatus.HEALTHY, 'open.er-api.com': HealthStatus.HEALTHY}
        )
        assert status is OverallStatus.HEALTHY

    def test_cache_down_is_degraded(self):
        status = determine_overall_status(
            {'cache': HealthStatus.UNHEALTHY, 'open.er-api.com': HealthStatus.HEALTHY}
        )
        assert status is OverallStatus.DEGRADED

    @pytest.mark.parametrize('provider_status', [HealthStatus.UNHEALTHY, HealthStatus.UNCONFIGURED])
    def test_provider_not_healthy_is_unhealthy(self, provider_status):
        status = determine_overall_status(
            {'cache': HealthStatus.HEALTHY, 'open.er-api.com': provider_status}
        )
        assert status is OverallStatus.UNHEALTHY
