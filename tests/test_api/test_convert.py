from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_rate_service
from api.main import app
from application.services.rate_service import RateService
from domain.exceptions.currency import ProviderError


@pytest.fixture
def mock_rate_service(usd_eur_rate, usd_eur_historical_rate):
    service = AsyncMock(spec=RateService)
    service.get_latest_rate.return_value = usd_eur_rate
    service.get_historical_rate.return_value = usd_eur_historical_rate
    return service


@pytest.fixture
def client(mock_rate_service):
    app.dependency_overrides[get_rate_service] = lambda: mock_rate_service
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


def test_convert_success(client, mock_rate_service):
    request_data = {
        "from_currency": "usd",
        "to_currency": "eur",
        "amount": 100
    }

    response = client.post("/api/v1/convert", json=request_data)

    assert response.status_code == 200
    data = response.json()

    assert data["from_currency"] == "USD"
    assert data["to_currency"] == "EUR"
    assert Decimal(data["amount"]) == Decimal("100")
    assert Decimal(data["converted_amount"]) == Decimal("92.00")
    assert Decimal(data["rate"]) == Decimal("0.92")
    assert data["provider"] == "open.er-api.com"
    assert data["date"] is None
    mock_rate_service.get_latest_rate.assert_awaited_once_with("USD", "EUR")


def test_convert_historical(client, mock_rate_service):
    request_data = {
        "from_currency": "USD",
        "to_currency": "EUR",
        "amount": "10",
        "date": "2024-01-15"
    }

    response = client.post("/api/v1/convert", json=request_data)

    assert response.status_code == 200
    data = response.json()
    assert data["date"] == "2024-01-15"
    assert Decimal(data["converted_amount"]) == Decimal("9.2510")
    mock_rate_service.get_historical_rate.assert_awaited_once_with("USD", "EUR", date(2024, 1, 15))


def test_convert_zero_amount_returns_400(client, mock_rate_service):
    request_data = {
        "from_currency": "USD",
        "to_currency": "EUR",
        "amount": 0
    }

    response = client.post("/api/v1/convert", json=request_data)

    assert response.status_code == 400
    assert response.json()["kind"] == "non_positive_amount"
    mock_rate_service.get_latest_rate.assert_not_awaited()


def test_convert_negative_amount_returns_400(client):
    request_data = {
        "from_currency": "USD",
        "to_currency": "EUR",
        "amount": -5
    }

    response = client.post("/api/v1/convert", json=request_data)

    assert response.status_code == 400


def test_convert_same_currency_returns_400(client):
    request_data = {
        "from_currency": "USD",
        "to_currency": "usd",
        "amount": 5
    }

    response = client.post("/api/v1/convert", json=request_data)

    assert response.status_code == 400
    assert response.json()["kind"] == "same_currency"


def test_convert_bad_date_returns_400(client, mock_rate_service):
    request_data = {
        "from_currency": "USD",
        "to_currency": "EUR",
        "amount": 5,
        "date": "not-a-date"
    }

    response = client.post("/api/v1/convert", json=request_data)

    assert response.status_code == 400
    assert response.json()["kind"] == "invalid_date"
    mock_rate_service.get_historical_rate.assert_not_awaited()


def test_convert_missing_field_returns_422(client):
    response = client.post("/api/v1/convert", json={"from_currency": "USD", "amount": 5})

    assert response.status_code == 422


def test_convert_provider_down_returns_503(client, mock_rate_service):
    mock_rate_service.get_latest_rate.side_effect = ProviderError(
        "request failed: ConnectError", provider="open.er-api.com", kind="network"
    )
    request_data = {
        "from_currency": "USD",
        "to_currency": "EUR",
        "amount": 5
    }

    response = client.post("/api/v1/convert", json=request_data)

    assert response.status_code == 503
    assert response.json()["kind"] == "network"
