from datetime import date as date_type, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class CurrencyResponse(BaseModel):
	code: str = Field(..., description='ISO 4217 currency code')
	name: str = Field(..., description='Display name')
	symbol: str | None = Field(default=None, description='Currency symbol, when known')
	is_supported: bool = Field(default=True)

	model_config = ConfigDict(from_attributes=True)


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[CurrencyResponse] = Field(description='Supported currencies')
	count: int

	model_config = ConfigDict(
		json_schema_extra={
			'examples': [
				{
					'currencies': [{'code': 'USD', 'name': 'United States Dollar', 'symbol': '$'}],
					'count': 1,
				}
			]
		}
	)


class ExchangeRateResponse(BaseModel):
	base_currency: str = Field(..., description='Base currency code')
	target_currency: str = Field(..., description='Target currency code')
	rate: Decimal = Field(..., description='Units of target per unit of base')
	provider: str = Field(..., description='Provider the rate came from')
	fetched_at: datetime = Field(..., description='When the rate was fetched from the provider')
	is_stale: bool = False

	model_config = ConfigDict(
		from_attributes=True,
		json_schema_extra={
			'example': {
				'base_currency': 'USD',
				'target_currency': 'EUR',
				'rate': '0.92',
				'provider': 'open.er-api.com',
				'fetched_at': '2025-09-27T10:30:00Z',
				'is_stale': False,
			}
		},
	)


class HistoricalRateResponse(BaseModel):
	base_currency: str
	target_currency: str
	rate: Decimal
	date: date_type
	provider: str
	fetched_at: datetime

	model_config = ConfigDict(from_attributes=True)


class BulkRatesResponse(BaseModel):
	base_currency: str
	rates: list[ExchangeRateResponse]
	count: int


class TimeSeriesResponse(BaseModel):
	base_currency: str
	target_currency: str
	start_date: date_type
	end_date: date_type
	rates: list[HistoricalRateResponse]
	count: int


class ConversionResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	amount: Decimal = Field(..., description='Original amount requested')
	converted_amount: Decimal = Field(..., description='Converted amount')
	rate: Decimal = Field(..., description='Exchange rate used for conversion')
	provider: str = Field(..., description='Provider of the rate')
	fetched_at: datetime = Field(..., description='When the rate was fetched')
	date: date_type | None = Field(default=None, description='Historical date, if requested')

	model_config = ConfigDict(
		from_attributes=True,
		json_schema_extra={
			'example': {
				'from_currency': 'USD',
				'to_currency': 'EUR',
				'amount': '100',
				'converted_amount': '92.00',
				'rate': '0.92',
				'provider': 'open.er-api.com',
				'fetched_at': '2025-09-27T10:30:00Z',
			}
		},
	)


class HealthResponse(BaseModel):
	status: str = Field(..., description='healthy, degraded or unhealthy')
	timestamp: datetime
	dependencies: dict[str, str] = Field(
		..., description='Per-dependency status: healthy, unhealthy or unconfigured'
	)


class ErrorResponse(BaseModel):
	error: str
	kind: str
	detail: str
	provider: str | None = None
