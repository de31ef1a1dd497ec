from .requests import ConversionRequest
from .responses import (
	BulkRatesResponse,
	ConversionResponse,
	CurrencyResponse,
	ErrorResponse,
	ExchangeRateResponse,
	HealthResponse,
	HistoricalRateResponse,
	SupportedCurrenciesResponse,
	TimeSeriesResponse,
)

__all__ = [
	'BulkRatesResponse',
	'ConversionRequest',
	'ConversionResponse',
	'CurrencyResponse',
	'ErrorResponse',
	'ExchangeRateResponse',
	'HealthResponse',
	'HistoricalRateResponse',
	'SupportedCurrenciesResponse',
	'TimeSeriesResponse',
]
