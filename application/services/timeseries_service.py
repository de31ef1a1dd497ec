import logging
from datetime import date, timedelta

from application.services.rate_service import RateService
from domain.exceptions.currency import InvalidCurrencyError, ProviderError
from domain.models.currency import ExchangeRate, HistoricalRate
from domain.validation import validate_currency_pair, validate_date_range

logger = logging.getLogger(__name__)


class TimeSeriesService:
	"""Multi-rate queries built from sequential coordinator calls.

	No batching or coalescing: each date or currency is one cache-aside lookup.
	"""

	def __init__(self, rate_service: RateService, max_days: int | None = None):
		self.rate_service = rate_service
		self.max_days = max_days

	async def get_time_series(
		self, base: str, target: str, start: date, end: date
	) -> list[HistoricalRate]:
		validate_currency_pair(base, target)
		validate_date_range(start, end, self.max_days)

		rates = []
		current = start
		while current <= end:
			rates.append(await self.rate_service.get_historical_rate(base, target, current))
			current += timedelta(days=1)
		return rates

	async def get_rates_for_base(self, base: str) -> list[ExchangeRate]:
		if not base or not base.strip():
			raise InvalidCurrencyError('base currency is required', kind='missing_currency')

		currencies = await self.rate_service.get_supported_currencies()

		rates = []
		for currency in currencies:
			if currency.code == base:
				continue
			try:
				rates.append(await self.rate_service.get_latest_rate(base, currency.code))
			except ProviderError as e:
				logger.warning(f'Skipping {base}->{currency.code}: {e}')
		return rates
