import asyncio
from datetime import UTC, date, datetime
from decimal import Decimal, InvalidOperation

import httpx

from domain.exceptions.currency import ProviderError, UnsupportedCapabilityError
from domain.models.currency import Currency, ExchangeRate, HistoricalRate
from infrastructure.providers.base import ExchangeRateProvider

# Display names and symbols for the codes users ask for most. The upstream
# API only returns codes, so anything else is named after its code.
CURRENCY_DETAILS: dict[str, tuple[str, str]] = {
	'USD': ('United States Dollar', '$'),
	'EUR': ('Euro', '€'),
	'GBP': ('British Pound Sterling', '£'),
	'JPY': ('Japanese Yen', '¥'),
	'CNY': ('Chinese Yuan', '¥'),
	'CHF': ('Swiss Franc', 'CHF'),
	'CAD': ('Canadian Dollar', 'C$'),
	'AUD': ('Australian Dollar', 'A$'),
	'INR': ('Indian Rupee', '₹'),
	'NGN': ('Nigerian Naira', '₦'),
	'BRL': ('Brazilian Real', 'R$'),
	'ZAR': ('South African Rand', 'R'),
	'KRW': ('South Korean Won', '₩'),
	'MXN': ('Mexican Peso', 'MX$'),
	'RUB': ('Russian Ruble', '₽'),
}


class OpenERAPIProvider(ExchangeRateProvider):
	DEFAULT_BASE_URL = 'https://open.er-api.com/v6'

	def __init__(
		self,
		base_url: str = DEFAULT_BASE_URL,
		name: str = 'open.er-api.com',
		client: httpx.AsyncClient | None = None,
		timeout: float = 10,
		health_check_timeout: float = 5,
	):
		self.base_url = (base_url or '').rstrip('/')
		self._name = name
		self.health_check_timeout = health_check_timeout
		self._client = client or httpx.AsyncClient(
			timeout=httpx.Timeout(timeout),
			headers={'accept': 'application/json'},
		)

	@property
	def name(self) -> str:
		return self._name

	@property
	def is_configured(self) -> bool:
		return bool(self.base_url)

	async def _request(self, endpoint: str) -> dict:
		url = f'{self.base_url}/{endpoint}'

		try:
			response = await self._client.get(url)
			response.raise_for_status()
			data = response.json()
		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'HTTP error {e.response.status_code}: {e.response.text[:200]}',
				provider=self.name,
				kind='http_status',
			) from e
		except httpx.RequestError as e:
			raise ProviderError(
				f'request failed: {e.__class__.__name__}', provider=self.name, kind='network'
			) from e
		except ValueError as e:
			raise ProviderError(
				f'response parsing error: {str(e)}', provider=self.name, kind='invalid_response'
			) from e

		if not isinstance(data, dict):
			raise ProviderError(
				'response parsing error: expected a JSON object',
				provider=self.name,
				kind='invalid_response',
			)

		if data.get('result') != 'success':
			error_type = data.get('error-type', data.get('result', 'unknown'))
			raise ProviderError(
				f'API returned error result: {error_type}', provider=self.name, kind='invalid_response'
			)

		return data

	def _rates(self, data: dict) -> dict:
		rates = data.get('rates')
		if not isinstance(rates, dict):
			raise ProviderError(
				'response is missing the rates mapping', provider=self.name, kind='invalid_response'
			)
		return rates

	async def get_latest_rate(self, base: str, target: str) -> ExchangeRate:
		data = await self._request(f'latest/{base}')
		rates = self._rates(data)

		if target not in rates:
			raise ProviderError(
				f'Missing rate for {target}', provider=self.name, kind='unsupported_currency'
			)

		try:
			rate = Decimal(str(rates[target]))
		except InvalidOperation as e:
			raise ProviderError(
				f'Invalid rate for {target}: {rates[target]!r}',
				provider=self.name,
				kind='invalid_response',
			) from e

		if not rate.is_finite() or rate <= 0:
			raise ProviderError(
				f'Non-positive rate for {target}: {rate}', provider=self.name, kind='invalid_response'
			)

		return ExchangeRate(
			base_currency=data.get('base_code', base),
			target_currency=target,
			rate=rate,
			provider=self.name,
			fetched_at=datetime.now(UTC),
		)

	async def get_historical_rate(self, base: str, target: str, on: date) -> HistoricalRate:
		raise UnsupportedCapabilityError(
			f'historical rates not supported by {self.name} in free tier', provider=self.name
		)

	async def get_supported_currencies(self) -> list[Currency]:
		data = await self._request('latest/USD')
		rates = self._rates(data)

		currencies = []
		for code in sorted(rates):
			name, symbol = CURRENCY_DETAILS.get(code, (code, None))
			currencies.append(Currency(code=code, name=name, symbol=symbol, is_supported=True))
		return currencies

	async def health_check(self) -> None:
		if not self.is_configured:
			raise ProviderError('provider base URL is not configured', provider=self.name, kind='unconfigured')

		try:
			async with asyncio.timeout(self.health_check_timeout):
				await self._request('latest/USD')
		except TimeoutError as e:
			raise ProviderError(
				f'health check timed out after {self.health_check_timeout}s',
				provider=self.name,
				kind='network',
			) from e

	async def close(self) -> None:
		await self._client.aclose()
