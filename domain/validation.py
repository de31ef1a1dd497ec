from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from domain.exceptions.currency import InvalidCurrencyError, ValidationError
from domain.models.currency import ConversionRequest, ConversionResult, ExchangeRate, HistoricalRate

DATE_FORMATS = ('%Y-%m-%d', '%Y/%m/%d', '%d-%m-%Y', '%d/%m/%Y')


def validate_currency_pair(base: str, target: str) -> None:
	if not base or not base.strip():
		raise InvalidCurrencyError('base currency is required', kind='missing_currency')
	if not target or not target.strip():
		raise InvalidCurrencyError('target currency is required', kind='missing_currency')
	if base.strip() == target.strip():
		raise ValidationError(
			'base_currency and target_currency cannot be the same', kind='same_currency'
		)


def validate_conversion_request(request: ConversionRequest) -> None:
	validate_currency_pair(request.from_currency, request.to_currency)
	try:
		amount = Decimal(str(request.amount))
	except InvalidOperation as e:
		raise ValidationError('amount must be a number', kind='non_positive_amount') from e

	if not amount.is_finite() or amount <= 0:
		raise ValidationError('amount must be greater than 0', kind='non_positive_amount')


def validate_date_range(start: date, end: date, max_days: int | None = None) -> None:
	if end < start:
		raise ValidationError('end_date must not be before start_date', kind='invalid_date_range')
	if max_days is not None and (end - start).days + 1 > max_days:
		raise ValidationError(
			f'date range cannot exceed {max_days} days', kind='invalid_date_range'
		)


def parse_date(value: str) -> date:
	"""Parse a calendar date, accepting ISO and the common day-first layouts."""
	if not value or not value.strip():
		raise ValidationError('date is required', kind='invalid_date')

	for fmt in DATE_FORMATS:
		try:
			return datetime.strptime(value.strip(), fmt).date()
		except ValueError:
			continue

	raise ValidationError(
		f'invalid date format: {value}. Use YYYY-MM-DD', kind='invalid_date'
	)


def convert(request: ConversionRequest, rate: ExchangeRate | HistoricalRate) -> ConversionResult:
	amount = Decimal(str(request.amount))
	return ConversionResult(
		from_currency=request.from_currency,
		to_currency=request.to_currency,
		amount=amount,
		converted_amount=amount * rate.rate,
		rate=rate.rate,
		provider=rate.provider,
		fetched_at=rate.fetched_at,
		date=request.date,
	)
