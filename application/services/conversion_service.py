from application.services.rate_service import RateService
from domain.models.currency import ConversionRequest, ConversionResult
from domain.validation import convert, validate_conversion_request


class ConversionService:
	def __init__(self, rate_service: RateService):
		self.rate_service = rate_service

	async def convert(self, request: ConversionRequest) -> ConversionResult:
		validate_conversion_request(request)

		if request.date is not None:
			rate = await self.rate_service.get_historical_rate(
				request.from_currency, request.to_currency, request.date
			)
		else:
			rate = await self.rate_service.get_latest_rate(request.from_currency, request.to_currency)

		return convert(request, rate)
