from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConversionRequest(BaseModel):
	from_currency: str = Field(..., min_length=3, max_length=5)
	to_currency: str = Field(..., min_length=3, max_length=5)
	amount: Decimal
	date: str | None = Field(default=None, description='Optional historical date (YYYY-MM-DD)')

	@field_validator('from_currency', 'to_currency')
	@classmethod
	def uppercase_currency(cls, v: str):
		return v.strip().upper()

	model_config = ConfigDict(
		json_schema_extra={
			'example': {'from_currency': 'USD', 'to_currency': 'EUR', 'amount': 100.00}
		}
	)
