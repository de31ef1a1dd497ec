from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_conversion_service
from api.schemas import ConversionRequest, ConversionResponse
from application.services import ConversionService
from domain.models import currency as models
from domain.validation import parse_date

router = APIRouter(prefix='/api/v1', tags=['convert'])


@router.post(
	'/convert',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert an amount between currencies',
)
async def convert_currency(
	request: ConversionRequest,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ConversionResponse:
	conversion = models.ConversionRequest(
		from_currency=request.from_currency,
		to_currency=request.to_currency,
		amount=request.amount,
		date=parse_date(request.date) if request.date else None,
	)
	result = await service.convert(conversion)
	return ConversionResponse.model_validate(result)
