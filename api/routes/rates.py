from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from api.dependencies import get_rate_service, get_timeseries_service
from api.schemas import (
	BulkRatesResponse,
	CurrencyResponse,
	ExchangeRateResponse,
	HistoricalRateResponse,
	SupportedCurrenciesResponse,
	TimeSeriesResponse,
)
from application.services import RateService, TimeSeriesService
from domain.validation import parse_date

router = APIRouter(prefix='/api/v1', tags=['rates'])

CurrencyPath = Annotated[str, Path(min_length=3, max_length=5)]


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List supported currencies',
)
async def get_supported_currencies(
	service: Annotated[RateService, Depends(get_rate_service)],
) -> SupportedCurrenciesResponse:
	currencies = await service.get_supported_currencies()
	return SupportedCurrenciesResponse(
		currencies=[CurrencyResponse.model_validate(c) for c in currencies],
		count=len(currencies),
	)


@router.get(
	'/rates',
	response_model=BulkRatesResponse,
	status_code=status.HTTP_200_OK,
	summary='Latest rates for every supported currency against a base',
)
async def get_rates(
	service: Annotated[TimeSeriesService, Depends(get_timeseries_service)],
	base: Annotated[str, Query(min_length=3, max_length=5)] = 'USD',
) -> BulkRatesResponse:
	base = base.upper()
	rates = await service.get_rates_for_base(base)
	return BulkRatesResponse(
		base_currency=base,
		rates=[ExchangeRateResponse.model_validate(r) for r in rates],
		count=len(rates),
	)


@router.get(
	'/rates/{base}/{target}',
	response_model=ExchangeRateResponse,
	status_code=status.HTTP_200_OK,
	summary='Get latest exchange rate',
)
async def get_latest_rate(
	base: CurrencyPath,
	target: CurrencyPath,
	service: Annotated[RateService, Depends(get_rate_service)],
) -> ExchangeRateResponse:
	rate = await service.get_latest_rate(base.upper(), target.upper())
	return ExchangeRateResponse.model_validate(rate)


@router.get(
	'/rates/{base}/{target}/{date}',
	response_model=HistoricalRateResponse,
	status_code=status.HTTP_200_OK,
	summary='Get historical exchange rate for a date',
)
async def get_historical_rate(
	base: CurrencyPath,
	target: CurrencyPath,
	date: str,
	service: Annotated[RateService, Depends(get_rate_service)],
) -> HistoricalRateResponse:
	on = parse_date(date)
	rate = await service.get_historical_rate(base.upper(), target.upper(), on)
	return HistoricalRateResponse.model_validate(rate)


@router.get(
	'/timeseries/{base}/{target}',
	response_model=TimeSeriesResponse,
	status_code=status.HTTP_200_OK,
	summary='Get historical rates for a date range',
)
async def get_time_series(
	base: CurrencyPath,
	target: CurrencyPath,
	start_date: Annotated[str, Query()],
	end_date: Annotated[str, Query()],
	service: Annotated[TimeSeriesService, Depends(get_timeseries_service)],
) -> TimeSeriesResponse:
	base = base.upper()
	target = target.upper()
	start = parse_date(start_date)
	end = parse_date(end_date)

	rates = await service.get_time_series(base, target, start, end)
	return TimeSeriesResponse(
		base_currency=base,
		target_currency=target,
		start_date=start,
		end_date=end,
		rates=[HistoricalRateResponse.model_validate(r) for r in rates],
		count=len(rates),
	)
