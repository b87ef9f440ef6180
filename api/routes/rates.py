from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_exchange_service
from api.schemas import ConversionPathResponse, ExchangeRateResponse, RateQueryRequest
from application.services import ExchangeService

router = APIRouter(prefix='/api', tags=['rates'])


@router.post(
	'/rate',
	response_model=ExchangeRateResponse,
	status_code=status.HTTP_200_OK,
	summary='Best exchange rate between two currencies',
)
def get_exchange_rate(
	request: RateQueryRequest,
	service: Annotated[ExchangeService, Depends(get_exchange_service)],
) -> ExchangeRateResponse:
	rate = service.get_rate(request.rates, request.from_currency, request.to_currency)
	return ExchangeRateResponse(
		from_currency=request.from_currency,
		to_currency=request.to_currency,
		rate=rate,
	)


@router.post(
	'/path',
	response_model=ConversionPathResponse,
	status_code=status.HTTP_200_OK,
	summary='Currencies traversed by the best conversion',
)
def get_conversion_path(
	request: RateQueryRequest,
	service: Annotated[ExchangeService, Depends(get_exchange_service)],
) -> ConversionPathResponse:
	path = service.get_path(request.rates, request.from_currency, request.to_currency)
	if path is None:
		return ConversionPathResponse(from_currency=request.from_currency, to_currency=request.to_currency)

	return ConversionPathResponse(
		from_currency=request.from_currency,
		to_currency=request.to_currency,
		rate=path.rate,
		path=list(path.currencies),
	)
