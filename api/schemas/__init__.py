from .requests import RateQueryRequest
from .responses import ConversionPathResponse, ExchangeRateResponse, HealthResponse

__all__ = [
	'ConversionPathResponse',
	'ExchangeRateResponse',
	'HealthResponse',
	'RateQueryRequest',
]
