from .exchange_service import ExchangeService, get_conversion_path, get_exchange_rate
from .rate_parser import RateParser
from .rate_resolver import RateResolver

__all__ = ['ExchangeService', 'RateParser', 'RateResolver', 'get_conversion_path', 'get_exchange_rate']
