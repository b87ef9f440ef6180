import logging

from application.services.rate_parser import RateParser
from application.services.rate_resolver import RateResolver
from config.settings import Settings
from domain.exceptions.rates import RatesInputTooLargeError
from domain.graph.rate_store import RateStore
from domain.models.rates import ConversionPath

logger = logging.getLogger(__name__)


def get_exchange_rate(rates: str, from_currency: str, to_currency: str) -> float | None:
	"""Best rate from ``from_currency`` to ``to_currency`` given ``FROM:TO:RATE`` pairs.

	Returns None when no conversion path exists, including for currencies that
	never appear in ``rates``.
	"""
	store = RateStore()
	RateParser().populate(store, rates)
	return RateResolver(store).best_rate(from_currency, to_currency)


def get_conversion_path(rates: str, from_currency: str, to_currency: str) -> ConversionPath | None:
	store = RateStore()
	RateParser().populate(store, rates)
	return RateResolver(store).best_path(from_currency, to_currency)


class ExchangeService:
	def __init__(self, settings: Settings):
		self.settings = settings

	def get_rate(self, rates: str, from_currency: str, to_currency: str) -> float | None:
		return self._resolver(rates).best_rate(from_currency, to_currency)

	def get_path(self, rates: str, from_currency: str, to_currency: str) -> ConversionPath | None:
		return self._resolver(rates).best_path(from_currency, to_currency)

	def _resolver(self, rates: str) -> RateResolver:
		if len(rates) > self.settings.MAX_RATES_LENGTH:
			logger.warning(f'Rejected rates input of {len(rates)} characters')
			raise RatesInputTooLargeError(
				f'Rates input is {len(rates)} characters, limit is {self.settings.MAX_RATES_LENGTH}'
			)

		store = RateStore()
		try:
			count = RateParser(max_pairs=self.settings.MAX_RATE_PAIRS).populate(store, rates)
		except RatesInputTooLargeError as e:
			logger.warning(f'Rejected rates input: {e}')
			raise
		logger.debug(f'Built rate graph from {count} pairs ({len(store)} edges)')

		return RateResolver(
			store,
			strategy=self.settings.SEARCH_STRATEGY,
			follow_reciprocal=self.settings.FOLLOW_RECIPROCAL_EDGES,
		)
