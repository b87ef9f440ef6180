import logging
import math
import re

from domain.exceptions.rates import RatesInputTooLargeError
from domain.graph.rate_store import RateStore
from domain.models.rates import RateEdge

logger = logging.getLogger(__name__)

PAIR_SEPARATOR = ','
FIELD_SEPARATOR = ':'
DECIMAL_LITERAL = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?', re.ASCII)


class RateParser:
	"""Parses ``FROM:TO:RATE`` pairs separated by commas.

	Malformed pairs are dropped rather than failing the whole input.
	"""

	def __init__(self, max_pairs: int | None = None):
		self.max_pairs = max_pairs

	def parse(self, rates: str) -> list[RateEdge]:
		if not rates or not rates.strip():
			return []

		segments = rates.split(PAIR_SEPARATOR)
		if self.max_pairs is not None and len(segments) > self.max_pairs:
			raise RatesInputTooLargeError(
				f'Rates input holds {len(segments)} pairs, limit is {self.max_pairs}'
			)

		edges = []
		for segment in segments:
			edge = self._parse_pair(segment)
			if edge is not None:
				edges.append(edge)
		return edges

	def populate(self, store: RateStore, rates: str) -> int:
		edges = self.parse(rates)
		for edge in edges:
			store.add_rate(edge.from_currency, edge.to_currency, edge.rate)
		return len(edges)

	def _parse_pair(self, segment: str) -> RateEdge | None:
		fields = [field.strip() for field in segment.strip().split(FIELD_SEPARATOR)]
		if len(fields) != 3:
			logger.debug(f'Dropping rate pair {segment!r}: expected 3 fields, got {len(fields)}')
			return None

		from_currency, to_currency, raw_rate = fields
		if not from_currency or not to_currency or not raw_rate:
			logger.debug(f'Dropping rate pair {segment!r}: empty field')
			return None

		if not DECIMAL_LITERAL.fullmatch(raw_rate):
			logger.debug(f'Dropping rate pair {segment!r}: rate is not a decimal literal')
			return None

		rate = float(raw_rate)

		if not math.isfinite(rate) or rate <= 0:
			logger.debug(f'Dropping rate pair {segment!r}: rate must be positive')
			return None

		return RateEdge(from_currency=from_currency, to_currency=to_currency, rate=rate)
