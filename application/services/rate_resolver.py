import logging
from collections import deque

from domain.graph.rate_store import RateStore
from domain.models.rates import ConversionPath

logger = logging.getLogger(__name__)

BFS = 'bfs'
RELAXATION = 'relaxation'
SEARCH_STRATEGIES = (BFS, RELAXATION)


class RateResolver:
	"""Finds the best cumulative conversion rate between two currencies.

	``bfs`` expands every currency once, in the order it is first dequeued, and
	returns a direct edge without searching. It can miss a better path that
	reaches an already expanded currency later.

	``relaxation`` re-expands a currency whenever a strictly better rate reaches
	it, over simple paths only. It returns the maximum product whenever no rate
	cycle multiplies to more than 1.

	Only quoted edges are walked unless ``follow_reciprocal`` is set; reciprocal
	edges still answer direct lookups.
	"""

	def __init__(self, store: RateStore, strategy: str = BFS, follow_reciprocal: bool = False):
		if strategy not in SEARCH_STRATEGIES:
			raise ValueError(f'Unknown search strategy {strategy!r}, expected one of {SEARCH_STRATEGIES}')
		self.store = store
		self.strategy = strategy
		self.follow_reciprocal = follow_reciprocal

	def best_rate(self, from_currency: str, to_currency: str) -> float | None:
		path = self.best_path(from_currency, to_currency)
		return path.rate if path is not None else None

	def best_path(self, from_currency: str, to_currency: str) -> ConversionPath | None:
		if from_currency == to_currency:
			return ConversionPath(currencies=(from_currency,), rate=1.0)

		if self.strategy == RELAXATION:
			path = self._relax(from_currency, to_currency)
		else:
			path = self._breadth_first(from_currency, to_currency)

		if path is None:
			logger.debug(f'No conversion path {from_currency}->{to_currency} ({self.strategy})')
		else:
			logger.debug(
				f'Resolved {from_currency}->{to_currency} = {path.rate} via {"->".join(path.currencies)}'
			)
		return path

	def _breadth_first(self, from_currency: str, to_currency: str) -> ConversionPath | None:
		direct_rate = self.store.get_direct_rate(from_currency, to_currency)
		if direct_rate is not None:
			return ConversionPath(currencies=(from_currency, to_currency), rate=direct_rate)

		queue = deque([(from_currency, 1.0, (from_currency,))])
		expanded: set[str] = set()
		best: ConversionPath | None = None

		while queue:
			currency, rate, currencies = queue.popleft()
			if currency in expanded:
				continue
			expanded.add(currency)

			for edge in self.store.neighbours(currency, include_reciprocal=self.follow_reciprocal):
				candidate = rate * edge.rate
				next_currencies = currencies + (edge.to_currency,)

				if edge.to_currency == to_currency:
					if best is None or candidate > best.rate:
						best = ConversionPath(currencies=next_currencies, rate=candidate)
				elif edge.to_currency not in expanded:
					queue.append((edge.to_currency, candidate, next_currencies))

		return best

	def _relax(self, from_currency: str, to_currency: str) -> ConversionPath | None:
		if from_currency not in self.store:
			return None

		# A currency improved more often than there are currencies can only be
		# gaining from a cycle whose product exceeds 1.
		max_improvements = len(self.store.currencies())
		improvements: dict[str, int] = {}
		best_at = {from_currency: ConversionPath(currencies=(from_currency,), rate=1.0)}
		queue = deque([from_currency])

		while queue:
			current = best_at[queue.popleft()]

			for edge in self.store.neighbours(current.target, include_reciprocal=self.follow_reciprocal):
				if edge.to_currency in current.currencies:
					continue

				candidate = current.rate * edge.rate
				known = best_at.get(edge.to_currency)
				if known is not None and candidate <= known.rate:
					continue
				if improvements.get(edge.to_currency, 0) >= max_improvements:
					continue

				improvements[edge.to_currency] = improvements.get(edge.to_currency, 0) + 1
				best_at[edge.to_currency] = ConversionPath(
					currencies=current.currencies + (edge.to_currency,),
					rate=candidate,
				)
				if edge.to_currency != to_currency:
					queue.append(edge.to_currency)

		return best_at.get(to_currency)
