import math

from domain.exceptions.rates import InvalidRateError
from domain.models.rates import RateEdge


class RateStore:
	"""In-memory directed rate graph keyed by currency code.

	Every added rate also stores its reciprocal edge. Writes overwrite the
	ordered pair they target, so the last entry for a pair wins. A pair that
	was ever quoted stays quoted when a later reverse entry overwrites its rate.
	"""

	def __init__(self):
		self._edges: dict[str, dict[str, RateEdge]] = {}
		self._quoted: set[tuple[str, str]] = set()

	def add_rate(self, from_currency: str, to_currency: str, rate: float) -> None:
		if not math.isfinite(rate) or rate <= 0:
			raise InvalidRateError(f'Rate for {from_currency}->{to_currency} must be positive, got {rate}')

		self._quoted.add((from_currency, to_currency))
		self._edges.setdefault(from_currency, {})[to_currency] = RateEdge(
			from_currency=from_currency,
			to_currency=to_currency,
			rate=rate,
		)
		self._edges.setdefault(to_currency, {})[from_currency] = RateEdge(
			from_currency=to_currency,
			to_currency=from_currency,
			rate=1.0 / rate,
			reciprocal=(to_currency, from_currency) not in self._quoted,
		)

	def get_direct_rate(self, from_currency: str, to_currency: str) -> float | None:
		if from_currency == to_currency:
			return 1.0

		edge = self.get_edge(from_currency, to_currency)
		return edge.rate if edge is not None else None

	def get_edge(self, from_currency: str, to_currency: str) -> RateEdge | None:
		return self._edges.get(from_currency, {}).get(to_currency)

	def neighbours(self, currency: str, include_reciprocal: bool = True) -> list[RateEdge]:
		edges = self._edges.get(currency, {}).values()
		if include_reciprocal:
			return list(edges)
		return [edge for edge in edges if not edge.reciprocal]

	def currencies(self) -> list[str]:
		return list(self._edges)

	def has_currency(self, code: str) -> bool:
		return code in self._edges

	def __contains__(self, code: object) -> bool:
		return code in self._edges

	def __len__(self) -> int:
		return sum(len(targets) for targets in self._edges.values())
