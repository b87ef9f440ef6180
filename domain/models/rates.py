from dataclasses import dataclass


@dataclass(frozen=True)
class RateEdge:
	from_currency: str
	to_currency: str
	rate: float
	reciprocal: bool = False  # derived as 1/rate from the opposite entry


@dataclass(frozen=True)
class ConversionPath:
	currencies: tuple[str, ...]
	rate: float

	@property
	def source(self) -> str:
		return self.currencies[0]

	@property
	def target(self) -> str:
		return self.currencies[-1]

	@property
	def hops(self) -> int:
		return len(self.currencies) - 1
