import pytest

from domain.exceptions.rates import InvalidRateError
from domain.graph.rate_store import RateStore
from domain.models.rates import RateEdge


@pytest.fixture
def store():
	store = RateStore()
	store.add_rate('AUD', 'USD', 0.7)
	store.add_rate('USD', 'CAD', 1.2)
	return store


def test_add_rate_stores_forward_edge(store):
	assert store.get_direct_rate('AUD', 'USD') == 0.7
	assert store.get_edge('AUD', 'USD') == RateEdge('AUD', 'USD', 0.7, reciprocal=False)


def test_add_rate_stores_reciprocal_edge(store):
	assert store.get_direct_rate('USD', 'AUD') == pytest.approx(1 / 0.7)
	assert store.get_edge('USD', 'AUD').reciprocal is True


def test_identity_rate_for_unknown_currency(store):
	assert store.get_direct_rate('XYZ', 'XYZ') == 1.0
	assert 'XYZ' not in store


def test_missing_edge_returns_none(store):
	assert store.get_direct_rate('AUD', 'CAD') is None
	assert store.get_direct_rate('AUD', 'XYZ') is None


def test_last_write_wins_for_ordered_pair():
	store = RateStore()
	store.add_rate('AUD', 'USD', 0.5)
	store.add_rate('USD', 'AUD', 3.0)

	assert store.get_direct_rate('USD', 'AUD') == 3.0
	assert store.get_direct_rate('AUD', 'USD') == pytest.approx(1 / 3.0)
	assert store.get_edge('USD', 'AUD').reciprocal is False
	assert store.get_edge('AUD', 'USD').reciprocal is False


def test_reverse_entry_keeps_quoted_pair_walkable():
	store = RateStore()
	store.add_rate('USD', 'EUR', 0.9)
	store.add_rate('EUR', 'USD', 1.1)

	quoted_targets = [edge.to_currency for edge in store.neighbours('USD', include_reciprocal=False)]

	assert quoted_targets == ['EUR']
	assert store.get_direct_rate('USD', 'EUR') == pytest.approx(1 / 1.1)


def test_duplicate_entries_are_not_averaged():
	store = RateStore()
	store.add_rate('AUD', 'USD', 0.5)
	store.add_rate('AUD', 'USD', 0.9)

	assert store.get_direct_rate('AUD', 'USD') == 0.9
	assert len(store) == 2


@pytest.mark.parametrize('rate', [0, -1.5, float('nan'), float('inf')])
def test_add_rate_rejects_invalid_rates(rate):
	store = RateStore()

	with pytest.raises(InvalidRateError):
		store.add_rate('AUD', 'USD', rate)

	assert len(store) == 0


def test_neighbours_can_exclude_reciprocal_edges(store):
	all_targets = {edge.to_currency for edge in store.neighbours('USD')}
	quoted_targets = {edge.to_currency for edge in store.neighbours('USD', include_reciprocal=False)}

	assert all_targets == {'AUD', 'CAD'}
	assert quoted_targets == {'CAD'}


def test_neighbours_of_unknown_currency_is_empty(store):
	assert store.neighbours('XYZ') == []


def test_currencies_and_edge_count(store):
	assert sorted(store.currencies()) == ['AUD', 'CAD', 'USD']
	assert store.has_currency('CAD')
	assert len(store) == 4


def test_currency_codes_are_case_sensitive(store):
	assert store.get_direct_rate('aud', 'usd') is None
	assert not store.has_currency('aud')
