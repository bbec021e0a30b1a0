"""
Unit tests for directory ordering and filtering.
"""
import itertools
from datetime import date

import pytest

from apps.companies.services import DirectoryEntry, SortKey, rank, rank_with_loyalty
from apps.membership.models import Tier
from apps.membership.services import months_before
from tests.reference import REFERENCE_DATE


def entry(id, name, months=None, industry='Technology', size='small'):
    enrolled_on = months_before(REFERENCE_DATE, months) if months is not None else None
    return DirectoryEntry(id=id, name=name, enrolled_on=enrolled_on, industry=industry, size=size)


def names(entries):
    return [item.name for item in entries]


class TestSortKeyParsing:

    @pytest.mark.parametrize('value, expected', [
        (None, SortKey.NAME),
        ('', SortKey.NAME),
        ('name', SortKey.NAME),
        ('duration', SortKey.DURATION),
        ('TIER', SortKey.TIER),
        ('loyalty', SortKey.TIER),
        (SortKey.DURATION, SortKey.DURATION),
    ])
    def test_known_keys(self, value, expected):
        assert SortKey.parse(value) == expected

    def test_unknown_key(self):
        with pytest.raises(ValueError, match='bogus'):
            SortKey.parse('bogus')


class TestRanking:

    def test_tier_order_descending(self, loyalty_config, now):
        entries = [entry(1, 'One Month', 1), entry(2, 'Forty Months', 40), entry(3, 'Eight Months', 8)]
        ordered = rank(entries, SortKey.TIER, now, config=loyalty_config)
        assert names(ordered) == ['Forty Months', 'Eight Months', 'One Month']

    def test_name_order_is_case_insensitive(self, loyalty_config, now):
        entries = [entry(1, 'beta'), entry(2, 'Alpha'), entry(3, 'gamma')]
        assert names(rank(entries, 'name', now, config=loyalty_config)) == ['Alpha', 'beta', 'gamma']

    def test_duration_order_descending(self, loyalty_config, now):
        entries = [entry(1, 'A', 5), entry(2, 'B', 50), entry(3, 'C', None), entry(4, 'D', 13)]
        assert names(rank(entries, 'duration', now, config=loyalty_config)) == ['B', 'D', 'A', 'C']

    def test_same_tier_orders_by_duration_then_name(self, loyalty_config, now):
        entries = [entry(1, 'Zed', 13), entry(2, 'Yak', 24), entry(3, 'Ant', 13)]
        assert names(rank(entries, 'tier', now, config=loyalty_config)) == ['Yak', 'Ant', 'Zed']

    def test_ties_broken_by_name_as_written_then_id(self, loyalty_config, now):
        entries = [entry(2, 'acme'), entry(10, 'Acme'), entry(1, 'Acme')]
        ordered = rank(entries, 'name', now, config=loyalty_config)
        assert [(item.name, item.id) for item in ordered] == [('Acme', 1), ('Acme', 10), ('acme', 2)]

    def test_order_independent_of_input_order(self, loyalty_config, now):
        entries = [entry(1, 'A', 40), entry(2, 'b', 40), entry(3, 'B', 8), entry(4, 'a', None)]
        expected = rank(entries, 'tier', now, config=loyalty_config)
        for permutation in itertools.permutations(entries):
            assert rank(list(permutation), 'tier', now, config=loyalty_config) == expected

    def test_filters_are_exact_and_combined(self, loyalty_config, now):
        entries = [
            entry(1, 'A', industry='Technology', size='startup'),
            entry(2, 'B', industry='Technology', size='large'),
            entry(3, 'C', industry='Environment', size='startup'),
            entry(4, 'D', industry='technology', size='startup'),
        ]
        assert names(rank(entries, 'name', now, industry='Technology', config=loyalty_config)) == ['A', 'B']
        assert names(rank(entries, 'name', now, size='startup', config=loyalty_config)) == ['A', 'C', 'D']
        assert names(rank(
            entries, 'name', now, industry='Technology', size='startup', config=loyalty_config
        )) == ['A']

    def test_filters_do_not_change_tiers(self, loyalty_config, now):
        entries = [entry(1, 'A', 40, industry='Technology'), entry(2, 'B', 8, industry='Environment')]
        ranked = rank_with_loyalty(entries, 'tier', now, industry='Technology', config=loyalty_config)
        assert len(ranked) == 1
        assert ranked[0].classification.tier == Tier.CHAMPION
        assert ranked[0].classification.elapsed_months == 40

    def test_empty_input(self, loyalty_config, now):
        assert rank([], 'tier', now, config=loyalty_config) == []

    def test_unknown_sort_key_raises(self, loyalty_config, now):
        with pytest.raises(ValueError):
            rank([entry(1, 'A')], 'popularity', date(2026, 1, 1), config=loyalty_config)
