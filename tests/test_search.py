"""Tests for the search strategies over a plain table."""

from __future__ import annotations

import pytest

from algolab.dictionary import (
    SearchMethod,
    SearchResult,
    bin_search,
    lin_auto_search,
    lin_search,
    resolve_search_method,
)
from algolab.errors import InvalidArgumentError, InvalidRangeError, KeyNotFoundError


class TestLinearSearch:
    def test_hit(self):
        assert lin_search([4, 2, 7, 1], 0, 3, 7) == SearchResult(position=2, ops=3)

    def test_miss_reports_ops(self):
        with pytest.raises(KeyNotFoundError) as exc:
            lin_search([4, 2, 7, 1], 0, 3, 5)
        assert exc.value.ops == 4
        assert exc.value.key == 5

    def test_bounds_are_inclusive(self):
        assert lin_search([4, 2, 7, 1], 1, 3, 1).position == 3

    def test_does_not_look_outside_range(self):
        with pytest.raises(KeyNotFoundError):
            lin_search([4, 2, 7, 1], 1, 2, 4)


class TestSelfOrganizingSearch:
    def test_hit_at_front_does_not_reorder(self):
        table = [5, 6, 7]
        assert lin_auto_search(table, 0, 2, 5) == SearchResult(position=0, ops=1)
        assert table == [5, 6, 7]

    def test_hit_moves_key_one_slot_forward(self):
        table = [5, 6, 7, 8, 9]
        assert lin_auto_search(table, 0, 4, 9) == SearchResult(position=4, ops=5)
        assert table == [5, 6, 7, 9, 8]

    def test_repeated_searches_move_key_towards_front(self):
        table = [5, 6, 7, 8, 9]
        positions = [lin_auto_search(table, 0, 4, 9).position for _ in range(5)]
        assert positions == [4, 3, 2, 1, 0]
        assert all(b < a for a, b in zip(positions, positions[1:4]))
        assert table[0] == 9

    def test_miss(self):
        table = [5, 6, 7]
        with pytest.raises(KeyNotFoundError) as exc:
            lin_auto_search(table, 0, 2, 1)
        assert exc.value.ops == 3
        assert table == [5, 6, 7]


class TestBinarySearch:
    @pytest.mark.parametrize(
        "key, position, ops",
        [
            (3, 2, 1),
            (1, 0, 3),
            (2, 1, 5),
            (4, 3, 3),
            (5, 4, 5),
        ],
    )
    def test_hits_charge_two_ops_per_failed_probe(self, key, position, ops):
        assert bin_search([1, 2, 3, 4, 5], 0, 4, key) == SearchResult(position, ops)

    @pytest.mark.parametrize("key, ops", [(6, 6), (0, 4)])
    def test_miss(self, key, ops):
        with pytest.raises(KeyNotFoundError) as exc:
            bin_search([1, 2, 3, 4, 5], 0, 4, key)
        assert exc.value.ops == ops


@pytest.mark.parametrize("method", list(SearchMethod))
@pytest.mark.parametrize(
    "first, last",
    [(-1, 2), (2, 1), (0, 3)],
)
def test_invalid_ranges(method, first, last):
    with pytest.raises(InvalidRangeError):
        method([1, 2, 3], first, last, 2)


def test_enum_dispatch_matches_functions():
    assert SearchMethod.LINEAR([3, 1, 2], 0, 2, 2) == lin_search([3, 1, 2], 0, 2, 2)
    assert SearchMethod.BINARY([1, 2, 3], 0, 2, 3) == bin_search([1, 2, 3], 0, 2, 3)


def test_resolve_search_method():
    assert resolve_search_method("lin_auto_search") is SearchMethod.LINEAR_AUTO
    with pytest.raises(InvalidArgumentError):
        resolve_search_method("hash_search")
