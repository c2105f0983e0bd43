"""
Search strategies over a table of integers.

All strategies share the signature

    method(table, first, last, key) -> SearchResult

with an inclusive range [first, last]. A miss raises `KeyNotFoundError`
carrying the operations spent; a bad range raises `InvalidRangeError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from algolab.algorithms.swap import swap
from algolab.errors import InvalidArgumentError, InvalidRangeError, KeyNotFoundError

__all__ = [
    "SearchResult",
    "SearchMethod",
    "lin_search",
    "lin_auto_search",
    "bin_search",
    "resolve_search_method",
]


@dataclass(frozen=True)
class SearchResult:
    """
    Result of a successful search.

    Attributes:
        position: Index where the key was found
        ops: Number of basic operations (key comparisons) performed
    """

    position: int
    ops: int


def lin_search(table: List[int], first: int, last: int, key: int) -> SearchResult:
    """Scan first..last, one operation per examined slot."""
    _check_range(table, first, last)
    ops = 0
    for i in range(first, last + 1):
        ops += 1
        if table[i] == key:
            return SearchResult(position=i, ops=ops)
    raise KeyNotFoundError(key, ops)


def lin_auto_search(table: List[int], first: int, last: int, key: int) -> SearchResult:
    """
    Self-organizing linear search.

    A hit at i > first swaps the key one slot towards the front. The reported
    position is where the key was found, before that swap.
    """
    _check_range(table, first, last)

    ops = 1
    if table[first] == key:
        return SearchResult(position=first, ops=ops)

    for i in range(first + 1, last + 1):
        ops += 1
        if table[i] == key:
            swap(table, i, i - 1)
            return SearchResult(position=i, ops=ops)
    raise KeyNotFoundError(key, ops)


def bin_search(table: List[int], first: int, last: int, key: int) -> SearchResult:
    """
    Bisection over a sorted table.

    Each probe charges one operation for the equality test and, when that
    fails, another for the less-than test.
    """
    _check_range(table, first, last)
    ops = 0
    while first <= last:
        mid = (first + last) // 2
        ops += 1
        if table[mid] == key:
            return SearchResult(position=mid, ops=ops)
        ops += 1
        if key < table[mid]:
            last = mid - 1
        else:
            first = mid + 1
    raise KeyNotFoundError(key, ops)


class SearchMethod(Enum):
    LINEAR = "lin_search"
    LINEAR_AUTO = "lin_auto_search"
    BINARY = "bin_search"

    def __call__(self, table: List[int], first: int, last: int, key: int) -> SearchResult:
        return _METHODS[self](table, first, last, key)


_METHODS = {
    SearchMethod.LINEAR: lin_search,
    SearchMethod.LINEAR_AUTO: lin_auto_search,
    SearchMethod.BINARY: bin_search,
}


def resolve_search_method(name: str) -> SearchMethod:
    try:
        return SearchMethod(name)
    except ValueError as e:
        supported = sorted(m.value for m in SearchMethod)
        raise InvalidArgumentError(
            f"Unknown search method {name!r}. Supported: {supported}"
        ) from e


def _check_range(table: List[int], first: int, last: int) -> None:
    if table is None or first < 0 or first > last or last >= len(table):
        raise InvalidRangeError(first, last, None if table is None else len(table))
