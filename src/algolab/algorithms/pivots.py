"""
Pivot-selection strategies for quicksort.

Every strategy has the signature (array, lo, hi) -> (pivot_index, ops) and is
injected into `partition` through `PivotStrategy`.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, List, Tuple

from algolab.errors import require

__all__ = ["PivotSelector", "PivotStrategy", "median", "median_avg", "median_stat"]

PivotSelector = Callable[[List[int], int, int], Tuple[int, int]]


def median(array: List[int], lo: int, hi: int) -> Tuple[int, int]:
    """First element of the range. No operations."""
    _require_range(array, lo, hi)
    return lo, 0


def median_avg(array: List[int], lo: int, hi: int) -> Tuple[int, int]:
    """Middle index floor((lo + hi) / 2). No operations."""
    _require_range(array, lo, hi)
    return (lo + hi) // 2, 0


def median_stat(array: List[int], lo: int, hi: int) -> Tuple[int, int]:
    """
    Median of array[lo], array[hi] and array[mid], mid = (lo + hi) // 2.

    Each comparison evaluated counts one operation, so the cost is 2 or 3.
    """
    _require_range(array, lo, hi)
    mid = (lo + hi) // 2
    e1, e2, e3 = array[lo], array[hi], array[mid]

    ops = 1
    if e1 < e2:
        ops += 1
        if e2 <= e3:
            return hi, ops
        ops += 1
        if e1 < e3:
            return mid, ops
        return lo, ops

    ops += 1
    if e2 >= e3:
        return hi, ops
    ops += 1
    if e1 > e3:
        return mid, ops
    return lo, ops


class PivotStrategy(Enum):
    """Closed set of pivot policies, selectable by name from configs."""

    FIRST = "first"
    AVERAGE = "average"
    MEDIAN_OF_THREE = "median_stat"

    def __call__(self, array: List[int], lo: int, hi: int) -> Tuple[int, int]:
        return _SELECTORS[self](array, lo, hi)


_SELECTORS = {
    PivotStrategy.FIRST: median,
    PivotStrategy.AVERAGE: median_avg,
    PivotStrategy.MEDIAN_OF_THREE: median_stat,
}


def _require_range(array: List[int], lo: int, hi: int) -> None:
    require(array is not None, "array must not be None")
    require(0 <= lo <= hi < len(array), f"invalid pivot range [{lo}, {hi}]")
