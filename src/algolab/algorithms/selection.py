"""
Selection sort, ascending and descending.

Both variants are top-level entry points: a bad range raises
`InvalidRangeError` instead of aborting.

Operation counting:
    One basic operation per element examined while looking for the minimum.
    The minimum scan over [i, hi] is inclusive of hi, so an ascending sort of
    n elements costs n + (n-1) + ... + 2 operations.

Descending boundary:
    `select_sort_inv` walks i from hi down to 1, not down to lo. For lo == 0
    this is the natural bound; for lo >= 1 the step i == lo still scans one
    element, and steps with i < lo have an empty window (no scan, no swap).
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from algolab.algorithms.swap import swap
from algolab.errors import InvalidRangeError

__all__ = ["min_index", "select_sort", "select_sort_inv"]


def min_index(array: List[int], lo: int, hi: int) -> Tuple[int, int]:
    """
    Return (index, ops) of the smallest element of array[lo..hi] inclusive.

    The first occurrence wins on ties. `ops` is hi - lo + 1.
    """
    _check_range(array, lo, hi)
    best = lo
    ops = 0
    for i in range(lo, hi + 1):
        ops += 1
        if array[i] < array[best]:
            best = i
    return best, ops


def select_sort(array: List[int], lo: int, hi: int) -> int:
    """
    Sort array[lo..hi] in place in nondecreasing order.

    Returns
    -------
    int
        Number of basic operations (elements examined by the minimum scans).

    Raises
    ------
    InvalidRangeError
        If array is None, lo < 0, hi < lo or hi is past the end of array.
    """
    _check_range(array, lo, hi)
    ops = 0
    for i in range(lo, hi):
        m, step_ops = min_index(array, i, hi)
        ops += step_ops
        swap(array, i, m)
    return ops


def select_sort_inv(array: List[int], lo: int, hi: int) -> int:
    """
    Sort array[lo..hi] in place in nonincreasing order.

    The minimum of [lo, i] is moved to i for i = hi, hi-1, ..., 1.
    """
    _check_range(array, lo, hi)
    ops = 0
    for i in range(hi, 0, -1):
        if i < lo:
            # empty window [lo, i]
            continue
        m, step_ops = min_index(array, lo, i)
        ops += step_ops
        swap(array, i, m)
    return ops


def _check_range(array: Optional[List[int]], lo: int, hi: int) -> None:
    if array is None or lo < 0 or hi < lo or hi >= len(array):
        raise InvalidRangeError(lo, hi, None if array is None else len(array))
