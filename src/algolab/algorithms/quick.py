"""
Quicksort with a pluggable pivot strategy.

Partition:
    The chosen pivot is swapped to lo, then array[lo+1..hi] is scanned once.
    Each comparison against the pivot value counts one operation; smaller
    elements are swapped into the growing "less than" region that ends at
    `pos`. Finally the pivot is swapped from lo into pos.

Recursion:
    The left part [lo, pos-1] is sorted only if lo < pos - 1 and the right
    part [pos+1, hi] only if pos + 1 < hi. Both guards skip parts of a single
    element, which are already in place.

With the FIRST strategy an already sorted input degrades to n - 1 nested
calls, so the public entry points raise the recursion limit to fit the range.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from algolab.algorithms.pivots import PivotStrategy
from algolab.algorithms.recursion import recursion_headroom
from algolab.algorithms.swap import swap
from algolab.errors import require

__all__ = ["QuicksortStats", "quicksort", "quicksort_stats", "partition"]


@dataclass(frozen=True)
class QuicksortStats:
    ops: int
    max_depth: int


def quicksort(
    array: List[int], lo: int, hi: int, pivot: PivotStrategy = PivotStrategy.FIRST
) -> int:
    """Sort array[lo..hi] in place; return the operation count."""
    return quicksort_stats(array, lo, hi, pivot).ops


def quicksort_stats(
    array: List[int], lo: int, hi: int, pivot: PivotStrategy = PivotStrategy.FIRST
) -> QuicksortStats:
    """Like `quicksort`, also reporting the deepest recursion level reached."""
    _require_range(array, lo, hi)
    with recursion_headroom(hi - lo + 1):
        ops, depth = _quicksort(array, lo, hi, pivot, 1)
    return QuicksortStats(ops=ops, max_depth=depth)


def _quicksort(
    array: List[int], lo: int, hi: int, pivot: PivotStrategy, depth: int
) -> Tuple[int, int]:
    if lo == hi:
        return 0, depth

    pos, ops = partition(array, lo, hi, pivot)
    deepest = depth

    if lo < pos - 1:
        sub_ops, sub_depth = _quicksort(array, lo, pos - 1, pivot, depth + 1)
        ops += sub_ops
        deepest = max(deepest, sub_depth)

    if pos + 1 < hi:
        sub_ops, sub_depth = _quicksort(array, pos + 1, hi, pivot, depth + 1)
        ops += sub_ops
        deepest = max(deepest, sub_depth)

    return ops, deepest


def partition(
    array: List[int], lo: int, hi: int, pivot: PivotStrategy = PivotStrategy.FIRST
) -> Tuple[int, int]:
    """
    Partition array[lo..hi] around the element picked by `pivot`.

    Returns
    -------
    (pos, ops) : tuple[int, int]
        Final index of the pivot and operations spent, pivot selection included.
    """
    _require_range(array, lo, hi)

    p, ops = pivot(array, lo, hi)
    swap(array, lo, p)
    value = array[lo]

    pos = lo
    for i in range(lo + 1, hi + 1):
        ops += 1
        if array[i] < value:
            pos += 1
            swap(array, i, pos)

    swap(array, lo, pos)
    return pos, ops


def _require_range(array: List[int], lo: int, hi: int) -> None:
    require(array is not None, "array must not be None")
    require(lo >= 0, f"lo must be nonnegative, got {lo}")
    require(hi >= lo, f"hi ({hi}) must be >= lo ({lo})")
    require(hi < len(array), f"hi ({hi}) past the end of an array of length {len(array)}")
