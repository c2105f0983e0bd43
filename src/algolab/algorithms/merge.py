"""
Merge sort over an inclusive index range.

Operation counting:
    One operation per key comparison in the merge loop, then one per guard
    evaluation while copying the remainder of the half that is not exhausted,
    including the final failing guard. A merge of k elements therefore always
    costs k + 1 operations and the total is independent of the input order.

Ties:
    The left element is taken only when strictly smaller, so equal keys take
    the right element first.
"""

from __future__ import annotations

from typing import List

from algolab.errors import require

__all__ = ["merge_sort", "merge"]


def merge_sort(array: List[int], lo: int, hi: int) -> int:
    """Sort array[lo..hi] in place; return the operation count."""
    _require_range(array, lo, hi)
    return _merge_sort(array, lo, hi)


def _merge_sort(array: List[int], lo: int, hi: int) -> int:
    if lo == hi:
        return 0

    mid = (lo + hi) // 2
    ops = _merge_sort(array, lo, mid)
    ops += _merge_sort(array, mid + 1, hi)
    ops += merge(array, lo, hi, mid)
    return ops


def merge(array: List[int], lo: int, hi: int, mid: int) -> int:
    """
    Merge the sorted runs array[lo..mid] and array[mid+1..hi].

    The result is built in a scratch list sized to the sub-range and copied
    back over array[lo..hi].
    """
    _require_range(array, lo, hi)
    require(lo <= mid <= hi, f"mid {mid} outside [{lo}, {hi}]")

    aux: List[int] = []
    ops = 0
    i, j = lo, mid + 1

    while i <= mid and j <= hi:
        ops += 1
        if array[i] < array[j]:
            aux.append(array[i])
            i += 1
        else:
            aux.append(array[j])
            j += 1

    if i > mid:
        while True:
            ops += 1
            if j > hi:
                break
            aux.append(array[j])
            j += 1
    else:
        while True:
            ops += 1
            if i > mid:
                break
            aux.append(array[i])
            i += 1

    array[lo : hi + 1] = aux
    return ops


def _require_range(array: List[int], lo: int, hi: int) -> None:
    require(array is not None, "array must not be None")
    require(lo >= 0, f"lo must be nonnegative, got {lo}")
    require(hi >= lo, f"hi ({hi}) must be >= lo ({lo})")
    require(hi < len(array), f"hi ({hi}) past the end of an array of length {len(array)}")
