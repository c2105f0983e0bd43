"""
Order and multiset checks for sorted output.

`check_sorted` is what the timing harness calls when validation is on; the
predicates are also used directly by the tests.

Equal keys are indistinguishable here, so stability is not checked (merge sort
takes the right element on ties and is not stable anyway).
"""

from __future__ import annotations

import operator
from collections import Counter
from typing import Dict, Optional, Sequence

from algolab.errors import SortValidationError

__all__ = [
    "is_nondecreasing",
    "is_nonincreasing",
    "order_violation",
    "is_permutation",
    "multiset_diff",
    "check_sorted",
]


def order_violation(xs: Sequence[int], descending: bool = False) -> Optional[int]:
    """First index i where xs[i], xs[i+1] are out of order, or None."""
    out_of_order = operator.lt if descending else operator.gt
    for i, (left, right) in enumerate(zip(xs, xs[1:])):
        if out_of_order(left, right):
            return i
    return None


def is_nondecreasing(xs: Sequence[int]) -> bool:
    return order_violation(xs) is None


def is_nonincreasing(xs: Sequence[int]) -> bool:
    return order_violation(xs, descending=True) is None


def multiset_diff(a: Sequence[int], b: Sequence[int]) -> Dict[int, int]:
    """
    Map each value whose multiplicity differs to count_in_a - count_in_b.

    An empty result means `b` is a rearrangement of `a`.
    """
    counts = Counter(a)
    counts.subtract(b)
    return {value: d for value, d in counts.items() if d}


def is_permutation(a: Sequence[int], b: Sequence[int]) -> bool:
    return len(a) == len(b) and not multiset_diff(a, b)


def check_sorted(before: Sequence[int], after: Sequence[int], descending: bool = False) -> None:
    """Raise SortValidationError unless `after` is `before` rearranged in order."""
    diff = multiset_diff(before, after)
    if diff:
        raise SortValidationError(f"sorted output is not a permutation of the input: {diff}")

    i = order_violation(after, descending)
    if i is not None:
        expected = "nonincreasing" if descending else "nondecreasing"
        raise SortValidationError(
            f"output not {expected} at i={i}: {after[i]}, {after[i + 1]}"
        )
