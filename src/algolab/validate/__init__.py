"""Sorted-output validation: the `sorted()` oracle and order/multiset checks."""

from .oracle import ORACLE_NAME, equals_oracle, oracle_sort
from .properties import (
    check_sorted,
    is_nondecreasing,
    is_nonincreasing,
    is_permutation,
    multiset_diff,
    order_violation,
)

__all__ = [
    "ORACLE_NAME",
    "oracle_sort",
    "equals_oracle",
    "is_nondecreasing",
    "is_nonincreasing",
    "order_violation",
    "is_permutation",
    "multiset_diff",
    "check_sorted",
]
