"""
Ground truth for the sorting tests: Python's built-in `sorted()`.

The laboratory sorts work in place, so callers keep a copy of the input and
compare the mutated array against `oracle_sort(copy)`.
"""

from __future__ import annotations

from typing import List

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(a: List[int], descending: bool = False) -> List[int]:
    """
    Return a new sorted list; `a` is left untouched.

    `descending=True` gives the nonincreasing order `select_sort_inv` produces.
    """
    return sorted(a, reverse=descending)


def equals_oracle(a: List[int], out: List[int], descending: bool = False) -> bool:
    return out == oracle_sort(a, descending)
