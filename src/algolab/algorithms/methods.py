"""
Sort methods as a tagged variant.

A `SortMethod` pairs a `SortKind` with the pivot strategy quicksort needs and
is callable with the common sort signature:

    method(array, lo, hi) -> ops

The benchmark runner builds methods from config entries such as
    {"name": "quicksort", "config": {"pivot": "median_stat"}}
through `resolve_sort_method`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from algolab.algorithms.merge import merge_sort
from algolab.algorithms.pivots import PivotStrategy
from algolab.algorithms.quick import quicksort
from algolab.algorithms.selection import select_sort, select_sort_inv
from algolab.errors import InvalidArgumentError

__all__ = ["SortKind", "SortMethod", "resolve_sort_method"]


class SortKind(Enum):
    SELECT_SORT = "select_sort"
    SELECT_SORT_INV = "select_sort_inv"
    MERGE_SORT = "merge_sort"
    QUICKSORT = "quicksort"


@dataclass(frozen=True)
class SortMethod:
    kind: SortKind
    pivot: Optional[PivotStrategy] = None

    def __post_init__(self) -> None:
        if self.kind is SortKind.QUICKSORT and self.pivot is None:
            object.__setattr__(self, "pivot", PivotStrategy.FIRST)
        elif self.kind is not SortKind.QUICKSORT and self.pivot is not None:
            raise InvalidArgumentError(f"{self.kind.value} takes no pivot strategy")

    @property
    def name(self) -> str:
        if self.kind is SortKind.QUICKSORT:
            return f"{self.kind.value}_{self.pivot.value}"
        return self.kind.value

    @property
    def descending(self) -> bool:
        return self.kind is SortKind.SELECT_SORT_INV

    def __call__(self, array: List[int], lo: int, hi: int) -> int:
        if self.kind is SortKind.SELECT_SORT:
            return select_sort(array, lo, hi)
        if self.kind is SortKind.SELECT_SORT_INV:
            return select_sort_inv(array, lo, hi)
        if self.kind is SortKind.MERGE_SORT:
            return merge_sort(array, lo, hi)
        return quicksort(array, lo, hi, self.pivot)


def resolve_sort_method(name: str, config: Optional[Dict[str, Any]] = None) -> SortMethod:
    """Build a SortMethod from a config name and its optional settings."""
    try:
        kind = SortKind(name)
    except ValueError as e:
        supported = sorted(k.value for k in SortKind)
        raise InvalidArgumentError(
            f"Unknown sort method {name!r}. Supported: {supported}"
        ) from e

    config = config or {}
    pivot_name = config.get("pivot")
    if pivot_name is None:
        return SortMethod(kind)

    try:
        pivot = PivotStrategy(pivot_name)
    except ValueError as e:
        supported = sorted(p.value for p in PivotStrategy)
        raise InvalidArgumentError(
            f"Unknown pivot strategy {pivot_name!r}. Supported: {supported}"
        ) from e
    return SortMethod(kind, pivot)
