"""
Sorting algorithms public API.

Every sort mutates an integer list in place over an inclusive range [lo, hi]
and returns the number of basic operations it performed.
"""

from .merge import merge, merge_sort
from .methods import SortKind, SortMethod, resolve_sort_method
from .pivots import PivotStrategy, median, median_avg, median_stat
from .quick import QuicksortStats, partition, quicksort, quicksort_stats
from .selection import min_index, select_sort, select_sort_inv
from .swap import swap

__all__ = [
    "swap",
    "min_index",
    "select_sort",
    "select_sort_inv",
    "merge_sort",
    "merge",
    "PivotStrategy",
    "median",
    "median_avg",
    "median_stat",
    "partition",
    "quicksort",
    "quicksort_stats",
    "QuicksortStats",
    "SortKind",
    "SortMethod",
    "resolve_sort_method",
]
