"""
Benchmark package public API.

    from algolab.bench import average_sorting_time, save_time_table
"""

from .measure import (
    average_search_time,
    average_sorting_time,
    generate_search_times,
    generate_sorting_times,
    size_range,
)
from .tables import TimeAA, load_time_table, save_time_table

__all__ = [
    "TimeAA",
    "size_range",
    "average_sorting_time",
    "average_search_time",
    "generate_sorting_times",
    "generate_search_times",
    "save_time_table",
    "load_time_table",
]
