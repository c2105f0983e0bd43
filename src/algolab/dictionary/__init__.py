"""
Dictionary package public API.

Re-exports the dictionary ADT and its search strategies:
    from algolab.dictionary import Dictionary, Order, SearchMethod
"""

from .dictionary import Dictionary, Order
from .search import (
    SearchMethod,
    SearchResult,
    bin_search,
    lin_auto_search,
    lin_search,
    resolve_search_method,
)

__all__ = [
    "Dictionary",
    "Order",
    "SearchMethod",
    "SearchResult",
    "lin_search",
    "lin_auto_search",
    "bin_search",
    "resolve_search_method",
]
