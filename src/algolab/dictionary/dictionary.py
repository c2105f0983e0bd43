"""
Growable integer dictionary with sorted or unsorted insertion.

The dictionary owns a backing `table` whose length is the allocated capacity
(`size`). Only the first `count` slots hold data. When the table is full an
insert grows it to int(size * 1.1) + 1 slots.

Operation counting:
    - unsorted insert: 1 (the append)
    - sorted insert:   0; the shifts that open the gap are not counted
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Iterator, List

from algolab.dictionary.search import SearchMethod, SearchResult
from algolab.errors import DictionaryGrowthError, InvalidArgumentError, KeyNotFoundError

__all__ = ["Order", "Dictionary"]

logger = logging.getLogger(__name__)

GROWTH_FACTOR = 1.1


class Order(Enum):
    SORTED = "sorted"
    NOT_SORTED = "not_sorted"
    UNSORTED = "not_sorted"


class Dictionary:
    """
    Integer dictionary backed by a table that grows on demand.

    Attributes:
        table: Backing storage; len(table) == size
        size: Allocated capacity
        count: Number of stored keys
        order: Whether the stored keys are kept sorted
    """

    def __init__(self, size: int, order: Order = Order.NOT_SORTED):
        if not isinstance(size, int) or size < 1:
            raise InvalidArgumentError(f"size must be a positive integer; got {size!r}")
        if not isinstance(order, Order):
            raise InvalidArgumentError(f"order must be an Order; got {order!r}")

        self.table: List[int] = [0] * size
        self.size = size
        self.count = 0
        self.order = order

    def insert(self, key: int) -> int:
        """Insert one key and return the operations charged for it."""
        self._check_open()
        if self.count == self.size:
            self._grow()

        if self.order is Order.NOT_SORTED:
            self.table[self.count] = key
            self.count += 1
            return 1

        i = self.count - 1
        while i >= 0 and self.table[i] > key:
            self.table[i + 1] = self.table[i]
            i -= 1
        self.table[i + 1] = key
        self.count += 1
        return 0

    def bulk_insert(self, keys: Iterable[int]) -> int:
        """
        Insert every key in order and return the summed operations.

        Not atomic: if an insert fails, the keys before it stay in the
        dictionary.
        """
        keys = list(keys)
        if not keys:
            raise InvalidArgumentError("bulk_insert needs at least one key")

        ops = 0
        for key in keys:
            ops += self.insert(key)
        return ops

    def search(self, key: int, method: SearchMethod = SearchMethod.LINEAR) -> SearchResult:
        """
        Look `key` up in table[0 .. count - 1] with the given strategy.

        The self-organizing search reorders the table, so it is refused on a
        sorted dictionary.
        """
        self._check_open()
        if method is SearchMethod.LINEAR_AUTO and self.order is Order.SORTED:
            raise InvalidArgumentError("lin_auto_search would break the order of a sorted dictionary")
        if self.count == 0:
            raise KeyNotFoundError(key, 0)
        return method(self.table, 0, self.count - 1, key)

    def free(self) -> None:
        """Release the backing table. The dictionary is unusable afterwards."""
        self.table = []
        self.size = 0
        self.count = 0

    def _grow(self) -> None:
        new_size = int(self.size * GROWTH_FACTOR) + 1
        try:
            self.table.extend([0] * (new_size - self.size))
        except MemoryError as e:
            raise DictionaryGrowthError(
                f"could not grow dictionary from {self.size} to {new_size} slots"
            ) from e
        logger.debug("Dictionary grown from %d to %d slots", self.size, new_size)
        self.size = new_size

    def _check_open(self) -> None:
        if self.size == 0:
            raise InvalidArgumentError("dictionary has been freed")

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[int]:
        return iter(self.table[: self.count])

    def __repr__(self) -> str:
        return (
            f"Dictionary(size={self.size}, count={self.count}, order={self.order.name})"
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.free()
