"""
Exception hierarchy for algolab.

Two tiers:

- Recoverable errors derive from `AlgoLabError`. They are raised by the
  top-level entry points that take externally-derived arguments (selection
  sort, dictionary operations, searches, generators) and callers are expected
  to handle them. A search miss (`KeyNotFoundError`) is a normal outcome.

- `InvariantViolation` marks programmer error inside the recursive
  primitives (merge sort, quicksort, partition, pivot selection). It derives
  from AssertionError and is raised explicitly so it also fires under -O.
"""

from __future__ import annotations

__all__ = [
    "AlgoLabError",
    "InvalidArgumentError",
    "InvalidRangeError",
    "KeyNotFoundError",
    "DictionaryGrowthError",
    "SortValidationError",
    "InvariantViolation",
    "require",
]


class AlgoLabError(Exception):
    """Base class for recoverable algolab errors."""


class InvalidArgumentError(AlgoLabError, ValueError):
    """An argument is outside the domain accepted by the operation."""


class InvalidRangeError(InvalidArgumentError):
    """An index range [lo, hi] is empty, inverted or out of bounds."""

    def __init__(self, lo: int, hi: int, length: int | None = None) -> None:
        self.lo = lo
        self.hi = hi
        self.length = length
        if length is None:
            msg = f"invalid index range [{lo}, {hi}]"
        else:
            msg = f"invalid index range [{lo}, {hi}] for a table of length {length}"
        super().__init__(msg)


class KeyNotFoundError(AlgoLabError, LookupError):
    """The searched key is not stored in the table.

    `ops` holds the basic operations spent before giving up.
    """

    def __init__(self, key: int, ops: int) -> None:
        self.key = key
        self.ops = ops
        super().__init__(f"key {key} not found after {ops} operations")


class DictionaryGrowthError(AlgoLabError, MemoryError):
    """The dictionary could not allocate a larger backing table."""


class SortValidationError(AlgoLabError):
    """A benchmarked sort produced an incorrectly ordered array."""


class InvariantViolation(AssertionError):
    """A precondition of a recursive primitive was broken by the caller."""


def require(condition: bool, message: str) -> None:
    """Raise InvariantViolation with `message` unless `condition` holds."""
    if not condition:
        raise InvariantViolation(message)
