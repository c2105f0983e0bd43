"""Temporary recursion-limit headroom for the recursive sorts."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator

__all__ = ["recursion_headroom"]

# Frames the recursion itself needs beyond its depth (partition, pivot calls).
_RESERVE = 50


@contextmanager
def recursion_headroom(depth: int) -> Iterator[None]:
    """
    Make sure `depth` more nested Python frames fit under the recursion limit.

    The caller's stack is always below the current limit, so raising the limit
    by `depth + _RESERVE` is enough wherever we are called from. Depths within
    half the current limit are assumed to fit and leave it alone. The previous
    value is restored on exit.

    Note: this only lifts the interpreter's frame counter. On Python 3.10 each
    Python call also uses C stack, so a very deep recursion (sorted input of
    tens of thousands of elements with the `first` pivot) can still overflow
    the thread's native stack.
    """
    previous = sys.getrecursionlimit()
    needed = depth + _RESERVE
    raised = needed > previous // 2
    if raised:
        sys.setrecursionlimit(previous + needed)
    try:
        yield
    finally:
        if raised:
            sys.setrecursionlimit(previous)
