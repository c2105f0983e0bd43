"""Swap primitive shared by the in-place sorts and the self-organizing search."""

from __future__ import annotations

from typing import List

__all__ = ["swap"]


def swap(array: List[int], i: int, j: int) -> None:
    """Exchange array[i] and array[j]. Positions are trusted."""
    array[i], array[j] = array[j], array[i]
