"""
Timing harness for the sorting and searching algorithms.

Each sample times exactly one call to the algorithm with a monotonic
high-resolution clock. Input generation, copying and validation happen
outside the timed block.

Public API (stable):
    size_range(num_min, num_max, incr) -> list[int]
    average_sorting_time(method, n_perms, n, rng, ...) -> TimeAA
    average_search_time(method, generator, order, n, n_times, rng, ...) -> TimeAA
    generate_sorting_times(method, path, num_min, num_max, incr, n_perms, rng, ...) -> list[TimeAA]
    generate_search_times(method, generator, order, path, num_min, num_max, incr, n_times, rng, ...) -> list[TimeAA]

`time` in the returned rows is the mean per call in nanoseconds.
"""

from __future__ import annotations

import gc
import logging
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Optional, Union

import numpy as np

from algolab.bench.tables import TimeAA, save_time_table
from algolab.datasets.generators import make_dataset
from algolab.datasets.keys import KeyGenerator
from algolab.datasets.permutations import generate_perm, generate_permutations
from algolab.dictionary import Dictionary, Order, SearchMethod
from algolab.errors import InvalidArgumentError
from algolab.validate import check_sorted

__all__ = [
    "SortFunction",
    "size_range",
    "average_sorting_time",
    "average_search_time",
    "generate_sorting_times",
    "generate_search_times",
]

logger = logging.getLogger(__name__)

SortFunction = Callable[[List[int], int, int], int]


@contextmanager
def _gc_paused(disable_gc: bool) -> Iterator[None]:
    """
    Collect and disable the GC for the block when `disable_gc` is set.

    The collector is re-enabled afterwards only if it was on when we entered.
    """
    was_enabled = gc.isenabled()
    if disable_gc:
        gc.collect()
        gc.disable()
    try:
        yield
    finally:
        if disable_gc and was_enabled:
            gc.enable()


def size_range(num_min: int, num_max: int, incr: int) -> List[int]:
    """Sizes num_min, num_min + incr, ... up to and including num_max."""
    if num_min < 1 or num_min > num_max:
        raise InvalidArgumentError(f"invalid size range [{num_min}, {num_max}]")
    if incr < 1:
        raise InvalidArgumentError(f"size increment must be >= 1; got {incr}")
    return list(range(num_min, num_max + 1, incr))


def average_sorting_time(
    method: SortFunction,
    n_perms: int,
    n: int,
    rng: np.random.Generator,
    *,
    disable_gc: bool = False,
    validate: bool = False,
    dataset: Optional[Dict[str, Any]] = None,
) -> TimeAA:
    """
    Sort `n_perms` random permutations of size `n` with `method`.

    Parameters
    ----------
    method : callable
        Sort with the signature method(array, lo, hi) -> ops, e.g. a SortMethod.
    n_perms : int
        Number of permutations to sort.
    n : int
        Size of each permutation.
    rng : numpy.random.Generator
        Source of the permutations.
    disable_gc : bool
        If True, collect and disable Python GC during the timed loop.
    validate : bool
        If True, check every output against the expected order (outside the
        timed block) and raise SortValidationError on a mismatch.
    dataset : dict | None
        Optional `make_dataset` spec used instead of uniform permutations,
        e.g. {"dist": "sorted"} to probe a pivot strategy's worst case.
    """
    if method is None:
        raise InvalidArgumentError("method must not be None")
    if n_perms < 1 or n < 1:
        raise InvalidArgumentError(f"n_perms and n must be >= 1; got {n_perms}, {n}")

    if dataset is None:
        perms = generate_permutations(n_perms, n, rng)
    else:
        perms = [make_dataset(n, dataset, rng) for _ in range(n_perms)]
    descending = bool(getattr(method, "descending", False))

    total_ns = 0
    total_ob = 0
    min_ob = None
    max_ob = 0

    with _gc_paused(disable_gc):
        for perm in perms:
            before = list(perm) if validate else None

            t0 = time.perf_counter_ns()
            ob = method(perm, 0, n - 1)
            t1 = time.perf_counter_ns()

            total_ns += t1 - t0
            total_ob += ob
            min_ob = ob if min_ob is None else min(min_ob, ob)
            max_ob = max(max_ob, ob)

            if before is not None:
                check_sorted(before, perm, descending=descending)

    row = TimeAA(
        n=n,
        n_elems=n_perms,
        time=total_ns / n_perms,
        average_ob=total_ob / n_perms,
        min_ob=min_ob,
        max_ob=max_ob,
    )
    logger.debug("sorting n=%d: %.2f ns, %.2f ops on average", n, row.time, row.average_ob)
    return row


def average_search_time(
    method: SearchMethod,
    generator: KeyGenerator,
    order: Order,
    n: int,
    n_times: int,
    rng: np.random.Generator,
    *,
    disable_gc: bool = False,
) -> TimeAA:
    """
    Search `n_times * n` generated keys in a dictionary holding 1..n.

    The dictionary is created with capacity `n` and filled with a random
    permutation of 1..n, so every generated key is present. A miss raises
    KeyNotFoundError.
    """
    if method is None or generator is None:
        raise InvalidArgumentError("method and generator must not be None")
    if n < 1 or n_times < 1:
        raise InvalidArgumentError(f"n and n_times must be >= 1; got {n}, {n_times}")

    n_keys = n_times * n

    with Dictionary(n, order) as dictionary:
        dictionary.bulk_insert(generate_perm(n, rng))
        keys = generator(n_keys, n, rng)

        total_ns = 0
        total_ob = 0
        min_ob = None
        max_ob = 0

        with _gc_paused(disable_gc):
            for key in keys:
                t0 = time.perf_counter_ns()
                result = dictionary.search(key, method)
                t1 = time.perf_counter_ns()

                total_ns += t1 - t0
                total_ob += result.ops
                min_ob = result.ops if min_ob is None else min(min_ob, result.ops)
                max_ob = max(max_ob, result.ops)

    row = TimeAA(
        n=n,
        n_elems=n_keys,
        time=total_ns / n_keys,
        average_ob=total_ob / n_keys,
        min_ob=min_ob,
        max_ob=max_ob,
    )
    logger.debug("searching n=%d: %.2f ns, %.2f ops on average", n, row.time, row.average_ob)
    return row


def generate_sorting_times(
    method: SortFunction,
    path: Union[str, Path],
    num_min: int,
    num_max: int,
    incr: int,
    n_perms: int,
    rng: np.random.Generator,
    *,
    disable_gc: bool = False,
    validate: bool = False,
    dataset: Optional[Dict[str, Any]] = None,
) -> List[TimeAA]:
    """Measure every size in [num_min, num_max] step incr and write the table."""
    rows = [
        average_sorting_time(
            method, n_perms, n, rng, disable_gc=disable_gc, validate=validate, dataset=dataset
        )
        for n in size_range(num_min, num_max, incr)
    ]
    save_time_table(path, rows)
    logger.info("Wrote %d sorting rows to %s", len(rows), path)
    return rows


def generate_search_times(
    method: SearchMethod,
    generator: KeyGenerator,
    order: Order,
    path: Union[str, Path],
    num_min: int,
    num_max: int,
    incr: int,
    n_times: int,
    rng: np.random.Generator,
    *,
    disable_gc: bool = False,
) -> List[TimeAA]:
    """Search counterpart of `generate_sorting_times`."""
    rows = [
        average_search_time(method, generator, order, n, n_times, rng, disable_gc=disable_gc)
        for n in size_range(num_min, num_max, incr)
    ]
    save_time_table(path, rows)
    logger.info("Wrote %d search rows to %s", len(rows), path)
    return rows
