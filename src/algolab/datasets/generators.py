"""
Input arrays for sort experiments, beyond plain random permutations.

Every distribution yields the values 1..n exactly once:

    permutation     uniform random permutation (`generate_perm`)
    sorted          1, 2, ..., n
    reversed        n, n-1, ..., 1
    nearly_sorted   1..n with ceil(swap_frac * n) random transpositions
                    (params: {"swap_frac": float in [0, 1], default 0.05})

A dataset is described by a mapping such as {"dist": "sorted"}, which is what
the `dataset` key of a sort experiment holds.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, List

import numpy as np

from algolab.datasets.permutations import generate_perm
from algolab.errors import InvalidArgumentError

__all__ = ["SUPPORTED_DISTS", "make_dataset"]

DEFAULT_SWAP_FRAC = 0.05


def _sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(1, n + 1))


def _reversed(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n, 0, -1))


def _permutation(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return generate_perm(n, rng)


def _nearly_sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    frac = _swap_frac(params)
    out = list(range(1, n + 1))
    n_swaps = math.ceil(frac * n)
    if n_swaps:
        pairs = rng.integers(0, n, size=(n_swaps, 2))
        for i, j in pairs.tolist():
            out[i], out[j] = out[j], out[i]
    return out


_BUILDERS: Dict[str, Callable[[int, Dict[str, Any], np.random.Generator], List[int]]] = {
    "permutation": _permutation,
    "sorted": _sorted,
    "reversed": _reversed,
    "nearly_sorted": _nearly_sorted,
}

SUPPORTED_DISTS = frozenset(_BUILDERS)


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Build an array of size `n` following `spec`.

    Parameters
    ----------
    n : int
        Array size, >= 0.
    spec : dict
        {"dist": <name>, "params": {...}}; `params` is optional.
    rng : numpy.random.Generator
        Caller-owned generator. The deterministic dists never draw from it.

    Raises
    ------
    InvalidArgumentError
        For a negative or non-int `n`, an unknown dist or bad params.
    """
    if not isinstance(n, int) or n < 0:
        raise InvalidArgumentError(f"n must be a nonnegative int; got {n!r}")
    if not isinstance(spec, dict):
        raise InvalidArgumentError(f"dataset spec must be a mapping; got {spec!r}")

    dist = spec.get("dist")
    builder = _BUILDERS.get(dist) if isinstance(dist, str) else None
    if builder is None:
        raise InvalidArgumentError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )
    if n == 0:
        return []
    return builder(n, spec.get("params") or {}, rng)


def _swap_frac(params: Dict[str, Any]) -> float:
    raw = params.get("swap_frac", DEFAULT_SWAP_FRAC)
    try:
        frac = float(raw)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"swap_frac must be a number in [0, 1]; got {raw!r}") from e
    if not 0.0 <= frac <= 1.0:
        raise InvalidArgumentError(f"swap_frac must be in [0, 1]; got {frac}")
    return frac
