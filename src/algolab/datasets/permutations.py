"""
Random permutations of 1..n.

`generate_perm` is a Fisher-Yates shuffle that swaps position i with a
uniform index in [i, n-1]. Randomness comes from a caller-owned
`numpy.random.Generator` so a seeded run is reproducible.

Public API (stable):
    random_num(inf, sup, rng) -> int
    generate_perm(n, rng) -> list[int]
    generate_permutations(n_perms, n, rng) -> list[list[int]]
"""

from __future__ import annotations

from typing import List

import numpy as np

from algolab.errors import InvalidArgumentError

__all__ = ["random_num", "generate_perm", "generate_permutations"]


def random_num(inf: int, sup: int, rng: np.random.Generator) -> int:
    """Return a uniform integer in [inf, sup] (both inclusive)."""
    if inf < 0 or inf > sup:
        raise InvalidArgumentError(f"invalid bounds for random_num: [{inf}, {sup}]")
    if inf == sup:
        return sup
    return int(rng.integers(inf, sup + 1))


def generate_perm(n: int, rng: np.random.Generator) -> List[int]:
    """Return a uniformly random permutation of 1..n."""
    if not isinstance(n, int) or n < 1:
        raise InvalidArgumentError(f"permutation size must be an integer >= 1; got {n!r}")

    perm = list(range(1, n + 1))
    for i in range(n):
        j = random_num(i, n - 1, rng)
        perm[i], perm[j] = perm[j], perm[i]
    return perm


def generate_permutations(n_perms: int, n: int, rng: np.random.Generator) -> List[List[int]]:
    """Return `n_perms` independent permutations of 1..n."""
    if not isinstance(n_perms, int) or n_perms < 1:
        raise InvalidArgumentError(
            f"number of permutations must be an integer >= 1; got {n_perms!r}"
        )
    return [generate_perm(n, rng) for _ in range(n_perms)]
