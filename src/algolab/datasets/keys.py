"""
Search-key generators.

Each generator has the signature
    generator(n_keys, max_key, rng) -> list[int]
and produces keys in [1, max_key].

- "uniform": 1, 2, ..., max_key, 1, 2, ... sequentially. With
  n_keys == max_key every key appears exactly once. `rng` is unused.
- "potential": approximately power-law keys; 1 is drawn about half of the
  time, 2 about 17%, 3 about 9%, and so on.
"""

from __future__ import annotations

from typing import Callable, Dict, List

import numpy as np

from algolab.errors import InvalidArgumentError

__all__ = [
    "KeyGenerator",
    "KEY_GENERATORS",
    "uniform_key_generator",
    "potential_key_generator",
    "resolve_key_generator",
]

KeyGenerator = Callable[[int, int, np.random.Generator], List[int]]


def uniform_key_generator(n_keys: int, max_key: int, rng: np.random.Generator) -> List[int]:
    _validate(n_keys, max_key)
    return [1 + (i % max_key) for i in range(n_keys)]


def potential_key_generator(n_keys: int, max_key: int, rng: np.random.Generator) -> List[int]:
    _validate(n_keys, max_key)
    if n_keys == 0:
        return []
    u = rng.random(n_keys)
    keys = 0.5 + max_key / (1 + max_key * u)
    # float -> int truncation, like a C cast
    return keys.astype(np.int64).tolist()


KEY_GENERATORS: Dict[str, KeyGenerator] = {
    "uniform": uniform_key_generator,
    "potential": potential_key_generator,
}


def resolve_key_generator(name: str) -> KeyGenerator:
    if name not in KEY_GENERATORS:
        raise InvalidArgumentError(
            f"Unknown key generator {name!r}. Supported: {sorted(KEY_GENERATORS)}"
        )
    return KEY_GENERATORS[name]


def _validate(n_keys: int, max_key: int) -> None:
    if n_keys < 0:
        raise InvalidArgumentError("n_keys must be nonnegative")
    if max_key < 1:
        raise InvalidArgumentError("max_key must be >= 1")
