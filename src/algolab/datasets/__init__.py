"""
Datasets package public API.

Re-export the input generators so callers can write:
    from algolab.datasets import generate_perm, make_dataset, KEY_GENERATORS
"""

from .generators import SUPPORTED_DISTS, make_dataset
from .keys import (
    KEY_GENERATORS,
    potential_key_generator,
    resolve_key_generator,
    uniform_key_generator,
)
from .permutations import generate_perm, generate_permutations, random_num

__all__ = [
    "make_dataset",
    "SUPPORTED_DISTS",
    "random_num",
    "generate_perm",
    "generate_permutations",
    "KEY_GENERATORS",
    "uniform_key_generator",
    "potential_key_generator",
    "resolve_key_generator",
]
