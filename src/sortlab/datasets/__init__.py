"""
Datasets package public API.

Re-export the generators so callers can write:
    from sortlab.datasets import generate_random_sequence, make_dataset
"""

from .generators import (
    DEFAULT_MAX_LENGTH,
    SHORT_MAX,
    SHORT_MIN,
    SUPPORTED_DISTS,
    USHORT_MAX,
    USHORT_MIN,
    generate_random_int,
    generate_random_sequence,
    make_dataset,
    make_rng,
)

__all__ = [
    "DEFAULT_MAX_LENGTH",
    "SHORT_MAX",
    "SHORT_MIN",
    "SUPPORTED_DISTS",
    "USHORT_MAX",
    "USHORT_MIN",
    "generate_random_int",
    "generate_random_sequence",
    "make_dataset",
    "make_rng",
]
