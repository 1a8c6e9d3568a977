"""
Oracle for sorting correctness.

Python's built-in `sorted()` is the ground truth: a correct total order on
integers, deterministic and independent of every algorithm in this repo.
Descending order uses `sorted(a, reverse=True)`.

Public API (stable):
    oracle_sort(a: list[int], direction: Direction = ASCENDING) -> list[int]
    equals_oracle(a: list[int], out: list[int], direction: Direction = ASCENDING) -> bool

Conventions:
- The oracle never mutates its input and always returns a **new** list.
- Every algorithm must match the oracle output exactly; since the elements
  are plain integers, stability cannot change the result.
"""

from __future__ import annotations

from typing import List

from sortlab.contract import Direction

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(a: List[int], direction: Direction = Direction.ASCENDING) -> List[int]:
    """
    Return the ground-truth ordering of `a` for `direction`.

    Parameters
    ----------
    a : list[int]
        Input sequence of integers. The oracle does not mutate `a`.
    direction : Direction
        ASCENDING gives nondecreasing output, DESCENDING nonincreasing.

    Returns
    -------
    list[int]
        A new list with the same elements as `a`.
    """
    return sorted(a, reverse=Direction.coerce(direction).reverse)


def equals_oracle(a: List[int], out: List[int], direction: Direction = Direction.ASCENDING) -> bool:
    """True iff `out` is exactly equal to `oracle_sort(a, direction)`."""
    return out == oracle_sort(a, direction)
