"""
Property helpers for validating sorting results.

Used by the tests and by the harness when it builds mismatch reports.

Public API (stable):
    is_ordered(xs: Sequence[int], direction: Direction) -> bool
    first_order_violation_index(xs: Sequence[int], direction: Direction) -> int | None
    first_difference_index(a: Sequence[int], b: Sequence[int]) -> int | None
    is_permutation(a: Sequence[int], b: Sequence[int]) -> bool
    permutation_counter_diff(a: Sequence[int], b: Sequence[int]) -> dict[int, int]

Notes
-----
- Stability is *not* checked here: with bare integers equal keys are
  indistinguishable. A stability test would need (key, id) pairs.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Sequence

from sortlab.contract import Direction

__all__ = [
    "is_ordered",
    "first_order_violation_index",
    "first_difference_index",
    "is_permutation",
    "permutation_counter_diff",
]


def is_ordered(xs: Sequence[int], direction: Direction = Direction.ASCENDING) -> bool:
    """Return True iff no element is followed by one that must precede it."""
    return first_order_violation_index(xs, direction) is None


def first_order_violation_index(xs: Sequence[int], direction: Direction = Direction.ASCENDING) -> int | None:
    """
    Return the first index i where xs[i + 1] must precede xs[i], or None.

    Useful for precise error messages:
        i = first_order_violation_index(out, Direction.DESCENDING)
        assert i is None, f"out of order at i={i}: {out[i]}, {out[i+1]}"
    """
    precedes = Direction.coerce(direction).precedes
    for i in range(len(xs) - 1):
        if precedes(xs[i + 1], xs[i]):
            return i
    return None


def first_difference_index(a: Sequence[int], b: Sequence[int]) -> int | None:
    """First index where `a` and `b` differ (a length difference counts), or None."""
    for i, (x, y) in enumerate(zip(a, b)):
        if x != y:
            return i
    if len(a) != len(b):
        return min(len(a), len(b))
    return None


def is_permutation(a: Sequence[int], b: Sequence[int]) -> bool:
    """Return True iff `a` and `b` contain exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[int], b: Sequence[int]) -> Dict[int, int]:
    """
    Return a dict of value -> count difference (count_a - count_b).

    Empty dict means `a` and `b` have identical multiplicities.
    Positive values indicate extra occurrences in `a`, negative in `b`.
    """
    ca = Counter(a)
    cb = Counter(b)
    diff: Dict[int, int] = {}
    for k in set(ca) | set(cb):
        d = ca.get(k, 0) - cb.get(k, 0)
        if d != 0:
            diff[k] = d
    return diff
