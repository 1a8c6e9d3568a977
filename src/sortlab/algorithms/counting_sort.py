"""
Counting sort over the input's own value range.

The range [min(a), max(a)] is computed up front and one counter is kept per
value in it, so memory is O(max - min). Counters are emitted low-to-high for
ascending order and high-to-low for descending.
"""

from __future__ import annotations

from typing import List

from sortlab.contract import Direction

__all__ = ["sort"]


def sort(a: List[int], direction: Direction, flag: bool = False) -> None:
    direction = Direction.coerce(direction)
    if len(a) < 2:
        return
    lo, hi = min(a), max(a)
    counts = [0] * (hi - lo + 1)
    for x in a:
        counts[x - lo] += 1

    offsets = range(len(counts))
    if direction is Direction.DESCENDING:
        offsets = reversed(offsets)

    k = 0
    for off in offsets:
        c = counts[off]
        if c:
            a[k:k + c] = [lo + off] * c
            k += c
