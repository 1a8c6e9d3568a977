"""
Selection sort.

For each position, scan the unsorted suffix for the element that belongs
there and swap it in. Always O(n^2) comparisons, at most n - 1 swaps.
"""

from __future__ import annotations

from typing import List

from sortlab.contract import Direction

__all__ = ["sort"]


def sort(a: List[int], direction: Direction, flag: bool = False) -> None:
    precedes = Direction.coerce(direction).precedes
    n = len(a)
    for i in range(n - 1):
        best = i
        for j in range(i + 1, n):
            if precedes(a[j], a[best]):
                best = j
        if best != i:
            a[i], a[best] = a[best], a[i]
