"""
Comb sort: bubble sort over a shrinking gap.

The gap starts at len(a) and shrinks by SHRINK_FACTOR each pass. Once it
reaches 1 the passes continue until one makes no swap.
"""

from __future__ import annotations

from typing import List

from sortlab.contract import Direction

SHRINK_FACTOR = 1.3

__all__ = ["SHRINK_FACTOR", "sort"]


def sort(a: List[int], direction: Direction, flag: bool = False) -> None:
    precedes = Direction.coerce(direction).precedes
    n = len(a)
    gap = n
    swapped = True
    while gap > 1 or swapped:
        gap = max(1, int(gap / SHRINK_FACTOR))
        swapped = False
        for i in range(n - gap):
            if precedes(a[i + gap], a[i]):
                a[i], a[i + gap] = a[i + gap], a[i]
                swapped = True
