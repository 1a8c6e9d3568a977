"""
Bubble sort.

Repeatedly swaps adjacent out-of-order pairs; each pass settles the next
element at the tail. Stops early once a full pass makes no swap, so an
already-ordered input costs a single O(n) pass.
"""

from __future__ import annotations

from typing import List

from sortlab.contract import Direction

__all__ = ["sort"]


def sort(a: List[int], direction: Direction, flag: bool = False) -> None:
    precedes = Direction.coerce(direction).precedes
    for end in range(len(a) - 1, 0, -1):
        swapped = False
        for i in range(end):
            if precedes(a[i + 1], a[i]):
                a[i], a[i + 1] = a[i + 1], a[i]
                swapped = True
        if not swapped:
            break
