"""Insertion sort: grow an ordered prefix by shifting each new element left."""

from __future__ import annotations

from typing import List

from sortlab.contract import Direction

__all__ = ["sort"]


def sort(a: List[int], direction: Direction, flag: bool = False) -> None:
    precedes = Direction.coerce(direction).precedes
    for i in range(1, len(a)):
        x = a[i]
        j = i - 1
        while j >= 0 and precedes(x, a[j]):
            a[j + 1] = a[j]
            j -= 1
        a[j + 1] = x
