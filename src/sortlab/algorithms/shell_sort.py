"""
Shell sort with Shell's original gap sequence n//2, n//4, ..., 1.

Each gap runs a gapped insertion sort; the final gap of 1 is a plain
insertion sort over an almost-ordered list.
"""

from __future__ import annotations

from typing import List

from sortlab.contract import Direction

__all__ = ["sort"]


def sort(a: List[int], direction: Direction, flag: bool = False) -> None:
    precedes = Direction.coerce(direction).precedes
    n = len(a)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            x = a[i]
            j = i
            while j >= gap and precedes(x, a[j - gap]):
                a[j] = a[j - gap]
                j -= gap
            a[j] = x
        gap //= 2
