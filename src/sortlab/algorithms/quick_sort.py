"""
Quicksort with a three-way (Dutch national flag) partition.

The pivot is the middle element of the current range. Elements equal to the
pivot are grouped in the middle and never revisited, so inputs with many
duplicates stay fast. The function recurses into the smaller side and loops
on the larger one, bounding the recursion depth to O(log n).
"""

from __future__ import annotations

from typing import Callable, List

from sortlab.contract import Direction

__all__ = ["sort"]


def sort(a: List[int], direction: Direction, flag: bool = False) -> None:
    precedes = Direction.coerce(direction).precedes
    _quick_sort(a, 0, len(a) - 1, precedes)


def _quick_sort(a: List[int], lo: int, hi: int, precedes: Callable[[int, int], bool]) -> None:
    while lo < hi:
        pivot = a[(lo + hi) // 2]
        lt, i, gt = lo, lo, hi
        while i <= gt:
            if precedes(a[i], pivot):
                a[lt], a[i] = a[i], a[lt]
                lt += 1
                i += 1
            elif precedes(pivot, a[i]):
                a[i], a[gt] = a[gt], a[i]
                gt -= 1
            else:
                i += 1
        # a[lo:lt] precede the pivot, a[lt:gt+1] equal it, a[gt+1:hi+1] follow it
        if lt - lo < hi - gt:
            _quick_sort(a, lo, lt - 1, precedes)
            lo = gt + 1
        else:
            _quick_sort(a, gt + 1, hi, precedes)
            hi = lt - 1
