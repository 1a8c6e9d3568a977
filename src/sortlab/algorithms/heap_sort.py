"""
Heap sort.

Builds a binary heap in place whose root is the element that belongs at the
tail (a max-heap for ascending order, a min-heap for descending), then
repeatedly swaps the root to the end of the shrinking heap and sifts down.
"""

from __future__ import annotations

from typing import Callable, List

from sortlab.contract import Direction

__all__ = ["sort"]


def sort(a: List[int], direction: Direction, flag: bool = False) -> None:
    precedes = Direction.coerce(direction).precedes
    n = len(a)
    for start in range(n // 2 - 1, -1, -1):
        _sift_down(a, start, n, precedes)
    for end in range(n - 1, 0, -1):
        a[0], a[end] = a[end], a[0]
        _sift_down(a, 0, end, precedes)


def _sift_down(a: List[int], root: int, end: int, precedes: Callable[[int, int], bool]) -> None:
    # Heap occupies a[0:end]; the parent never precedes either child.
    while True:
        child = 2 * root + 1
        if child >= end:
            return
        if child + 1 < end and precedes(a[child], a[child + 1]):
            child += 1
        if not precedes(a[root], a[child]):
            return
        a[root], a[child] = a[child], a[root]
        root = child
