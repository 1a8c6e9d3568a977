"""
Top-down merge sort.

Splits recursively, merges the halves into new lists and finally writes the
merged result back into the caller's list, so the contract stays in place.
The merge takes from the left half on ties, which keeps it stable.
"""

from __future__ import annotations

from typing import Callable, List

from sortlab.contract import Direction

__all__ = ["sort"]


def sort(a: List[int], direction: Direction, flag: bool = False) -> None:
    precedes = Direction.coerce(direction).precedes
    if len(a) < 2:
        return
    a[:] = _merge_sort(a, precedes)


def _merge_sort(xs: List[int], precedes: Callable[[int, int], bool]) -> List[int]:
    if len(xs) < 2:
        return list(xs)
    mid = len(xs) // 2
    return _merge(_merge_sort(xs[:mid], precedes), _merge_sort(xs[mid:], precedes), precedes)


def _merge(left: List[int], right: List[int], precedes: Callable[[int, int], bool]) -> List[int]:
    out: List[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if precedes(right[j], left[i]):
            out.append(right[j])
            j += 1
        else:
            out.append(left[i])
            i += 1
    out.extend(left[i:])
    out.extend(right[j:])
    return out
