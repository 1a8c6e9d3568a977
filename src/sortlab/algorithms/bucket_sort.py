"""
Bucket sort.

Partitions the input into len(a) equal-width buckets spanning
[min(a), max(a)], insertion-sorts each bucket and concatenates them in the
requested order. Uniformly spread inputs give O(n) expected time.
"""

from __future__ import annotations

from typing import List

from sortlab.algorithms import insertion_sort
from sortlab.contract import Direction

__all__ = ["sort"]


def sort(a: List[int], direction: Direction, flag: bool = False) -> None:
    direction = Direction.coerce(direction)
    n = len(a)
    if n < 2:
        return
    lo, hi = min(a), max(a)
    if lo == hi:
        return

    # Bucket index grows monotonically with value; the max lands in bucket n - 1.
    width = hi - lo + 1
    buckets: List[List[int]] = [[] for _ in range(n)]
    for x in a:
        buckets[(x - lo) * n // width].append(x)

    if direction is Direction.DESCENDING:
        buckets.reverse()

    k = 0
    for bucket in buckets:
        if not bucket:
            continue
        insertion_sort.sort(bucket, direction, flag)
        a[k:k + len(bucket)] = bucket
        k += len(bucket)
