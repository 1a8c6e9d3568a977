"""
LSD radix sort, base 256.

Only non-negative integers are supported: the digit extraction assumes an
unsigned value domain. Any negative value makes `sort` raise DomainError
before the list is touched; callers with signed data must filter or offset
it themselves.

Each pass distributes by one byte into 256 stable buckets and collects them
in digit order (reversed digit order for descending). The number of passes is
the byte length of max(a).
"""

from __future__ import annotations

from typing import List

from sortlab.contract import Direction, DomainError

RADIX_BITS = 8
RADIX = 1 << RADIX_BITS

__all__ = ["RADIX", "sort"]


def sort(a: List[int], direction: Direction, flag: bool = False) -> None:
    direction = Direction.coerce(direction)
    if not a:
        return
    lo = min(a)
    if lo < 0:
        raise DomainError(
            f"radix_sort supports non-negative integers only; got minimum {lo}"
        )
    if len(a) < 2:
        return

    digit_order = range(RADIX)
    if direction is Direction.DESCENDING:
        digit_order = range(RADIX - 1, -1, -1)

    mask = RADIX - 1
    shift = 0
    top = max(a)
    work = list(a)
    while (top >> shift) > 0:
        buckets: List[List[int]] = [[] for _ in range(RADIX)]
        for x in work:
            buckets[(x >> shift) & mask].append(x)
        work = [x for d in digit_order for x in buckets[d]]
        shift += RADIX_BITS
    a[:] = work
