"""
Timing helper for single sort calls.

We measure exactly one call to an algorithm's `sort(a, direction, flag)`
using a monotonic high-resolution clock. Copying the input is the caller's
job and happens outside the timed block.

Public API (stable):
    time_sort_call(*, sort_fn, a, direction, flag=False, disable_gc=False) -> int
"""

from __future__ import annotations

import gc
import time
from typing import List

from sortlab.contract import Direction, SortFn

__all__ = ["time_sort_call"]


def time_sort_call(
    *,
    sort_fn: SortFn,
    a: List[int],
    direction: Direction,
    flag: bool = False,
    disable_gc: bool = False,
) -> int:
    """
    Apply `sort_fn(a, direction, flag)` in place and return the elapsed ns.

    Parameters
    ----------
    sort_fn : SortFn
        A registered algorithm's `sort`.
    a : list[int]
        The list to sort. It is mutated in place.
    direction : Direction
        Passed through unchanged.
    flag : bool
        Passed through unchanged.
    disable_gc : bool
        If True, collect and disable Python GC for the call; restore afterward.

    Exceptions raised by `sort_fn` propagate to the caller.
    """
    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()
        t0 = time.perf_counter_ns()
        sort_fn(a, direction, flag)
        t1 = time.perf_counter_ns()
    finally:
        # If GC was previously disabled, leave it disabled (respect caller's global state).
        if disable_gc and prev_gc_enabled:
            gc.enable()
    return int(t1 - t0)
