"""
Algorithm registry.

Each algorithm lives in `sortlab.algorithms.<name>` and exposes a module-level
`sort(a, direction, flag=False)` (see `sortlab.contract`). The registry maps
names to those functions so callers pick a strategy by name:

    from sortlab.algorithms import get_sort
    get_sort("heap_sort")(xs, Direction.DESCENDING, False)

`radix_sort` is range-restricted: it accepts non-negative integers only and
is listed in RANGE_RESTRICTED rather than GENERAL_PURPOSE.
"""

from __future__ import annotations

import importlib
from typing import Dict

from sortlab.contract import SortFn

ALGORITHM_NAMES = (
    "bubble_sort",
    "bucket_sort",
    "comb_sort",
    "counting_sort",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "radix_sort",
    "selection_sort",
    "shell_sort",
)

RANGE_RESTRICTED = frozenset({"radix_sort"})
GENERAL_PURPOSE = tuple(name for name in ALGORITHM_NAMES if name not in RANGE_RESTRICTED)

__all__ = ["ALGORITHM_NAMES", "GENERAL_PURPOSE", "RANGE_RESTRICTED", "SORTS", "get_sort"]


def _load(name: str) -> SortFn:
    mod = importlib.import_module(f"{__name__}.{name}")
    if not callable(getattr(mod, "sort", None)):
        raise AttributeError(
            f"Algorithm module '{name}' must define a callable `sort(a, direction, flag=False)`"
        )
    return mod.sort


SORTS: Dict[str, SortFn] = {name: _load(name) for name in ALGORITHM_NAMES}


def get_sort(name: str) -> SortFn:
    """Return the registered sort function for `name`; ValueError if unknown."""
    try:
        return SORTS[name]
    except KeyError:
        raise ValueError(
            f"Unsupported algorithm: {name!r}. Supported: {sorted(SORTS)}"
        ) from None
