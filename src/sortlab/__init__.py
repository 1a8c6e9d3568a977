"""
sortlab: classic integer sorting algorithms behind one contract, plus a
randomized differential harness that checks them against `sorted()`.

    from sortlab import Direction, get_sort
    xs = [5, -3, 0, 12, -7, 5]
    get_sort("quick_sort")(xs, Direction.ASCENDING, False)
"""

from .algorithms import ALGORITHM_NAMES, GENERAL_PURPOSE, RANGE_RESTRICTED, SORTS, get_sort
from .contract import Direction, DomainError, SortFn

__version__ = "0.1.0"

__all__ = [
    "ALGORITHM_NAMES",
    "GENERAL_PURPOSE",
    "RANGE_RESTRICTED",
    "SORTS",
    "get_sort",
    "Direction",
    "DomainError",
    "SortFn",
]
