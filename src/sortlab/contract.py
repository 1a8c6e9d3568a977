"""
The shared contract every sorting algorithm in this repo satisfies.

Every algorithm module under `sortlab.algorithms` exposes:

    sort(a: list[int], direction: Direction, flag: bool = False) -> None

which rearranges `a` in place. `direction` has no default and must be given
explicitly on every call. `flag` is accepted and threaded through uniformly,
but no algorithm currently interprets it.

Public API (stable):
    Direction           # ASCENDING (1) / DESCENDING (-1)
    SortFn              # type of a module-level `sort`
    DomainError         # input outside an algorithm's supported value domain

Conventions:
- Postcondition: `a` is a permutation of its input, totally ordered per
  `direction`. Ties may land in any order (stability is not promised).
- Empty and single-element lists are valid and come back unchanged.
- An invalid direction is rejected with ValueError by `Direction.coerce`.
"""

from __future__ import annotations

import operator
from enum import IntEnum
from typing import Any, Callable, List

__all__ = ["Direction", "SortFn", "DomainError"]


class DomainError(ValueError):
    """Raised when an input holds values an algorithm does not support."""


class Direction(IntEnum):
    ASCENDING = 1
    DESCENDING = -1

    @classmethod
    def coerce(cls, value: Any) -> "Direction":
        """
        Normalize `value` to a Direction.

        Accepts a Direction, the integers 1 / -1, or the strings
        "ascending"/"asc"/"descending"/"desc" (case-insensitive).

        Raises
        ------
        ValueError
            For any other value, including booleans.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"direction must not be a bool; got {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(
                    f"direction must be 1 (ascending) or -1 (descending); got {value!r}"
                ) from None
        if isinstance(value, str):
            key = value.strip().lower()
            if key in _NAMES:
                return _NAMES[key]
        raise ValueError(
            f"Unsupported direction: {value!r}. Supported: {sorted(_NAMES)}"
        )

    @property
    def precedes(self) -> Callable[[int, int], bool]:
        """
        Strict ordering predicate: precedes(x, y) is True iff x must come
        before y in this direction (operator.lt or operator.gt).
        """
        return operator.lt if self is Direction.ASCENDING else operator.gt

    @property
    def reverse(self) -> bool:
        """The `reverse=` argument that makes `sorted` follow this direction."""
        return self is Direction.DESCENDING

    @property
    def label(self) -> str:
        return self.name.lower()


_NAMES = {
    "ascending": Direction.ASCENDING,
    "asc": Direction.ASCENDING,
    "descending": Direction.DESCENDING,
    "desc": Direction.DESCENDING,
}

SortFn = Callable[[List[int], Direction, bool], None]
