"""
Correctness tests for every registered sorting algorithm against the oracle
(Python's built-in sorted).

What we check:
- Output exactly matches the oracle in both directions (strongest guarantee)
- Ordered output and permutation preservation (diagnostics)
- Sorting happens in place and returns None (API contract)
- Idempotence on already-ordered input
- radix_sort: correct on non-negative input, rejects negatives
"""

from __future__ import annotations

from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from sortlab.algorithms import ALGORITHM_NAMES, GENERAL_PURPOSE, RANGE_RESTRICTED, SORTS, get_sort
from sortlab.contract import Direction, DomainError
from sortlab.datasets import SHORT_MAX, SHORT_MIN, USHORT_MAX, USHORT_MIN
from sortlab.validate import first_order_violation_index, is_permutation, oracle_sort

DIRECTIONS = [Direction.ASCENDING, Direction.DESCENDING]


# ------------------------- helpers ------------------------- #

def _check_one(name: str, a: List[int], direction: Direction) -> None:
    """Common assertion bundle for one input."""
    work = list(a)
    ret = get_sort(name)(work, direction, False)

    assert ret is None, "sort must work in place and return None"

    expected = oracle_sort(a, direction)
    assert work == expected, f"{name} output must exactly match the oracle"

    i = first_order_violation_index(work, direction)
    assert i is None, f"{name} out of order at i={i}: {work[i]}, {work[i + 1]}"
    assert is_permutation(a, work), f"{name} output is not a permutation of input"


# ------------------------- registry ------------------------- #

def test_registry_covers_every_algorithm() -> None:
    assert set(SORTS) == set(ALGORITHM_NAMES)
    assert len(ALGORITHM_NAMES) == 11
    assert RANGE_RESTRICTED == {"radix_sort"}
    assert "radix_sort" not in GENERAL_PURPOSE
    assert len(GENERAL_PURPOSE) == 10


def test_get_sort_unknown_name() -> None:
    with pytest.raises(ValueError, match="Unsupported algorithm"):
        get_sort("bogo_sort")


# ------------------------- unit tests (deterministic) ------------------------- #

@pytest.mark.parametrize("name", GENERAL_PURPOSE)
def test_example_scenario(name: str) -> None:
    xs = [5, -3, 0, 12, -7, 5]
    asc = list(xs)
    SORTS[name](asc, Direction.ASCENDING, False)
    assert asc == [-7, -3, 0, 5, 5, 12]

    desc = list(xs)
    SORTS[name](desc, Direction.DESCENDING, False)
    assert desc == [12, 5, 5, 0, -3, -7]


@pytest.mark.parametrize("direction", DIRECTIONS)
@pytest.mark.parametrize("name", GENERAL_PURPOSE)
@pytest.mark.parametrize(
    "a",
    [
        [],
        [5],
        [2, 1],
        [1, 2, 3, 4],
        [4, 3, 2, 1],
        [7, 7, 7, 7],
        [1, 3, 2, 3, 1, 2],
        list(range(20)),
        list(range(20))[::-1],
        [0, -1, 5, -10, 3, 3, 2],
        [SHORT_MIN, SHORT_MAX, 0, SHORT_MIN, -1, SHORT_MAX],
    ],
)
def test_unit_cases(a: List[int], name: str, direction: Direction) -> None:
    _check_one(name, a, direction)


@pytest.mark.parametrize("direction", DIRECTIONS)
@pytest.mark.parametrize("name", ALGORITHM_NAMES)
def test_empty_and_single_unchanged(name: str, direction: Direction) -> None:
    empty: List[int] = []
    SORTS[name](empty, direction, False)
    assert empty == []

    single = [42]
    SORTS[name](single, direction, False)
    assert single == [42]


@pytest.mark.parametrize("direction", DIRECTIONS)
@pytest.mark.parametrize("name", GENERAL_PURPOSE)
def test_already_sorted_is_unchanged(name: str, direction: Direction) -> None:
    ordered = oracle_sort([9, -4, 0, 3, 3, 100, -50, 7], direction)
    work = list(ordered)
    SORTS[name](work, direction, False)
    assert work == ordered


@pytest.mark.parametrize("name", ALGORITHM_NAMES)
def test_flag_does_not_change_result(name: str) -> None:
    xs = [30, 1, 4, 1, 5, 9, 2, 6]
    plain, flagged = list(xs), list(xs)
    SORTS[name](plain, Direction.ASCENDING, False)
    SORTS[name](flagged, Direction.ASCENDING, True)
    assert plain == flagged == sorted(xs)


@pytest.mark.parametrize("name", ["heap_sort", "quick_sort", "counting_sort"])
def test_direction_accepts_legacy_ints_and_names(name: str) -> None:
    xs = [3, -1, 2]
    SORTS[name](xs, -1, False)
    assert xs == [3, 2, -1]
    SORTS[name](xs, "asc", False)
    assert xs == [-1, 2, 3]


@pytest.mark.parametrize("bad", [0, 2, True, "sideways", None])
@pytest.mark.parametrize("name", ALGORITHM_NAMES)
def test_invalid_direction_rejected(name: str, bad: object) -> None:
    with pytest.raises(ValueError):
        SORTS[name]([3, 1, 2], bad, False)  # type: ignore[arg-type]


# ------------------------- radix_sort domain ------------------------- #

@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.ASCENDING, [0, 1, 300, 65535]),
        (Direction.DESCENDING, [65535, 300, 1, 0]),
    ],
)
def test_radix_unsigned_example(direction: Direction, expected: List[int]) -> None:
    xs = [300, 1, 65535, 0]
    get_sort("radix_sort")(xs, direction, False)
    assert xs == expected


def test_radix_all_zeros() -> None:
    xs = [0, 0, 0]
    get_sort("radix_sort")(xs, Direction.DESCENDING, False)
    assert xs == [0, 0, 0]


def test_radix_rejects_negative_without_mutating() -> None:
    xs = [4, -1, 2]
    with pytest.raises(DomainError, match="non-negative"):
        get_sort("radix_sort")(xs, Direction.ASCENDING, False)
    assert xs == [4, -1, 2]


def test_domain_error_is_value_error() -> None:
    assert issubclass(DomainError, ValueError)


# ------------------------- property-based tests (randomized) ------------------------- #

short_ints = st.integers(min_value=SHORT_MIN, max_value=SHORT_MAX)
ushort_ints = st.integers(min_value=USHORT_MIN, max_value=USHORT_MAX)


@pytest.mark.parametrize("name", GENERAL_PURPOSE)
@settings(deadline=None, max_examples=60)
@given(a=st.lists(short_ints, min_size=0, max_size=200), direction=st.sampled_from(DIRECTIONS))
def test_property_signed_short_domain(name: str, a: List[int], direction: Direction) -> None:
    _check_one(name, a, direction)


@pytest.mark.parametrize("name", GENERAL_PURPOSE)
@settings(deadline=None, max_examples=40)
@given(
    a=st.lists(st.integers(min_value=0, max_value=7), min_size=0, max_size=200),
    direction=st.sampled_from(DIRECTIONS),
)
def test_property_many_duplicates(name: str, a: List[int], direction: Direction) -> None:
    _check_one(name, a, direction)


@settings(deadline=None, max_examples=150)
@given(a=st.lists(ushort_ints, min_size=0, max_size=400), direction=st.sampled_from(DIRECTIONS))
def test_property_radix_unsigned_domain(a: List[int], direction: Direction) -> None:
    _check_one("radix_sort", a, direction)


@settings(deadline=None, max_examples=60)
@given(a=st.lists(st.integers(min_value=0, max_value=2**40), min_size=0, max_size=100))
def test_property_radix_wide_values(a: List[int]) -> None:
    _check_one("radix_sort", a, Direction.ASCENDING)
