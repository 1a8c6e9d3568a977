"""
Randomized differential verification of the registered sorting algorithms.

For each direction scenario and each trial:
    1. generate one signed-short-domain sequence (or a shaped dataset),
    2. compute the baseline with the oracle (`sorted`),
    3. give every general-purpose strategy its own copy, sort it, and compare
       element-wise with the baseline.
Range-restricted strategies (radix_sort) are checked in the same trial but on
a separately generated unsigned-short-domain sequence, since negative values
are outside their contract.

Public API (stable):
    Strategy, TrialResult, VerificationReport, VerificationMismatch
    resolve_strategies(strategies) -> list[Strategy]
    run_verification(strategies=None, trials=20, *, ...) -> VerificationReport

Failure semantics:
- A mismatch is a VerificationMismatch (an AssertionError) carrying the
  strategy, direction, trial index, input, expected and actual sequences.
- fail_fast=True raises the first mismatch; otherwise all are collected in
  the report. Exceptions raised by a strategy are not caught.
- Nothing is retried; equality must be exact.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

import numpy as np
import pandas as pd
from tqdm import tqdm

from sortlab.algorithms import ALGORITHM_NAMES, RANGE_RESTRICTED, get_sort
from sortlab.bench.measure import time_sort_call
from sortlab.contract import Direction, SortFn
from sortlab.datasets import (
    DEFAULT_MAX_LENGTH,
    generate_random_int,
    generate_random_sequence,
    make_dataset,
    make_rng,
)
from sortlab.validate.oracle import oracle_sort
from sortlab.validate.properties import (
    first_difference_index,
    is_permutation,
    permutation_counter_diff,
)

__all__ = [
    "Strategy",
    "TrialResult",
    "VerificationMismatch",
    "VerificationReport",
    "resolve_strategies",
    "run_verification",
]

RESULT_COLUMNS = ["strategy", "direction", "trial", "length", "ok", "elapsed_ns"]
SUMMARY_COLUMNS = ["strategy", "direction", "runs", "failures", "median_ns", "max_ns"]

_PREVIEW_ITEMS = 16


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class Strategy:
    name: str
    sort_fn: SortFn
    unsigned_only: bool = False


@dataclass(frozen=True)
class TrialResult:
    strategy: str
    direction: str
    trial: int
    length: int
    ok: bool
    elapsed_ns: int


class VerificationMismatch(AssertionError):
    """A strategy's output differed from the oracle baseline."""

    def __init__(
        self,
        *,
        strategy: str,
        direction: Direction,
        trial: int,
        original: List[int],
        expected: List[int],
        actual: List[int],
    ) -> None:
        self.strategy = strategy
        self.direction = direction
        self.trial = trial
        self.original = original
        self.expected = expected
        self.actual = actual
        self.index = first_difference_index(expected, actual)
        # Positive counts: values the output has too many of.
        self.counter_diff: Dict[int, int] = (
            {} if is_permutation(original, actual) else permutation_counter_diff(actual, original)
        )
        super().__init__(self._describe())

    def _describe(self) -> str:
        lines = [
            f"{self.strategy} ({self.direction.label}, trial {self.trial}) "
            f"differs from the oracle at index {self.index}",
            f"  input:    {_preview(self.original)}",
            f"  expected: {_preview(self.expected)}",
            f"  actual:   {_preview(self.actual)}",
        ]
        if self.index is not None and self.index < min(len(self.expected), len(self.actual)):
            lines.append(
                f"  at [{self.index}]: expected {self.expected[self.index]}, "
                f"got {self.actual[self.index]}"
            )
        if self.counter_diff:
            lines.append(f"  not a permutation of the input; count diff: {self.counter_diff}")
        return "\n".join(lines)


@dataclass
class VerificationReport:
    seed: Optional[int]
    results: List[TrialResult] = field(default_factory=list)
    mismatches: List[VerificationMismatch] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.mismatches

    def to_frame(self) -> pd.DataFrame:
        """One row per strategy call."""
        return pd.DataFrame([asdict(r) for r in self.results], columns=RESULT_COLUMNS)

    def summary(self) -> pd.DataFrame:
        """Runs, failures and median/max elapsed ns per (strategy, direction)."""
        df = self.to_frame()
        if df.empty:
            return pd.DataFrame(columns=SUMMARY_COLUMNS)
        df["failed"] = ~df["ok"].astype(bool)
        out = (
            df.groupby(["strategy", "direction"], as_index=False, sort=False)
            .agg(
                runs=("ok", "count"),
                failures=("failed", "sum"),
                median_ns=("elapsed_ns", "median"),
                max_ns=("elapsed_ns", "max"),
            )
        )
        out[["runs", "failures", "median_ns", "max_ns"]] = out[
            ["runs", "failures", "median_ns", "max_ns"]
        ].astype("int64")
        return out[SUMMARY_COLUMNS]


# ------------------------- strategy resolution ------------------------- #

def resolve_strategies(strategies: Optional[Iterable[Union[str, Strategy]]] = None) -> List[Strategy]:
    """
    Turn names and/or Strategy objects into a list of Strategy.

    None selects every registered algorithm. Names are looked up in the
    registry; a name in RANGE_RESTRICTED is marked unsigned_only.
    """
    if strategies is None:
        strategies = ALGORITHM_NAMES
    if isinstance(strategies, (str, Strategy)):
        strategies = [strategies]

    resolved: List[Strategy] = []
    seen = set()
    for entry in strategies:
        if isinstance(entry, Strategy):
            strategy = entry
        elif isinstance(entry, str):
            strategy = Strategy(entry, get_sort(entry), unsigned_only=entry in RANGE_RESTRICTED)
        else:
            raise ValueError(f"strategy must be a name or Strategy; got {entry!r}")
        if strategy.name in seen:
            raise ValueError(f"Duplicate strategy name: {strategy.name}")
        seen.add(strategy.name)
        resolved.append(strategy)

    if not resolved:
        raise ValueError("at least one strategy is required")
    return resolved


# ------------------------- core loop ------------------------- #

def run_verification(
    strategies: Optional[Iterable[Union[str, Strategy]]] = None,
    trials: int = 20,
    *,
    directions: Sequence[Direction] = (Direction.ASCENDING, Direction.DESCENDING),
    max_length: int = DEFAULT_MAX_LENGTH,
    flag: bool = False,
    seed: Optional[int] = None,
    dataset: Optional[Dict[str, Any]] = None,
    fail_fast: bool = True,
    disable_gc: bool = False,
    progress: bool = False,
) -> VerificationReport:
    """
    Differentially test `strategies` against the oracle.

    Parameters
    ----------
    strategies : iterable of str | Strategy, optional
        Registered names or Strategy objects; None means all registered.
    trials : int
        Iterations per direction scenario.
    directions : sequence of Direction
        Scenarios to run, in order.
    max_length : int
        Upper bound on generated sequence length (lengths are in [1, max_length]).
    flag : bool
        Threaded through to every sort call.
    seed : int | None
        None draws fresh OS entropy for every generated value; an int makes
        the whole run reproducible.
    dataset : dict | None
        A `make_dataset` spec used for general-purpose inputs instead of the
        uniform signed-short generator. Range-restricted strategies always
        get unsigned-short inputs.
    fail_fast : bool
        Raise the first VerificationMismatch instead of collecting it.
    disable_gc : bool
        Disable GC around each timed call.
    progress : bool
        Show a tqdm progress bar over trials.

    Returns
    -------
    VerificationReport
    """
    resolved = resolve_strategies(strategies)
    if isinstance(trials, bool) or not isinstance(trials, int) or trials < 0:
        raise ValueError(f"trials must be a nonnegative integer; got {trials!r}")
    scenarios = [Direction.coerce(d) for d in directions]
    if not scenarios:
        raise ValueError("at least one direction is required")

    general = [s for s in resolved if not s.unsigned_only]
    restricted = [s for s in resolved if s.unsigned_only]

    rng = make_rng(seed) if seed is not None else None
    report = VerificationReport(seed=seed)

    runs = [(direction, trial) for direction in scenarios for trial in range(trials)]
    for direction, trial in tqdm(runs, desc="Trials", unit="trial", disable=not progress):
        if general:
            original = _general_input(max_length, dataset, rng)
            _check(report, general, original, direction, trial, flag, fail_fast, disable_gc)
        if restricted:
            original = generate_random_sequence(True, max_length, rng)
            _check(report, restricted, original, direction, trial, flag, fail_fast, disable_gc)

    return report


def _general_input(
    max_length: int, dataset: Optional[Dict[str, Any]], rng: Optional[np.random.Generator]
) -> List[int]:
    if dataset is None:
        return generate_random_sequence(False, max_length, rng)
    n = generate_random_int(1, max_length, rng)
    return make_dataset(n, dataset, rng)


def _check(
    report: VerificationReport,
    strategies: List[Strategy],
    original: List[int],
    direction: Direction,
    trial: int,
    flag: bool,
    fail_fast: bool,
    disable_gc: bool,
) -> None:
    expected = oracle_sort(original, direction)
    for strategy in strategies:
        # Fresh copy per strategy; `original` itself is never handed out.
        work = list(original)
        elapsed = time_sort_call(
            sort_fn=strategy.sort_fn,
            a=work,
            direction=direction,
            flag=flag,
            disable_gc=disable_gc,
        )
        ok = work == expected
        report.results.append(
            TrialResult(
                strategy=strategy.name,
                direction=direction.label,
                trial=trial,
                length=len(original),
                ok=ok,
                elapsed_ns=elapsed,
            )
        )
        if ok:
            continue
        mismatch = VerificationMismatch(
            strategy=strategy.name,
            direction=direction,
            trial=trial,
            original=list(original),
            expected=expected,
            actual=work,
        )
        if fail_fast:
            raise mismatch
        report.mismatches.append(mismatch)


def _preview(xs: List[int]) -> str:
    if len(xs) <= _PREVIEW_ITEMS:
        return repr(xs)
    head = ", ".join(str(x) for x in xs[:_PREVIEW_ITEMS])
    return f"[{head}, ...] (len={len(xs)})"
