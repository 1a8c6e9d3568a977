"""
Run configuration for verification sweeps.

A config is an optional YAML mapping; every key is optional and falls back to
the defaults below:

    trials: 20                 # iterations per direction
    max_length: 1000           # generated lengths are uniform in [1, max_length]
    seed: null                 # null -> fresh OS entropy per draw; int -> reproducible
    algorithms: [bubble_sort, heap_sort, radix_sort]   # default: all registered
    directions: [ascending, descending]
    flag: false                # threaded through to every sort call
    fail_fast: false           # stop at the first mismatch
    disable_gc: false          # disable GC around each timed call
    dataset:                   # optional shaped input for general-purpose strategies
      dist: nearly_sorted
      params: {swap_frac: 0.1}

Unknown keys and malformed values raise ValueError naming the key.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from sortlab.algorithms import ALGORITHM_NAMES, get_sort
from sortlab.contract import Direction
from sortlab.datasets import DEFAULT_MAX_LENGTH, make_dataset, make_rng

__all__ = ["RunConfig", "load_config", "config_from_dict"]

KNOWN_KEYS = {
    "trials",
    "max_length",
    "seed",
    "algorithms",
    "directions",
    "flag",
    "fail_fast",
    "disable_gc",
    "dataset",
}


@dataclass(frozen=True)
class RunConfig:
    trials: int = 20
    max_length: int = DEFAULT_MAX_LENGTH
    seed: Optional[int] = None
    algorithms: Tuple[str, ...] = ALGORITHM_NAMES
    directions: Tuple[Direction, ...] = (Direction.ASCENDING, Direction.DESCENDING)
    flag: bool = False
    fail_fast: bool = False
    disable_gc: bool = False
    dataset: Optional[Dict[str, Any]] = None


def _load_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_config(path: Optional[Path] = None, overrides: Optional[Dict[str, Any]] = None) -> RunConfig:
    """
    Read `path` (if given), apply `overrides` on top, and validate.

    `overrides` holds command-line values; keys mapped to None are ignored.
    """
    raw: Dict[str, Any] = {}
    if path is not None:
        loaded = _load_yaml(path)
        if loaded is not None:
            if not isinstance(loaded, dict):
                raise ValueError(f"Config {path} must be a YAML mapping")
            raw.update(loaded)
    for key, value in (overrides or {}).items():
        if value is not None:
            raw[key] = value
    return config_from_dict(raw)


def config_from_dict(raw: Dict[str, Any]) -> RunConfig:
    unknown = sorted(set(raw) - KNOWN_KEYS)
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}. Supported: {sorted(KNOWN_KEYS)}")

    defaults = RunConfig()

    trials = _parse_int(raw, "trials", defaults.trials, minimum=0)
    max_length = _parse_int(raw, "max_length", defaults.max_length, minimum=1)

    seed = raw.get("seed")
    if seed is not None:
        seed = _parse_int(raw, "seed", 0, minimum=0)

    algorithms = raw.get("algorithms", defaults.algorithms)
    if isinstance(algorithms, str):
        algorithms = [algorithms]
    if not isinstance(algorithms, (list, tuple)) or not algorithms:
        raise ValueError("Config 'algorithms' must be a non-empty list of algorithm names")
    for name in algorithms:
        get_sort(name)
    if len(set(algorithms)) != len(algorithms):
        raise ValueError(f"Duplicate algorithm names in config: {list(algorithms)}")

    directions = raw.get("directions", defaults.directions)
    if isinstance(directions, (str, int)):
        directions = [directions]
    if not isinstance(directions, (list, tuple)) or not directions:
        raise ValueError("Config 'directions' must be a non-empty list")
    directions = tuple(Direction.coerce(d) for d in directions)

    dataset = raw.get("dataset")
    if dataset is not None:
        # make_dataset validates dist and params even for n == 0
        make_dataset(0, dataset, make_rng(0))

    return RunConfig(
        trials=trials,
        max_length=max_length,
        seed=seed,
        algorithms=tuple(algorithms),
        directions=directions,
        flag=_parse_bool(raw, "flag", defaults.flag),
        fail_fast=_parse_bool(raw, "fail_fast", defaults.fail_fast),
        disable_gc=_parse_bool(raw, "disable_gc", defaults.disable_gc),
        dataset=dataset,
    )


# ------------------------- helpers ------------------------- #


def _parse_int(raw: Dict[str, Any], key: str, default: int, minimum: int) -> int:
    val = raw.get(key, default)
    if isinstance(val, bool) or not isinstance(val, int):
        raise ValueError(f"Config '{key}' must be an integer; got {val!r}")
    if val < minimum:
        raise ValueError(f"Config '{key}' must be >= {minimum}; got {val}")
    return val


def _parse_bool(raw: Dict[str, Any], key: str, default: bool) -> bool:
    val = raw.get(key, default)
    if not isinstance(val, bool):
        raise ValueError(f"Config '{key}' must be true or false; got {val!r}")
    return val
