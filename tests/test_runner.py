"""
Tests for the run config loader and the command-line runner.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from sortlab.algorithms import ALGORITHM_NAMES, SORTS
from sortlab.bench.config import RunConfig, config_from_dict, load_config
from sortlab.bench.runner import main
from sortlab.contract import Direction


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "run.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def _noop(a: List[int], direction: Direction, flag: bool = False) -> None:
    pass


# ------------------------- config ------------------------- #

def test_defaults_without_file() -> None:
    cfg = load_config(None)
    assert cfg == RunConfig()
    assert cfg.trials == 20
    assert cfg.max_length == 1000
    assert cfg.seed is None
    assert cfg.algorithms == ALGORITHM_NAMES
    assert cfg.directions == (Direction.ASCENDING, Direction.DESCENDING)


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    assert load_config(_write(tmp_path, "")) == RunConfig()


def test_yaml_values_and_overrides(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "trials: 3\n"
        "max_length: 50\n"
        "seed: 9\n"
        "algorithms: [heap_sort, radix_sort]\n"
        "directions: [desc]\n"
        "dataset: {dist: few_uniques, params: {k: 2}}\n",
    )
    cfg = load_config(path, {"trials": 7, "seed": None})
    assert cfg.trials == 7
    assert cfg.seed == 9
    assert cfg.max_length == 50
    assert cfg.algorithms == ("heap_sort", "radix_sort")
    assert cfg.directions == (Direction.DESCENDING,)
    assert cfg.dataset == {"dist": "few_uniques", "params": {"k": 2}}


@pytest.mark.parametrize(
    "raw, match",
    [
        ({"trails": 3}, "Unknown config keys"),
        ({"trials": -1}, "trials"),
        ({"trials": "many"}, "trials"),
        ({"max_length": 0}, "max_length"),
        ({"seed": True}, "seed"),
        ({"algorithms": []}, "algorithms"),
        ({"algorithms": ["bogo_sort"]}, "Unsupported algorithm"),
        ({"algorithms": ["heap_sort", "heap_sort"]}, "Duplicate"),
        ({"directions": ["up"]}, "direction"),
        ({"flag": "yes"}, "flag"),
        ({"dataset": {"dist": "zipf"}}, "dist"),
    ],
)
def test_invalid_config_values(raw: dict, match: str) -> None:
    with pytest.raises(ValueError, match=match):
        config_from_dict(raw)


def test_non_mapping_yaml_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="mapping"):
        load_config(_write(tmp_path, "- just\n- a list\n"))


def test_shipped_configs_load() -> None:
    configs = Path(__file__).resolve().parents[1] / "configs"
    for path in sorted(configs.glob("*.yaml")):
        assert isinstance(load_config(path), RunConfig)


# ------------------------- CLI ------------------------- #

def test_main_passes_with_overrides() -> None:
    assert main(["--seed", "1", "--trials", "2", "--max-length", "40"]) == 0


def test_main_reads_config_file(tmp_path: Path) -> None:
    path = _write(tmp_path, "trials: 2\nmax_length: 30\nseed: 3\nalgorithms: [merge_sort, radix_sort]\n")
    assert main([str(path)]) == 0


def test_main_invalid_config_exit_code(tmp_path: Path) -> None:
    path = _write(tmp_path, "trials: -5\n")
    assert main([str(path)]) == 2
    assert main(["--algorithms", "bogo_sort"]) == 2


def test_main_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="Config file not found"):
        main([str(tmp_path / "missing.yaml")])


@pytest.mark.parametrize("extra", [[], ["--fail-fast"]])
def test_main_mismatch_exit_code(monkeypatch: pytest.MonkeyPatch, extra: List[str]) -> None:
    monkeypatch.setitem(SORTS, "heap_sort", _noop)
    argv = ["--seed", "1", "--trials", "3", "--max-length", "50", "--algorithms", "heap_sort"]
    assert main(argv + extra) == 1
