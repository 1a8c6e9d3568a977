"""
Verification runner: differential-tests the registered algorithms from the
command line.

Usage (from repo root):
    python -m sortlab.bench.runner                              # defaults
    python -m sortlab.bench.runner configs/verify_default.yaml
    python -m sortlab.bench.runner --seed 1234 --trials 5 --algorithms heap_sort,radix_sort

Console output:
    - run banner (algorithms, directions, seed, environment)
    - tqdm progress over trials
    - rich summary table: runs, failures, median/max time per (algorithm, direction)
    - every mismatch with input/expected/actual previews

Exit status: 0 when every run matched the oracle, 1 on any mismatch,
2 on configuration errors.
"""

from __future__ import annotations

import argparse
import platform
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd
import psutil
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sortlab.bench.config import RunConfig, load_config
from sortlab.validate.harness import VerificationMismatch, VerificationReport, run_verification

_console = Console()


# ------------------------- helpers: meta & display ------------------------- #

def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "cpu": platform.processor() or platform.machine(),
        "cores_logical": psutil.cpu_count(logical=True),
        "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
        "platform": platform.platform(),
    }


def _print_banner(cfg: RunConfig, meta: Dict[str, Any]) -> None:
    seed = cfg.seed if cfg.seed is not None else "none (fresh OS entropy per draw)"
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(cfg.algorithms)}")
    _console.print(f"[bold]Directions:[/bold] {', '.join(d.label for d in cfg.directions)}")
    _console.print(f"[bold]Trials:[/bold] {cfg.trials}  [bold]max_length:[/bold] {cfg.max_length}  [bold]seed:[/bold] {seed}")
    if cfg.dataset is not None:
        _console.print(f"[bold]Dataset:[/bold] {cfg.dataset}")
    _console.print(
        f"[dim]python {meta['python']} | numpy {meta['numpy']} | pandas {meta['pandas']} | "
        f"{meta['cpu']} x{meta['cores_logical']} | {meta['ram_gb']} GB | {meta['platform']}[/dim]"
    )
    _console.print()


def _format_ms(ns: int) -> str:
    return f"{ns / 1e6:.3f}"


def _print_summary(summary: pd.DataFrame) -> None:
    table = Table(title="Verification Summary (time in ms)")
    table.add_column("Algorithm", style="bold")
    table.add_column("Direction")
    table.add_column("Runs", justify="right")
    table.add_column("Failures", justify="right")
    table.add_column("Median", justify="right")
    table.add_column("Max", justify="right")

    if summary.empty:
        _console.print("(no runs)")
        return

    for row in summary.itertuples(index=False):
        failures = f"[bold red]{row.failures}[/]" if row.failures else "[green]0[/]"
        table.add_row(
            row.strategy,
            row.direction,
            str(row.runs),
            failures,
            _format_ms(row.median_ns),
            _format_ms(row.max_ns),
        )
    _console.print()
    _console.print(table)
    _console.print()


def _print_mismatches(mismatches: List[VerificationMismatch]) -> None:
    for m in mismatches:
        _console.print(f"[bold red]MISMATCH[/bold red] {escape(str(m))}", highlight=False)


# ------------------------- core runner ------------------------- #

def run(cfg: RunConfig) -> VerificationReport:
    """Run one verification sweep for `cfg` and print its results."""
    _print_banner(cfg, _gather_meta())

    report = run_verification(
        cfg.algorithms,
        cfg.trials,
        directions=cfg.directions,
        max_length=cfg.max_length,
        flag=cfg.flag,
        seed=cfg.seed,
        dataset=cfg.dataset,
        fail_fast=cfg.fail_fast,
        disable_gc=cfg.disable_gc,
        progress=True,
    )

    _print_summary(report.summary())
    _print_mismatches(report.mismatches)
    if report.ok:
        _console.print("[bold green]All runs match the oracle.[/bold green]")
    else:
        _console.print(f"[bold red]{len(report.mismatches)} mismatching run(s).[/bold red]")
    return report


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Differentially test the sorting algorithms against sorted().")
    p.add_argument("config", nargs="?", default=None, help="Optional path to a YAML run config")
    p.add_argument("--seed", type=int, default=None, help="Deterministic seed (overrides config)")
    p.add_argument("--trials", type=int, default=None, help="Iterations per direction (overrides config)")
    p.add_argument("--max-length", type=int, default=None, help="Maximum generated length (overrides config)")
    p.add_argument("--algorithms", type=str, default=None, help="Comma-separated algorithm names (overrides config)")
    p.add_argument("--fail-fast", action="store_true", default=None, help="Stop at the first mismatch")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    config_path: Optional[Path] = None
    if args.config is not None:
        config_path = Path(args.config).resolve()
        if not config_path.exists():
            raise SystemExit(f"Config file not found: {config_path}")

    overrides = {
        "seed": args.seed,
        "trials": args.trials,
        "max_length": args.max_length,
        "algorithms": args.algorithms.split(",") if args.algorithms else None,
        "fail_fast": args.fail_fast,
    }
    try:
        cfg = load_config(config_path, overrides)
    except ValueError as e:
        _console.print(f"[bold red]Invalid configuration:[/bold red] {escape(str(e))}")
        return 2

    try:
        report = run(cfg)
    except VerificationMismatch as e:
        _console.print(f"[bold red]MISMATCH[/bold red] {escape(str(e))}", highlight=False)
        return 1
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise

    return 0 if report.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
