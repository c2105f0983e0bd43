"""
Experiment runner: orchestrates a full timing sweep from a YAML config.

Usage (from repo root):
    python -m algolab.bench.runner experiments/configs/01_sorting.yaml

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit) and per-algorithm status
    - <label>.txt             # one result table per algorithm: "N time avg_ops min_ops max_ops"
    - (console) rich summary

Design notes:
- One seeded numpy Generator drives every permutation and key of the run.
- On an AlgoLabError the algorithm is marked as failed in meta.json and the
  sweep continues with the next algorithm; rows measured before the failure
  are still written.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import logging
import os
import platform
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from tqdm import tqdm

from algolab.bench.config import AlgoSpec, ExperimentConfig, load_config
from algolab.bench.measure import average_search_time, average_sorting_time
from algolab.bench.tables import TimeAA, rows_to_frame, save_time_table
from algolab.errors import AlgoLabError
from algolab.validate import ORACLE_NAME

logger = logging.getLogger(__name__)

_console = Console()


# ------------------------- helpers: IO & meta ------------------------- #

def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _timestamp() -> str:
    return _dt.datetime.now().strftime("%Y%m%d_%H%M%S")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    run_dir = base_dir / f"{_timestamp()}_{experiment_name}"
    suffix = 1
    while run_dir.exists():
        run_dir = base_dir / f"{_timestamp()}_{experiment_name}_{suffix}"
        suffix += 1
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
        return out.decode("utf-8").strip()
    except (OSError, subprocess.CalledProcessError):
        return None


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


# ------------------------- measuring ------------------------- #

def _measure(cfg: ExperimentConfig, algo: AlgoSpec, n: int, rng: np.random.Generator) -> TimeAA:
    if cfg.kind == "sort":
        return average_sorting_time(
            algo.sort_method,
            cfg.n_perms,
            n,
            rng,
            disable_gc=cfg.disable_gc,
            validate=cfg.validate,
            dataset=cfg.dataset,
        )
    return average_search_time(
        algo.search_method,
        algo.key_generator,
        algo.order,
        n,
        cfg.n_times,
        rng,
        disable_gc=cfg.disable_gc,
    )


def _run_algorithm(
    cfg: ExperimentConfig, algo: AlgoSpec, rng: np.random.Generator
) -> Tuple[List[TimeAA], Optional[str]]:
    rows: List[TimeAA] = []
    for n in cfg.sizes:
        try:
            rows.append(_measure(cfg, algo, n, rng))
        except AlgoLabError as e:
            logger.error("%s failed at n=%d: %s", algo.label, n, e)
            return rows, f"n={n}: {e!r}"
    return rows, None


def _print_rich_summary(tables: Dict[str, List[TimeAA]], sizes: List[int]) -> None:
    table = Table(title="Benchmark Summary (mean ns / mean ops)")
    table.add_column("Algorithm", style="bold")

    picks = sorted({sizes[0], sizes[len(sizes) // 2], sizes[-1]})
    for n in picks:
        table.add_column(f"n={n}", justify="right")

    for label, rows in tables.items():
        df = rows_to_frame(rows)
        row = [f"[bold]{label}[/]"]
        for n in picks:
            s = df[df["n"] == n]
            if s.empty:
                row.append("-")
            else:
                row.append(f"{float(s['time'].iloc[0]):.2f} / {float(s['average_ob'].iloc[0]):.2f}")
        table.add_row(*row)

    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path) -> Path:
    cfg = load_config(config_path)

    run_dir = _ensure_run_dir(cfg.output_dir, cfg.experiment_name)
    meta_path = run_dir / "meta.json"
    _write_yaml(cfg.raw, run_dir / "config_resolved.yaml")

    meta = _gather_meta()
    meta["validation_oracle"] = ORACLE_NAME if cfg.validate else None
    meta["algorithms"] = {}

    rng = np.random.default_rng(cfg.seed)

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Experiment:[/bold] {cfg.experiment_name} ({cfg.kind})")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(a.label for a in cfg.algorithms)}")

    tables: Dict[str, List[TimeAA]] = {}
    for algo in tqdm(cfg.algorithms, desc="Algorithms", unit="algo"):
        rows, error = _run_algorithm(cfg, algo, rng)
        table_path = run_dir / f"{algo.label}.txt"
        save_time_table(table_path, rows)
        tables[algo.label] = rows
        meta["algorithms"][algo.label] = {
            "name": algo.name,
            "config": algo.config,
            "status": "ok" if error is None else "error",
            "error": error,
            "rows": len(rows),
            "table": table_path.name,
        }
        logger.info("%s: %d rows -> %s", algo.label, len(rows), table_path)

    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(meta, f, indent=2)

    _print_rich_summary(tables, cfg.sizes)
    _console.print(f"[bold green]Done.[/bold green] Wrote {len(tables)} tables to {run_dir}")
    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a sorting or searching experiment from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_console, rich_tracebacks=True)],
    )

    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path)
    except (ValueError, OSError) as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
