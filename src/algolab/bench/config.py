"""
Experiment configuration.

An experiment is a YAML file, for example:

    experiment_name: quicksort_pivots
    output_dir: results
    seed: 42
    kind: sort                  # or: search
    sizes: {min: 100, max: 1000, incr: 100}
    n_perms: 100                # sort runs
    dataset: {dist: sorted}     # optional, sort runs; default: random permutations
    disable_gc: true
    validate: true
    algorithms:
      - name: quicksort
        config: {pivot: median_stat}
      - name: merge_sort

Search runs replace `n_perms` with `n_times` and list search methods:

      - name: bin_search
        config: {order: sorted, key_generator: potential}

`order` defaults to `sorted` for bin_search and `not_sorted` for the linear
searches; bin_search on `not_sorted` and lin_auto_search on `sorted` are
rejected.

Each algorithm entry may carry an explicit `label`; otherwise one is derived
from the name and config. Labels name the result files and must be unique.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from algolab.algorithms import SortMethod, resolve_sort_method
from algolab.bench.measure import size_range
from algolab.datasets.generators import SUPPORTED_DISTS
from algolab.datasets.keys import KeyGenerator, resolve_key_generator
from algolab.dictionary import Order, SearchMethod, resolve_search_method
from algolab.errors import AlgoLabError

__all__ = ["AlgoSpec", "ExperimentConfig", "load_config", "parse_config"]

KINDS = ("sort", "search")
REQUIRED = ["experiment_name", "output_dir", "seed", "kind", "sizes", "algorithms"]

_DEFAULT_ORDER = {
    SearchMethod.LINEAR: Order.NOT_SORTED,
    SearchMethod.LINEAR_AUTO: Order.NOT_SORTED,
    SearchMethod.BINARY: Order.SORTED,
}
# bisection needs sorted keys; the self-organizing swap would unsort them
_INCOMPATIBLE = {
    (SearchMethod.BINARY, Order.NOT_SORTED),
    (SearchMethod.LINEAR_AUTO, Order.SORTED),
}


@dataclass(frozen=True)
class AlgoSpec:
    label: str
    name: str
    config: Dict[str, Any]
    sort_method: SortMethod | None = None
    search_method: SearchMethod | None = None
    order: Order | None = None
    key_generator: KeyGenerator | None = None


@dataclass(frozen=True)
class ExperimentConfig:
    experiment_name: str
    output_dir: Path
    seed: int
    kind: str
    sizes: List[int]
    algorithms: List[AlgoSpec]
    n_perms: int = 0
    n_times: int = 0
    disable_gc: bool = False
    validate: bool = False
    dataset: Optional[Dict[str, Any]] = None
    raw: Dict[str, Any] = field(default_factory=dict)


def load_config(path: Union[str, Path]) -> ExperimentConfig:
    with Path(path).open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    return parse_config(raw)


def parse_config(raw: Any) -> ExperimentConfig:
    """Validate a decoded YAML mapping; raise ValueError naming the problem."""
    if not isinstance(raw, dict):
        raise ValueError("experiment config must be a mapping")

    missing = [k for k in REQUIRED if k not in raw]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    kind = str(raw["kind"])
    if kind not in KINDS:
        raise ValueError(f"kind must be one of {list(KINDS)}; got {kind!r}")

    sizes_cfg = raw["sizes"]
    if not isinstance(sizes_cfg, dict) or not {"min", "max"} <= set(sizes_cfg):
        raise ValueError("sizes must be a mapping with 'min', 'max' and optional 'incr'")
    try:
        sizes = size_range(int(sizes_cfg["min"]), int(sizes_cfg["max"]), int(sizes_cfg.get("incr", 1)))
    except AlgoLabError as e:
        raise ValueError(f"invalid sizes: {e}") from e

    n_perms = int(raw.get("n_perms", 0))
    n_times = int(raw.get("n_times", 0))
    if kind == "sort" and n_perms < 1:
        raise ValueError("sort experiments need n_perms >= 1")
    if kind == "search" and n_times < 1:
        raise ValueError("search experiments need n_times >= 1")

    dataset = raw.get("dataset")
    if dataset is not None:
        if kind != "sort":
            raise ValueError("dataset only applies to sort experiments")
        if not isinstance(dataset, dict) or str(dataset.get("dist")) not in SUPPORTED_DISTS:
            raise ValueError(f"dataset must be a mapping with dist in {sorted(SUPPORTED_DISTS)}")

    algos_cfg = raw["algorithms"]
    if not isinstance(algos_cfg, list) or not algos_cfg:
        raise ValueError("algorithms must be a non-empty list")

    algorithms = [_parse_algorithm(entry, kind) for entry in algos_cfg]
    labels = [a.label for a in algorithms]
    duplicates = sorted({x for x in labels if labels.count(x) > 1})
    if duplicates:
        raise ValueError(f"Duplicate algorithm labels in config: {duplicates}")

    return ExperimentConfig(
        experiment_name=str(raw["experiment_name"]),
        output_dir=Path(raw["output_dir"]),
        seed=int(raw["seed"]),
        kind=kind,
        sizes=sizes,
        algorithms=algorithms,
        n_perms=n_perms,
        n_times=n_times,
        disable_gc=bool(raw.get("disable_gc", False)),
        validate=bool(raw.get("validate", False)),
        dataset=dataset,
        raw=raw,
    )


def _parse_algorithm(entry: Any, kind: str) -> AlgoSpec:
    if not isinstance(entry, dict):
        raise ValueError(f"algorithm entries must be mappings; got {entry!r}")
    name = entry.get("name", None)
    if not name or not isinstance(name, str):
        raise ValueError("Each algorithm must have a string 'name' field")

    config = entry.get("config", {})
    if config is None:
        config = {}
    elif not isinstance(config, dict):
        raise ValueError(f"Algorithm '{name}': 'config' must be a dict if provided")

    try:
        if kind == "sort":
            method = resolve_sort_method(name, config)
            label = entry.get("label") or method.name
            return AlgoSpec(label=str(label), name=name, config=config, sort_method=method)

        search = resolve_search_method(name)
        order = Order(config.get("order", _DEFAULT_ORDER[search].value))
        generator_name = config.get("key_generator", "uniform")
        generator = resolve_key_generator(generator_name)
    except (AlgoLabError, ValueError) as e:
        raise ValueError(f"Algorithm '{name}': {e}") from e

    if (search, order) in _INCOMPATIBLE:
        raise ValueError(f"Algorithm '{name}': cannot search a {order.value} dictionary")

    label = entry.get("label") or f"{name}_{order.value}_{generator_name}"
    return AlgoSpec(
        label=str(label),
        name=name,
        config=config,
        search_method=search,
        order=order,
        key_generator=generator,
    )
