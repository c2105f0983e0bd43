"""Tests for the timing harness, result tables and the experiment runner."""

from __future__ import annotations

import gc
import json
import re
from typing import List

import pytest
import yaml

from algolab.algorithms import PivotStrategy, SortKind, SortMethod
from algolab.bench import (
    TimeAA,
    average_search_time,
    average_sorting_time,
    generate_search_times,
    generate_sorting_times,
    load_time_table,
    save_time_table,
    size_range,
)
from algolab.bench.config import parse_config
from algolab.bench.runner import main, run_experiment
from algolab.datasets import potential_key_generator, uniform_key_generator
from algolab.dictionary import Order, SearchMethod
from algolab.errors import InvalidArgumentError, SortValidationError

LINE = re.compile(r"^\d+ \d+\.\d{2} \d+\.\d{2} \d+ \d+$")


def _do_nothing(array: List[int], lo: int, hi: int) -> int:
    return 0


class TestSortingTimes:
    def test_merge_sort_counts_are_constant(self, rng):
        row = average_sorting_time(SortMethod(SortKind.MERGE_SORT), 6, 5, rng, validate=True)
        assert row.n == 5
        assert row.n_elems == 6
        assert row.min_ob == row.max_ob == 16
        assert row.average_ob == 16.0
        assert row.time >= 0

    def test_select_sort_inv_validates_descending(self, rng):
        row = average_sorting_time(SortMethod(SortKind.SELECT_SORT_INV), 3, 8, rng, validate=True)
        assert row.average_ob == sum(range(2, 9))

    def test_quicksort_counts_vary(self, rng):
        row = average_sorting_time(SortMethod(SortKind.QUICKSORT), 30, 20, rng, disable_gc=True)
        assert row.min_ob <= row.average_ob <= row.max_ob
        assert row.max_ob <= 20 * 19 // 2

    def test_sorted_dataset_hits_first_pivot_worst_case(self, rng):
        method = SortMethod(SortKind.QUICKSORT, PivotStrategy.FIRST)
        row = average_sorting_time(method, 2, 10, rng, validate=True, dataset={"dist": "sorted"})
        assert row.min_ob == row.max_ob == 45

    @pytest.mark.parametrize("enabled", [True, False])
    def test_gc_state_is_restored(self, rng, enabled):
        (gc.enable if enabled else gc.disable)()
        try:
            average_sorting_time(SortMethod(SortKind.MERGE_SORT), 2, 10, rng, disable_gc=True)
            assert gc.isenabled() is enabled
        finally:
            gc.enable()

    def test_validation_catches_broken_sort(self, rng):
        with pytest.raises(SortValidationError):
            average_sorting_time(_do_nothing, 2, 30, rng, validate=True)

    def test_rejects_bad_arguments(self, rng):
        with pytest.raises(InvalidArgumentError):
            average_sorting_time(SortMethod(SortKind.MERGE_SORT), 0, 5, rng)
        with pytest.raises(InvalidArgumentError):
            average_sorting_time(None, 1, 5, rng)

    def test_generate_sorting_times_writes_one_line_per_size(self, tmp_path, rng):
        path = tmp_path / "merge.txt"
        rows = generate_sorting_times(SortMethod(SortKind.MERGE_SORT), path, 2, 7, 2, 3, rng)
        assert [r.n for r in rows] == [2, 4, 6]

        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 3
        assert all(LINE.match(line) for line in lines)
        assert lines[0].startswith("2 ")
        assert lines[0].endswith(" 3.00 3 3")


class TestSearchTimes:
    def test_binary_search_uniform_keys(self, rng):
        row = average_search_time(SearchMethod.BINARY, uniform_key_generator, Order.SORTED, 5, 1, rng)
        assert row.n_elems == 5
        assert row.min_ob == 1
        assert row.max_ob == 5
        assert row.average_ob == pytest.approx(17 / 5)

    def test_linear_search_uniform_keys(self, rng):
        row = average_search_time(SearchMethod.LINEAR, uniform_key_generator, Order.NOT_SORTED, 5, 2, rng)
        assert row.n_elems == 10
        assert row.average_ob == pytest.approx(3.0)
        assert (row.min_ob, row.max_ob) == (1, 5)

    def test_self_organizing_search_with_potential_keys(self, rng):
        row = average_search_time(
            SearchMethod.LINEAR_AUTO, potential_key_generator, Order.NOT_SORTED, 50, 4, rng, disable_gc=True
        )
        assert row.n_elems == 200
        assert 1 <= row.min_ob <= row.average_ob <= row.max_ob <= 50

    def test_generate_search_times(self, tmp_path, rng):
        path = tmp_path / "bin.txt"
        rows = generate_search_times(
            SearchMethod.BINARY, uniform_key_generator, Order.SORTED, path, 10, 30, 10, 1, rng
        )
        assert [r.n for r in rows] == [10, 20, 30]
        assert len(load_time_table(path)) == 3


class TestTables:
    def test_format(self, tmp_path):
        path = tmp_path / "t.txt"
        save_time_table(path, [TimeAA(n=100, n_elems=10, time=1234.5678, average_ob=16.0, min_ob=16, max_ob=16)])
        assert path.read_text(encoding="utf-8") == "100 1234.57 16.00 16 16\n"

    def test_round_trip(self, tmp_path):
        path = tmp_path / "t.txt"
        rows = [
            TimeAA(n=10, n_elems=5, time=1.0, average_ob=2.5, min_ob=1, max_ob=4),
            TimeAA(n=20, n_elems=5, time=3.333, average_ob=7.25, min_ob=3, max_ob=12),
        ]
        save_time_table(path, rows)
        df = load_time_table(path)
        assert df["n"].tolist() == [10, 20]
        assert df["average_ob"].tolist() == [2.5, 7.25]
        assert df["max_ob"].tolist() == [4, 12]

    def test_empty_table(self, tmp_path):
        path = tmp_path / "t.txt"
        save_time_table(path, [])
        assert path.read_text(encoding="utf-8") == ""
        assert load_time_table(path).empty


def test_size_range():
    assert size_range(10, 35, 10) == [10, 20, 30]
    assert size_range(5, 5, 3) == [5]
    with pytest.raises(InvalidArgumentError):
        size_range(0, 5, 1)
    with pytest.raises(InvalidArgumentError):
        size_range(6, 5, 1)
    with pytest.raises(InvalidArgumentError):
        size_range(1, 5, 0)


# ------------------------- config & runner ------------------------- #

def _sort_config(tmp_path) -> dict:
    return {
        "experiment_name": "tiny_sort",
        "output_dir": str(tmp_path / "results"),
        "seed": 1,
        "kind": "sort",
        "sizes": {"min": 5, "max": 15, "incr": 5},
        "n_perms": 3,
        "disable_gc": True,
        "validate": True,
        "algorithms": [
            {"name": "merge_sort"},
            {"name": "quicksort", "config": {"pivot": "median_stat"}},
            {"name": "select_sort_inv"},
        ],
    }


def _write(tmp_path, cfg: dict):
    path = tmp_path / "experiment.yaml"
    path.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return path


class TestConfig:
    def test_labels_are_derived(self, tmp_path):
        cfg = parse_config(_sort_config(tmp_path))
        assert [a.label for a in cfg.algorithms] == ["merge_sort", "quicksort_median_stat", "select_sort_inv"]
        assert cfg.sizes == [5, 10, 15]

    def test_search_labels(self, tmp_path):
        raw = _sort_config(tmp_path)
        raw.update(
            kind="search",
            n_times=1,
            algorithms=[{"name": "bin_search", "config": {"order": "sorted", "key_generator": "potential"}}],
        )
        cfg = parse_config(raw)
        assert cfg.algorithms[0].label == "bin_search_sorted_potential"
        assert cfg.algorithms[0].order is Order.SORTED

    @pytest.mark.parametrize(
        "change",
        [
            {"kind": "shuffle"},
            {"sizes": {"min": 10, "max": 5}},
            {"n_perms": 0},
            {"dataset": {"dist": "gaussian"}},
            {"algorithms": []},
            {"algorithms": [{"name": "merge_sort"}, {"name": "merge_sort"}]},
            {"algorithms": [{"name": "quicksort", "config": {"pivot": "random"}}]},
        ],
    )
    def test_rejects_bad_configs(self, tmp_path, change):
        raw = _sort_config(tmp_path)
        raw.update(change)
        with pytest.raises(ValueError):
            parse_config(raw)

    def test_dataset_only_for_sort_runs(self, tmp_path):
        raw = _sort_config(tmp_path)
        raw.update(dataset={"dist": "sorted"})
        assert parse_config(raw).dataset == {"dist": "sorted"}

        raw.update(kind="search", n_times=1, algorithms=[{"name": "lin_search"}])
        with pytest.raises(ValueError, match="dataset"):
            parse_config(raw)

    def test_search_order_defaults_per_method(self, tmp_path):
        raw = _sort_config(tmp_path)
        raw.update(
            kind="search",
            n_times=1,
            algorithms=[{"name": "lin_search"}, {"name": "lin_auto_search"}, {"name": "bin_search"}],
        )
        orders = {a.name: a.order for a in parse_config(raw).algorithms}
        assert orders == {
            "lin_search": Order.NOT_SORTED,
            "lin_auto_search": Order.NOT_SORTED,
            "bin_search": Order.SORTED,
        }

    @pytest.mark.parametrize(
        "name, order",
        [("bin_search", "not_sorted"), ("lin_auto_search", "sorted")],
    )
    def test_rejects_search_on_incompatible_order(self, tmp_path, name, order):
        raw = _sort_config(tmp_path)
        raw.update(kind="search", n_times=1, algorithms=[{"name": name, "config": {"order": order}}])
        with pytest.raises(ValueError, match=name):
            parse_config(raw)

    def test_missing_keys(self):
        with pytest.raises(ValueError, match="Missing required config keys"):
            parse_config({"experiment_name": "x"})


class TestRunner:
    def test_sort_experiment_writes_tables_and_meta(self, tmp_path):
        run_dir = run_experiment(_write(tmp_path, _sort_config(tmp_path)))

        assert (run_dir / "config_resolved.yaml").exists()
        meta = json.loads((run_dir / "meta.json").read_text(encoding="utf-8"))
        assert set(meta["algorithms"]) == {"merge_sort", "quicksort_median_stat", "select_sort_inv"}
        assert all(a["status"] == "ok" for a in meta["algorithms"].values())
        assert meta["validation_oracle"] == "python_sorted_timsort"

        lines = (run_dir / "merge_sort.txt").read_text(encoding="utf-8").splitlines()
        assert [line.split()[0] for line in lines] == ["5", "10", "15"]
        assert lines[0].split()[2:] == ["16.00", "16", "16"]

    def test_search_experiment(self, tmp_path):
        raw = _sort_config(tmp_path)
        raw.update(
            kind="search",
            n_times=2,
            algorithms=[
                {"name": "lin_search", "config": {"order": "not_sorted"}},
                {"name": "bin_search", "label": "binary", "config": {"order": "sorted"}},
            ],
        )
        run_dir = run_experiment(_write(tmp_path, raw))
        assert len(load_time_table(run_dir / "binary.txt")) == 3
        assert len(load_time_table(run_dir / "lin_search_not_sorted_uniform.txt")) == 3

    def test_failing_algorithm_is_recorded_as_error(self, tmp_path):
        # swap_frac is only checked when the arrays are built
        raw = _sort_config(tmp_path)
        raw.update(
            dataset={"dist": "nearly_sorted", "params": {"swap_frac": 2.0}},
            algorithms=[{"name": "merge_sort"}],
        )
        run_dir = run_experiment(_write(tmp_path, raw))
        meta = json.loads((run_dir / "meta.json").read_text(encoding="utf-8"))
        entry = meta["algorithms"]["merge_sort"]
        assert entry["status"] == "error"
        assert entry["rows"] == 0
        assert (run_dir / "merge_sort.txt").read_text(encoding="utf-8") == ""

    def test_cli_missing_config(self, tmp_path):
        with pytest.raises(SystemExit):
            main([str(tmp_path / "nope.yaml")])

    def test_cli_runs(self, tmp_path):
        main([str(_write(tmp_path, _sort_config(tmp_path))), "--log-level", "WARNING"])
        assert len(list((tmp_path / "results").iterdir())) == 1
