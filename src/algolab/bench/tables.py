"""
Result tables written by the timing harness.

One line per measured size, space-separated:

    N time avg_ops min_ops max_ops

`time` (mean nanoseconds per call) and `avg_ops` carry two decimals; the
other columns are integers. No header.

Public API (stable):
    TimeAA                                   # one row
    save_time_table(path, rows) -> None
    load_time_table(path) -> pandas.DataFrame
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import List, Sequence, Union

import pandas as pd

__all__ = ["TimeAA", "TABLE_COLUMNS", "save_time_table", "load_time_table", "rows_to_frame"]

TABLE_COLUMNS = ["n", "time", "average_ob", "min_ob", "max_ob"]


@dataclass
class TimeAA:
    """
    Aggregated measurements for one input size.

    Attributes:
        n: Input size (permutation length or dictionary size)
        n_elems: Number of timed calls aggregated into this row
        time: Mean time per call, in nanoseconds
        average_ob: Mean operation count per call
        min_ob: Smallest operation count seen
        max_ob: Largest operation count seen
    """

    n: int
    n_elems: int
    time: float
    average_ob: float
    min_ob: int
    max_ob: int


def save_time_table(path: Union[str, Path], rows: Sequence[TimeAA]) -> None:
    """Write `rows` to `path`, replacing any existing file."""
    path = Path(path)
    if not rows:
        path.write_text("", encoding="utf-8")
        return

    df = pd.DataFrame([asdict(r) for r in rows])[TABLE_COLUMNS]
    df = df.astype(
        {"n": "int64", "time": "float64", "average_ob": "float64", "min_ob": "int64", "max_ob": "int64"}
    )
    df.to_csv(
        path,
        sep=" ",
        header=False,
        index=False,
        float_format="%.2f",
        lineterminator="\n",
    )


def load_time_table(path: Union[str, Path]) -> pd.DataFrame:
    """Read a table written by `save_time_table` into a DataFrame."""
    try:
        return pd.read_csv(Path(path), sep=" ", header=None, names=TABLE_COLUMNS)
    except pd.errors.EmptyDataError:
        return pd.DataFrame(columns=TABLE_COLUMNS)


def rows_to_frame(rows: List[TimeAA]) -> pd.DataFrame:
    """Tabulate rows in memory with the same columns as the file."""
    if not rows:
        return pd.DataFrame(columns=TABLE_COLUMNS)
    return pd.DataFrame([asdict(r) for r in rows])[TABLE_COLUMNS]
