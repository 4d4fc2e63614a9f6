"""
FARS Monthly Summary (Functional Core)

Pure functions only. No I/O, no side effects.

Package Location: src/fars/analysis/summary.py

Sparse Pivot Rule:
    The summary counts accidents per ``(MONTH, year)`` and pivots years
    into columns.  A month/year pair with no accidents is left as
    ``<NA>``; it is never filled with ``0``.  Callers that need a dense
    view must decide explicitly how to treat the absent cells.
"""

from __future__ import annotations

from typing import Dict, Iterable, Tuple

import pandas as pd

from ..config import MONTH_FIELD, YEAR_FIELD


def summarize_frames(frames: Iterable[pd.DataFrame]) -> pd.DataFrame:
    """
    Cross-tabulate accident counts by month (rows) and year (columns).

    Args:
        frames: DataFrames each holding at least ``MONTH`` and ``year``
            columns, typically the usable output of ``load_years``.

    Returns:
        DataFrame with a ``MONTH`` column followed by one column per year
        observed, named by the integer year.  Rows are sorted by month and
        year columns ascending.  Cells are nullable ``Int64`` counts;
        combinations with no rows are ``<NA>``.  With no input rows, an
        empty DataFrame with only the ``MONTH`` column is returned.
    """
    frames = [f[[MONTH_FIELD, YEAR_FIELD]] for f in frames]
    if not frames:
        return pd.DataFrame(columns=[MONTH_FIELD])

    combined = pd.concat(frames, ignore_index=True)
    if combined.empty:
        return pd.DataFrame(columns=[MONTH_FIELD])

    counts = (
        combined.groupby([YEAR_FIELD, MONTH_FIELD])
        .size()
        .reset_index(name="n")
    )

    summary = (
        counts.pivot(index=MONTH_FIELD, columns=YEAR_FIELD, values="n")
        .sort_index()
        .sort_index(axis=1)
        .astype("Int64")
    )
    summary.columns = [int(c) for c in summary.columns]
    summary.columns.name = None

    return summary.rename_axis(MONTH_FIELD).reset_index()


def summary_cells(summary: pd.DataFrame) -> Dict[Tuple[int, int], int]:
    """
    Sparse ``{(month, year): count}`` view of a monthly summary.

    Absent cells are omitted, so a key lookup never yields a fabricated
    zero.

    Args:
        summary: Output of :func:`summarize_frames`.

    Returns:
        Mapping from ``(month, year)`` to the accident count.
    """
    cells: Dict[Tuple[int, int], int] = {}
    if summary.empty:
        return cells

    long_df = summary.melt(id_vars=MONTH_FIELD, var_name=YEAR_FIELD, value_name="n")
    long_df = long_df.dropna(subset=["n"])
    for month, year, n in long_df.itertuples(index=False, name=None):
        cells[(int(month), int(year))] = int(n)
    return cells
