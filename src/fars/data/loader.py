"""
FARS Multi-Year Loader (Imperative Shell)

Loads several yearly datasets in one call, tags each row with its year
and projects to the ``(MONTH, year)`` pair used by the monthly summary.

Package Location: src/fars/data/loader.py

Failure isolation:
    A year whose file is missing, unparseable or lacks a ``MONTH``
    column, or whose value is not a valid integer, never aborts the batch.
    Its :class:`YearResult` carries ``data=None`` plus the reason, and a
    single ``invalid year: <year>`` warning is logged.  Results are
    returned in input order, one per requested year.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

import pandas as pd

from ..config import MONTH_FIELD, YEAR_FIELD
from .reader import (
    DatasetParseError,
    YearCoercionError,
    coerce_year,
    make_filename,
    read_dataset,
    require_columns,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class YearResult:
    """Outcome of loading one requested year.

    Attributes:
        year:  The year exactly as it was requested.
        data:  ``[MONTH, year]`` DataFrame, or ``None`` if loading failed.
        error: Failure reason, or ``None`` on success.
    """

    year: Any
    data: Optional[pd.DataFrame] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.data is not None


def load_years(
    years: Union[Any, Iterable[Any]],
    data_dir: Optional[Union[str, Path]] = None,
) -> List[YearResult]:
    """
    Load the ``(MONTH, year)`` projection for every requested year.

    Args:
        years: Sequence of years (ints or numeric strings).  A single
            scalar year is treated as a one-element sequence.
        data_dir: Optional directory holding the dataset files.

    Returns:
        One :class:`YearResult` per input year, in input order.  The
        ``year`` column of each frame holds the integer year.
    """
    if isinstance(years, (str, bytes, int)) or not isinstance(years, Iterable):
        years = [years]

    results: List[YearResult] = []
    for year in years:
        try:
            data = _load_one_year(year, data_dir)
        except (FileNotFoundError, YearCoercionError, DatasetParseError) as exc:
            logger.warning(f"invalid year: {year}", extra={"year": str(year)})
            results.append(YearResult(year=year, error=str(exc)))
            continue
        results.append(YearResult(year=year, data=data))

    return results


def loaded_frames(results: Iterable[YearResult]) -> List[pd.DataFrame]:
    """Return the DataFrames of successful results, dropping failures."""
    return [r.data for r in results if r.ok]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _load_one_year(
    year: Any,
    data_dir: Optional[Union[str, Path]],
) -> pd.DataFrame:
    filename = make_filename(year)
    df = read_dataset(filename, data_dir=data_dir)

    require_columns(df, [MONTH_FIELD], filename)

    df = df[[MONTH_FIELD]].copy()
    df[YEAR_FIELD] = coerce_year(year)
    return df.reset_index(drop=True)
