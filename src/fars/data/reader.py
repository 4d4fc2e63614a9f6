"""
FARS Dataset Reader (Imperative Shell)

Resolves yearly dataset filenames and loads accident files into
DataFrames.  This is the only module that touches the filesystem for
reading.

Package Location: src/fars/data/reader.py

File naming:
    Every year is published as ``accident_<year>.csv.bz2``.  Paths are
    resolved against the current working directory at call time unless a
    ``data_dir`` is supplied.

Schema:
    The header determines the column set.  When present, ``STATE`` and
    ``MONTH`` are coerced to nullable ``Int64`` and ``LONGITUD`` /
    ``LATITUDE`` to ``float64``.  Every other column is passed through
    exactly as pandas parsed it.
"""

from __future__ import annotations

import errno
import warnings
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import pandas as pd

from ..config import COORDINATE_FIELDS, FILENAME_TEMPLATE, INTEGER_FIELDS


class YearCoercionError(ValueError):
    """Raised when a year value cannot be represented as an integer."""


class DatasetParseError(ValueError):
    """
    Raised when a dataset file exists but cannot be parsed.

    Covers:
    - Tokenizer errors (malformed CSV rows)
    - Empty files with no header
    - Corrupt compression streams
    - Non-numeric values in the fixed integer/coordinate fields
    - A required FARS column missing from the header
    """


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def coerce_year(year: Any) -> int:
    """
    Coerce a year given as an int, float or numeric string to ``int``.

    Args:
        year: Year value, e.g. ``2013`` or ``"2013"``.

    Returns:
        The integer year.

    Raises:
        YearCoercionError: If *year* is not representable as an integer.
    """
    if isinstance(year, bool):
        raise YearCoercionError(f"invalid year: {year!r}")
    try:
        return int(year)
    except (TypeError, ValueError, OverflowError) as exc:
        raise YearCoercionError(f"invalid year: {year!r}") from exc


def make_filename(year: Any) -> str:
    """
    Build the conventional dataset filename for a year.

    Example::

        make_filename(2013)    # 'accident_2013.csv.bz2'
        make_filename("2013")  # 'accident_2013.csv.bz2'

    Raises:
        YearCoercionError: If *year* is not coercible to an integer.
    """
    return FILENAME_TEMPLATE.format(year=coerce_year(year))


def read_dataset(
    filename: Union[str, Path],
    data_dir: Optional[Union[str, Path]] = None,
) -> pd.DataFrame:
    """
    Read one FARS dataset file into a DataFrame.

    Compression is inferred from the file extension.  Parser warnings are
    suppressed so the call is silent apart from its return value.

    Args:
        filename: Dataset file name or path.
        data_dir: Optional directory to resolve *filename* against.
            Defaults to the current working directory.

    Returns:
        DataFrame with one row per accident.

    Raises:
        FileNotFoundError: If the file does not exist.  ``filename`` and
            ``errno`` are set on the exception.
        PermissionError: If the file exists but cannot be opened.
        DatasetParseError: If the file content cannot be parsed.
    """
    path = Path(data_dir) / filename if data_dir is not None else Path(filename)
    if not path.is_file():
        raise FileNotFoundError(
            errno.ENOENT, f"file '{filename}' does not exist", str(filename)
        )

    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", pd.errors.ParserWarning)
            warnings.simplefilter("ignore", pd.errors.DtypeWarning)
            df = pd.read_csv(path, low_memory=False)
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise DatasetParseError(f"failed to parse '{filename}': {exc}") from exc
    except PermissionError:
        raise
    except (OSError, EOFError, UnicodeDecodeError) as exc:
        # bz2 raises OSError/EOFError on a corrupt or truncated stream
        raise DatasetParseError(f"failed to read '{filename}': {exc}") from exc

    return _coerce_schema(df, filename)


def require_columns(
    df: pd.DataFrame,
    columns: Iterable[str],
    filename: Union[str, Path],
) -> None:
    """
    Check that *df* carries every column in *columns*.

    Raises:
        DatasetParseError: Naming the first missing column.
    """
    for col in columns:
        if col not in df.columns:
            raise DatasetParseError(f"'{filename}' has no {col} column")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _coerce_schema(df: pd.DataFrame, filename: Union[str, Path]) -> pd.DataFrame:
    """Apply the fixed FARS dtypes to whichever known fields are present."""
    try:
        for col in INTEGER_FIELDS:
            if col in df.columns:
                df[col] = pd.to_numeric(df[col]).astype("Int64")
        for col in COORDINATE_FIELDS:
            if col in df.columns:
                df[col] = pd.to_numeric(df[col]).astype("float64")
    except (TypeError, ValueError) as exc:
        raise DatasetParseError(
            f"unexpected values in '{filename}': {exc}"
        ) from exc
    return df
