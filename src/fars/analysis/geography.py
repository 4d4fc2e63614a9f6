"""
FARS State Selection and Coordinate Sanitization (Functional Core)

Pure functions only. No I/O, no side effects; inputs are never mutated.

Package Location: src/fars/analysis/geography.py

Coordinate Sentinel Rule:
    FARS records an unknown location with out-of-range values rather than
    blanks.  ``LONGITUD > 900`` and ``LATITUDE > 90`` both mean "not
    recorded" and are replaced with ``NaN`` independently per axis before
    any range computation or plotting.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

import numpy as np
import pandas as pd

from ..config import (
    LATITUDE_FIELD,
    LATITUDE_SENTINEL,
    LONGITUDE_FIELD,
    LONGITUDE_SENTINEL,
    STATE_FIELD,
)


class InvalidStateError(ValueError):
    """Raised when a state number is not present in a year's dataset."""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def validate_state(df: pd.DataFrame, state: Any) -> int:
    """
    Coerce *state* to an integer and check it appears in ``df.STATE``.

    Args:
        df: Full dataset for one year.
        state: State number as int or numeric string.

    Returns:
        The integer state number.

    Raises:
        InvalidStateError: If *state* is not an integer or is not one of
            the distinct STATE values in *df*.
    """
    try:
        state_num = int(state)
    except (TypeError, ValueError) as exc:
        raise InvalidStateError(f"invalid STATE number: {state}") from exc

    known = set(int(s) for s in df[STATE_FIELD].dropna().unique())
    if state_num not in known:
        raise InvalidStateError(f"invalid STATE number: {state_num}")
    return state_num


def select_state(df: pd.DataFrame, state_num: int) -> pd.DataFrame:
    """Return a copy of the rows belonging to one state."""
    return df.loc[df[STATE_FIELD] == state_num].copy()


def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with ``NaN``.

    Args:
        df: DataFrame with ``LONGITUD`` and ``LATITUDE`` columns.

    Returns:
        A copy of *df* where ``LONGITUD > 900`` and ``LATITUDE > 90`` are
        ``NaN``.  Each axis is handled on its own: a row with a sentinel
        longitude keeps its valid latitude.
    """
    df = df.copy()
    df[LONGITUDE_FIELD] = df[LONGITUDE_FIELD].astype("float64")
    df[LATITUDE_FIELD] = df[LATITUDE_FIELD].astype("float64")
    df.loc[df[LONGITUDE_FIELD] > LONGITUDE_SENTINEL, LONGITUDE_FIELD] = np.nan
    df.loc[df[LATITUDE_FIELD] > LATITUDE_SENTINEL, LATITUDE_FIELD] = np.nan
    return df


def coordinate_range(values: pd.Series) -> Optional[Tuple[float, float]]:
    """
    ``(min, max)`` of the non-missing values, or ``None`` if all missing.
    """
    valid = values.dropna()
    if valid.empty:
        return None
    return float(valid.min()), float(valid.max())


def coordinate_points(df: pd.DataFrame) -> List[Tuple[float, float]]:
    """
    ``(longitude, latitude)`` pairs for rows where both are known.
    """
    both = df[[LONGITUDE_FIELD, LATITUDE_FIELD]].dropna()
    return list(both.itertuples(index=False, name=None))
