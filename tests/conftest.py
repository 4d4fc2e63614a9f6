"""Shared fixtures: small FARS accident files written to a temp directory."""

from pathlib import Path

import pandas as pd
import pytest


def write_accidents(directory: Path, year: int, rows) -> Path:
    """Write *rows* (list of dicts) as ``accident_<year>.csv.bz2``."""
    path = directory / f"accident_{year}.csv.bz2"
    pd.DataFrame(rows).to_csv(path, index=False, compression="bz2")
    return path


def _row(state, month, lon, lat, case):
    return {
        "STATE": state,
        "ST_CASE": case,
        "MONTH": month,
        "LONGITUD": lon,
        "LATITUDE": lat,
    }


ROWS_2013 = [
    _row(1, 1, -86.5, 32.6, 10001),
    _row(1, 1, -87.1, 33.4, 10002),
    _row(1, 2, 999.9999, 32.0, 10003),
    _row(1, 3, -85.9, 99.9999, 10004),
    _row(6, 1, -118.2, 34.0, 60001),
    _row(6, 3, 999.9999, 99.9999, 60002),
]

ROWS_2014 = [
    _row(1, 2, -86.0, 32.1, 10001),
    _row(6, 2, -121.5, 38.5, 60001),
    _row(6, 2, -120.0, 37.0, 60002),
    _row(6, 4, -117.1, 32.7, 60003),
]


@pytest.fixture
def fars_dir(tmp_path, monkeypatch):
    """Temp working directory holding 2013 and 2014 accident files."""
    write_accidents(tmp_path, 2013, ROWS_2013)
    write_accidents(tmp_path, 2014, ROWS_2014)
    monkeypatch.chdir(tmp_path)
    return tmp_path
