"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS pipeline.

Modules:
- reader: Filename resolution and single-file dataset loading
- loader: Multi-year loading with per-year failure isolation
"""

from .reader import (
    DatasetParseError,
    YearCoercionError,
    coerce_year,
    make_filename,
    read_dataset,
    require_columns,
)
from .loader import YearResult, load_years, loaded_frames

__all__ = [
    # Reader
    'DatasetParseError',
    'YearCoercionError',
    'coerce_year',
    'make_filename',
    'read_dataset',
    'require_columns',
    # Loader
    'YearResult',
    'load_years',
    'loaded_frames',
]
