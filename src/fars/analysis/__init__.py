"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames and return new DataFrames or plain
Python values.

Modules:
- summary:   Month x year accident count pivot
- geography: State validation, state filtering, coordinate sanitization
"""

from .summary import (
    summarize_frames,
    summary_cells,
)

from .geography import (
    InvalidStateError,
    validate_state,
    select_state,
    sanitize_coordinates,
    coordinate_range,
    coordinate_points,
)

__all__ = [
    # Summary
    'summarize_frames',
    'summary_cells',
    # Geography
    'InvalidStateError',
    'validate_state',
    'select_state',
    'sanitize_coordinates',
    'coordinate_range',
    'coordinate_points',
]
