"""
FARS - Fatality Analysis Reporting System accident tools

A small Python package for summarizing yearly FARS accident files and
mapping accident locations, using the Functional Core, Imperative Shell
architecture.

Structure:
- data/     : Imperative Shell (file naming, reading, multi-year loading)
- analysis/ : Functional Core (monthly pivot, state filter, coordinates)
- plotting/ : (plotly map renderer)
- reports/  : (summary and map orchestration, output writers)
"""

from .analysis.geography import InvalidStateError
from .data.loader import YearResult, load_years
from .data.reader import (
    DatasetParseError,
    YearCoercionError,
    make_filename,
    read_dataset,
)
from .reports.generators import render_state_map, summarize_years

__version__ = "0.1.0"

__all__ = [
    'make_filename',
    'read_dataset',
    'load_years',
    'summarize_years',
    'render_state_map',
    'YearResult',
    'YearCoercionError',
    'DatasetParseError',
    'InvalidStateError',
]
