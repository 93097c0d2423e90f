"""
FARS - Fatality Analysis Reporting System toolkit

Reads yearly FARS accident extracts, summarises accidents by month and
year, and maps accident locations for a single state, using the
Functional Core, Imperative Shell architecture.

Structure:
- data/     : Imperative Shell (file I/O)
- analysis/ : Functional Core (pure transformations)
- plotting/ : (plotting functions)
- reports/  : orchestration (summaries, state maps)
"""

from .analysis import (
    EmptyDatasetError,
    InvalidStateError,
    StateCode,
    TypeConversionError,
    Year,
)
from .data import (
    build_filename,
    extract_year_columns,
    load_years,
    read_table,
)
from .reports import (
    plot_state,
    summarize,
    write_summary,
)

__version__ = "0.1.0"

__all__ = [
    'EmptyDatasetError',
    'InvalidStateError',
    'StateCode',
    'TypeConversionError',
    'Year',
    'build_filename',
    'extract_year_columns',
    'load_years',
    'read_table',
    'plot_state',
    'summarize',
    'write_summary',
]
