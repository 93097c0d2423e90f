"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS toolkit.

Modules:
- reader: Yearly CSV loading, filename convention, and per-year extraction
"""

from .reader import (
    FILENAME_TEMPLATE,
    YearLoad,
    read_table,
    build_filename,
    load_years,
    extract_year_columns,
    report_load_errors,
)

__all__ = [
    'FILENAME_TEMPLATE',
    'YearLoad',
    'read_table',
    'build_filename',
    'load_years',
    'extract_year_columns',
    'report_load_errors',
]
