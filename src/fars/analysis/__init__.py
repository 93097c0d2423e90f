"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept data structures (DataFrames, value objects) and
return transformed data.

Modules:
- values:  Validated Year / StateCode construction
- summary: Month-by-year accident count pivot
- states:  State selection and coordinate sentinel sanitation
"""

from .values import (
    TypeConversionError,
    Year,
    StateCode,
)

from .summary import (
    EmptyDatasetError,
    summarize_extracts,
    count_by_month,
)

from .states import (
    InvalidStateError,
    MapBounds,
    select_state,
    sanitize_coordinates,
    complete_points,
    coordinate_bounds,
)

__all__ = [
    # Values
    'TypeConversionError',
    'Year',
    'StateCode',
    # Summary
    'EmptyDatasetError',
    'summarize_extracts',
    'count_by_month',
    # States
    'InvalidStateError',
    'MapBounds',
    'select_state',
    'sanitize_coordinates',
    'complete_points',
    'coordinate_bounds',
]
