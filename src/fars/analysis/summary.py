"""
FARS Monthly Summary (Functional Core)

Pure functions only. No I/O, no side effects.
Input is the list produced by ``fars.data.reader.extract_year_columns``
(one ``MONTH``/``year`` frame or ``None`` per requested year); output is a
month-by-year accident count table.

Package Location: src/fars/analysis/summary.py

Output layout::

    year    2013  2014  2015
    MONTH
    1       2230  2168  2368
    2       1952  1893  1968
    ...

Cells are nullable integers (``Int64``).  A (month, year) pair with no
accidents is ``<NA>``, never ``0``.

A missing ``MONTH`` value is not dropped: those rows are counted under a
``<NA>`` month label (sorted last), so each column still sums to the number
of rows loaded for that year.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import pandas as pd

# ---------------------------------------------------------------------------
# Column names shared with the reader
# ---------------------------------------------------------------------------

MONTH_COL: str = "MONTH"
YEAR_COL: str = "year"
_COUNT_COL: str = "n"


class EmptyDatasetError(ValueError):
    """
    Raised when a summary is requested but no year produced any data.

    Every requested year failed to load, so there is nothing to group.
    """
    pass


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def summarize_extracts(extracts: Sequence[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Count accidents per month for each year and pivot years into columns.

    Args:
        extracts: Per-year frames with columns ``[MONTH, year]``.  ``None``
            entries (years that failed to load) are skipped.

    Returns:
        DataFrame indexed by ``MONTH`` (ascending, ``<NA>`` last) with one
        ``Int64`` column per distinct year (ascending).  The column axis is
        named ``year``.

    Raises:
        EmptyDatasetError: If *extracts* holds no frames at all.
    """
    frames: List[pd.DataFrame] = [f for f in extracts if f is not None]
    if not frames:
        raise EmptyDatasetError(
            "no data to summarize: none of the requested years could be loaded"
        )

    combined = pd.concat(frames, ignore_index=True)
    counts = count_by_month(combined)

    # One Series per year, aligned on MONTH.  Built without a
    # (year, MONTH) MultiIndex so a NaN month survives the reshape.
    table = pd.DataFrame({
        year: grp.set_index(MONTH_COL)[_COUNT_COL]
        for year, grp in counts.groupby(YEAR_COL)
    })
    table.index = _month_index(table.index)
    table = table.sort_index(na_position="last").sort_index(axis=1)
    table = table.rename_axis(index=MONTH_COL, columns=YEAR_COL)
    return table.astype("Int64")


def count_by_month(combined: pd.DataFrame) -> pd.DataFrame:
    """Long-form accident counts, one row per observed (year, MONTH) pair.

    Rows with a missing ``MONTH`` form their own group.

    Args:
        combined: Concatenated ``[MONTH, year]`` rows.

    Returns:
        DataFrame with columns ``[year, MONTH, n]``.
    """
    return (
        combined.groupby([YEAR_COL, MONTH_COL], dropna=False)
        .size()
        .rename(_COUNT_COL)
        .reset_index()
    )


def _month_index(index: pd.Index) -> pd.Index:
    # A NaN month turns integer months into floats; keep them integral.
    if index.dtype.kind != "f":
        return index
    known = index.dropna()
    if (known.to_numpy() % 1 == 0).all():
        return index.astype("Int64")
    return index
