"""
FARS Report Generators (Imperative Shell)

Thin orchestration layer: parses caller input, calls reader.py to fetch
DataFrames, calls the functional core and plotting functions, and
optionally writes CSV / HTML output.

No CSV parsing lives here.  All file access goes through
src/fars/data/reader.py.

Package Location: src/fars/reports/generators.py

Usage::

    from pathlib import Path
    from fars.reports.generators import summarize, plot_state

    table = summarize([2013, 2014, 2015], data_dir=Path("data"))
    fig = plot_state(22, 2014, data_dir=Path("data"),
                     output_path=Path("state_22_2014.html"))
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import pandas as pd
import plotly.graph_objects as go

from ..analysis.states import coordinate_bounds, sanitize_coordinates, select_state
from ..analysis.summary import summarize_extracts
from ..analysis.values import StateCode, Year
from ..data import reader
from ..plotting.state_map import plot_state_map

log = logging.getLogger(__name__)

PathLike = Union[str, Path]

_NOTHING_TO_PLOT = "no accidents to plot"


# ---------------------------------------------------------------------------
# Monthly summary
# ---------------------------------------------------------------------------

def summarize(
    years: Union[Any, Iterable[Any]],
    data_dir: Optional[PathLike] = None,
) -> pd.DataFrame:
    """
    Month-by-year accident counts for the requested years.

    Years whose file cannot be loaded are reported as warnings and left out
    of the table.

    Args:
        years: One year or an iterable of years (integer-like values).
        data_dir: Directory containing ``accident_<YEAR>.csv.bz2`` files.

    Returns:
        DataFrame indexed by ``MONTH`` with one ``Int64`` column per loaded
        year.  Months with no accidents in a year are ``<NA>``.

    Raises:
        TypeConversionError: If a year is not integer-like.
        EmptyDatasetError: If none of the years could be loaded.
    """
    extracts = reader.extract_year_columns(years, data_dir=data_dir)
    return summarize_extracts(extracts)


def write_summary(table: pd.DataFrame, output_path: PathLike) -> Path:
    """Write a summary table to CSV (``MONTH`` as the first column).

    Returns:
        The path written.
    """
    out_path = Path(output_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    table.to_csv(out_path)
    log.info(f"Summary saved → {out_path}", extra={"path": str(out_path)})
    return out_path


# ---------------------------------------------------------------------------
# State accident map
# ---------------------------------------------------------------------------

def plot_state(
    state_code: Any,
    year: Any,
    data_dir: Optional[PathLike] = None,
    output_path: Optional[PathLike] = None,
) -> Optional[go.Figure]:
    """
    Plot one state's accident locations for one year.

    Steps: load the year's file, validate and filter the STATE code, mask
    sentinel coordinates, then draw the remaining points over the state
    outlines restricted to their bounding range.

    When the state has no rows, or none of its rows has a known location,
    an informational message is logged and nothing is drawn.

    Args:
        state_code: FARS ``STATE`` code (integer-like).
        year: Dataset year (integer-like).
        data_dir: Directory containing the yearly files.
        output_path: When given, the figure is also written there as HTML.

    Returns:
        The Plotly figure, or ``None`` when there was nothing to plot.

    Raises:
        TypeConversionError: If *state_code* or *year* is not integer-like.
        FileNotFoundError: If the year's file does not exist.
        InvalidStateError: If *state_code* does not occur in the file.
    """
    code = StateCode.parse(state_code)
    yr = Year.parse(year)

    data = reader.read_table(reader.build_filename(yr), data_dir=data_dir)
    rows = select_state(data, code)

    context = {"state_code": code.value, "year": yr.value}
    if rows.empty:
        log.info(_NOTHING_TO_PLOT, extra=context)
        return None

    points = sanitize_coordinates(rows)
    bounds = coordinate_bounds(points)
    if bounds is None:
        log.info(_NOTHING_TO_PLOT, extra=context)
        return None

    fig = plot_state_map(points, bounds, metadata=context)

    if output_path is not None:
        out_path = Path(output_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(out_path))
        log.info(f"State map saved → {out_path}", extra={**context, "path": str(out_path)})

    return fig
