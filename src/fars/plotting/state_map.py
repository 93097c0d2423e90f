"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: sanitized coordinate DataFrame + bounding range.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Map layout:
    A ``Scattergeo`` trace on a Mercator projection with US state outlines
    (``showsubunits``) drawn.  The visible window is the bounding range of
    the known coordinates plus a small margin, so the state of interest
    fills the frame and its neighbours are clipped at the edges.  Each
    accident is a small dot; rows with an unknown longitude or latitude
    are not drawn.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import pandas as pd
import plotly.graph_objects as go

from ..analysis.states import LAT_COL, LON_COL, MapBounds, complete_points

# ---------------------------------------------------------------------------
# Layout constants
# ---------------------------------------------------------------------------

# Degrees added around the data range so edge points are not on the frame.
_MAP_MARGIN = 0.5

_POINT_COLOR = "#222222"
_POINT_SIZE = 3

_OUTLINE_COLOR = "#555555"
_LAND_COLOR = "#f7f7f7"

_FIG_HEIGHT = 650


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    points: pd.DataFrame,
    bounds: MapBounds,
    metadata: Optional[Dict[str, Any]] = None,
) -> go.Figure:
    """
    Build a map of accident locations within *bounds*.

    Args:
        points: DataFrame with ``LONGITUD`` / ``LATITUDE`` float columns, as
            returned by ``fars.analysis.states.sanitize_coordinates``.
            ``NaN`` marks an unknown value.
        bounds: Bounding range of the known coordinates.
        metadata: Optional labels for the title: ``state_code`` and
            ``year``.

    Returns:
        Plotly figure with a single ``Scattergeo`` trace named
        ``"Accidents"``.  The trace holds one marker per row of *points*
        that has both coordinates.
    """
    metadata = metadata or {}
    plotted = complete_points(points)
    window = bounds.padded(_MAP_MARGIN)

    fig = go.Figure(
        go.Scattergeo(
            lon=plotted[LON_COL].tolist(),
            lat=plotted[LAT_COL].tolist(),
            mode="markers",
            name="Accidents",
            marker=dict(size=_POINT_SIZE, color=_POINT_COLOR),
            hovertemplate="Lon: %{lon:.4f}<br>Lat: %{lat:.4f}<extra></extra>",
        )
    )

    fig.update_geos(
        scope="north america",
        projection_type="mercator",
        resolution=50,
        showsubunits=True,
        subunitcolor=_OUTLINE_COLOR,
        showcountries=True,
        countrycolor=_OUTLINE_COLOR,
        showland=True,
        landcolor=_LAND_COLOR,
        lonaxis_range=[window.lon_min, window.lon_max],
        lataxis_range=[window.lat_min, window.lat_max],
    )

    fig.update_layout(
        title=_format_title(metadata, len(plotted)),
        height=_FIG_HEIGHT,
        margin=dict(l=10, r=10, t=60, b=10),
        showlegend=False,
    )
    return fig


def _format_title(metadata: Dict[str, Any], n_points: int) -> str:
    state = metadata.get("state_code")
    year = metadata.get("year")
    parts = ["Fatal Accidents"]
    if state is not None:
        parts.append(f"STATE {state}")
    if year is not None:
        parts.append(str(year))
    return f"{' – '.join(parts)} ({n_points} located)"
