"""
FARS State Selection & Coordinate Sanitation (Functional Core)

Pure function – no file I/O, no plotting.
Input: a full-year accident DataFrame.
Output: the rows for one state, with unknown coordinates masked out.

Package Location: src/fars/analysis/states.py

Sentinel Rule:
    FARS encodes an unknown location in-band: ``LONGITUD`` values above 900
    (typically 999.9999) and ``LATITUDE`` values above 90 (typically
    99.9999) are not coordinates.  ``sanitize_coordinates`` replaces them
    with ``NaN`` so every later step treats them as absent.  Nothing
    downstream compares against the sentinel thresholds again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from .values import StateCode

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

STATE_COL: str = "STATE"
LON_COL: str = "LONGITUD"
LAT_COL: str = "LATITUDE"

LONGITUDE_SENTINEL: float = 900.0
LATITUDE_SENTINEL: float = 90.0


class InvalidStateError(ValueError):
    """Raised when a STATE code does not occur in the loaded dataset."""
    pass


@dataclass(frozen=True)
class MapBounds:
    """Bounding range of the plottable coordinates (degrees)."""

    lon_min: float
    lon_max: float
    lat_min: float
    lat_max: float

    def padded(self, margin: float) -> "MapBounds":
        """Return a copy grown by *margin* degrees on every side."""
        return MapBounds(
            lon_min=max(self.lon_min - margin, -180.0),
            lon_max=min(self.lon_max + margin, 180.0),
            lat_min=max(self.lat_min - margin, -90.0),
            lat_max=min(self.lat_max + margin, 90.0),
        )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def select_state(data: pd.DataFrame, state_code: StateCode) -> pd.DataFrame:
    """
    Validate *state_code* against the dataset and return its rows.

    Args:
        data: Full-year accident DataFrame with a ``STATE`` column.
        state_code: Parsed state code.

    Returns:
        Copy of the rows where ``STATE == state_code``.

    Raises:
        InvalidStateError: If the code is not among the distinct ``STATE``
            values of *data*.
    """
    code = int(state_code)
    present = set(data[STATE_COL].dropna().unique().tolist())
    if code not in present:
        raise InvalidStateError(f"invalid STATE number: {code}")
    return data.loc[data[STATE_COL] == code].copy()


def sanitize_coordinates(rows: pd.DataFrame) -> pd.DataFrame:
    """Mask sentinel coordinates as ``NaN``.

    Args:
        rows: DataFrame with ``LONGITUD`` and ``LATITUDE`` columns.

    Returns:
        New two-column DataFrame ``[LONGITUD, LATITUDE]`` (float) sharing
        the index of *rows*.  Sentinel values are ``NaN``.
    """
    lon = pd.to_numeric(rows[LON_COL], errors="coerce").astype(float)
    lat = pd.to_numeric(rows[LAT_COL], errors="coerce").astype(float)
    return pd.DataFrame(
        {
            LON_COL: lon.mask(lon > LONGITUDE_SENTINEL),
            LAT_COL: lat.mask(lat > LATITUDE_SENTINEL),
        },
        index=rows.index,
    )


def complete_points(points: pd.DataFrame) -> pd.DataFrame:
    """Rows of *points* where both longitude and latitude are present."""
    return points.dropna(subset=[LON_COL, LAT_COL])


def coordinate_bounds(points: pd.DataFrame) -> Optional[MapBounds]:
    """
    Compute the bounding range of the non-absent coordinates.

    Longitude and latitude ranges are taken independently, so a row with a
    known longitude but an unknown latitude still widens the longitude range.

    Args:
        points: Output of ``sanitize_coordinates``.

    Returns:
        ``MapBounds``, or ``None`` when either axis has no known value.
    """
    lon = points[LON_COL].to_numpy(dtype=float)
    lat = points[LAT_COL].to_numpy(dtype=float)
    lon = lon[np.isfinite(lon)]
    lat = lat[np.isfinite(lat)]
    if lon.size == 0 or lat.size == 0:
        return None
    return MapBounds(
        lon_min=float(lon.min()),
        lon_max=float(lon.max()),
        lat_min=float(lat.min()),
        lat_max=float(lat.max()),
    )
