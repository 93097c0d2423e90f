"""Shared fixtures: small synthetic FARS extracts written as .csv.bz2 files."""

import logging
from typing import Dict, List

import pandas as pd
import pytest

SENTINEL_LON = 999.9999
SENTINEL_LAT = 99.9999


def _rows_2013() -> List[dict]:
    """Month m has m accidents, alternating STATE 1 / STATE 22.

    Two extra STATE 5 accidents in January have no known location, one
    STATE 1 row has an unknown longitude and one STATE 22 row an unknown
    latitude.
    """
    rows = []
    case = 10000
    for month in range(1, 13):
        for i in range(month):
            state = 1 if i % 2 == 0 else 22
            if state == 1:
                lon, lat = -86.5 - i * 0.1, 32.5 + i * 0.1
            else:
                lon, lat = -91.0 - i * 0.1, 30.5 + i * 0.1
            if month == 12 and i == 0:
                lon = SENTINEL_LON
            if month == 11 and i == 1:
                lat = SENTINEL_LAT
            case += 1
            rows.append({
                "ST_CASE": case, "STATE": state, "MONTH": month,
                "LONGITUD": lon, "LATITUDE": lat, "year": 1900,
            })
    for _ in range(2):
        case += 1
        rows.append({
            "ST_CASE": case, "STATE": 5, "MONTH": 1,
            "LONGITUD": SENTINEL_LON, "LATITUDE": SENTINEL_LAT, "year": 1900,
        })
    return rows


def _rows_2014() -> List[dict]:
    """January to June only, two STATE 1 accidents per month."""
    rows = []
    case = 20000
    for month in range(1, 7):
        for i in range(2):
            case += 1
            rows.append({
                "ST_CASE": case, "STATE": 1, "MONTH": month,
                "LONGITUD": -87.0 + i * 0.2, "LATITUDE": 33.0 + i * 0.2,
            })
    return rows


@pytest.fixture
def fars_frames() -> Dict[int, pd.DataFrame]:
    return {
        2013: pd.DataFrame(_rows_2013()),
        2014: pd.DataFrame(_rows_2014()),
    }


@pytest.fixture
def data_dir(tmp_path, fars_frames):
    """Directory holding accident_2013.csv.bz2 and accident_2014.csv.bz2."""
    for year, frame in fars_frames.items():
        frame.to_csv(tmp_path / f"accident_{year}.csv.bz2", index=False)
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_fars_logger():
    """Undo any handler/level changes the CLI makes to the ``fars`` logger."""
    logger = logging.getLogger("fars")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
