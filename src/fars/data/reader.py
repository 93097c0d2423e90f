"""
FARS Data Reader (Imperative Shell)

File access for the yearly FARS accident extracts.  Everything that touches
the disk lives here; the summary and state-map logic in ``fars.analysis``
only ever sees DataFrames.

Package Location: src/fars/data/reader.py

File convention:
    One file per year, named ``accident_<YEAR>.csv.bz2``.  Files are CSV,
    usually bzip2-compressed; pandas infers the codec from the extension so
    ``.gz`` / ``.zip`` / ``.xz`` / plain ``.csv`` paths are read as well.

Base directory:
    Filenames are resolved against an explicit ``data_dir`` argument.  When
    it is ``None`` the path is used as given (relative to the process working
    directory), which is only a fallback for interactive use.

Error isolation:
    ``load_years`` is the only place where a load failure is caught.  Each
    year gets a ``YearLoad`` result; ``extract_year_columns`` logs one
    warning per failed year and leaves a ``None`` in that year's slot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

import pandas as pd

from ..analysis.values import Year
from ..analysis.summary import MONTH_COL, YEAR_COL

log = logging.getLogger(__name__)

PathLike = Union[str, Path]

# ---------------------------------------------------------------------------
# Dataset constants
# ---------------------------------------------------------------------------

FILENAME_TEMPLATE: str = "accident_%d.csv.bz2"

# Columns kept by the yearly extractor, in output order.
_EXTRACT_COLUMNS: List[str] = [MONTH_COL, YEAR_COL]

# Failures that are isolated per year inside a batch.  OSError covers a
# missing or unreadable file; pandas parser errors and decode errors are
# ValueError subclasses; KeyError is a file without a MONTH column; EOFError
# is a truncated bz2 stream.  Keep this narrower than "any error":
# anything else (a bug in this package, MemoryError, KeyboardInterrupt)
# must propagate rather than become an "invalid year" warning.
_LOAD_ERRORS = (OSError, ValueError, KeyError, EOFError)


@dataclass(frozen=True)
class YearLoad:
    """Outcome of loading one year's extract.

    Exactly one of ``frame`` / ``error`` is set.
    """

    year: Year
    frame: Optional[pd.DataFrame] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.frame is not None


# ---------------------------------------------------------------------------
# Public API – single files
# ---------------------------------------------------------------------------

def read_table(path: PathLike, data_dir: Optional[PathLike] = None) -> pd.DataFrame:
    """
    Load a (possibly compressed) CSV file into a DataFrame.

    Args:
        path: File path.  Relative paths are resolved against *data_dir*
            when one is given.
        data_dir: Optional base directory for relative *path* values.

    Returns:
        DataFrame with one row per data row of the file and column dtypes
        inferred by pandas.

    Raises:
        FileNotFoundError: If the resolved path does not exist.
    """
    file_path = _resolve(path, data_dir)
    if not file_path.exists():
        raise FileNotFoundError(f"file '{file_path}' does not exist")

    df = pd.read_csv(file_path, low_memory=False)
    log.debug(
        f"Read {len(df)} rows from {file_path.name}",
        extra={"path": str(file_path), "rows": len(df)},
    )
    return df


def build_filename(year: Any) -> str:
    """Return the dataset filename for *year*.

    Example::

        >>> build_filename(2013)
        'accident_2013.csv.bz2'

    Raises:
        TypeConversionError: If *year* is not integer-like.
    """
    return FILENAME_TEMPLATE % Year.parse(year).value


# ---------------------------------------------------------------------------
# Public API – year batches
# ---------------------------------------------------------------------------

def load_years(
    years: Union[Any, Iterable[Any]],
    data_dir: Optional[PathLike] = None,
) -> List[YearLoad]:
    """
    Load the ``MONTH``/``year`` extract for every requested year.

    Years are processed sequentially in input order.  A year whose file is
    missing or unreadable yields a ``YearLoad`` carrying the error instead
    of a frame; the remaining years are unaffected.

    Args:
        years: One year or an iterable of years (any integer-like values).
        data_dir: Directory containing the ``accident_<YEAR>.csv.bz2`` files.

    Returns:
        One ``YearLoad`` per input year, in input order.

    Raises:
        TypeConversionError: If any year is not integer-like.  Coercion is
            not part of the per-year isolation.
    """
    results: List[YearLoad] = []
    for raw in _as_year_list(years):
        year = Year.parse(raw)
        filename = build_filename(year)
        try:
            frame = read_table(filename, data_dir=data_dir)
            frame = frame.assign(**{YEAR_COL: year.value})[_EXTRACT_COLUMNS]
        except _LOAD_ERRORS as exc:
            results.append(YearLoad(year=year, error=exc))
            continue
        results.append(YearLoad(year=year, frame=frame))
    return results


def extract_year_columns(
    years: Union[Any, Iterable[Any]],
    data_dir: Optional[PathLike] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    Per-year ``[MONTH, year]`` frames, with ``None`` for years that failed.

    Every failed year is reported as a warning (``invalid year: <year>``)
    before the result is returned.

    Args:
        years: One year or an iterable of years.
        data_dir: Directory containing the yearly files.

    Returns:
        List aligned with *years*: a two-column DataFrame or ``None``.
    """
    loads = load_years(years, data_dir=data_dir)
    report_load_errors(loads)
    return [load.frame for load in loads]


def report_load_errors(loads: Iterable[YearLoad]) -> int:
    """Log one warning per failed ``YearLoad``.

    Returns:
        Number of failed loads.
    """
    failed = 0
    for load in loads:
        if load.ok:
            continue
        failed += 1
        log.warning(
            f"invalid year: {load.year}",
            extra={"year": load.year.value, "error": str(load.error)},
        )
    return failed


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _resolve(path: PathLike, data_dir: Optional[PathLike]) -> Path:
    file_path = Path(path)
    if data_dir is not None and not file_path.is_absolute():
        file_path = Path(data_dir) / file_path
    return file_path


def _as_year_list(years: Union[Any, Iterable[Any]]) -> List[Any]:
    # A bare string is one year, not an iterable of characters.
    if isinstance(years, (str, bytes, Year)) or not isinstance(years, Iterable):
        return [years]
    return list(years)
