"""
FARS Reports Package (Imperative Shell)

Orchestrates data fetching, summarising, plot generation, and file output.
No analysis logic lives here — this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    generators: ``summarize`` / ``write_summary`` for month-by-year counts
                and ``plot_state`` for single-state accident maps.
"""

from .generators import (
    summarize,
    write_summary,
    plot_state,
)

__all__ = [
    'summarize',
    'write_summary',
    'plot_state',
]
