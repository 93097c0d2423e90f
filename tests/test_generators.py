import logging

import pandas as pd
import pytest

from fars.analysis.states import InvalidStateError
from fars.analysis.summary import EmptyDatasetError
from fars.analysis.values import TypeConversionError
from fars.reports.generators import plot_state, summarize, write_summary


# ---------------------------------------------------------------------------
# summarize
# ---------------------------------------------------------------------------

def test_summarize_single_year(data_dir, fars_frames):
    table = summarize([2013], data_dir=data_dir)

    assert list(table.index) == list(range(1, 13))
    assert list(table.columns) == [2013]
    assert table[2013].sum() == len(fars_frames[2013])
    # January: one accident from the month loop plus the two STATE 5 rows.
    assert table.loc[1, 2013] == 3


def test_summarize_multiple_years_leaves_gaps_absent(data_dir):
    table = summarize([2013, 2014], data_dir=data_dir)

    assert list(table.columns) == [2013, 2014]
    assert table.loc[6, 2014] == 2
    assert table.loc[7:12, 2014].isna().all()


def test_summarize_skips_missing_year_with_warning(data_dir, caplog):
    caplog.set_level(logging.WARNING, logger="fars")
    table = summarize([2014, 2016], data_dir=data_dir)

    assert list(table.columns) == [2014]
    assert "invalid year: 2016" in caplog.text


def test_summarize_all_years_invalid_raises(data_dir):
    with pytest.raises(EmptyDatasetError):
        summarize([2016], data_dir=data_dir)


def test_summarize_non_numeric_years_raise(data_dir):
    with pytest.raises(TypeConversionError):
        summarize("abc", data_dir=data_dir)


def test_write_summary_csv(tmp_path, data_dir):
    table = summarize([2013, 2014], data_dir=data_dir)
    out = write_summary(table, tmp_path / "out" / "summary.csv")

    written = pd.read_csv(out)
    assert list(written.columns) == ["MONTH", "2013", "2014"]
    assert len(written) == 12


# ---------------------------------------------------------------------------
# plot_state
# ---------------------------------------------------------------------------

def test_plot_state_draws_known_locations(data_dir, fars_frames):
    df = fars_frames[2013]
    expected = df[(df["STATE"] == 1) & (df["LONGITUD"] < 900) & (df["LATITUDE"] < 90)]

    fig = plot_state(1, 2013, data_dir=data_dir)

    assert fig is not None
    trace = fig.data[0]
    assert len(trace.lon) == len(expected)
    assert max(trace.lon) < 900
    assert max(trace.lat) <= 90


def test_plot_state_accepts_string_arguments(data_dir):
    assert plot_state("22", "2013", data_dir=data_dir) is not None


def test_plot_state_writes_html(tmp_path, data_dir):
    out = tmp_path / "maps" / "state_22_2013.html"
    plot_state(22, 2013, data_dir=data_dir, output_path=out)
    assert out.exists()
    assert "scattergeo" in out.read_text(encoding="utf-8")


def test_plot_state_unknown_state_raises(data_dir):
    with pytest.raises(InvalidStateError, match="52"):
        plot_state(52, 2013, data_dir=data_dir)


def test_plot_state_missing_year_raises(data_dir):
    with pytest.raises(FileNotFoundError):
        plot_state(1, 2016, data_dir=data_dir)


def test_plot_state_bad_state_code_raises(data_dir):
    with pytest.raises(TypeConversionError):
        plot_state("alabama", 2013, data_dir=data_dir)


def test_plot_state_without_known_locations_is_a_no_op(tmp_path, data_dir, caplog):
    caplog.set_level(logging.INFO, logger="fars")
    out = tmp_path / "state_5.html"

    result = plot_state(5, 2013, data_dir=data_dir, output_path=out)

    assert result is None
    assert not out.exists()
    assert "no accidents to plot" in caplog.text


def test_summarize_counts_rows_without_month(tmp_path):
    pd.DataFrame({
        "STATE": [1, 1, 1],
        "MONTH": [1, None, 2],
        "LONGITUD": [-86.0, -86.1, -86.2],
        "LATITUDE": [32.0, 32.1, 32.2],
    }).to_csv(tmp_path / "accident_2013.csv.bz2", index=False)

    table = summarize([2013], data_dir=tmp_path)

    assert table[2013].sum() == 3
    assert list(table.index[:2]) == [1, 2]
