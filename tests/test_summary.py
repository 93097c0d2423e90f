import pandas as pd
import pytest

from fars.analysis.summary import EmptyDatasetError, count_by_month, summarize_extracts


def _extract(year, months):
    return pd.DataFrame({"MONTH": months, "year": [year] * len(months)})


def test_counts_per_month_and_year():
    table = summarize_extracts([
        _extract(2013, [1, 1, 2, 3, 3, 3]),
        _extract(2014, [1, 3]),
    ])
    assert list(table.index) == [1, 2, 3]
    assert list(table.columns) == [2013, 2014]
    assert table.loc[1, 2013] == 2
    assert table.loc[3, 2013] == 3
    assert table.loc[1, 2014] == 1


def test_missing_pairs_are_absent_not_zero():
    table = summarize_extracts([
        _extract(2013, [1, 2]),
        _extract(2014, [1]),
    ])
    assert pd.isna(table.loc[2, 2014])
    assert str(table[2014].dtype) == "Int64"


def test_none_entries_are_skipped():
    table = summarize_extracts([None, _extract(2015, [7, 7]), None])
    assert list(table.columns) == [2015]
    assert table.loc[7, 2015] == 2


def test_all_none_raises_empty_dataset():
    with pytest.raises(EmptyDatasetError):
        summarize_extracts([None, None])


def test_no_extracts_raises_empty_dataset():
    with pytest.raises(EmptyDatasetError):
        summarize_extracts([])


def test_month_values_are_not_validated():
    table = summarize_extracts([_extract(2013, [99, 99, 1])])
    assert table.loc[99, 2013] == 2


def test_count_by_month_long_form():
    counts = count_by_month(_extract(2013, [4, 4, 5]))
    assert list(counts.columns) == ["year", "MONTH", "n"]
    assert counts["n"].tolist() == [2, 1]


def test_missing_month_is_counted_not_dropped():
    table = summarize_extracts([_extract(2013, [1, None, 2])])

    assert table[2013].sum() == 3
    assert list(table.index[:2]) == [1, 2]
    assert pd.isna(table.index[-1])
    assert table[2013].iloc[-1] == 1


def test_missing_month_row_is_absent_for_other_years():
    table = summarize_extracts([
        _extract(2013, [1, None]),
        _extract(2014, [1, 1]),
    ])
    assert table[2014].sum() == 2
    assert pd.isna(table[2014].iloc[-1])
