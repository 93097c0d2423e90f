import numpy as np
import pytest

from fars.analysis.values import StateCode, TypeConversionError, Year


@pytest.mark.parametrize("raw", [2013, "2013", " 2013 ", 2013.0, "2013.0", np.int64(2013)])
def test_year_parse_accepts_integer_like(raw):
    assert Year.parse(raw) == Year(2013)
    assert int(Year.parse(raw)) == 2013


def test_year_parse_truncates_fractional_numbers():
    assert Year.parse(2013.9).value == 2013


@pytest.mark.parametrize("raw", ["abc", "", None, True, float("nan"), float("inf"), [2013]])
def test_year_parse_rejects_non_integers(raw):
    with pytest.raises(TypeConversionError):
        Year.parse(raw)


def test_conversion_error_is_both_type_and_value_error():
    with pytest.raises(TypeError):
        Year.parse("abc")
    with pytest.raises(ValueError):
        StateCode.parse("abc")


def test_parse_returns_existing_instance_unchanged():
    year = Year(2015)
    assert Year.parse(year) is year


def test_state_code_str_is_plain_integer():
    assert str(StateCode.parse("22")) == "22"


def test_values_are_immutable():
    year = Year(2013)
    with pytest.raises(AttributeError):
        year.value = 2014
