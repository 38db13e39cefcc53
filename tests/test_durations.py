from datetime import timedelta

import pytest

from unitsum.durations import parse_duration
from unitsum.errors import IncompatibleUnitsError, InputFormatError


def test_parse_duration_expressions():
    assert parse_duration("5min") == timedelta(minutes=5)
    assert parse_duration("1d 12h") == timedelta(days=1, hours=12)
    assert parse_duration("  90min -30s ") == timedelta(minutes=89, seconds=30)
    assert parse_duration("250ms") == timedelta(milliseconds=250)


def test_parse_duration_bare_number_is_seconds():
    assert parse_duration("10") == timedelta(seconds=10)
    assert parse_duration("2.5") == timedelta(seconds=2.5)


def test_parse_duration_empty_string():
    with pytest.raises(ValueError):
        parse_duration("   ")


def test_parse_duration_rejects_garbage_and_non_time_units():
    with pytest.raises(InputFormatError):
        parse_duration("not-a-duration")
    with pytest.raises(IncompatibleUnitsError):
        parse_duration("5m")


def test_parse_duration_out_of_timedelta_range():
    with pytest.raises(ValueError) as excinfo:
        parse_duration("9999999999d")
    assert str(excinfo.value) == "Duration out of range: 9999999999d"
