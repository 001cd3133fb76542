from datetime import datetime, timezone

import pytest

from starprompt.clock import (
    InvalidOffsetError,
    create_offset_time_string,
    current_time_string,
    format_time,
)

FMT_12 = "%r"
FMT_24 = "%T"

UTC_TIME = datetime(2014, 7, 8, 15, 36, 47, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("hms", "fmt", "expected"),
    [
        ((0, 0, 0), FMT_12, "12:00:00 AM"),
        ((0, 0, 0), FMT_24, "00:00:00"),
        ((12, 0, 0), FMT_12, "12:00:00 PM"),
        ((12, 0, 0), FMT_24, "12:00:00"),
        ((15, 36, 47), FMT_12, "03:36:47 PM"),
        ((15, 36, 47), FMT_24, "15:36:47"),
        ((15, 36, 47), "[%T]", "[15:36:47]"),
    ],
)
def test_format_local_time(hms, fmt, expected):
    time = datetime(2014, 7, 8, *hms)
    assert format_time(fmt, time) == expected


@pytest.mark.parametrize(
    ("hms", "fmt", "expected"),
    [
        ((0, 0, 0), FMT_12, "12:00:00 AM"),
        ((0, 0, 0), FMT_24, "00:00:00"),
        ((12, 0, 0), FMT_12, "12:00:00 PM"),
        ((12, 0, 0), FMT_24, "12:00:00"),
        ((15, 36, 47), FMT_12, "03:36:47 PM"),
        ((15, 36, 47), FMT_24, "15:36:47"),
        ((15, 36, 47), "[%T]", "[15:36:47]"),
    ],
)
def test_format_fixed_offset_time(hms, fmt, expected):
    time = datetime(2014, 7, 8, *hms, tzinfo=timezone.utc)
    assert format_time(fmt, time) == expected


@pytest.mark.parametrize(
    ("offset", "expected"),
    [
        ("-3", "12:36:47 PM"),
        ("+5", "08:36:47 PM"),
        ("+9.5", "01:06:47 AM"),
        ("+5.75", "09:21:47 PM"),
    ],
)
def test_create_offset_time_string(offset, expected):
    assert create_offset_time_string(UTC_TIME, offset, FMT_12) == expected


@pytest.mark.parametrize(
    "offset", ["+24", "-24", "+9001", "-4242", "completely wrong config"]
)
def test_create_offset_time_string_rejects_invalid_offsets(offset):
    with pytest.raises(InvalidOffsetError):
        create_offset_time_string(UTC_TIME, offset, FMT_12)


def test_invalid_offset_is_a_value_error():
    with pytest.raises(ValueError):
        create_offset_time_string(UTC_TIME, "nan", FMT_12)


def test_current_time_string_without_directives():
    assert current_time_string("+0", "[fixed]") == "[fixed]"


def test_current_time_string_falls_back_to_local():
    assert current_time_string("completely wrong config", "at") == "at"


def test_current_time_string_local_shape():
    result = current_time_string("local", FMT_24)
    assert len(result) == 8
    assert result[2] == ":" and result[5] == ":"