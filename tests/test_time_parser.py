# tests/test_time_parser.py

import pytest

from csvmarkers.data.models import SkipReason
from csvmarkers.data.time_parser import parse_time_string, try_parse_time_string
from csvmarkers.utils.exceptions import InvalidTimeFormat


@pytest.mark.parametrize("text", ["0", "10", "12.5", "-3.25", "+7", ".5", "5.", "1e2", "  42  "])
def test_plain_decimal_matches_float(text):
    assert parse_time_string(text) == float(text)


def test_hms_with_fractional_seconds():
    assert parse_time_string("01:02:03.5") == 3723.5


def test_hms_whole_seconds():
    assert parse_time_string("00:00:10") == 10


def test_hms_is_trimmed():
    assert parse_time_string("  00:01:00 ") == 60


def test_hms_components_are_not_range_checked():
    assert parse_time_string("00:90:00") == 5400
    assert parse_time_string("-1:00:00") == -3600


@pytest.mark.parametrize("text", ["1:2", "1:30", "01:02:03:04", "abc", "", "   ", "1:2:x", "1.5:00:00", "nan", "inf", "::"])
def test_invalid_formats_raise(text):
    with pytest.raises(InvalidTimeFormat) as exc_info:
        parse_time_string(text)
    assert exc_info.value.text == text


def test_error_message_mentions_original_text():
    with pytest.raises(InvalidTimeFormat, match="abc"):
        parse_time_string("abc")


def test_try_parse_reports_outcome():
    good = try_parse_time_string("00:00:10")
    assert good.ok
    assert good.seconds == 10
    assert good.error is None

    bad = try_parse_time_string("1:2")
    assert not bad.ok
    assert bad.seconds is None
    assert bad.error is SkipReason.INVALID_TIME
    assert bad.text == "1:2"
