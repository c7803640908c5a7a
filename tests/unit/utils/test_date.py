"Tests for the date utility functions."

from datetime import date, datetime, timedelta, timezone

import pytest

from jira_payload.utils.date import format_rfc3339, is_zero_date, parse_date


def test_parse_date_empty_input():
    """Test that empty input yields None."""
    assert parse_date("") is None
    assert parse_date(None) is None


def test_parse_date_invalid_input():
    """Test that unparseable strings raise."""
    with pytest.raises(ValueError):
        parse_date("invalid")


def test_parse_date_epoch():
    """Test epoch milliseconds as str and int."""
    assert str(parse_date("1612156800000")) == "2021-02-01 05:20:00+00:00"
    assert str(parse_date(1612156800000)) == "2021-02-01 05:20:00+00:00"


def test_parse_date_iso8601():
    """Test that parse_date returns the correct date for ISO 8601."""
    assert str(parse_date("2021-01-01T00:00:00Z")) == "2021-01-01 00:00:00+00:00"


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, True),
        (date.min, True),
        (datetime.min, True),
        (datetime.min.replace(tzinfo=timezone.utc), True),
        (date(2024, 3, 1), False),
        (datetime(2024, 3, 1, 10), False),
    ],
)
def test_is_zero_date(value, expected):
    assert is_zero_date(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (datetime(2024, 3, 1, 10, 30, tzinfo=timezone.utc), "2024-03-01T10:30:00Z"),
        (datetime(2024, 3, 1, 10, 30), "2024-03-01T10:30:00Z"),
        (
            datetime(2024, 3, 1, 10, 30, tzinfo=timezone(timedelta(hours=5, minutes=30))),
            "2024-03-01T10:30:00+05:30",
        ),
    ],
)
def test_format_rfc3339(value, expected):
    assert format_rfc3339(value) == expected
