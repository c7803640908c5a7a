"""Utility functions for date operations."""

import logging
from datetime import date, datetime, timezone

import dateutil.parser

logger = logging.getLogger("jira-payload")


def parse_date(date_str: str | int | None) -> datetime | None:
    """
    Parse a date string from any format to a datetime object for type consistency.

    The input string `date_str` accepts:
    - None
    - Epoch timestamp (only contains digits and is in milliseconds)
    - Other formats supported by `dateutil.parser` (ISO 8601, RFC 3339, etc.)

    Args:
        date_str: Date string

    Returns:
        Parsed date string or None if date_str is None / empty string

    Raises:
        ValueError: If the string cannot be parsed as a date
    """

    if not date_str:
        return None
    if isinstance(date_str, int) or date_str.isdigit():
        return datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
    return dateutil.parser.parse(date_str)


def is_zero_date(value: date | datetime | None) -> bool:
    """Check whether a date is unset or the minimum representable value."""
    if value is None:
        return True
    if isinstance(value, datetime):
        return value.replace(tzinfo=None) == datetime.min
    return value == date.min


def format_rfc3339(value: datetime) -> str:
    """
    Format a datetime as an RFC 3339 timestamp with second precision.

    Naive datetimes are treated as UTC; a UTC offset is written as ``Z``.

    Args:
        value: The datetime to format

    Returns:
        A string such as ``2024-03-01T10:30:00Z`` or ``2024-03-01T10:30:00-03:00``
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    formatted = value.isoformat(timespec="seconds")
    if formatted.endswith("+00:00"):
        formatted = formatted[: -len("+00:00")] + "Z"
    return formatted
