"""Encoders for Jira custom field values.

Each Jira custom field kind expects its own JSON shape on create and edit
requests. The functions in this module validate a field id plus a typed value
and return the exact fragment Jira expects for that kind. They never return a
partial fragment: any missing required input raises PayloadValidationError.
"""

import logging
import math
from collections.abc import Sequence
from datetime import date, datetime
from typing import Any

from ..exceptions import PayloadValidationError
from ..models.constants import (
    COMPACT_DATE_FORMAT,
    DATE_FORMAT,
    ERR_NO_BUTTON,
    ERR_NO_CASCADING_CHILD,
    ERR_NO_CASCADING_PARENT,
    ERR_NO_CHECKBOX,
    ERR_NO_DATE,
    ERR_NO_DATETIME,
    ERR_NO_FIELD_ID,
    ERR_NO_GROUP,
    ERR_NO_GROUPS,
    ERR_NO_MULTISELECT,
    ERR_NO_NUMBER,
    ERR_NO_SELECT,
    ERR_NO_TEXT,
    ERR_NO_URL,
    ERR_NO_USER,
    ERR_NO_USERS,
)
from ..utils.date import format_rfc3339, is_zero_date, parse_date

logger = logging.getLogger("jira-payload.jira")

DateInput = date | datetime | str | int | None


def require_field_id(field_id: str) -> None:
    """Raise if the custom field id is empty."""
    if not field_id or not isinstance(field_id, str):
        raise PayloadValidationError(ERR_NO_FIELD_ID)


def _require_value(field_id: str, value: str, message: str) -> str:
    if not value or not isinstance(value, str):
        raise PayloadValidationError(message, field_id=field_id)
    return value


def _require_values(field_id: str, values: Sequence[str], message: str) -> list[str]:
    # A bare string is a sequence too, reject it instead of splitting characters
    if not values or isinstance(values, str):
        raise PayloadValidationError(message, field_id=field_id)
    items = list(values)
    if any(not item or not isinstance(item, str) for item in items):
        raise PayloadValidationError(message, field_id=field_id)
    return items


def _parse_date_string(value: str) -> datetime | None:
    # Epoch milliseconds are only taken as ints; a digit string is a basic
    # ISO 8601 date (YYYYMMDD) or nothing
    if value.isdigit():
        if len(value) != len("YYYYMMDD"):
            raise ValueError(f"ambiguous numeric date string {value!r}")
        return datetime.strptime(value, COMPACT_DATE_FORMAT)
    return parse_date(value)


def _coerce_datetime(field_id: str, value: DateInput, message: str) -> datetime | date:
    if isinstance(value, str | int) and not isinstance(value, bool):
        try:
            if isinstance(value, str):
                value = _parse_date_string(value)
            else:
                value = parse_date(value)
        except (ValueError, OverflowError, OSError) as e:
            raise PayloadValidationError(
                f"{message}: could not parse {value!r}", field_id=field_id
            ) from e
    if not isinstance(value, date) or is_zero_date(value):
        raise PayloadValidationError(message, field_id=field_id)
    return value


def encode_cascading_select(field_id: str, parent: str, child: str) -> dict[str, Any]:
    """
    Encode a cascading select (parent option plus child option).

    Args:
        field_id: The custom field id, e.g. ``customfield_10043``
        parent: The parent option value
        child: The child option value

    Returns:
        ``{"value": parent, "child": {"value": child}}``
    """
    require_field_id(field_id)
    _require_value(field_id, parent, ERR_NO_CASCADING_PARENT)
    _require_value(field_id, child, ERR_NO_CASCADING_CHILD)
    return {"value": parent, "child": {"value": child}}


def encode_checkbox(field_id: str, options: Sequence[str]) -> list[dict[str, str]]:
    """Encode a checkbox field as a list of option objects."""
    require_field_id(field_id)
    items = _require_values(field_id, options, ERR_NO_CHECKBOX)
    return [{"value": option} for option in items]


def encode_multi_select(field_id: str, options: Sequence[str]) -> list[dict[str, str]]:
    """Encode a multi-select field as a list of option objects."""
    require_field_id(field_id)
    items = _require_values(field_id, options, ERR_NO_MULTISELECT)
    return [{"value": option} for option in items]


def encode_date(field_id: str, value: DateInput) -> str:
    """
    Encode a date picker field as ``YYYY-MM-DD``.

    Args:
        field_id: The custom field id
        value: A date, a datetime (its date part is used), a string
            parseable by dateutil or ``YYYYMMDD``, or epoch milliseconds
            as an int

    Returns:
        The ISO date string
    """
    require_field_id(field_id)
    parsed = _coerce_datetime(field_id, value, ERR_NO_DATE)
    return parsed.strftime(DATE_FORMAT)


def encode_datetime(field_id: str, value: DateInput) -> str:
    """
    Encode a date-time picker field as an RFC 3339 timestamp.

    A plain date is taken as midnight UTC.

    Args:
        field_id: The custom field id
        value: A datetime, a date or a parseable string

    Returns:
        The RFC 3339 timestamp string
    """
    require_field_id(field_id)
    parsed = _coerce_datetime(field_id, value, ERR_NO_DATETIME)
    if not isinstance(parsed, datetime):
        parsed = datetime(parsed.year, parsed.month, parsed.day)
    return format_rfc3339(parsed)


def encode_group(field_id: str, group: str) -> dict[str, str]:
    """Encode a single group picker field."""
    require_field_id(field_id)
    _require_value(field_id, group, ERR_NO_GROUP)
    return {"name": group}


def encode_groups(field_id: str, groups: Sequence[str]) -> list[dict[str, str]]:
    """Encode a multi group picker field."""
    require_field_id(field_id)
    items = _require_values(field_id, groups, ERR_NO_GROUPS)
    return [{"name": group} for group in items]


def encode_number(field_id: str, value: int | float) -> int | float:
    """
    Encode a number field. Zero is a legal value.

    Args:
        field_id: The custom field id
        value: The numeric value

    Returns:
        The bare number
    """
    require_field_id(field_id)
    # bool is an int subclass but Jira would receive true/false
    if value is None or isinstance(value, bool) or not isinstance(value, int | float):
        raise PayloadValidationError(ERR_NO_NUMBER, field_id=field_id)
    # NaN and infinity have no JSON representation
    if not math.isfinite(value):
        raise PayloadValidationError(ERR_NO_NUMBER, field_id=field_id)
    return value


def encode_radio_button(field_id: str, button: str) -> dict[str, str]:
    """Encode a radio button field."""
    require_field_id(field_id)
    _require_value(field_id, button, ERR_NO_BUTTON)
    return {"value": button}


def encode_select(field_id: str, option: str) -> dict[str, str]:
    """Encode a single select list field."""
    require_field_id(field_id)
    _require_value(field_id, option, ERR_NO_SELECT)
    return {"value": option}


def encode_text(field_id: str, text: str) -> str:
    """Encode a single or multi line text field."""
    require_field_id(field_id)
    return _require_value(field_id, text, ERR_NO_TEXT)


def encode_url(field_id: str, url: str) -> str:
    """Encode a URL field."""
    require_field_id(field_id)
    return _require_value(field_id, url, ERR_NO_URL)


def encode_user(field_id: str, account_id: str) -> dict[str, str]:
    """Encode a single user picker field by account id."""
    require_field_id(field_id)
    _require_value(field_id, account_id, ERR_NO_USER)
    return {"accountId": account_id}


def encode_users(field_id: str, account_ids: Sequence[str]) -> list[dict[str, str]]:
    """Encode a multi user picker field by account ids."""
    require_field_id(field_id)
    items = _require_values(field_id, account_ids, ERR_NO_USERS)
    return [{"accountId": account_id} for account_id in items]
