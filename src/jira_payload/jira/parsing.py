"""Read custom field values from Jira issue and search responses.

The single-issue parsers take an issue response (``{"key": ..., "fields": {...}}``)
and return the typed value of one custom field. The ``*_fields`` variants take a
search response (``{"issues": [...]}``) and return ``{issue_key: value}``,
skipping issues where the field is empty.

Responses may be given as a parsed dict, a JSON string or raw bytes.
"""

import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from ..exceptions import CustomFieldParseError
from ..models.constants import (
    ERR_NO_FIELD_ID,
    ERR_NO_FIELDS_INFORMATION,
    ERR_NO_ISSUES_INFORMATION,
)
from ..models.jira import (
    JiraCascadingSelect,
    JiraCustomFieldOption,
    JiraGroup,
    JiraSprint,
    JiraUser,
    JiraVersion,
)

logger = logging.getLogger("jira-payload.jira")

T = TypeVar("T")

Response = dict[str, Any] | str | bytes


def _load(data: Response) -> dict[str, Any]:
    if isinstance(data, str | bytes | bytearray):
        try:
            data = json.loads(data)
        except ValueError as e:
            raise CustomFieldParseError(f"invalid JSON response: {e}") from e
    if not isinstance(data, dict):
        raise CustomFieldParseError(f"unexpected response type: {type(data).__name__}")
    return data


def _convert(
    field_id: str, value: Any, converter: Callable[[Any], T], kind: str
) -> T:
    try:
        return converter(value)
    except (TypeError, ValueError) as e:
        raise CustomFieldParseError(
            f"custom field '{field_id}' is not a {kind} value", field_id=field_id
        ) from e


def _parse_issue(
    data: Response, field_id: str, converter: Callable[[Any], T], kind: str
) -> T:
    if not field_id:
        raise CustomFieldParseError(ERR_NO_FIELD_ID)

    issue = _load(data)
    fields = issue.get("fields")
    if not isinstance(fields, dict):
        raise CustomFieldParseError(ERR_NO_FIELDS_INFORMATION, field_id=field_id)

    value = fields.get(field_id)
    if value is None:
        raise CustomFieldParseError(
            f"no {kind} value set for custom field '{field_id}'", field_id=field_id
        )
    return _convert(field_id, value, converter, kind)


def _parse_issues(
    data: Response, field_id: str, converter: Callable[[Any], T], kind: str
) -> dict[str, T]:
    if not field_id:
        raise CustomFieldParseError(ERR_NO_FIELD_ID)

    search = _load(data)
    issues = search.get("issues")
    if not isinstance(issues, list):
        raise CustomFieldParseError(ERR_NO_ISSUES_INFORMATION, field_id=field_id)

    values: dict[str, T] = {}
    for issue in issues:
        if not isinstance(issue, dict):
            continue
        key = issue.get("key")
        fields = issue.get("fields")
        if not key or not isinstance(fields, dict):
            logger.debug(f"Skipping issue without key or fields: {issue.get('id')}")
            continue
        value = fields.get(field_id)
        if value is None:
            continue
        values[key] = _convert(field_id, value, converter, kind)
    return values


def _as_list(value: Any) -> list:
    if not isinstance(value, list):
        raise TypeError(f"expected a list, got {type(value).__name__}")
    return value


def _as_dict(value: Any) -> dict:
    if not isinstance(value, dict):
        raise TypeError(f"expected an object, got {type(value).__name__}")
    return value


def _options(value: Any) -> list[JiraCustomFieldOption]:
    return [
        JiraCustomFieldOption.from_api_response(_as_dict(v)) for v in _as_list(value)
    ]


def _option(value: Any) -> JiraCustomFieldOption:
    return JiraCustomFieldOption.from_api_response(_as_dict(value))


def _cascading(value: Any) -> JiraCascadingSelect:
    return JiraCascadingSelect.from_api_response(_as_dict(value))


def _user(value: Any) -> JiraUser:
    return JiraUser.from_api_response(_as_dict(value))


def _users(value: Any) -> list[JiraUser]:
    return [JiraUser.from_api_response(_as_dict(v)) for v in _as_list(value)]


def _groups(value: Any) -> list[JiraGroup]:
    return [JiraGroup.from_api_response(_as_dict(v)) for v in _as_list(value)]


def _versions(value: Any) -> list[JiraVersion]:
    return [JiraVersion.from_api_response(_as_dict(v)) for v in _as_list(value)]


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def _float(value: Any) -> float:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    return float(value)


def _labels(value: Any) -> list[str]:
    return [_string(v) for v in _as_list(value)]


def _sprints(value: Any) -> list[JiraSprint]:
    return [JiraSprint.from_api_response(_as_dict(v)) for v in _as_list(value)]


def parse_multi_select_custom_field(
    data: Response, field_id: str
) -> list[JiraCustomFieldOption]:
    """
    Parse a multi-select or checkbox custom field from an issue response.

    Args:
        data: The issue response
        field_id: The custom field id, e.g. ``customfield_10001``

    Returns:
        The selected options

    Raises:
        CustomFieldParseError: If the response has no ``fields`` object, the
            field is empty, or its value is not a list of options
    """
    return _parse_issue(data, field_id, _options, "multiselect")


def parse_multi_select_custom_fields(
    data: Response, field_id: str
) -> dict[str, list[JiraCustomFieldOption]]:
    """
    Parse a multi-select or checkbox custom field from a search response.

    Args:
        data: The search response with an ``issues`` list
        field_id: The custom field id

    Returns:
        Selected options keyed by issue key
    """
    return _parse_issues(data, field_id, _options, "multiselect")


def parse_select_custom_field(data: Response, field_id: str) -> JiraCustomFieldOption:
    """Parse a single select or radio button custom field from an issue response."""
    return _parse_issue(data, field_id, _option, "select")


def parse_select_custom_fields(
    data: Response, field_id: str
) -> dict[str, JiraCustomFieldOption]:
    """Parse a single select or radio button custom field from a search response."""
    return _parse_issues(data, field_id, _option, "select")


def parse_cascading_select_custom_field(
    data: Response, field_id: str
) -> JiraCascadingSelect:
    """Parse a cascading select custom field from an issue response."""
    return _parse_issue(data, field_id, _cascading, "cascading select")


def parse_cascading_select_custom_fields(
    data: Response, field_id: str
) -> dict[str, JiraCascadingSelect]:
    """Parse a cascading select custom field from a search response."""
    return _parse_issues(data, field_id, _cascading, "cascading select")


def parse_user_custom_field(data: Response, field_id: str) -> JiraUser:
    """Parse a single user picker custom field from an issue response."""
    return _parse_issue(data, field_id, _user, "user")


def parse_user_custom_fields(data: Response, field_id: str) -> dict[str, JiraUser]:
    """Parse a single user picker custom field from a search response."""
    return _parse_issues(data, field_id, _user, "user")


def parse_multi_user_custom_field(data: Response, field_id: str) -> list[JiraUser]:
    """Parse a multi user picker custom field from an issue response."""
    return _parse_issue(data, field_id, _users, "multi-user")


def parse_multi_user_custom_fields(
    data: Response, field_id: str
) -> dict[str, list[JiraUser]]:
    """Parse a multi user picker custom field from a search response."""
    return _parse_issues(data, field_id, _users, "multi-user")


def parse_multi_group_custom_field(data: Response, field_id: str) -> list[JiraGroup]:
    """Parse a multi group picker custom field from an issue response."""
    return _parse_issue(data, field_id, _groups, "multi-group")


def parse_multi_group_custom_fields(
    data: Response, field_id: str
) -> dict[str, list[JiraGroup]]:
    """Parse a multi group picker custom field from a search response."""
    return _parse_issues(data, field_id, _groups, "multi-group")


def parse_multi_version_custom_field(
    data: Response, field_id: str
) -> list[JiraVersion]:
    """Parse a multi version picker custom field from an issue response."""
    return _parse_issue(data, field_id, _versions, "multi-version")


def parse_multi_version_custom_fields(
    data: Response, field_id: str
) -> dict[str, list[JiraVersion]]:
    """Parse a multi version picker custom field from a search response."""
    return _parse_issues(data, field_id, _versions, "multi-version")


def parse_string_custom_field(data: Response, field_id: str) -> str:
    """Parse a text, URL or date custom field as its raw string."""
    return _parse_issue(data, field_id, _string, "string")


def parse_string_custom_fields(data: Response, field_id: str) -> dict[str, str]:
    """Parse a text, URL or date custom field from a search response."""
    return _parse_issues(data, field_id, _string, "string")


def parse_float_custom_field(data: Response, field_id: str) -> float:
    """Parse a number custom field from an issue response."""
    return _parse_issue(data, field_id, _float, "number")


def parse_float_custom_fields(data: Response, field_id: str) -> dict[str, float]:
    """Parse a number custom field from a search response."""
    return _parse_issues(data, field_id, _float, "number")


def parse_label_custom_field(data: Response, field_id: str) -> list[str]:
    """Parse a labels custom field from an issue response."""
    return _parse_issue(data, field_id, _labels, "labels")


def parse_label_custom_fields(data: Response, field_id: str) -> dict[str, list[str]]:
    """Parse a labels custom field from a search response."""
    return _parse_issues(data, field_id, _labels, "labels")


def parse_sprint_custom_field(data: Response, field_id: str) -> list[JiraSprint]:
    """Parse the sprint custom field from an issue response."""
    return _parse_issue(data, field_id, _sprints, "sprint")


def parse_sprint_custom_fields(
    data: Response, field_id: str
) -> dict[str, list[JiraSprint]]:
    """Parse the sprint custom field from a search response."""
    return _parse_issues(data, field_id, _sprints, "sprint")
