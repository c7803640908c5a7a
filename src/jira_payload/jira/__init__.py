"""Jira payload construction for jira_payload.

This package encodes custom field values, collects update operations and
merges both into issue request bodies, and reads custom field values back
from issue and search responses.
"""

# flake8: noqa

from .custom_fields import CustomFieldCollection
from .encoders import (
    encode_cascading_select,
    encode_checkbox,
    encode_date,
    encode_datetime,
    encode_group,
    encode_groups,
    encode_multi_select,
    encode_number,
    encode_radio_button,
    encode_select,
    encode_text,
    encode_url,
    encode_user,
    encode_users,
)
from .operations import UpdateOperationCollection
from .parsing import (
    parse_multi_select_custom_field,
    parse_multi_select_custom_fields,
    parse_select_custom_field,
    parse_select_custom_fields,
    parse_cascading_select_custom_field,
    parse_cascading_select_custom_fields,
    parse_user_custom_field,
    parse_user_custom_fields,
    parse_multi_user_custom_field,
    parse_multi_user_custom_fields,
    parse_multi_group_custom_field,
    parse_multi_group_custom_fields,
    parse_multi_version_custom_field,
    parse_multi_version_custom_fields,
    parse_string_custom_field,
    parse_string_custom_fields,
    parse_float_custom_field,
    parse_float_custom_fields,
    parse_label_custom_field,
    parse_label_custom_fields,
    parse_sprint_custom_field,
    parse_sprint_custom_fields,
)
from .payloads import (
    build_bulk_create_payload,
    build_create_payload,
    build_edit_payload,
    build_transition_payload,
    merge_custom_fields,
    merge_operations,
    to_map,
)

__all__ = [
    "CustomFieldCollection",
    "UpdateOperationCollection",
    "to_map",
    "merge_custom_fields",
    "merge_operations",
    "build_create_payload",
    "build_bulk_create_payload",
    "build_edit_payload",
    "build_transition_payload",
    "encode_cascading_select",
    "encode_checkbox",
    "encode_date",
    "encode_datetime",
    "encode_group",
    "encode_groups",
    "encode_multi_select",
    "encode_number",
    "encode_radio_button",
    "encode_select",
    "encode_text",
    "encode_url",
    "encode_user",
    "encode_users",
    "parse_multi_select_custom_field",
    "parse_multi_select_custom_fields",
    "parse_select_custom_field",
    "parse_select_custom_fields",
    "parse_cascading_select_custom_field",
    "parse_cascading_select_custom_fields",
    "parse_user_custom_field",
    "parse_user_custom_fields",
    "parse_multi_user_custom_field",
    "parse_multi_user_custom_fields",
    "parse_multi_group_custom_field",
    "parse_multi_group_custom_fields",
    "parse_multi_version_custom_field",
    "parse_multi_version_custom_fields",
    "parse_string_custom_field",
    "parse_string_custom_fields",
    "parse_float_custom_field",
    "parse_float_custom_fields",
    "parse_label_custom_field",
    "parse_label_custom_fields",
    "parse_sprint_custom_field",
    "parse_sprint_custom_fields",
]
