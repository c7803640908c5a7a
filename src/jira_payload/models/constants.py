"""
Constants and default values for payload construction.

This module centralizes the messages, formats and wire keys used when
encoding custom fields and building update operations, providing a
single source of truth for the vocabulary shared by the models and
the payload builders.
"""

#
# Common defaults
#
EMPTY_STRING = ""
CUSTOM_FIELD_PREFIX = "customfield_"

#
# Wire keys
#
FIELDS_KEY = "fields"
UPDATE_KEY = "update"
TRANSITION_KEY = "transition"
BULK_ISSUES_KEY = "issueUpdates"

#
# Date/Time formats
#
DATE_FORMAT = "%Y-%m-%d"
COMPACT_DATE_FORMAT = "%Y%m%d"

#
# Update operation verbs
#
OPERATION_SET = "set"
OPERATION_ADD = "add"
OPERATION_REMOVE = "remove"
OPERATION_EDIT = "edit"
OPERATION_COPY = "copy"

KNOWN_OPERATIONS = frozenset(
    {OPERATION_SET, OPERATION_ADD, OPERATION_REMOVE, OPERATION_EDIT, OPERATION_COPY}
)

#
# Validation messages
#
ERR_NO_FIELD_ID = "no field id set"
ERR_NO_FIELD_VALUE = "no field value set"
ERR_NO_CUSTOM_FIELDS = "no custom fields set"
ERR_NO_OPERATIONS = "no update operations set"
ERR_NO_ISSUE = "no issue payload set"
ERR_NO_OPERATION = "no operation verb set"
ERR_NO_OPERATION_VALUE = "no operation value set"
ERR_NO_OPERATION_MAPPING = "no operation mapping set"
ERR_NO_TRANSITION_ID = "no transition id set"
ERR_NO_BULK_ISSUES = "no issues set for bulk creation"
ERR_NO_CASCADING_PARENT = "no cascading parent value set"
ERR_NO_CASCADING_CHILD = "no cascading child value set"
ERR_NO_CHECKBOX = "no check-box type set"
ERR_NO_DATE = "no datepicker type set"
ERR_NO_DATETIME = "no datetime type set"
ERR_NO_GROUP = "no group name set"
ERR_NO_GROUPS = "no groups names set"
ERR_NO_MULTISELECT = "no multiselect type set"
ERR_NO_NUMBER = "no number type set"
ERR_NO_BUTTON = "no button type set"
ERR_NO_SELECT = "no select type set"
ERR_NO_TEXT = "no text type set"
ERR_NO_URL = "no url type set"
ERR_NO_USER = "no user type set"
ERR_NO_USERS = "no multi-user type set"
ERR_NO_FIELDS_INFORMATION = "no fields information found"
ERR_NO_ISSUES_INFORMATION = "no issues information found"
