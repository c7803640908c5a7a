"""Merge static issue documents with custom fields and update operations.

The static issue model is flattened into a plain dict first, using the same
keys its own serialization uses, so that tenant specific custom fields and
update operations reduce to dictionary unions. Every function here is pure:
inputs are never mutated and a new document is returned on success.
"""

import logging
from collections.abc import Iterable
from typing import Any

from ..exceptions import FieldCollisionError, PayloadValidationError
from ..models.base import ApiModel
from ..models.constants import (
    BULK_ISSUES_KEY,
    ERR_NO_BULK_ISSUES,
    ERR_NO_CUSTOM_FIELDS,
    ERR_NO_ISSUE,
    ERR_NO_OPERATIONS,
    ERR_NO_TRANSITION_ID,
    FIELDS_KEY,
    TRANSITION_KEY,
    UPDATE_KEY,
)
from ..models.jira import JiraIssue
from .custom_fields import CustomFieldCollection
from .operations import UpdateOperationCollection

logger = logging.getLogger("jira-payload.jira")

BulkEntry = JiraIssue | tuple[JiraIssue | None, CustomFieldCollection | None] | None


def to_map(issue: ApiModel | None) -> dict[str, Any]:
    """
    Flatten an issue document into a plain dictionary.

    Args:
        issue: The issue (or any payload model) to flatten, or None

    Returns:
        A new dictionary keyed as Jira serializes the model. ``None``
        yields an empty dictionary.
    """
    if issue is None:
        return {}
    return issue.to_map()


def merge_custom_fields(
    issue: JiraIssue | None, custom_fields: CustomFieldCollection | None
) -> dict[str, Any]:
    """
    Union the issue's flattened ``fields`` with a custom field collection.

    Args:
        issue: The static issue document
        custom_fields: At least one custom field value

    Returns:
        A new payload whose ``fields`` holds the static fields plus one
        key per custom field id

    Raises:
        PayloadValidationError: If the issue is absent or the collection is
            absent or empty
        FieldCollisionError: If a custom field id matches a field already
            present in the issue's ``fields``
    """
    if issue is None:
        raise PayloadValidationError(ERR_NO_ISSUE)
    if custom_fields is None or len(custom_fields) == 0:
        raise PayloadValidationError(ERR_NO_CUSTOM_FIELDS)

    payload = to_map(issue)
    fields = payload.get(FIELDS_KEY, {})

    for field_id, _ in custom_fields:
        if field_id in fields:
            raise FieldCollisionError(
                f"custom field '{field_id}' collides with an issue field",
                field_id=field_id,
            )

    fields.update(custom_fields.to_dict())
    payload[FIELDS_KEY] = fields
    logger.debug(f"Merged {len(custom_fields)} custom field(s) into issue payload")
    return payload


def merge_operations(
    issue: JiraIssue | None, operations: UpdateOperationCollection | None
) -> dict[str, Any]:
    """
    Attach an ``update`` document to the flattened issue.

    The issue keeps its own ``fields`` key; ``update`` is added beside it.

    Args:
        issue: The static issue document
        operations: At least one field with update operations

    Returns:
        A new payload holding the issue keys plus ``update``

    Raises:
        PayloadValidationError: If the issue is absent or the collection is
            absent or empty
    """
    if issue is None:
        raise PayloadValidationError(ERR_NO_ISSUE)
    if operations is None or len(operations) == 0:
        raise PayloadValidationError(ERR_NO_OPERATIONS)

    payload = to_map(issue)
    update = operations.to_dict()
    payload[UPDATE_KEY] = update
    logger.debug(f"Merged update operations for {len(update)} field(s)")
    return payload


def build_create_payload(
    issue: JiraIssue | None, custom_fields: CustomFieldCollection | None = None
) -> dict[str, Any]:
    """
    Build the request body for creating an issue.

    Args:
        issue: The static issue document
        custom_fields: Optional custom field values

    Returns:
        The flattened issue, merged with the custom fields when given
    """
    if issue is None:
        raise PayloadValidationError(ERR_NO_ISSUE)
    if custom_fields is None:
        return to_map(issue)
    return merge_custom_fields(issue, custom_fields)


def build_bulk_create_payload(entries: Iterable[BulkEntry]) -> dict[str, Any]:
    """
    Build the request body for creating several issues in one call.

    Args:
        entries: Issues, or ``(issue, custom_fields)`` pairs. Entries without
            an issue are skipped.

    Returns:
        ``{"issueUpdates": [payload, ...]}`` in the order given

    Raises:
        PayloadValidationError: If no entry carries an issue
    """
    payloads = []
    for entry in entries or []:
        if isinstance(entry, tuple):
            issue, custom_fields = entry
        else:
            issue, custom_fields = entry, None
        if issue is None:
            continue
        payloads.append(build_create_payload(issue, custom_fields))

    if not payloads:
        raise PayloadValidationError(ERR_NO_BULK_ISSUES)
    return {BULK_ISSUES_KEY: payloads}


def build_edit_payload(
    issue: JiraIssue | None,
    custom_fields: CustomFieldCollection | None = None,
    operations: UpdateOperationCollection | None = None,
) -> dict[str, Any]:
    """
    Build the request body for editing an issue.

    Any combination of custom fields and update operations may be given;
    a collection that is passed must not be empty. When the operations'
    config sets ``reject_update_overlap``, a field named both in ``fields``
    and in ``update`` is refused before the request is sent.

    Args:
        issue: The static issue document
        custom_fields: Optional custom field values
        operations: Optional update operations

    Returns:
        The combined payload

    Raises:
        FieldCollisionError: If ``reject_update_overlap`` is set and an
            operation targets a static or custom field already in ``fields``
    """
    if issue is None:
        raise PayloadValidationError(ERR_NO_ISSUE)

    if custom_fields is not None:
        payload = merge_custom_fields(issue, custom_fields)
    else:
        payload = to_map(issue)

    if operations is not None:
        update = merge_operations(issue, operations)[UPDATE_KEY]
        if operations.config.reject_update_overlap:
            fields = payload.get(FIELDS_KEY, {})
            for field_name in update:
                if field_name in fields:
                    raise FieldCollisionError(
                        f"field '{field_name}' is set in fields and update",
                        field_id=field_name,
                    )
        payload[UPDATE_KEY] = update

    return payload


def build_transition_payload(
    transition_id: str | int,
    issue: JiraIssue | None = None,
    custom_fields: CustomFieldCollection | None = None,
    operations: UpdateOperationCollection | None = None,
) -> dict[str, Any]:
    """
    Build the request body for transitioning an issue.

    Fields, custom fields and update operations are optional; when only
    collections are given they are merged against an empty issue.

    Args:
        transition_id: The id of the workflow transition
        issue: Optional static issue document for fields set on the screen
        custom_fields: Optional custom field values
        operations: Optional update operations (e.g. adding a comment)

    Returns:
        ``{"transition": {"id": ...}}`` plus any ``fields`` and ``update``

    Raises:
        PayloadValidationError: If the transition id is empty
    """
    if transition_id is None or str(transition_id) == "":
        raise PayloadValidationError(ERR_NO_TRANSITION_ID)

    payload: dict[str, Any] = {TRANSITION_KEY: {"id": str(transition_id)}}
    if issue is None and custom_fields is None and operations is None:
        return payload

    body = build_edit_payload(issue or JiraIssue(), custom_fields, operations)
    body.pop(TRANSITION_KEY, None)
    payload.update(body)
    return payload
