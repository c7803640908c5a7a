"""Update operation collection for Jira issue edits and transitions.

Jira edits can be expressed as ordered lists of verbs per field instead of a
full replacement of the field value::

    "update": {
        "labels": [{"add": "triaged"}, {"remove": "blocker"}],
        "summary": [{"set": "new summary"}]
    }

The server applies each field's list in the order given, so the collection
keeps insertion order for fields and for the operations under each field.
"""

import copy
import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from ..config import PayloadConfig
from ..exceptions import PayloadValidationError
from ..models.constants import (
    ERR_NO_FIELD_ID,
    ERR_NO_OPERATION,
    ERR_NO_OPERATION_MAPPING,
    ERR_NO_OPERATION_VALUE,
    KNOWN_OPERATIONS,
)
from ..utils.logging import summarize_value

logger = logging.getLogger("jira-payload.jira")

OperationPairs = Mapping[str, str] | Iterable[tuple[Any, str]]


def _is_collection(value: Any, kind: type) -> bool:
    return isinstance(value, kind) and not isinstance(value, str | bytes)


class UpdateOperationCollection:
    """
    Ordered mapping of field name to a list of single-key ``{verb: value}`` objects.

    Repeated calls for the same field append to its list. Every method builds
    the new operations before touching the collection, so a failed call
    leaves it unchanged. A single instance is not safe for concurrent writers.
    """

    def __init__(self, config: PayloadConfig | None = None) -> None:
        self.config = config or PayloadConfig()
        self._fields: dict[str, list[dict[str, Any]]] = {}

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[tuple[str, list[dict[str, Any]]]]:
        return iter(self.to_dict().items())

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._fields

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UpdateOperationCollection):
            return NotImplemented
        return list(self._fields.items()) == list(other._fields.items())

    def __repr__(self) -> str:
        return f"UpdateOperationCollection({self._fields!r})"

    def get(self, field_name: str) -> list[dict[str, Any]]:
        """Return a copy of the operations stored for a field."""
        return copy.deepcopy(self._fields.get(field_name, []))

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Return the ``update`` document as a new nested dict."""
        return copy.deepcopy(self._fields)

    def _check_field_name(self, field_name: str) -> None:
        if not field_name or not isinstance(field_name, str):
            raise PayloadValidationError(ERR_NO_FIELD_ID)

    def _check_verb(self, field_name: str, verb: str) -> None:
        if not verb or not isinstance(verb, str):
            raise PayloadValidationError(ERR_NO_OPERATION, field_id=field_name)
        if self.config.strict_verbs and verb not in KNOWN_OPERATIONS:
            raise PayloadValidationError(
                f"unsupported operation '{verb}', expected one of "
                f"{', '.join(sorted(KNOWN_OPERATIONS))}",
                field_id=field_name,
            )

    def _extend(self, field_name: str, operations: list[dict[str, Any]]) -> None:
        self._fields.setdefault(field_name, []).extend(operations)
        logger.debug(
            f"Added {len(operations)} operation(s) to {field_name}: "
            f"{summarize_value(operations)}"
        )

    def add_array_operation(self, field_name: str, mapping: OperationPairs) -> None:
        """
        Add one operation per ``(value, verb)`` pair under a field.

        Typical use is adding or removing several labels at once::

            operations.add_array_operation(
                "labels", [("triaged", "remove"), ("blocker", "remove")]
            )

        Args:
            field_name: The field id or name, e.g. ``labels``
            mapping: A ``{value: verb}`` mapping or an iterable of
                ``(value, verb)`` pairs. Either way the given order is kept.

        Raises:
            PayloadValidationError: If the field name or mapping is empty,
                an entry is not a ``(value, verb)`` pair, or any pair has an
                empty verb or value
        """
        self._check_field_name(field_name)
        if not mapping or not _is_collection(mapping, Iterable):
            raise PayloadValidationError(ERR_NO_OPERATION_MAPPING, field_id=field_name)

        pairs = mapping.items() if isinstance(mapping, Mapping) else mapping
        operations = []
        for pair in pairs:
            # Each entry must be exactly one (value, verb) pair
            if not _is_collection(pair, Sequence) or len(pair) != 2:
                raise PayloadValidationError(
                    ERR_NO_OPERATION_MAPPING, field_id=field_name
                )
            value, verb = pair
            self._check_verb(field_name, verb)
            if value is None or value == "":
                raise PayloadValidationError(
                    ERR_NO_OPERATION_VALUE, field_id=field_name
                )
            operations.append({verb: value})

        if not operations:
            raise PayloadValidationError(ERR_NO_OPERATION_MAPPING, field_id=field_name)
        self._extend(field_name, operations)

    def add_string_operation(self, field_name: str, verb: str, value: str) -> None:
        """
        Add a single ``{verb: value}`` operation with a string value.

        Args:
            field_name: The field id or name, e.g. ``summary``
            verb: The operation, e.g. ``set``
            value: The string value

        Raises:
            PayloadValidationError: If any of the three strings is empty
        """
        self._check_field_name(field_name)
        self._check_verb(field_name, verb)
        if not value or not isinstance(value, str):
            raise PayloadValidationError(ERR_NO_OPERATION_VALUE, field_id=field_name)
        self._extend(field_name, [{verb: value}])

    def add_operation(self, field_name: str, verb: str, value: Any) -> None:
        """
        Add a single operation whose value is an arbitrary JSON value.

        Covers object-valued operations such as adding a comment
        (``{"add": {"body": "..."}}``) or a component (``{"add": {"name": "..."}}``).

        Args:
            field_name: The field id or name
            verb: The operation verb
            value: Any JSON serializable value except ``None`` or ``""``
        """
        self._check_field_name(field_name)
        self._check_verb(field_name, verb)
        if value is None or value == "":
            raise PayloadValidationError(ERR_NO_OPERATION_VALUE, field_id=field_name)
        self._extend(field_name, [{verb: copy.deepcopy(value)}])
