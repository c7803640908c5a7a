"""
Custom field collection for Jira issue payloads.

A CustomFieldCollection accumulates ``(field_id, encoded_value)`` pairs, one
typed setter per custom field kind. The collection is later unioned into the
``fields`` object of an issue payload by ``merge_custom_fields``.
"""

import copy
import logging
from collections.abc import Iterator, Sequence
from typing import Any

from ..config import DUPLICATE_REJECT, PayloadConfig
from ..exceptions import FieldCollisionError, PayloadValidationError
from ..models.constants import ERR_NO_FIELD_VALUE
from ..utils.logging import summarize_value
from . import encoders

logger = logging.getLogger("jira-payload.jira")


class CustomFieldCollection:
    """
    Ordered collection of encoded custom field values.

    Every setter validates and encodes its input before touching the
    collection, so a failed call leaves it exactly as it was. Adding the same
    field id twice replaces the earlier value in place, unless the config
    sets ``duplicate_fields="reject"``.

    A single instance is not safe for concurrent writers.
    """

    def __init__(self, config: PayloadConfig | None = None) -> None:
        self.config = config or PayloadConfig()
        self._fields: dict[str, Any] = {}

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return iter(self.to_dict().items())

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._fields

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CustomFieldCollection):
            return NotImplemented
        return list(self._fields.items()) == list(other._fields.items())

    def __repr__(self) -> str:
        return f"CustomFieldCollection({list(self._fields)!r})"

    @property
    def field_ids(self) -> list[str]:
        """The custom field ids in insertion order."""
        return list(self._fields)

    def get(self, field_id: str, default: Any = None) -> Any:
        """Return the encoded value stored for a field id."""
        return copy.deepcopy(self._fields.get(field_id, default))

    def to_dict(self) -> dict[str, Any]:
        """Return the collection as a new ``{field_id: encoded_value}`` dict."""
        return copy.deepcopy(self._fields)

    def _append(self, field_id: str, value: Any) -> None:
        if field_id in self._fields:
            if self.config.duplicate_fields == DUPLICATE_REJECT:
                raise FieldCollisionError(
                    f"custom field '{field_id}' is already set", field_id=field_id
                )
            logger.debug(f"Replacing value of custom field {field_id}")
        self._fields[field_id] = value
        logger.debug(f"Set custom field {field_id} = {summarize_value(value)}")

    def cascading(self, field_id: str, parent: str, child: str) -> None:
        """Set a cascading select field to a parent/child option pair."""
        self._append(
            field_id, encoders.encode_cascading_select(field_id, parent, child)
        )

    def checkbox(self, field_id: str, options: Sequence[str]) -> None:
        """Set a checkbox field to the given options."""
        self._append(field_id, encoders.encode_checkbox(field_id, options))

    def date(self, field_id: str, value: encoders.DateInput) -> None:
        """Set a date picker field."""
        self._append(field_id, encoders.encode_date(field_id, value))

    def datetime(self, field_id: str, value: encoders.DateInput) -> None:
        """Set a date-time picker field."""
        self._append(field_id, encoders.encode_datetime(field_id, value))

    def group(self, field_id: str, group: str) -> None:
        """Set a single group picker field."""
        self._append(field_id, encoders.encode_group(field_id, group))

    def groups(self, field_id: str, groups: Sequence[str]) -> None:
        """Set a multi group picker field."""
        self._append(field_id, encoders.encode_groups(field_id, groups))

    def multi_select(self, field_id: str, options: Sequence[str]) -> None:
        """Set a multi-select field to the given options."""
        self._append(field_id, encoders.encode_multi_select(field_id, options))

    def number(self, field_id: str, value: int | float) -> None:
        """Set a number field."""
        self._append(field_id, encoders.encode_number(field_id, value))

    def radio_button(self, field_id: str, button: str) -> None:
        """Set a radio button field."""
        self._append(field_id, encoders.encode_radio_button(field_id, button))

    def select(self, field_id: str, option: str) -> None:
        """Set a single select list field."""
        self._append(field_id, encoders.encode_select(field_id, option))

    def text(self, field_id: str, text: str) -> None:
        """Set a text field."""
        self._append(field_id, encoders.encode_text(field_id, text))

    def url(self, field_id: str, url: str) -> None:
        """Set a URL field."""
        self._append(field_id, encoders.encode_url(field_id, url))

    def user(self, field_id: str, account_id: str) -> None:
        """Set a single user picker field."""
        self._append(field_id, encoders.encode_user(field_id, account_id))

    def users(self, field_id: str, account_ids: Sequence[str]) -> None:
        """Set a multi user picker field."""
        self._append(field_id, encoders.encode_users(field_id, account_ids))

    def raw(self, field_id: str, value: Any) -> None:
        """
        Set a field to an already shaped JSON value.

        Used for kinds without a dedicated setter (labels, version pickers,
        app specific fields). A copy of the value is stored.

        Args:
            field_id: The custom field id
            value: Any JSON serializable value except ``None``
        """
        encoders.require_field_id(field_id)
        if value is None:
            raise PayloadValidationError(ERR_NO_FIELD_VALUE, field_id=field_id)
        self._append(field_id, copy.deepcopy(value))
