"""
Base models and utility classes for the Jira payload models.

This module provides the base class shared by the static issue models.
Every model flattens under the same keys Jira uses on the wire, so a
flattened model can be unioned with dynamically built custom field and
update operation documents.
"""

import copy
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

# Type variable for the return type of from_api_response
T = TypeVar("T", bound="ApiModel")


def is_empty(value: Any) -> bool:
    """
    Check whether a flattened value should be omitted from a payload.

    ``None``, empty strings, lists and dicts are empty. Zero and ``False``
    are meaningful payload values and are kept.
    """
    if value is None:
        return True
    if isinstance(value, str | list | dict):
        return len(value) == 0
    return False


def flatten_value(value: Any) -> Any:
    """
    Flatten a model attribute value into plain JSON data.

    Nested models are flattened with their own ``to_map``; lists are
    flattened item by item with empty items dropped. Any other value,
    including free-form dicts such as Atlassian Document Format nodes,
    is copied as given.
    """
    if isinstance(value, ApiModel):
        return value.to_map()
    if isinstance(value, list):
        items = [flatten_value(item) for item in value]
        return [item for item in items if not is_empty(item)]
    return copy.deepcopy(value)


class ApiModel(BaseModel):
    """
    Base model for all Jira payload models.

    Attributes use Python names and declare the Jira key as an alias, so
    models can be built either way and always flatten with Jira keys.
    """

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Convert an API response to a model instance.

        Args:
            data: The API response data
            **kwargs: Additional context parameters

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_map(self) -> dict[str, Any]:
        """
        Flatten the model into a plain dictionary keyed as Jira expects.

        Keys follow field declaration order. Unset and empty values are
        omitted, nested models are flattened recursively.

        Returns:
            A new dictionary safe to mutate
        """
        result: dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            value = flatten_value(getattr(self, name))
            if is_empty(value):
                continue
            result[field.serialization_alias or field.alias or name] = value
        return result
