"""
Jira custom field value models.

This module provides Pydantic models for the values Jira returns for custom
fields on read: select options, cascading selections, groups and sprints.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel

logger = logging.getLogger(__name__)


class JiraCustomFieldOption(ApiModel):
    """
    Model representing a select, radio button, checkbox or multi-select option.
    """

    id: str | None = None
    value: str | None = None
    disabled: bool | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraCustomFieldOption":
        """
        Create a JiraCustomFieldOption from a Jira API response.

        Args:
            data: The option data from the Jira API

        Returns:
            A JiraCustomFieldOption instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        option_id = data.get("id")
        return cls(
            id=str(option_id) if option_id is not None else None,
            value=data.get("value"),
            disabled=data.get("disabled"),
        )


class JiraCascadingSelect(JiraCustomFieldOption):
    """
    Model representing a cascading select value: a parent option with a child.
    """

    child: JiraCustomFieldOption | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraCascadingSelect":
        """Create a JiraCascadingSelect from a Jira API response."""
        if not data or not isinstance(data, dict):
            return cls()

        parent = JiraCustomFieldOption.from_api_response(data)
        child = None
        if child_data := data.get("child"):
            child = JiraCustomFieldOption.from_api_response(child_data)

        return cls(
            id=parent.id, value=parent.value, disabled=parent.disabled, child=child
        )


class JiraGroup(ApiModel):
    """
    Model representing a Jira group as returned by group picker fields.
    """

    name: str | None = None
    group_id: str | None = Field(default=None, alias="groupId")

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraGroup":
        """Create a JiraGroup from a Jira API response."""
        if not data or not isinstance(data, dict):
            return cls()

        return cls(name=data.get("name"), group_id=data.get("groupId"))


class JiraSprint(ApiModel):
    """
    Model representing a sprint as returned by the sprint custom field.
    """

    id: int | None = None
    name: str | None = None
    state: str | None = None
    board_id: int | None = Field(default=None, alias="boardId")
    goal: str | None = None
    start_date: str | None = Field(default=None, alias="startDate")
    end_date: str | None = Field(default=None, alias="endDate")
    complete_date: str | None = Field(default=None, alias="completeDate")

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraSprint":
        """
        Create a JiraSprint from a Jira API response.

        Args:
            data: The sprint data from the Jira API

        Returns:
            A JiraSprint instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        def _int_or_none(value: Any) -> int | None:
            try:
                return int(value) if value is not None else None
            except (ValueError, TypeError):
                return None

        return cls(
            id=_int_or_none(data.get("id")),
            name=data.get("name"),
            state=data.get("state"),
            board_id=_int_or_none(data.get("boardId")),
            goal=data.get("goal"),
            start_date=data.get("startDate"),
            end_date=data.get("endDate"),
            complete_date=data.get("completeDate"),
        )
