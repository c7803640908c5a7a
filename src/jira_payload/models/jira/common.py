"""
Common Jira entity models.

This module provides Pydantic models for the entities an issue payload refers
to: users, projects, issue types, priorities, components, versions and the like.
Write payloads usually carry only an identifying key (``id``, ``key``, ``name``
or ``accountId``), so every attribute is optional and omitted when unset.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel

logger = logging.getLogger(__name__)


def _optional_str(value: Any) -> str | None:
    """Jira returns ids as strings or integers depending on the endpoint."""
    if value is None:
        return None
    return str(value)


class JiraNamedReference(ApiModel):
    """
    Model for an entity referenced by id and/or name.
    """

    id: str | None = None
    name: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any):
        """
        Create a reference from a Jira API response.

        Args:
            data: The entity data from the Jira API

        Returns:
            A reference instance
        """
        if not data:
            return cls()

        # Handle non-dictionary data by returning a default instance
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        return cls(id=_optional_str(data.get("id")), name=data.get("name"))


class JiraUser(ApiModel):
    """
    Model representing a Jira user.

    Cloud instances identify users by ``accountId``; Server/Data Center
    instances use ``name``.
    """

    account_id: str | None = Field(default=None, alias="accountId")
    name: str | None = None
    display_name: str | None = Field(default=None, alias="displayName")
    email: str | None = Field(default=None, alias="emailAddress")
    active: bool | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraUser":
        """
        Create a JiraUser from a Jira API response.

        Args:
            data: The user data from the Jira API

        Returns:
            A JiraUser instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        return cls(
            account_id=data.get("accountId"),
            name=data.get("name"),
            display_name=data.get("displayName"),
            email=data.get("emailAddress"),
            active=data.get("active"),
        )


class JiraProject(JiraNamedReference):
    """
    Model representing a Jira project reference.
    """

    key: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraProject":
        """
        Create a JiraProject from a Jira API response.

        Args:
            data: The project data from the Jira API

        Returns:
            A JiraProject instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            id=_optional_str(data.get("id")),
            key=data.get("key"),
            name=data.get("name"),
        )


class JiraIssueType(JiraNamedReference):
    """
    Model representing a Jira issue type.
    """

    subtask: bool | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueType":
        """Create a JiraIssueType from a Jira API response."""
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            id=_optional_str(data.get("id")),
            name=data.get("name"),
            subtask=data.get("subtask"),
        )


class JiraPriority(JiraNamedReference):
    """
    Model representing a Jira priority.
    """


class JiraComponent(JiraNamedReference):
    """
    Model representing a Jira project component.
    """


class JiraVersion(JiraNamedReference):
    """
    Model representing a Jira project version (affects or fix version).
    """


class JiraResolution(JiraNamedReference):
    """
    Model representing a Jira issue resolution.
    """


class JiraStatus(JiraNamedReference):
    """
    Model representing a Jira issue status. Read-only on the server side.
    """


class JiraSecurityLevel(JiraNamedReference):
    """
    Model representing an issue security level.
    """


class JiraParent(ApiModel):
    """
    Model representing the parent issue of a sub-task or child issue.
    """

    id: str | None = None
    key: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraParent":
        """Create a JiraParent from a Jira API response."""
        if not data or not isinstance(data, dict):
            return cls()

        return cls(id=_optional_str(data.get("id")), key=data.get("key"))
