"""
Jira issue models.

This module provides the static Pydantic models for a Jira issue document:
the top-level issue (``id``, ``key``, ``self``) and its ``fields`` object.
Tenant specific custom fields are not modelled here; they are attached at
merge time from a CustomFieldCollection.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel
from .common import (
    JiraComponent,
    JiraIssueType,
    JiraParent,
    JiraPriority,
    JiraProject,
    JiraResolution,
    JiraSecurityLevel,
    JiraStatus,
    JiraUser,
    JiraVersion,
)

logger = logging.getLogger(__name__)


def _reference_list(model: type[ApiModel], items: Any) -> list | None:
    if not isinstance(items, list):
        return None
    return [model.from_api_response(item) for item in items if item]


class JiraIssueFields(ApiModel):
    """
    Model representing the system fields of a Jira issue.

    ``description`` and ``environment`` accept either wiki/plain text
    (REST API v2) or an Atlassian Document Format node (REST API v3).
    """

    parent: JiraParent | None = None
    project: JiraProject | None = None
    issue_type: JiraIssueType | None = Field(default=None, alias="issuetype")
    summary: str | None = None
    description: str | dict[str, Any] | None = None
    environment: str | dict[str, Any] | None = None
    priority: JiraPriority | None = None
    assignee: JiraUser | None = None
    reporter: JiraUser | None = None
    labels: list[str] | None = None
    components: list[JiraComponent] | None = None
    versions: list[JiraVersion] | None = None
    fix_versions: list[JiraVersion] | None = Field(default=None, alias="fixVersions")
    duedate: str | None = None
    security: JiraSecurityLevel | None = None
    resolution: JiraResolution | None = None
    status: JiraStatus | None = None
    created: str | None = None
    updated: str | None = None
    resolutiondate: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueFields":
        """
        Create JiraIssueFields from the ``fields`` object of a Jira API response.

        Custom fields present in the response are ignored.

        Args:
            data: The fields data from the Jira API

        Returns:
            A JiraIssueFields instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        labels = data.get("labels")

        return cls(
            parent=JiraParent.from_api_response(data["parent"])
            if data.get("parent")
            else None,
            project=JiraProject.from_api_response(data["project"])
            if data.get("project")
            else None,
            issue_type=JiraIssueType.from_api_response(data["issuetype"])
            if data.get("issuetype")
            else None,
            summary=data.get("summary"),
            description=data.get("description"),
            environment=data.get("environment"),
            priority=JiraPriority.from_api_response(data["priority"])
            if data.get("priority")
            else None,
            assignee=JiraUser.from_api_response(data["assignee"])
            if data.get("assignee")
            else None,
            reporter=JiraUser.from_api_response(data["reporter"])
            if data.get("reporter")
            else None,
            labels=[str(label) for label in labels]
            if isinstance(labels, list)
            else None,
            components=_reference_list(JiraComponent, data.get("components")),
            versions=_reference_list(JiraVersion, data.get("versions")),
            fix_versions=_reference_list(JiraVersion, data.get("fixVersions")),
            duedate=data.get("duedate"),
            security=JiraSecurityLevel.from_api_response(data["security"])
            if data.get("security")
            else None,
            resolution=JiraResolution.from_api_response(data["resolution"])
            if data.get("resolution")
            else None,
            status=JiraStatus.from_api_response(data["status"])
            if data.get("status")
            else None,
            created=data.get("created"),
            updated=data.get("updated"),
            resolutiondate=data.get("resolutiondate"),
        )


class JiraIssue(ApiModel):
    """
    Model representing a Jira issue document.

    ``id``, ``key`` and ``self`` are assigned by the server and only matter
    on read paths; create and edit payloads normally carry ``fields`` only.
    """

    id: str | None = None
    key: str | None = None
    self_url: str | None = Field(default=None, alias="self")
    fields: JiraIssueFields | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a Jira API response.

        Args:
            data: The issue data from the Jira API

        Returns:
            A JiraIssue instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        issue_id = data.get("id")

        return cls(
            id=str(issue_id) if issue_id is not None else None,
            key=data.get("key"),
            self_url=data.get("self"),
            fields=JiraIssueFields.from_api_response(data["fields"])
            if data.get("fields")
            else None,
        )
