"""
Pydantic models for Jira issue payloads.

This package provides the base model and the Jira issue models used to build
request bodies and to read custom field values from responses.
"""

from .base import ApiModel
from .jira import (
    JiraCascadingSelect,
    JiraComponent,
    JiraCustomFieldOption,
    JiraGroup,
    JiraIssue,
    JiraIssueFields,
    JiraIssueType,
    JiraParent,
    JiraPriority,
    JiraProject,
    JiraResolution,
    JiraSecurityLevel,
    JiraSprint,
    JiraStatus,
    JiraUser,
    JiraVersion,
)

__all__ = [
    "ApiModel",
    "JiraCascadingSelect",
    "JiraComponent",
    "JiraCustomFieldOption",
    "JiraGroup",
    "JiraIssue",
    "JiraIssueFields",
    "JiraIssueType",
    "JiraParent",
    "JiraPriority",
    "JiraProject",
    "JiraResolution",
    "JiraSecurityLevel",
    "JiraSprint",
    "JiraStatus",
    "JiraUser",
    "JiraVersion",
]
