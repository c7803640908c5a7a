"""
Jira data models for the jira-payload package.

This package provides Pydantic models for the static parts of a Jira issue
document and for the custom field values Jira returns on read.
"""

from .common import (
    JiraComponent,
    JiraIssueType,
    JiraNamedReference,
    JiraParent,
    JiraPriority,
    JiraProject,
    JiraResolution,
    JiraSecurityLevel,
    JiraStatus,
    JiraUser,
    JiraVersion,
)
from .issue import JiraIssue, JiraIssueFields
from .options import JiraCascadingSelect, JiraCustomFieldOption, JiraGroup, JiraSprint

__all__ = [
    # Reference models
    "JiraNamedReference",
    "JiraUser",
    "JiraProject",
    "JiraIssueType",
    "JiraPriority",
    "JiraComponent",
    "JiraVersion",
    "JiraResolution",
    "JiraStatus",
    "JiraSecurityLevel",
    "JiraParent",
    # Issue models
    "JiraIssue",
    "JiraIssueFields",
    # Custom field value models
    "JiraCustomFieldOption",
    "JiraCascadingSelect",
    "JiraGroup",
    "JiraSprint",
]
