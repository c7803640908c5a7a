"""
Root pytest configuration file for jira-payload tests.
"""

import copy
import os
from typing import Any
from unittest.mock import patch

import pytest

from jira_payload.models.jira import (
    JiraIssue,
    JiraIssueFields,
    JiraIssueType,
    JiraProject,
)
from tests.fixtures.jira_mocks import (
    MOCK_JIRA_ISSUE_RESPONSE,
    MOCK_JIRA_SEARCH_RESPONSE,
)


@pytest.fixture
def clean_env():
    """Run a test with none of the JIRA_PAYLOAD_* variables set."""
    with patch.dict(os.environ, {}, clear=True):
        yield


@pytest.fixture
def jira_issue_data() -> dict[str, Any]:
    """Return a copy of the mock Jira issue response."""
    return copy.deepcopy(MOCK_JIRA_ISSUE_RESPONSE)


@pytest.fixture
def jira_search_data() -> dict[str, Any]:
    """Return a copy of the mock Jira search response."""
    return copy.deepcopy(MOCK_JIRA_SEARCH_RESPONSE)


@pytest.fixture
def issue() -> JiraIssue:
    """A minimal issue ready to be created: project, type and summary."""
    return JiraIssue(
        fields=JiraIssueFields(
            project=JiraProject(key="KP"),
            issue_type=JiraIssueType(name="Task"),
            summary="Login page returns 500",
        )
    )
