import logging
import os

from jira_payload.utils.logging import PACKAGE_LOGGERS, setup_logging

from .config import PayloadConfig
from .exceptions import (
    CustomFieldParseError,
    FieldCollisionError,
    PayloadValidationError,
)
from .jira import (
    CustomFieldCollection,
    UpdateOperationCollection,
    build_bulk_create_payload,
    build_create_payload,
    build_edit_payload,
    build_transition_payload,
    merge_custom_fields,
    merge_operations,
    to_map,
)
from .models import JiraIssue, JiraIssueFields

__version__ = "0.1.0"

# Library logging: handlers belong to the host application, see setup_logging
logging_level = logging.WARNING
if os.getenv("JIRA_PAYLOAD_VERBOSE", "").lower() in ("true", "1", "yes"):
    logging_level = logging.DEBUG

logger = logging.getLogger("jira-payload")
if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
    logger.addHandler(logging.NullHandler())
for logger_name in PACKAGE_LOGGERS:
    logging.getLogger(logger_name).setLevel(logging_level)

__all__ = [
    "setup_logging",
    "PayloadConfig",
    "PayloadValidationError",
    "FieldCollisionError",
    "CustomFieldParseError",
    "CustomFieldCollection",
    "UpdateOperationCollection",
    "JiraIssue",
    "JiraIssueFields",
    "to_map",
    "merge_custom_fields",
    "merge_operations",
    "build_create_payload",
    "build_bulk_create_payload",
    "build_edit_payload",
    "build_transition_payload",
]
