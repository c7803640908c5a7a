"""
Utility functions for the jira-payload package.
This package provides date and logging helpers used throughout the codebase.
"""

from .date import format_rfc3339, is_zero_date, parse_date
from .logging import setup_logging, summarize_value

__all__ = [
    "format_rfc3339",
    "is_zero_date",
    "parse_date",
    "setup_logging",
    "summarize_value",
]
