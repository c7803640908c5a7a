"""Configuration module for Jira payload construction."""

import logging
import os
from dataclasses import dataclass
from typing import Literal

from dotenv import load_dotenv

DUPLICATE_REPLACE = "replace"
DUPLICATE_REJECT = "reject"

TRUTHY_VALUES = ("true", "1", "yes", "y", "on")


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() in TRUTHY_VALUES


@dataclass(frozen=True)
class PayloadConfig:
    """Payload construction configuration.

    Controls how custom field collections treat repeated field ids and
    whether update operation verbs are restricted to the ones Jira documents.
    """

    duplicate_fields: Literal["replace", "reject"] = DUPLICATE_REPLACE
    strict_verbs: bool = False  # Only allow set/add/remove/edit/copy
    reject_update_overlap: bool = False  # Refuse a field in fields and update
    verbose: bool = False  # Enable DEBUG logging

    @property
    def log_level(self) -> int:
        """The logging level matching the verbose flag."""
        return logging.DEBUG if self.verbose else logging.WARNING

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "PayloadConfig":
        """Create configuration from environment variables.

        Args:
            env_file: Optional path to a .env file loaded before reading
                the environment. Existing variables are not overridden.

        Returns:
            PayloadConfig with values from environment variables

        Raises:
            ValueError: If an environment variable holds an invalid value
        """
        if env_file:
            load_dotenv(env_file, override=False)

        duplicate_fields = (
            os.getenv("JIRA_PAYLOAD_DUPLICATE_FIELDS", DUPLICATE_REPLACE)
            .strip()
            .lower()
        )
        if duplicate_fields not in (DUPLICATE_REPLACE, DUPLICATE_REJECT):
            error_msg = (
                f"Invalid JIRA_PAYLOAD_DUPLICATE_FIELDS value '{duplicate_fields}', "
                f"expected '{DUPLICATE_REPLACE}' or '{DUPLICATE_REJECT}'"
            )
            raise ValueError(error_msg)

        return cls(
            duplicate_fields=duplicate_fields,
            strict_verbs=_env_flag("JIRA_PAYLOAD_STRICT_VERBS"),
            reject_update_overlap=_env_flag("JIRA_PAYLOAD_REJECT_UPDATE_OVERLAP"),
            verbose=_env_flag("JIRA_PAYLOAD_VERBOSE"),
        )
