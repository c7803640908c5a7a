"""Logging utilities for jira-payload.

The package only adds a ``NullHandler`` on import; handlers and the root
logger belong to the host application. ``setup_logging`` is an opt-in
helper for scripts that want the package's debug output on stderr.
"""

import logging

PACKAGE_LOGGERS = ["jira-payload", "jira-payload.jira"]

HANDLER_NAME = "jira-payload-stream"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure jira-payload logging.

    Installs a single stream handler on the ``jira-payload`` logger and sets
    the level of the package loggers. Calling it again replaces the handler
    it installed earlier. The root logger is left untouched.

    Args:
        level: The minimum logging level to display (default: WARNING)

    Returns:
        The configured logger instance
    """
    app_logger = logging.getLogger("jira-payload")

    # Remove the handler from a previous call to prevent duplication
    for handler in app_logger.handlers[:]:
        if handler.get_name() == HANDLER_NAME:
            app_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    formatter = logging.Formatter("%(levelname)s - %(name)s - %(message)s")
    handler.setFormatter(formatter)
    app_logger.addHandler(handler)

    for logger_name in PACKAGE_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)

    # Return the application logger
    return app_logger


def summarize_value(value: object, max_length: int = 60) -> str:
    """Shorten a payload value for debug logging.

    Args:
        value: The value to render
        max_length: Maximum length of the rendered value

    Returns:
        The ``repr`` of the value, truncated with an ellipsis when too long
    """
    rendered = repr(value)
    if len(rendered) <= max_length:
        return rendered
    return f"{rendered[: max_length - 3]}..."
