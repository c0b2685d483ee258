"""
Logging configuration for photo_vars.
File: photo_vars/core/logging_setup.py

Library modules log through ``logging.getLogger(__name__)`` and stay silent
until an application calls ``configure_logging()``, which attaches a single
rich handler to the package logger.

Usage:
    from photo_vars.core.logging_setup import configure_logging
    configure_logging("DEBUG")
"""

import os
import logging

from typing import Optional, Union
from rich.console import Console
from rich.logging import RichHandler

from photo_vars.constants import LOG_LEVEL_ENV_VAR


PACKAGE_LOGGER_NAME = "photo_vars"
DEFAULT_LOG_LEVEL = logging.WARNING

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def resolve_level(level: Optional[Union[int, str]] = None) -> int:
    """
    Turn a level name or number into a logging level.

    Falls back to the PHOTO_VARS_LOG_LEVEL environment variable, then WARNING.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "")
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else DEFAULT_LOG_LEVEL


def configure_logging(level: Optional[Union[int, str]] = None,
                      console: Optional[Console] = None) -> logging.Logger:
    """
    Attach a RichHandler to the package logger and set its level.

    Calling it again only adjusts the level; handlers are never duplicated.

    Args:
        level: Level name or number (None = environment / default)
        console: Console to render into (defaults to stderr)

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    resolved = resolve_level(level)

    rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    if not rich_handlers:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        rich_handlers = [handler]

    logger.setLevel(resolved)
    for handler in rich_handlers:
        handler.setLevel(resolved)

    return logger


# End of file #
