"""
System context for placeholder substitution.
File: photo_vars/core/system_context.py

Collects the values that do not come from the image itself: the user name,
the home/pictures/desktop folders, the application version and the clock.
Each value can be supplied by the caller; anything left out is derived from
the process environment at the moment the context is built.
"""

import os

from pathlib import Path
from datetime import datetime
from dataclasses import dataclass
from typing import Optional

from photo_vars._version import __version__
from photo_vars.constants import (
    IS_WINDOWS,
    PATH_SEPARATOR,
    PICTURES_FOLDER_NAME,
    DESKTOP_FOLDER_NAME,
    APP_VERSION_ENV_VAR,
)


def default_username() -> str:
    """User name from the environment, or "" when none is set."""
    return os.environ.get("USERNAME") or os.environ.get("USER") or ""


def default_home_dir() -> str:
    """Home folder from HOMEPATH (Windows) or HOME, falling back to Path.home()."""
    home = os.environ.get("HOMEPATH") if IS_WINDOWS else os.environ.get("HOME")
    if home:
        return home

    try:
        return str(Path.home())
    except RuntimeError:
        return ""


@dataclass(frozen=True)
class SystemContext:
    """Immutable snapshot of the non-image values used by one substitution."""
    username: str
    home_dir: str
    pictures_dir: str
    desktop_dir: str
    app_version: str
    now: datetime

    @classmethod
    def from_environment(cls,
                         username: Optional[str] = None,
                         pictures_dir: Optional[str] = None,
                         home_dir: Optional[str] = None,
                         desktop_dir: Optional[str] = None,
                         app_version: Optional[str] = None,
                         now: Optional[datetime] = None) -> 'SystemContext':
        """
        Build a context, deriving every value the caller did not supply.

        The pictures and desktop folders default to subfolders of the
        *environment* home folder, not of an overridden home_dir.
        """
        env_home = default_home_dir()

        return cls(
            username=username if username is not None else default_username(),
            home_dir=home_dir if home_dir is not None else env_home,
            pictures_dir=(pictures_dir if pictures_dir is not None
                          else env_home + PATH_SEPARATOR + PICTURES_FOLDER_NAME),
            desktop_dir=(desktop_dir if desktop_dir is not None
                         else env_home + PATH_SEPARATOR + DESKTOP_FOLDER_NAME),
            app_version=(app_version if app_version is not None
                         else os.environ.get(APP_VERSION_ENV_VAR, __version__)),
            now=now if now is not None else datetime.now(),
        )


# End of file #
