"""Shared constants and configuration."""

import sys

# Console styling
CONSOLE_STYLES = {
    'success': 'green',
    'error': 'red', 
    'warning': 'yellow',
    'info': 'cyan',
    'dim': 'dim'
}

IS_WINDOWS = sys.platform == "win32"

# Path separator used when deriving default folders
PATH_SEPARATOR = "\\" if IS_WINDOWS else "/"

PICTURES_FOLDER_NAME = "My Pictures" if IS_WINDOWS else "Pictures"
DESKTOP_FOLDER_NAME = "Desktop"

# Environment variables read by the package
LOG_LEVEL_ENV_VAR = "PHOTO_VARS_LOG_LEVEL"
APP_VERSION_ENV_VAR = "PHOTO_VARS_APP_VERSION"
