"""
File path splitting helpers.
File: photo_vars/core/filepath.py

Splits a path string into folder, filename, basename and filetype without
touching the filesystem, accepting both '/' and '\\' separators.
"""

import re


# folder (shortest) + filename, where filename = basename [. filetype]
FILEPATH_PARTS_RGX = re.compile(r'(.*?)(([^\\/]*?)\.?([^.\\/]*))', re.DOTALL)


def split_filepath(filepath: str) -> dict[str, str]:
    """
    Split a filepath into its parts.

    Quote characters are removed first so already-quoted paths split cleanly.

    Examples:
        "/photos/2024/IMG_0001.CR2" -> path "/photos/2024/", filename "IMG_0001.CR2",
                                       basename "IMG_0001", filetype "CR2"
        "archive.tar.gz"            -> basename "archive.tar", filetype "gz"
        "/home/user/.bashrc"        -> basename "bashrc", filetype ""

    Args:
        filepath: Path and filename

    Returns:
        Dictionary with 'path', 'filename', 'basename' and 'filetype' keys
    """
    clean = str(filepath).replace("'", "").replace('"', '')

    match = FILEPATH_PARTS_RGX.fullmatch(clean)
    parts = {
        'path': match.group(1),
        'filename': match.group(2),
        'basename': match.group(3),
        'filetype': match.group(4),
    }

    # A name without a dot is all basename, not all filetype
    if not parts['basename'] and parts['filetype']:
        parts['basename'] = parts['filetype']
        parts['filetype'] = ""

    return parts


def get_path(filepath: str) -> str:
    """Return the folder part of a filepath, including the trailing separator."""
    return split_filepath(filepath)['path']


def get_filename(filepath: str) -> str:
    """Return the filename and extension of a filepath."""
    return split_filepath(filepath)['filename']


def get_basename(filepath: str) -> str:
    """Return the filename without folder or extension."""
    return split_filepath(filepath)['basename']


def get_filetype(filepath: str) -> str:
    """Return the extension (without the dot) of a filepath."""
    return split_filepath(filepath)['filetype']


# End of file #
