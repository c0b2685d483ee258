"""
Shell argument quoting for external commands.
File: photo_vars/shell/sanitizer.py

Makes a string safe to pass as one argument on a command line, for either a
POSIX shell or the Windows command interpreter. The dialect is fixed by the
platform this process runs on; the functions accept one explicitly so both
dialects can be exercised anywhere.

POSIX:   wrap in single quotes, each inner ' becomes '\\''
         (close quote, escaped quote, reopen quote)
Windows: wrap in double quotes, each inner " becomes "^""
"""

import sys
import enum

from typing import Iterable


class Dialect(enum.Enum):
    POSIX = "posix"
    WINDOWS = "windows"


RUNNING_DIALECT = Dialect.WINDOWS if sys.platform == "win32" else Dialect.POSIX

POSIX_QUOTE = "'"
POSIX_ESCAPED_QUOTE = "'\\''"
WINDOWS_QUOTE = '"'
WINDOWS_ESCAPED_QUOTE = '"^""'


def _is_wrapped(text: str, quote: str) -> bool:
    return len(text) >= 2 and text[0] == quote and text[-1] == quote


def _is_not_sanitized_posix(text: str) -> bool:
    # A sanitized string must be quoted
    if not _is_wrapped(text, POSIX_QUOTE):
        return True

    # Any quote inside must be part of an escape sequence
    inner = text[1:-1].replace(POSIX_ESCAPED_QUOTE, "")
    return POSIX_QUOTE in inner


def _is_not_sanitized_windows(text: str) -> bool:
    return not _is_wrapped(text, WINDOWS_QUOTE)


def is_not_sanitized(text: str, dialect: Dialect = RUNNING_DIALECT) -> bool:
    """
    Check whether a string still needs quoting for the dialect's shell.

    Examples (POSIX):
        "bare text"           -> True
        "'already quoted'"    -> False
        "'it'\\''s quoted'"   -> False
        "'it's broken'"       -> True

    Args:
        text: String to check
        dialect: Shell dialect (defaults to the running platform's)

    Returns:
        True if the string is not safely quoted, otherwise False
    """
    if dialect is Dialect.WINDOWS:
        return _is_not_sanitized_windows(text)
    return _is_not_sanitized_posix(text)


def sanitize(text: str, dialect: Dialect = RUNNING_DIALECT) -> str:
    """
    Quote a string so it is passed as exactly one shell argument.

    Already-sanitized strings are returned unchanged, so sanitizing twice
    gives the same result as sanitizing once.

    Examples:
        "it's a file.jpg" (POSIX)    -> "'it'\\''s a file.jpg'"
        'say "cheese".jpg' (WINDOWS) -> '"say "^""cheese"^"".jpg"'

    Args:
        text: Raw argument
        dialect: Shell dialect (defaults to the running platform's)

    Returns:
        Quoted argument
    """
    if not is_not_sanitized(text, dialect):
        return text

    if dialect is Dialect.WINDOWS:
        return WINDOWS_QUOTE + text.replace(WINDOWS_QUOTE, WINDOWS_ESCAPED_QUOTE) + WINDOWS_QUOTE
    return POSIX_QUOTE + text.replace(POSIX_QUOTE, POSIX_ESCAPED_QUOTE) + POSIX_QUOTE


def quote_command(arguments: Iterable[str], dialect: Dialect = RUNNING_DIALECT) -> str:
    """
    Join arguments into one command-line string, sanitizing each.

    Nothing is executed; the caller decides what to do with the string.

    Examples (POSIX):
        ["ln", "-s", "my photo.jpg", "link.jpg"] -> "'ln' '-s' 'my photo.jpg' 'link.jpg'"
    """
    return " ".join(sanitize(str(argument), dialect) for argument in arguments)


# End of file #
