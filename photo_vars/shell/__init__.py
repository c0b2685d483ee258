"""Shell argument quoting for POSIX and Windows command interpreters."""

from photo_vars.shell.sanitizer import (
    Dialect,
    RUNNING_DIALECT,
    is_not_sanitized,
    sanitize,
    quote_command,
)


__all__ = [
    'Dialect',
    'RUNNING_DIALECT',
    'is_not_sanitized',
    'sanitize',
    'quote_command',
]

# End of file #
