"""
Exceptions for template substitution and metadata loading.
File: photo_vars/core/exceptions.py
"""


class PatternError(ValueError):
    """
    Raised when a modifier pattern cannot be translated or applied.

    This exception is raised when:
    - A pattern ends with a lone '%'
    - A character set '[...]' is never closed
    - A pattern uses an item with no regular expression counterpart (%b, %f)
    - A replacement refers to a capture the pattern does not have
    """

    def __init__(self, pattern, reason=None):
        """
        Initialize pattern error.

        Args:
            pattern: The pattern text that failed
            reason: Short description of what went wrong
        """
        self.pattern = pattern
        self.reason = reason

        message = f"Invalid pattern: '{pattern}'"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class MalformedTokenError(ValueError):
    """
    Raised when a $(...) token does not follow the token grammar.

    The template engine catches this and leaves the token as literal text.
    """

    def __init__(self, token, reason=None):
        self.token = token
        self.reason = reason

        message = f"Malformed token: '{token}'"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class MetadataError(ValueError):
    """Raised when an image metadata record cannot be loaded."""

    def __init__(self, source, message=None):
        self.source = source

        if message:
            super().__init__(message)
        else:
            super().__init__(f"Could not load image metadata from {source}")


# End of file #
