"""photo_vars - placeholder substitution and shell quoting for photo export scripts."""

from ._version import __version__
from .substitution import substitute, substitute_list, build_substitution_list
from .shell import sanitize, is_not_sanitized
from .core.metadata import ImageMetadata
from .cli import main

__all__ = [
    'main',
    '__version__',
    'ImageMetadata',
    'substitute',
    'substitute_list',
    'build_substitution_list',
    'sanitize',
    'is_not_sanitized',
]
