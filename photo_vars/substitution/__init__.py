"""
Placeholder substitution for photo export templates.
File: photo_vars/substitution/__init__.py

Expands $(NAME) tokens with values taken from image metadata, the system
and the clock, applying at most one modifier per token.
"""

from photo_vars.substitution.template_engine import (
    TemplateEngine,
    parse_template,
    preview_substitution,
    substitute,
    substitute_list,
)
from photo_vars.substitution.placeholders import (
    PLACEHOLDERS,
    PlaceholderRegistry,
    build_substitution_list,
)
from photo_vars.substitution.pattern_dialect import escape_pattern


__all__ = [
    'TemplateEngine',
    'PlaceholderRegistry',
    'PLACEHOLDERS',
    'build_substitution_list',
    'parse_template',
    'preview_substitution',
    'substitute',
    'substitute_list',
    'escape_pattern',
]

# End of file #
