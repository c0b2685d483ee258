"""
Modifier classification and evaluation.
File: photo_vars/substitution/modifiers.py

The text that follows a placeholder name inside a token, e.g. the ":0:3" in
"$(FILE.NAME:0:3)", selects exactly one operation. Modifier forms are tried
in a fixed order and the first one that matches wins; there is no chaining.

    ^^        uppercase everything          ^        uppercase first letter
    ,,        lowercase everything          ,        lowercase first letter
    :S:E      characters S..E               :S       characters S..end
    -$(NAME)  NAME's value if empty         -text    text if empty
    +text     text if not empty             #pat     strip pat from start
    %pat      strip pat from end            //p/r    replace every p with r
    /#p/r     replace p at start            /%p/r    replace p at end
    /p/r      replace first p

Offsets are 0-based when positive (S=0 is the first character) and count
back from the end when negative (-1 is the last character). E is used as an
inclusive 1-based end position.
"""

import enum
import logging

from dataclasses import dataclass
from collections.abc import Mapping
from typing import Optional

from photo_vars.core.exceptions import MalformedTokenError, PatternError
from photo_vars.substitution.pattern_dialect import escape_pattern, pattern_sub
from photo_vars.substitution.placeholders import canonical_name
from photo_vars.substitution.substitution_regex_patterns import (
    CAPITALIZE_ALL_RGX,
    CAPITALIZE_FIRST_RGX,
    LOWERCASE_ALL_RGX,
    LOWERCASE_FIRST_RGX,
    SLICE_RGX,
    SLICE_OPEN_RGX,
    DEFAULT_PLACEHOLDER_RGX,
    DEFAULT_LITERAL_RGX,
    REPLACE_NON_EMPTY_RGX,
    STRIP_PREFIX_RGX,
    STRIP_SUFFIX_RGX,
    REPLACE_ALL_RGX,
    REPLACE_START_RGX,
    REPLACE_END_RGX,
    REPLACE_FIRST_RGX,
    DEFAULT_REFERENCE_RGX,
)


logger = logging.getLogger(__name__)


_ASCII_UPPER = str.maketrans("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


class ModifierKind(enum.Enum):
    CAPITALIZE_ALL = "capitalize-all"
    CAPITALIZE_FIRST = "capitalize-first"
    LOWERCASE_ALL = "lowercase-all"
    LOWERCASE_FIRST = "lowercase-first"
    SLICE = "slice"
    SLICE_FROM_START = "slice-open"
    DEFAULT_FROM_PLACEHOLDER = "default-placeholder"
    DEFAULT_LITERAL = "default-literal"
    REPLACE_IF_NON_EMPTY = "replace-if-non-empty"
    STRIP_PREFIX = "strip-prefix"
    STRIP_SUFFIX = "strip-suffix"
    REPLACE_ALL = "replace-all"
    REPLACE_FIRST_START = "replace-first-start"
    REPLACE_FIRST_END = "replace-first-end"
    REPLACE_FIRST = "replace-first"


@dataclass(frozen=True)
class ModifierOp:
    """One parsed modifier. Only the fields its kind uses are set."""
    kind: ModifierKind
    start: Optional[int] = None
    end: Optional[int] = None
    text: Optional[str] = None          # literal for default / replace-if-non-empty
    reference: Optional[str] = None     # placeholder name for default-from-placeholder
    pattern: Optional[str] = None
    replacement: Optional[str] = None

    def __str__(self):
        details = [f"{k}={v!r}" for k, v in (
            ('start', self.start), ('end', self.end), ('text', self.text),
            ('reference', self.reference), ('pattern', self.pattern),
            ('replacement', self.replacement)) if v is not None]
        return f"{self.kind.value}({', '.join(details)})" if details else self.kind.value


def _to_position(offset: int) -> int:
    """0-based offsets become 1-based positions; negative offsets are kept."""
    return offset + 1 if offset >= 0 else offset


def _parse_slice(match):
    start = _to_position(int(match.group(1)))
    end = int(match.group(2))
    if start < 0 and end < 0:
        start, end = end, start
    return ModifierOp(ModifierKind.SLICE, start=start, end=end)


def _parse_default_placeholder(match):
    expr = match.string
    reference = DEFAULT_REFERENCE_RGX.match(expr)
    if not reference:
        # Only an error once the fallback is needed
        return ModifierOp(ModifierKind.DEFAULT_FROM_PLACEHOLDER, text=expr)
    return ModifierOp(ModifierKind.DEFAULT_FROM_PLACEHOLDER,
                      reference=canonical_name(reference.group(1)))


# (regex, builder) pairs in priority order
MODIFIER_PARSERS = (
    (CAPITALIZE_ALL_RGX, lambda m: ModifierOp(ModifierKind.CAPITALIZE_ALL)),
    (CAPITALIZE_FIRST_RGX, lambda m: ModifierOp(ModifierKind.CAPITALIZE_FIRST)),
    (LOWERCASE_ALL_RGX, lambda m: ModifierOp(ModifierKind.LOWERCASE_ALL)),
    (LOWERCASE_FIRST_RGX, lambda m: ModifierOp(ModifierKind.LOWERCASE_FIRST)),
    (SLICE_RGX, _parse_slice),
    (SLICE_OPEN_RGX, lambda m: ModifierOp(ModifierKind.SLICE_FROM_START,
                                          start=_to_position(int(m.group(1))))),
    (DEFAULT_PLACEHOLDER_RGX, _parse_default_placeholder),
    (DEFAULT_LITERAL_RGX, lambda m: ModifierOp(ModifierKind.DEFAULT_LITERAL, text=m.group(1))),
    (REPLACE_NON_EMPTY_RGX, lambda m: ModifierOp(ModifierKind.REPLACE_IF_NON_EMPTY,
                                                 text=m.group(1))),
    (STRIP_PREFIX_RGX, lambda m: ModifierOp(ModifierKind.STRIP_PREFIX, pattern=m.group(1))),
    (STRIP_SUFFIX_RGX, lambda m: ModifierOp(ModifierKind.STRIP_SUFFIX, pattern=m.group(1))),
    (REPLACE_ALL_RGX, lambda m: ModifierOp(ModifierKind.REPLACE_ALL,
                                           pattern=m.group(1), replacement=m.group(2))),
    (REPLACE_START_RGX, lambda m: ModifierOp(ModifierKind.REPLACE_FIRST_START,
                                             pattern=m.group(1), replacement=m.group(2))),
    (REPLACE_END_RGX, lambda m: ModifierOp(ModifierKind.REPLACE_FIRST_END,
                                           pattern=m.group(1), replacement=m.group(2))),
    (REPLACE_FIRST_RGX, lambda m: ModifierOp(ModifierKind.REPLACE_FIRST,
                                             pattern=m.group(1), replacement=m.group(2))),
)


def parse_modifier(expr: str) -> Optional[ModifierOp]:
    """
    Classify modifier text into a single ModifierOp.

    Args:
        expr: Text following the placeholder name inside the token

    Returns:
        The first matching ModifierOp, or None when nothing matches
    """
    if not expr:
        return None

    for regex, build in MODIFIER_PARSERS:
        match = regex.match(expr)
        if match:
            return build(match)

    return None


def substring(value: str, start: int, end: int = -1) -> str:
    """
    Return characters start..end of value, 1-based and inclusive.

    Negative positions count back from the end (-1 is the last character).
    Out-of-range positions are clamped; an empty range gives "".
    """
    length = len(value)

    if start < 0:
        start = max(length + start + 1, 0)
    if end < 0:
        end = length + end + 1
    start = max(start, 1)
    end = min(end, length)

    if start > end:
        return ""
    return value[start - 1:end]


def _first_letter(value: str, table: dict) -> str:
    if value[:1].isascii() and value[:1].isalpha():
        return value[0].translate(table) + value[1:]
    return value


def apply_modifier(op: Optional[ModifierOp], value: str, registry: Mapping) -> str:
    """
    Apply a parsed modifier to a placeholder value.

    Pattern errors never propagate: the value is returned unchanged and a
    warning is logged.

    Args:
        op: Modifier to apply (None passes the value through)
        value: Looked-up placeholder value
        registry: Registry used for default-from-placeholder lookups

    Returns:
        The modified value

    Raises:
        MalformedTokenError: When an empty value needs a default reference
            that is not a single $(NAME)
    """
    if op is None:
        return value

    kind = op.kind

    if kind is ModifierKind.CAPITALIZE_ALL:
        return value.translate(_ASCII_UPPER)
    if kind is ModifierKind.CAPITALIZE_FIRST:
        return _first_letter(value, _ASCII_UPPER)
    if kind is ModifierKind.LOWERCASE_ALL:
        return value.translate(_ASCII_LOWER)
    if kind is ModifierKind.LOWERCASE_FIRST:
        return _first_letter(value, _ASCII_LOWER)

    if kind is ModifierKind.SLICE:
        return substring(value, op.start, op.end)
    if kind is ModifierKind.SLICE_FROM_START:
        return substring(value, op.start)

    if kind is ModifierKind.DEFAULT_FROM_PLACEHOLDER:
        if value:
            return value
        if op.reference is None:
            raise MalformedTokenError(op.text, "default reference must be a single $(NAME)")
        if op.reference not in registry:
            logger.warning("variable %s is not an allowed variable, returning empty value",
                           op.reference)
            return ""
        return registry[op.reference]
    if kind is ModifierKind.DEFAULT_LITERAL:
        return value if value else op.text
    if kind is ModifierKind.REPLACE_IF_NON_EMPTY:
        return op.text if value else value

    try:
        if kind is ModifierKind.STRIP_PREFIX:
            return pattern_sub(value, "^" + escape_pattern(op.pattern), "", count=1)
        if kind is ModifierKind.STRIP_SUFFIX:
            return pattern_sub(value, escape_pattern(op.pattern) + "$", "", count=1)
        if kind is ModifierKind.REPLACE_ALL:
            return pattern_sub(value, op.pattern, op.replacement)
        if kind is ModifierKind.REPLACE_FIRST_START:
            return pattern_sub(value, "^" + op.pattern, op.replacement, count=1)
        if kind is ModifierKind.REPLACE_FIRST_END:
            return pattern_sub(value, op.pattern + "$", op.replacement, count=1)
        if kind is ModifierKind.REPLACE_FIRST:
            return pattern_sub(value, op.pattern, op.replacement, count=1)
    except PatternError as e:
        logger.warning("%s, leaving value unchanged", e)
        return value

    return value


# End of file #
