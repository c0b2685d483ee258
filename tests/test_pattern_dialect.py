"""
Test the modifier pattern dialect and its translation to re.
File: tests/test_pattern_dialect.py

Run: pytest tests/test_pattern_dialect.py -v
"""

import pytest

from photo_vars.core.exceptions import PatternError
from photo_vars.substitution.pattern_dialect import (
    escape_pattern,
    pattern_sub,
    translate_pattern,
)


def test_escape_pattern():
    assert escape_pattern("IMG-(1)+100%") == "IMG%-%(1%)%+100%%"


def test_escape_pattern_keeps_other_magic_characters():
    assert escape_pattern("a.b*[c]^$?") == "a.b*[c]^$?"


def test_escaped_text_matches_itself():
    for literal in ["IMG-", "(copy)", "50%", "a+b", "x-(y)+%z"]:
        assert pattern_sub(literal, escape_pattern(literal), "") == ""


SUB_CASES = [
    # (subject, pattern, replacement, count, expected, description)
    ("IMG_0001", "%d+", "#", 0, "IMG_#", "Digit class, greedy"),
    ("aaa", "a-", "x", 0, "xaxaxax", "Lazy repetition matches empty"),
    ("<a><b>", "<.->", "X", 1, "X<b>", "Lazy repetition"),
    ("abcabc", "^abc", "X", 0, "Xabc", "Start anchor"),
    ("abcabc", "abc$", "X", 0, "abcX", "End anchor"),
    ("a^b", "a^b", "X", 0, "X", "'^' inside is literal"),
    ("a$b", "a$b", "X", 0, "X", "'$' inside is literal"),
    ("a*b", "*", "x", 0, "axb", "Quantifier with nothing to repeat"),
    ("a\nb", "a.b", "X", 0, "X", "Dot matches newline"),
    ("a1-b2", "[%d%-]", "", 0, "ab", "Set with classes and escapes"),
    ("abc123", "[^%a]", "", 0, "abc", "Negated set"),
    ("abcxyz", "[a-c]", "", 0, "xyz", "Range in set"),
    ("a]b", "[]]", "", 0, "ab", "']' first in set"),
    ("a b\tc", "%S+", "x", 0, "x x\tx", "Complemented class"),
    ("a1b2", "%A", "", 0, "ab", "Complemented letter class"),
    ("a.b,c!", "%p", "", 0, "abc", "Punctuation class"),
    ("Hello World", "%u", "_", 0, "_ello _orld", "Uppercase class"),
    ("x1y2", "%l", "", 0, "12", "Lowercase class"),
    ("2024-05-17", "(%d+)%-(%d+)%-(%d+)", "%3.%2.%1", 0, "17.05.2024", "Captures"),
    ("aa-bb-cd", "(%a)%1", "X", 0, "X-X-cd", "Back-reference"),
    ("abc", "b", "[%0]", 0, "a[b]c", "Whole match as %0"),
    ("abc", "b", "<%1>", 0, "a<b>c", "%1 is the whole match without captures"),
    ("50", "%d+", "%0%%", 0, "50%", "Literal percent in replacement"),
    ("a.b.c", "%.", "/", 1, "a/b.c", "Escaped dot, first only"),
    ("café", "%a+", "x", 0, "xé", "Classes are ASCII only"),
    ("IMG_0001.CR2", "[%A]", "x", 0, "IMGxxxxxxCRx", "Complement inside a set"),
    ("café 1", "[%A]", "", 0, "caf", "Set complement covers non-ASCII"),
    ("aB3 c", "[%L%s]", "", 0, "ac", "Complement and class in one set"),
    ("a-b_1", "[^%W]", "", 0, "-_", "Negated set of a complement"),
    ("a1!", "[%D]", "", 0, "1", "Digit complement in a set"),
    ("IMG_0001.CR2", "%d*", "-", 0, "-I-M-G-_-.-C-R-", "Empty match after a match is skipped"),
    ("abc", "x*", "-", 0, "-a-b-c-", "Empty matches between characters"),
]


@pytest.mark.parametrize("subject,pattern,replacement,count,expected,description", SUB_CASES)
def test_pattern_sub(subject, pattern, replacement, count, expected, description):
    assert pattern_sub(subject, pattern, replacement, count=count) == expected, description


@pytest.mark.parametrize("pattern", [
    "abc%",
    "[abc",
    "[%a",
    "%b()",
    "%f[%a]",
    "%2",
    "(a)%2",
])
def test_invalid_patterns(pattern):
    with pytest.raises(PatternError) as exc_info:
        translate_pattern(pattern)

    assert exc_info.value.pattern == pattern
    assert "Invalid pattern" in str(exc_info.value)


def test_invalid_replacement_capture():
    with pytest.raises(PatternError):
        pattern_sub("a", "a", "%2")


def test_translation_is_cached():
    assert translate_pattern("%d+") is translate_pattern("%d+")
