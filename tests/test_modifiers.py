"""
Test modifier classification and evaluation.
File: tests/test_modifiers.py

Run: pytest tests/test_modifiers.py -v
"""

import logging

import pytest

from photo_vars.core.exceptions import MalformedTokenError
from photo_vars.substitution.modifiers import (
    ModifierKind,
    apply_modifier,
    parse_modifier,
    substring,
)


CLASSIFICATION_CASES = [
    # (modifier text, expected kind)
    ("^^", ModifierKind.CAPITALIZE_ALL),
    ("^", ModifierKind.CAPITALIZE_FIRST),
    (",,", ModifierKind.LOWERCASE_ALL),
    (",", ModifierKind.LOWERCASE_FIRST),
    (":0:3", ModifierKind.SLICE),
    (":-3:-1", ModifierKind.SLICE),
    (":4", ModifierKind.SLICE_FROM_START),
    (":-5", ModifierKind.SLICE_FROM_START),
    ("-$(FILE.NAME)", ModifierKind.DEFAULT_FROM_PLACEHOLDER),
    ("-5", ModifierKind.DEFAULT_LITERAL),
    ("-Untitled", ModifierKind.DEFAULT_LITERAL),
    ("+yes", ModifierKind.REPLACE_IF_NON_EMPTY),
    ("#IMG_", ModifierKind.STRIP_PREFIX),
    ("%.CR2", ModifierKind.STRIP_SUFFIX),
    ("//a/b", ModifierKind.REPLACE_ALL),
    ("/#a/b", ModifierKind.REPLACE_FIRST_START),
    ("/%a/b", ModifierKind.REPLACE_FIRST_END),
    ("/a/b", ModifierKind.REPLACE_FIRST),
]


@pytest.mark.parametrize("expr,kind", CLASSIFICATION_CASES)
def test_parse_modifier_kind(expr, kind):
    assert parse_modifier(expr).kind is kind


@pytest.mark.parametrize("expr", ["", ":abc", "-", "+", "?x", "/nothing"])
def test_unrecognised_modifiers_pass_through(expr):
    op = parse_modifier(expr)

    assert op is None
    assert apply_modifier(op, "value", {}) == "value"


def test_parse_modifier_fields():
    assert parse_modifier("//%d+/#").pattern == "%d+"
    assert parse_modifier("//%d+/#").replacement == "#"
    assert parse_modifier("-$(PICTURES_FOLDER)").reference == "FOLDER.PICTURES"
    assert parse_modifier("+tagged").text == "tagged"


def test_slice_positions():
    # Start offsets are 0-based, end offsets are end positions
    assert parse_modifier(":0:3").start == 1
    assert parse_modifier(":0:3").end == 3
    assert parse_modifier(":4").start == 5
    assert parse_modifier(":-3").start == -3


def test_negative_slice_bounds_are_swapped():
    op = parse_modifier(":-1:-3")

    assert (op.start, op.end) == (-3, -1)
    assert apply_modifier(op, "IMG_0001.CR2", {}) == "CR2"


def test_nested_default_reference_is_malformed_when_needed():
    op = parse_modifier("-$(FILE.NAME:0:3)")

    assert op.kind is ModifierKind.DEFAULT_FROM_PLACEHOLDER
    assert op.reference is None
    assert apply_modifier(op, "Sunset", {"FILE.NAME": "IMG"}) == "Sunset"
    with pytest.raises(MalformedTokenError):
        apply_modifier(op, "", {"FILE.NAME": "IMG"})


VALUE = "IMG_0001.CR2"

APPLY_CASES = [
    # (modifier text, value, expected, description)
    ("^^", "Sunset over the bay", "SUNSET OVER THE BAY", "Uppercase all"),
    ("^", "canon", "Canon", "Uppercase first"),
    ("^", "/photos", "/photos", "Uppercase first, not a letter"),
    (",,", "Sunset Over", "sunset over", "Lowercase all"),
    (",", "Canon", "canon", "Lowercase first"),
    ("^^", "café", "CAFé", "Case change is ASCII only"),
    (":0:3", VALUE, "IMG", "Slice start"),
    (":4:8", VALUE, "0001", "Slice middle"),
    (":4", VALUE, "0001.CR2", "Open slice"),
    (":-3", VALUE, "CR2", "Open slice from the end"),
    (":2:-4", VALUE, "G_0001.", "Slice with negative end"),
    (":20", VALUE, "", "Slice past the end"),
    (":0:100", VALUE, VALUE, "Slice end clamped"),
    ("-Untitled", "", "Untitled", "Default for empty"),
    ("-Untitled", "Sunset", "Sunset", "Default ignored"),
    ("+yes", "x", "yes", "Replace non-empty"),
    ("+yes", "", "", "Replace non-empty, empty value"),
    ("#IMG_", VALUE, "0001.CR2", "Strip prefix"),
    ("#0001", VALUE, VALUE, "Strip prefix only at start"),
    ("%.CR2", VALUE, "IMG_0001", "Strip suffix"),
    ("#IMG-", "IMG-0001.jpg", "0001.jpg", "Strip prefix with '-'"),
    ("%(1)", "photo(1)", "photo", "Strip suffix with parentheses"),
    ("%+1", "a+1", "a", "Strip suffix with '+'"),
    ("#%d", "%d%d", "%d", "Strip prefix with '%'"),
    ("//0/x", VALUE, "IMG_xxx1.CR2", "Replace all"),
    ("//%d/#", VALUE, "IMG_####.CR#", "Replace all digits"),
    ("/0/x", VALUE, "IMG_x001.CR2", "Replace first"),
    ("/(%d+)/<%1>", VALUE, "IMG_<0001>.CR2", "Replace first with capture"),
    ("/#IMG/DSC", VALUE, "DSC_0001.CR2", "Replace at start"),
    ("/#0/x", VALUE, VALUE, "Replace at start, no match"),
    ("/%CR2/jpg", VALUE, "IMG_0001.jpg", "Replace at end"),
    ("/%IMG/x", VALUE, VALUE, "Replace at end, no match"),
]


@pytest.mark.parametrize("expr,value,expected,description", APPLY_CASES)
def test_apply_modifier(expr, value, expected, description):
    assert apply_modifier(parse_modifier(expr), value, {}) == expected, description


def test_default_from_placeholder():
    op = parse_modifier("-$(FILE.NAME)")
    registry = {"FILE.NAME": "IMG_0001.CR2"}

    assert apply_modifier(op, "", registry) == "IMG_0001.CR2"
    assert apply_modifier(op, "My title", registry) == "My title"


def test_default_from_unknown_placeholder(caplog):
    op = parse_modifier("-$(NOPE)")

    with caplog.at_level(logging.WARNING, logger="photo_vars"):
        assert apply_modifier(op, "", {}) == ""
    assert "NOPE is not an allowed variable" in caplog.text


def test_pattern_error_leaves_value_unchanged(caplog):
    op = parse_modifier("//%b()/x")

    with caplog.at_level(logging.WARNING, logger="photo_vars"):
        assert apply_modifier(op, "a(b)c", {}) == "a(b)c"
    assert "Invalid pattern" in caplog.text


SUBSTRING_CASES = [
    # (start, end, expected)
    (1, -1, "abcdef"),
    (2, 4, "bcd"),
    (-2, -1, "ef"),
    (0, 2, "ab"),
    (4, 2, ""),
    (-100, 3, "abc"),
    (5, 100, "ef"),
    (7, -1, ""),
]


@pytest.mark.parametrize("start,end,expected", SUBSTRING_CASES)
def test_substring(start, end, expected):
    assert substring("abcdef", start, end) == expected


def test_modifier_op_str():
    assert str(parse_modifier("^^")) == "capitalize-all"
    assert str(parse_modifier(":0:3")) == "slice(start=1, end=3)"
