"""
Test text conversion helpers.
File: tests/test_text_utils.py

Run: pytest tests/test_text_utils.py -v
"""

import pytest

from photo_vars.core.text_utils import escape_xml_characters, strip_accents, urlencode


@pytest.mark.parametrize("text,expected", [
    ("Café Zürich", "Cafe Zurich"),
    ("Señor", "Senor"),
    ("ÀÉÎÕÜ", "AEIOU"),
    ("plain", "plain"),
    ("", ""),
])
def test_strip_accents(text, expected):
    assert strip_accents(text) == expected


def test_escape_xml_characters():
    assert (escape_xml_characters("<a href=\"x\">Tom & Jerry's</a>")
            == "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&apos;s&lt;/a&gt;")


def test_escape_xml_ampersand_not_doubled():
    assert escape_xml_characters("&lt;") == "&amp;lt;"


@pytest.mark.parametrize("text,expected", [
    ("sunset at the lake.jpg", "sunset+at+the+lake%2Ejpg"),
    ("a\nb", "a%0D%0Ab"),
    ("é", "%C3%A9"),
    ("a&b=c", "a%26b%3Dc"),
    ("ABC123", "ABC123"),
    ("", ""),
])
def test_urlencode(text, expected):
    assert urlencode(text) == expected
