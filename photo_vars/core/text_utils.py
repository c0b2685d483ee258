"""
Text conversion helpers for substituted values.
File: photo_vars/core/text_utils.py
"""

import re


ACCENT_MAP = str.maketrans({
    "à": "a", "á": "a", "â": "a", "ã": "a", "ä": "a",
    "ç": "c",
    "è": "e", "é": "e", "ê": "e", "ë": "e",
    "ì": "i", "í": "i", "î": "i", "ï": "i",
    "ñ": "n",
    "ò": "o", "ó": "o", "ô": "o", "õ": "o", "ö": "o",
    "ù": "u", "ú": "u", "û": "u", "ü": "u",
    "ý": "y", "ÿ": "y",
    "À": "A", "Á": "A", "Â": "A", "Ã": "A", "Ä": "A",
    "Ç": "C",
    "È": "E", "É": "E", "Ê": "E", "Ë": "E",
    "Ì": "I", "Í": "I", "Î": "I", "Ï": "I",
    "Ñ": "N",
    "Ò": "O", "Ó": "O", "Ô": "O", "Õ": "O", "Ö": "O",
    "Ù": "U", "Ú": "U", "Û": "U", "Ü": "U",
    "Ý": "Y",
})

URL_UNSAFE_RGX = re.compile(r'[^A-Za-z0-9 ]')


def strip_accents(text: str) -> str:
    """
    Replace accented Latin characters with their unaccented ASCII letter.

    Examples:
        "Café Zürich" -> "Cafe Zurich"
        "Señor"       -> "Senor"
    """
    return text.translate(ACCENT_MAP)


def escape_xml_characters(text: str) -> str:
    """
    Escape the five XML special characters.

    '&' is handled first so the other entities are not escaped twice.
    """
    text = text.replace("&", "&amp;")
    text = text.replace('"', "&quot;")
    text = text.replace("'", "&apos;")
    text = text.replace("<", "&lt;")
    text = text.replace(">", "&gt;")
    return text


def urlencode(text: str) -> str:
    """
    Encode text for use in a URL query.

    Newlines become CRLF, every byte outside [A-Za-z0-9 ] becomes %XX,
    and spaces become '+'.

    Examples:
        "sunset at the lake.jpg" -> "sunset+at+the+lake%2Ejpg"
    """
    if not text:
        return text

    text = text.replace("\n", "\r\n")

    def _percent(match):
        return "".join(f"%{byte:02X}" for byte in match.group(0).encode("utf-8"))

    text = URL_UNSAFE_RGX.sub(_percent, text)
    return text.replace(" ", "+")


# End of file #
