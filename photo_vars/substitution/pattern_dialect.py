"""
Adapter between the modifier pattern dialect and Python's re module.
File: photo_vars/substitution/pattern_dialect.py

Strip and replace modifiers take their patterns in a small percent-escaped
dialect rather than in regular-expression syntax. This module is the only
place that knows how that dialect maps onto ``re``; the rest of the engine
calls ``escape_pattern``, ``translate_pattern`` and ``pattern_sub``.

Dialect -> re mapping:

    .          any character              .   (DOTALL)
    %a %d %l   letters, digits, lower     [A-Za-z] [0-9] [a-z]
    %s %u %w   space, upper, alnum        [ \\t\\n\\r\\f\\v] [A-Z] [A-Za-z0-9]
    %x %p %c   hex, punctuation, control  [0-9A-Fa-f] [!-/:-@[-`{-~] [\\x00-\\x1f\\x7f]
    %g         printable except space     [!-~]
    %A %D ...  complement of the above    [^...], or code point ranges in a set
    %<symbol>  the symbol itself          re.escape(symbol)
    [set]      set, '%' escapes inside     [set]
    x* x+ x?   greedy repetition          x* x+ x?
    x-         lazy zero-or-more          x*?
    ( )        capture                    ( )
    %1 .. %9   back-reference             (?:\\1) .. (?:\\9)
    ^ (first)  anchor at start            \\A
    $ (last)   anchor at end              \\Z

'^' anywhere but the first position and '$' anywhere but the last are plain
characters, as is a quantifier symbol that has nothing to repeat. All classes
are ASCII only. Balanced matches (%b) and frontiers (%f) have no re
counterpart and raise PatternError.

In replacement strings %0 is the whole match, %1..%9 are captures (%1 is
the whole match when the pattern has no captures) and %% is a literal '%'.
"""

import re
import string

from functools import lru_cache

from photo_vars.core.exceptions import PatternError


# Characters escaped by escape_pattern(): only % - ( ) +
PATTERN_ESCAPE_RGX = re.compile(r'([%\-()+])')

QUANTIFIERS = {
    '*': '*',
    '+': '+',
    '?': '?',
    '-': '*?',
}

_PUNCTUATION = "".join("\\" + ch if ch in "\\]^-[" else ch for ch in string.punctuation)

# Set contents for each class letter (without the enclosing brackets)
CLASS_CONTENTS = {
    'a': 'A-Za-z',
    'c': '\\x00-\\x1f\\x7f',
    'd': '0-9',
    'g': '!-~',
    'l': 'a-z',
    'p': _PUNCTUATION,
    's': ' \\t\\n\\r\\f\\v',
    'u': 'A-Z',
    'w': 'A-Za-z0-9',
    'x': '0-9A-Fa-f',
}


def _code_escape(code: int) -> str:
    return f"\\x{code:02x}" if code < 0x100 else f"\\U{code:08x}"


def _complement_contents(contents: str) -> str:
    """Set contents for every character outside a class, as code point ranges."""
    member = re.compile(f"[{contents}]", re.ASCII)
    ranges = []
    start = None
    for code in range(128):
        if member.fullmatch(chr(code)):
            if start is not None:
                ranges.append((start, code - 1))
                start = None
        elif start is None:
            start = code
    ranges.append((128 if start is None else start, 0x10FFFF))

    return "".join(_code_escape(low) if low == high
                   else f"{_code_escape(low)}-{_code_escape(high)}"
                   for low, high in ranges)


# Complements (%A, %D, ...) usable inside a [...] set
COMPLEMENT_CONTENTS = {
    letter.upper(): _complement_contents(contents)
    for letter, contents in CLASS_CONTENTS.items()
}


def escape_pattern(text: str) -> str:
    """
    Escape a literal string for use inside a pattern.

    Only '%', '-', '(', ')' and '+' are escaped (each is prefixed with '%');
    '.', '*', '?', '[', ']', '^' and '$' keep their pattern meaning.

    Examples:
        "IMG-"     -> "IMG%-"
        "(copy)"   -> "%(copy%)"
        "100%"     -> "100%%"
    """
    return PATTERN_ESCAPE_RGX.sub(r'%\1', text)


def _escape_in_set(ch: str) -> str:
    return "\\" + ch if ch in "\\]^-[" else ch


def _class_item(letter: str, pattern: str) -> str:
    """Translate %<letter> outside a set."""
    lower = letter.lower()
    if lower in CLASS_CONTENTS:
        if letter.islower():
            return f"[{CLASS_CONTENTS[lower]}]"
        return f"[^{CLASS_CONTENTS[lower]}]"
    if letter in ('b', 'f'):
        raise PatternError(pattern, f"'%{letter}' is not supported")
    # Any other escaped character stands for itself
    return re.escape(letter)


def _set_item(letter: str) -> str:
    """Translate %<letter> inside a [...] set."""
    if letter in CLASS_CONTENTS:
        return CLASS_CONTENTS[letter]
    if letter in COMPLEMENT_CONTENTS:
        return COMPLEMENT_CONTENTS[letter]
    return _escape_in_set(letter)


def _translate_set(pattern: str, start: int) -> tuple[str, int]:
    """
    Translate the set that opens at pattern[start] == '['.

    Returns:
        Tuple of (re set text, index just past the closing ']')
    """
    i = start + 1
    end = len(pattern)
    out = ['[']

    if i < end and pattern[i] == '^':
        out.append('^')
        i += 1

    first = True
    while True:
        if i >= end:
            raise PatternError(pattern, "missing ']'")
        ch = pattern[i]

        if ch == ']' and not first:
            out.append(']')
            return "".join(out), i + 1

        first = False
        if ch == '%':
            if i + 1 >= end:
                raise PatternError(pattern, "missing ']'")
            out.append(_set_item(pattern[i + 1]))
            i += 2
        elif i + 2 < end and pattern[i + 1] == '-' and pattern[i + 2] != ']':
            out.append(f"{_escape_in_set(ch)}-{_escape_in_set(pattern[i + 2])}")
            i += 3
        else:
            out.append(_escape_in_set(ch))
            i += 1


@lru_cache(maxsize=256)
def translate_pattern(pattern: str) -> re.Pattern:
    """
    Compile a dialect pattern into an equivalent Python regular expression.

    Args:
        pattern: Pattern in the modifier dialect

    Returns:
        Compiled regular expression

    Raises:
        PatternError: If the pattern is malformed or uses an unsupported item
    """
    out = []
    i = 0
    end = len(pattern)
    group_count = 0

    if pattern.startswith('^'):
        out.append(r'\A')
        i = 1

    while i < end:
        ch = pattern[i]

        if ch == '(':
            group_count += 1
            out.append('(')
            i += 1
            continue
        if ch == ')':
            out.append(')')
            i += 1
            continue
        if ch == '$' and i == end - 1:
            out.append(r'\Z')
            i += 1
            continue

        if ch == '%':
            if i + 1 >= end:
                raise PatternError(pattern, "pattern ends with '%'")
            letter = pattern[i + 1]
            if letter.isdigit():
                index = int(letter)
                if index == 0 or index > group_count:
                    raise PatternError(pattern, f"invalid capture index %{letter}")
                out.append(f"(?:\\{index})")
                i += 2
                continue
            item = _class_item(letter, pattern)
            i += 2
        elif ch == '[':
            item, i = _translate_set(pattern, i)
        elif ch == '.':
            item = '.'
            i += 1
        else:
            item = re.escape(ch)
            i += 1

        if i < end and pattern[i] in QUANTIFIERS:
            item += QUANTIFIERS[pattern[i]]
            i += 1
        out.append(item)

    try:
        return re.compile("".join(out), re.DOTALL | re.ASCII)
    except re.error as e:
        raise PatternError(pattern, str(e)) from e


def expand_replacement(match: re.Match, replacement: str) -> str:
    """
    Expand %0-%9 and %% in a replacement string for one match.

    Raises:
        PatternError: If the replacement names a capture that does not exist
    """
    out = []
    i = 0
    end = len(replacement)
    group_count = match.re.groups

    while i < end:
        ch = replacement[i]
        if ch != '%' or i + 1 >= end:
            out.append(ch)
            i += 1
            continue

        letter = replacement[i + 1]
        i += 2
        if not letter.isdigit():
            out.append(letter)
            continue

        index = int(letter)
        if index == 0 or (index == 1 and group_count == 0):
            out.append(match.group(0))
        elif index <= group_count:
            out.append(match.group(index) or "")
        else:
            raise PatternError(match.re.pattern, f"invalid capture index %{index} in replacement")

    return "".join(out)


def pattern_sub(subject: str, pattern: str, replacement: str, count: int = 0) -> str:
    """
    Replace matches of a dialect pattern in subject.

    Matches are tried left to right. A match that ends where the previous
    accepted match ended is skipped, so an empty match right after a
    replacement is not replaced again:

        pattern_sub("IMG_0001", "%d*", "-") -> "-I-M-G-_-"

    Args:
        subject: Text to search
        pattern: Pattern in the modifier dialect
        replacement: Replacement text (%0-%9 and %% expanded)
        count: Maximum replacements, 0 for all

    Returns:
        The text with replacements made

    Raises:
        PatternError: If the pattern or replacement is invalid
    """
    compiled = translate_pattern(pattern)
    anchored = pattern.startswith('^')

    pieces = []
    pos = 0
    last_end = -1
    replaced = 0
    end = len(subject)

    while count == 0 or replaced < count:
        match = compiled.match(subject, pos)
        if match and match.end() != last_end:
            pieces.append(expand_replacement(match, replacement))
            replaced += 1
            pos = last_end = match.end()
        elif pos < end:
            pieces.append(subject[pos])
            pos += 1
        else:
            break
        if anchored:
            break

    pieces.append(subject[pos:])
    return "".join(pieces)


# End of file #
