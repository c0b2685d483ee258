"""
Regex patterns for the substitution subsection.
File: photo_vars/substitution/substitution_regex_patterns.py

All patterns are compiled with DOTALL so token bodies and modifier text may
contain newlines.
"""

import re

# $( ... ) with room for one inner ')' so "$(TITLE-$(FILE.NAME))" is one token
TOKEN_RGX = re.compile(r'\$\((.*?\)?)\)', re.DOTALL)

# Leading placeholder name inside a token body
PLACEHOLDER_NAME_RGX = re.compile(r'[A-Za-z._]+')

# Modifier expressions, tested in this order (first match wins)
CAPITALIZE_ALL_RGX = re.compile(r'\^\^')
CAPITALIZE_FIRST_RGX = re.compile(r'\^')
LOWERCASE_ALL_RGX = re.compile(r',,')
LOWERCASE_FIRST_RGX = re.compile(r',')
SLICE_RGX = re.compile(r':(-?\d+):(-?\d+)')
SLICE_OPEN_RGX = re.compile(r':(-?\d+)')
DEFAULT_PLACEHOLDER_RGX = re.compile(r'-\$\(.*?\)', re.DOTALL)
DEFAULT_LITERAL_RGX = re.compile(r'-(.+)', re.DOTALL)
REPLACE_NON_EMPTY_RGX = re.compile(r'\+(.+)', re.DOTALL)
STRIP_PREFIX_RGX = re.compile(r'#(.+)', re.DOTALL)
STRIP_SUFFIX_RGX = re.compile(r'%(.+)', re.DOTALL)
REPLACE_ALL_RGX = re.compile(r'//(.*?)/(.+)', re.DOTALL)
REPLACE_START_RGX = re.compile(r'/#(.+)/(.+)', re.DOTALL)
REPLACE_END_RGX = re.compile(r'/%(.*?)/(.+)', re.DOTALL)
REPLACE_FIRST_RGX = re.compile(r'/(.*?)/(.+)', re.DOTALL)

# Reference inside a default-from-placeholder modifier: only a bare name
DEFAULT_REFERENCE_RGX = re.compile(r'-\$\(([A-Za-z._]+)\)')

# EXIF capture timestamp "YYYY:MM:DD HH:MM:SS[.fraction]"
EXIF_DATETIME_RGX = re.compile(
    r'(\d+):(\d+):(\d+) (\d+):(\d+):(\d+)(?:\.(\d+))?'
)

# End of file #
