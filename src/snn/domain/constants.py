"""Limits and byte ranges of the style name grammar."""

from __future__ import annotations

# Upper bound on the UTF-8 encoded length of a style name.
MAX_LENGTH = 32

UPPERCASE_MIN = 0x41  # A
UPPERCASE_MAX = 0x5A  # Z
LOWERCASE_MIN = 0x61  # a
LOWERCASE_MAX = 0x7A  # z
DIGIT_MIN = 0x30  # 0
DIGIT_MAX = 0x39  # 9
