# src/text_scanner/scanning/predicates.py

"""
predicates.py.

Does: Position-aware character predicates for Scanner.next_token and
      fixed-width numeric parsers for Scanner.next_number.
Returns: is_word_char(), is_number_char(), is_hex_char(), is_identifier_char(), int32().
Used by: Scanner built-ins (words/numbers), custom token shapes, the demo CLI.
"""

from __future__ import annotations

import re
from collections.abc import Callable

__all__ = [
    "TokenPredicate",
    "INT32_MIN",
    "INT32_MAX",
    "is_whitespace",
    "rstrip_whitespace",
    "is_word_char",
    "is_number_char",
    "is_hex_char",
    "is_identifier_char",
    "int32",
]

# (char, index_within_token) -> bool
TokenPredicate = Callable[[str, int], bool]

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_ASCII_DIGITS = frozenset("0123456789")
_ASCII_HEX = frozenset("0123456789abcdefABCDEF")
_SIGNED_DECIMAL_RE = re.compile(r"-?[0-9]+")

# str.isspace() also accepts the ASCII file/group/record/unit separators,
# which are not in the Unicode White_Space property.
_NOT_WHITE_SPACE = frozenset("\x1c\x1d\x1e\x1f")


# ─────────────────────────────────────────────────────────────────────────────
# Whitespace
# ─────────────────────────────────────────────────────────────────────────────


def is_whitespace(ch: str) -> bool:
    """Does: Test the Unicode White_Space property (str.isspace minus \\x1c-\\x1f)."""
    return ch.isspace() and ch not in _NOT_WHITE_SPACE


def rstrip_whitespace(text: str) -> str:
    """
    Does: Trim trailing White_Space characters; \\x1c-\\x1f are kept.
    Returns: `text` without its trailing whitespace run.
    """
    end = len(text)
    while end and is_whitespace(text[end - 1]):
        end -= 1
    return text[:end]


# ─────────────────────────────────────────────────────────────────────────────
# Predicates
# ─────────────────────────────────────────────────────────────────────────────


def is_word_char(ch: str, index: int) -> bool:
    """Does: Accept any non-whitespace character (index unused)."""
    return not is_whitespace(ch)


def is_number_char(ch: str, index: int) -> bool:
    """
    Does: Accept ASCII decimal digits, plus '-' only as the first char of the match.
    Returns: True if `ch` may belong to a signed decimal token at `index`.
    """
    if ch in _ASCII_DIGITS:
        return True
    return ch == "-" and index == 0


def is_hex_char(ch: str, index: int) -> bool:
    return ch in _ASCII_HEX


def is_identifier_char(ch: str, index: int) -> bool:
    """Does: Accept [A-Za-z_] first, then [A-Za-z0-9_]."""
    if ch == "_" or (ch.isascii() and ch.isalpha()):
        return True
    return index > 0 and ch in _ASCII_DIGITS


# ─────────────────────────────────────────────────────────────────────────────
# Numeric parsers
# ─────────────────────────────────────────────────────────────────────────────


def int32(text: str) -> int:
    """
    Does: Parse a signed decimal integer that must fit in 32 bits.
          Only ASCII digits with an optional leading '-' are accepted.
    Returns: The parsed int.
    Raises: ValueError on malformed text, OverflowError when out of range.
    """
    if not isinstance(text, str) or not _SIGNED_DECIMAL_RE.fullmatch(text):
        raise ValueError(f"invalid digit found in {text!r}")
    value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        raise OverflowError(f"{text} does not fit in a 32-bit signed integer")
    return value
