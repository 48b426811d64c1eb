# text_scanner/scanning/__init__.py
"""
scanning.
========

Does: Provide the cursor-based Scanner and its character predicates.
Exports: Scanner, TokenPredicate, is_whitespace, rstrip_whitespace, is_word_char,
         is_number_char, is_hex_char, is_identifier_char, int32, INT32_MIN, INT32_MAX
Used by: The demo CLI and library callers.
"""

from __future__ import annotations

from .predicates import (
    INT32_MAX,
    INT32_MIN,
    TokenPredicate,
    int32,
    is_hex_char,
    is_identifier_char,
    is_number_char,
    is_whitespace,
    is_word_char,
    rstrip_whitespace,
)
from .scanner import Scanner

__all__ = [
    # scanner
    "Scanner",
    # predicates
    "TokenPredicate",
    "is_whitespace",
    "rstrip_whitespace",
    "is_word_char",
    "is_number_char",
    "is_hex_char",
    "is_identifier_char",
    # numeric parsers
    "int32",
    "INT32_MIN",
    "INT32_MAX",
]
