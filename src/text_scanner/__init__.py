"""
text_scanner
============

Does: Root package for the cursor-based text scanner.
Returns: Re-exports Scanner and the built-in token predicates.
Used by: All imports starting from `text_scanner.*`.
"""

from text_scanner.scanning import (
    INT32_MAX,
    INT32_MIN,
    Scanner,
    int32,
    is_hex_char,
    is_identifier_char,
    is_number_char,
    is_word_char,
)

__all__: list[str] = [
    "Scanner",
    "is_word_char",
    "is_number_char",
    "is_hex_char",
    "is_identifier_char",
    "int32",
    "INT32_MIN",
    "INT32_MAX",
]
__docformat__ = "google"
