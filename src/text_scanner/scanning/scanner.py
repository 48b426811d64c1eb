# src/text_scanner/scanning/scanner.py

"""
scanner.py.

Does: Cursor-based scanner over an immutable input string. Extracts the next
      word, signed number, line, or custom predicate-shaped token, advancing a
      single offset that never moves backwards past a successful read.
Returns: Scanner with remaining(), next_token(), next_word(), next_number(),
         next_line() and iterator helpers words()/numbers()/lines().
Used by: The demo calculator and any caller tokenizing small in-memory texts.

"Not found" is always reported as None, never as an exception; a failed call
leaves the offset exactly where it was.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import TypeVar, overload

from text_scanner.scanning.predicates import (
    TokenPredicate,
    is_number_char,
    is_whitespace,
    is_word_char,
    rstrip_whitespace,
)

__all__ = ["Scanner"]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

N = TypeVar("N")

_PREVIEW_LEN = 20


class Scanner:
    """
    Does: Hold a reference to `source` and an offset into it
          (0 <= offset <= len(source)). Every read starts at the offset.
    Used by: Callers reading tokens one at a time from a fixed text.

    Example:
        >>> s = Scanner("8 + 9")
        >>> s.next_number(), s.next_word(), s.next_number()
        (8, '+', 9)
    """

    __slots__ = ("_source", "_offset")

    def __init__(self, source: str) -> None:
        if not isinstance(source, str):
            raise TypeError(f"Scanner source must be str, got {type(source).__name__}")
        self._source = source
        self._offset = 0

    # ─────────────────────────────────────────────────────────────────────
    # State accessors
    # ─────────────────────────────────────────────────────────────────────

    @property
    def source(self) -> str:
        return self._source

    @property
    def offset(self) -> int:
        """Does: Code-point index separating consumed from unconsumed text."""
        return self._offset

    @property
    def at_end(self) -> bool:
        return self._offset >= len(self._source)

    def remaining(self) -> str:
        """
        Does: Derive the unconsumed suffix source[offset:].
        Returns: The remaining text ("" once everything is consumed).
        """
        return self._source[self._offset :]

    # Kept for callers used to the getter-style name.
    get_remaining = remaining

    def __repr__(self) -> str:
        rest = self.remaining()
        preview = rest if len(rest) <= _PREVIEW_LEN else rest[:_PREVIEW_LEN] + "..."
        return f"Scanner(offset={self._offset}, remaining={preview!r})"

    # ─────────────────────────────────────────────────────────────────────
    # Primitive
    # ─────────────────────────────────────────────────────────────────────

    def next_token(self, predicate: TokenPredicate) -> str | None:
        """
        Does: Skip leading whitespace the predicate rejects, then take the first
              maximal run of characters for which predicate(ch, index) holds.
              `index` is the char's position inside the token being matched,
              so index == 0 identifies its first character.
        Returns: The token, or None (offset unchanged) if the first
                 non-skipped character does not match or input is exhausted.
        """
        source = self._source
        end = len(source)
        pos = self._offset

        while pos < end and is_whitespace(source[pos]) and not predicate(source[pos], 0):
            pos += 1

        start = pos
        while pos < end and predicate(source[pos], pos - start):
            pos += 1

        if pos == start:
            log.debug("next_token: no match at offset %d", self._offset)
            return None

        self._offset = pos
        return source[start:pos]

    # ─────────────────────────────────────────────────────────────────────
    # Token kinds
    # ─────────────────────────────────────────────────────────────────────

    def next_word(self) -> str | None:
        """
        Does: Read the next run of non-whitespace characters.
        Returns: The word, or None if only whitespace remains.
        """
        return self.next_token(is_word_char)

    @overload
    def next_number(self) -> int | None: ...
    @overload
    def next_number(self, number_type: Callable[[str], N]) -> N | None: ...

    def next_number(self, number_type: Callable[[str], object] = int) -> object | None:
        """
        Does: Read digits with an optional leading '-' and parse them with
              `number_type` (int by default; see predicates.int32 for a
              fixed-width variant). A token the parser rejects with
              ValueError or ArithmeticError (a lone '-', an out-of-range
              value, decimal.InvalidOperation) is rolled back.
        Returns: The parsed number, or None with the offset restored.
        """
        saved = self._offset
        token = self.next_token(is_number_char)
        if token is None:
            return None
        try:
            return number_type(token)
        except (ValueError, ArithmeticError) as e:
            log.debug("next_number: rejected %r (%s); rolling back to %d", token, e, saved)
            self._offset = saved
            return None

    def next_line(self) -> str | None:
        """
        Does: Read up to the next '\\n' (consumed, not returned) or to the end.
              Trailing whitespace is trimmed from the returned line only.
        Returns: The line, or None when nothing remains.
        """
        rest = self.remaining()
        if not rest:
            return None

        newline_pos = rest.find("\n")
        if newline_pos == -1:
            self._offset = len(self._source)
            return rstrip_whitespace(rest)

        self._offset += newline_pos + 1
        return rstrip_whitespace(rest[:newline_pos])

    # ─────────────────────────────────────────────────────────────────────
    # Iterators
    # ─────────────────────────────────────────────────────────────────────

    def words(self) -> Iterator[str]:
        """Does: Yield next_word() results until it returns None."""
        while (word := self.next_word()) is not None:
            yield word

    def numbers(self, number_type: Callable[[str], N] = int) -> Iterator[N]:  # type: ignore[assignment]
        """Does: Yield next_number(number_type) results until it returns None."""
        while (number := self.next_number(number_type)) is not None:
            yield number

    def lines(self) -> Iterator[str]:
        """Does: Yield next_line() results until input is exhausted."""
        while (line := self.next_line()) is not None:
            yield line
