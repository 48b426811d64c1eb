# src/text_scanner/demo.py
"""
demo.py.

Does: Tiny calculator built on Scanner: reads a number, an operator word and a
      second number, then applies + - * /.
Returns: evaluate() -> (x, op, y, result); main() CLI printing "x op y = result".
Used by: The `text-scanner-demo` console script.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence

from rapidfuzz import fuzz, process

from text_scanner.scanning import Scanner, int32
from text_scanner.utils import (
    ConfigParseError,
    ConfigTypeError,
    debug,
    enable_topics,
    load_config,
)

__all__ = ["DemoError", "OPERATORS", "evaluate", "suggest_operator", "main"]

log = logging.getLogger(__name__)

DEFAULT_INPUT = "8 + 9"
SUGGEST_MIN_SCORE = 60


class DemoError(ValueError):
    """Raise when the demo input cannot be evaluated (missing number, bad operator)."""


def _divide(x: int, y: int) -> int:
    # Truncates toward zero; ZeroDivisionError propagates.
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": lambda x, y: x + y,
    "-": lambda x, y: x - y,
    "*": lambda x, y: x * y,
    "/": _divide,
}

# Spelled-out aliases only feed suggestions, they are not accepted as operators.
_OPERATOR_NAMES = {"plus": "+", "minus": "-", "times": "*", "divide": "/"}


def suggest_operator(word: str) -> str | None:
    """
    Does: Fuzzy-match an unknown operator word against symbols and their names.
    Returns: The closest operator symbol, or None below SUGGEST_MIN_SCORE.
    """
    choices = {**{op: op for op in OPERATORS}, **_OPERATOR_NAMES}
    hit = process.extractOne(
        word.lower(), list(choices), scorer=fuzz.ratio, score_cutoff=SUGGEST_MIN_SCORE
    )
    if hit is None:
        return None
    return choices[hit[0]]


def evaluate(text: str) -> tuple[int, str, int, int]:
    """
    Does: Scan "<number> <operator> <number>" from `text` and compute the result.
    Returns: (x, op, y, result).
    Raises: DemoError for a missing/unparseable number or an unknown operator;
            ZeroDivisionError for '/' by zero.
    """
    scanner = Scanner(text)

    x = scanner.next_number(int32)
    if x is None:
        raise DemoError(f"Expecting number at offset {scanner.offset}")
    op = scanner.next_word()
    if op is None:
        raise DemoError(f"Expecting word at offset {scanner.offset}")
    y = scanner.next_number(int32)
    if y is None:
        raise DemoError(f"Expecting number at offset {scanner.offset}")
    debug(f"scanned x={x} op={op!r} y={y} rest={scanner.remaining()!r}", topic="demo")

    apply = OPERATORS.get(op)
    if apply is None:
        hint = suggest_operator(op)
        suffix = f" (did you mean {hint!r}?)" if hint else ""
        raise DemoError(f"Invalid operator {op!r}{suffix}")

    return x, op, y, apply(x, y)


def _load_sample(name: str) -> str:
    samples = load_config("samples")
    try:
        text = samples[name]
    except KeyError:
        known = ", ".join(sorted(samples)) or "none"
        raise DemoError(f"Unknown sample {name!r} (known: {known})") from None
    if not isinstance(text, str):
        raise DemoError(f"Sample {name!r} must be a string, got {type(text).__name__}")
    return text


def main(argv: Sequence[str] | None = None) -> None:
    """CLI demo: scan two numbers and an operator, print the arithmetic result."""
    parser = argparse.ArgumentParser(
        prog="text-scanner-demo",
        description="Scan '<number> <operator> <number>' and print the result.",
    )
    parser.add_argument("text", nargs="*", help="Expression to scan (e.g. 8 + 9)")
    parser.add_argument("--sample", help="Name of an input stored in the samples.json data file")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)
    if args.debug:
        enable_topics("demo")
        logging.basicConfig(level=logging.DEBUG)

    try:
        text = _load_sample(args.sample) if args.sample else " ".join(args.text) or DEFAULT_INPUT
        x, op, y, result = evaluate(text)
    except (DemoError, ZeroDivisionError, ConfigParseError, ConfigTypeError, OSError) as e:
        log.debug("demo failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"{x} {op} {y} = {result}")


if __name__ == "__main__":
    main()
