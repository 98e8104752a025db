"""Strict integer parsing and truncating division helpers."""

from __future__ import annotations

import re

from pyepoch._constants import INT64_MAX, INT64_MIN
from pyepoch._errors import (
    ERR_MSG_INVALID_SYNTAX,
    ERR_MSG_OUT_OF_RANGE,
    NumeralParseError,
)

# ASCII digits only: int() would also accept whitespace, underscores and
# non-ASCII decimal digits.
INT_LITERAL_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


def parse_int64(text: str) -> int:
    """Parse a base-10 signed 64-bit integer.

    Accepts an optional leading sign followed by ASCII digits, nothing else.

    Raises:
        NumeralParseError: On a syntax error or a value outside int64.
    """
    if not INT_LITERAL_RE.fullmatch(text):
        raise NumeralParseError(
            ERR_MSG_INVALID_SYNTAX,
            f"parsing {text!r}: invalid syntax",
        )
    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        raise NumeralParseError(
            ERR_MSG_OUT_OF_RANGE,
            f"parsing {text!r}: value out of range",
        )
    return value


def trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero (``//`` rounds toward -inf)."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def as_text(data: bytes | bytearray | memoryview | str) -> str:
    """Return ``data`` as text, decoding byte buffers as ASCII."""
    if isinstance(data, str):
        return data
    try:
        return bytes(data).decode("ascii")
    except UnicodeDecodeError as e:
        raise NumeralParseError(
            ERR_MSG_INVALID_SYNTAX,
            f"parsing {bytes(data)!r}: non-ASCII input",
            wrapped=e,
        ) from e
