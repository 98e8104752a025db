"""Epoch numeral encoding and unit-inferring decoding."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from pyepoch._constants import (
    FRACTION_PAD_WIDTH,
    FRACTION_SCALE_BY_WIDTH,
    SECONDS_WIDTH,
    UNIT_NAME_BY_WIDTH,
)
from pyepoch._errors import (
    ERR_MSG_UNEXPECTED_DIGITS,
    EpochError,
    UnsupportedPrecisionError,
)
from pyepoch._instant import Instant
from pyepoch._utils import as_text, parse_int64

logger = logging.getLogger(__name__)

Numeral = bytes | bytearray | memoryview | str


@runtime_checkable
class TimestampCodec(Protocol):
    """Two-method capability consumed by document integrations.

    ``encode`` must return an integer numeral; the json and pydantic
    integrations emit it as a JSON number.
    """

    def encode(self, instant: Instant) -> bytes: ...
    def decode(self, data: Numeral) -> Instant: ...


def encode(instant: Instant) -> bytes:
    """Encode ``instant`` as a bare numeral of milliseconds since the epoch.

    Sub-millisecond precision is dropped by truncating toward zero, so
    pre-epoch instants round up rather than down.
    """
    if not isinstance(instant, Instant):
        raise TypeError(f"expected Instant, got {type(instant).__name__}")
    return str(instant.unix_millis()).encode("ascii")


def normalize(text: str) -> str:
    """Rewrite a numeral into the digit string used for unit inference.

    A single decimal point merges the fraction into the digits, padding it
    to three places; short numerals are left-padded to ten digits.
    """
    parts = text.split(".")
    if len(parts) == 2:
        whole, fraction = parts
        text = whole + fraction.ljust(FRACTION_PAD_WIDTH, "0")
    text = text.replace(".", "", 1)
    return text.rjust(SECONDS_WIDTH, "0")


def decode(data: Numeral) -> Instant:
    """Decode an epoch numeral of seconds, ms, us or ns precision.

    The unit is inferred from the digit count after :func:`normalize`:
    10 digits are seconds, 13 milliseconds, 16 microseconds and 19
    nanoseconds.

    Args:
        data: The raw numeral as it appeared in the document.

    Returns:
        The decoded instant.

    Raises:
        NumeralParseError: If either field is not a valid int64 literal.
        UnsupportedPrecisionError: If the digit count maps to no unit.
    """
    text = as_text(data)
    digits = normalize(text)

    try:
        seconds = parse_int64(digits[:SECONDS_WIDTH])
        fraction = parse_int64(digits[SECONDS_WIDTH:]) if len(digits) > SECONDS_WIDTH else 0
    except EpochError as e:
        logger.debug("rejected timestamp %r: %s", text, e.internal())
        raise

    scale = FRACTION_SCALE_BY_WIDTH.get(len(digits))
    if scale is None:
        logger.debug("rejected timestamp %r: %d digits", text, len(digits))
        raise UnsupportedPrecisionError(
            ERR_MSG_UNEXPECTED_DIGITS,
            f"timestamp {text!r} normalized to {len(digits)} digits; "
            f"expected one of {sorted(FRACTION_SCALE_BY_WIDTH)}",
        )

    logger.debug("decoded timestamp %r as %s", text, UNIT_NAME_BY_WIDTH[len(digits)])
    return Instant.from_unix(seconds, fraction * scale)


def encode_int(codec: TimestampCodec, instant: Instant) -> int:
    """Encode with ``codec`` and return the numeral as an int.

    Raises:
        TypeError: If the codec produced something other than an integer numeral.
    """
    numeral = codec.encode(instant)
    try:
        return int(numeral)
    except ValueError as e:
        raise TypeError(
            f"{type(codec).__name__}.encode returned {numeral!r}; expected an integer numeral"
        ) from e


class EpochCodec:
    """Default :class:`TimestampCodec`: millisecond output, any-unit input."""

    def encode(self, instant: Instant) -> bytes:
        return encode(instant)

    def decode(self, data: Numeral) -> Instant:
        return decode(data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


DEFAULT_CODEC = EpochCodec()
