"""Digit widths and unit scale factors for epoch numerals."""

SECONDS_WIDTH = 10
"""Digits in the seconds field; shorter numerals are left-padded to this width."""

FRACTION_PAD_WIDTH = 3
"""Fractional parts after a decimal point are right-padded to this width."""

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLISECOND = 1_000_000
NANOS_PER_MICROSECOND = 1_000

FRACTION_SCALE_BY_WIDTH: dict[int, int] = {
    SECONDS_WIDTH: 0,
    SECONDS_WIDTH + 3: NANOS_PER_MILLISECOND,
    SECONDS_WIDTH + 6: NANOS_PER_MICROSECOND,
    SECONDS_WIDTH + 9: 1,
}
"""Total digit count mapped to the nanoseconds per unit of the fractional field."""

UNIT_NAME_BY_WIDTH: dict[int, str] = {
    SECONDS_WIDTH: "seconds",
    SECONDS_WIDTH + 3: "milliseconds",
    SECONDS_WIDTH + 6: "microseconds",
    SECONDS_WIDTH + 9: "nanoseconds",
}

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
