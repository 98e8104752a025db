"""Exception hierarchy for epoch timestamp encoding and decoding."""


class EpochError(Exception):
    """Base exception for epoch timestamp errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details (including the rejected input) for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class NumeralParseError(EpochError, ValueError):
    """Raised when a numeral field is not a valid signed 64-bit integer."""


class UnsupportedPrecisionError(EpochError, ValueError):
    """Raised when the normalized digit count maps to no known unit."""


class DocumentDecodeError(EpochError, ValueError):
    """Raised when a timestamp field inside a document fails to decode."""

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        field: str = "",
    ) -> None:
        super().__init__(user_message, internal_details, wrapped)
        self.field = field


# Sanitized user-facing error message constants
ERR_MSG_INVALID_SYNTAX = "invalid syntax"
ERR_MSG_OUT_OF_RANGE = "value out of range"
ERR_MSG_UNEXPECTED_DIGITS = "unexpected number of digits in timestamp"
ERR_MSG_NOT_A_NUMERAL = "timestamp field is not a numeral"
