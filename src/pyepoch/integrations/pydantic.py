"""pydantic field type for epoch timestamps."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator

from pyepoch._codec import DEFAULT_CODEC, TimestampCodec, encode_int
from pyepoch._errors import ERR_MSG_NOT_A_NUMERAL
from pyepoch._instant import Instant

__all__ = ["EpochTime", "epoch_time_type"]


def epoch_time_type(codec: TimestampCodec = DEFAULT_CODEC) -> Any:
    """Build an ``Annotated[Instant, ...]`` type bound to ``codec``.

    Validation accepts instants, datetimes (naive taken as UTC), ints,
    floats and str/bytes numerals. Serialization writes the codec's
    numeral as an int in both Python and JSON modes.

    pydantic parses JSON numbers before validation, so a JSON float is
    decoded from its ``repr`` rather than its literal text. Literals the
    codec would reject can therefore validate: ``1609459200.1230`` becomes
    ``1609459200.123`` and ``1.6094592e9`` becomes ``1609459200.0``. Use
    :mod:`pyepoch.integrations.json` when the literal text matters.
    """

    def validate(value: Any) -> Instant:
        if isinstance(value, Instant):
            return value
        if isinstance(value, datetime):
            return Instant.from_datetime(value)
        # bool is an int subclass but never a timestamp
        if isinstance(value, bool):
            raise ValueError(ERR_MSG_NOT_A_NUMERAL)
        if isinstance(value, int):
            return codec.decode(str(value))
        if isinstance(value, float):
            return codec.decode(repr(value))
        if isinstance(value, (str, bytes, bytearray)):
            return codec.decode(value)
        raise ValueError(ERR_MSG_NOT_A_NUMERAL)

    def serialize(value: Instant) -> int:
        return encode_int(codec, value)

    return Annotated[
        Instant,
        PlainValidator(validate),
        PlainSerializer(serialize, return_type=int, when_used="always"),
    ]


EpochTime = epoch_time_type()
