"""pyepoch - Encode and decode epoch timestamps of any precision."""

from __future__ import annotations

import logging

try:
    from pyepoch._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from pyepoch._codec import (
    DEFAULT_CODEC,
    EpochCodec,
    TimestampCodec,
    decode,
    encode,
    normalize,
)
from pyepoch._errors import (
    DocumentDecodeError,
    EpochError,
    NumeralParseError,
    UnsupportedPrecisionError,
)
from pyepoch._instant import EPOCH, Instant

__all__ = [
    "decode",
    "encode",
    "normalize",
    "DEFAULT_CODEC",
    "EPOCH",
    "EpochCodec",
    "Instant",
    "TimestampCodec",
    "DocumentDecodeError",
    "EpochError",
    "NumeralParseError",
    "UnsupportedPrecisionError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
