"""Shared test fixtures."""

import pytest

from pyepoch import Instant, decode

NEW_YEAR_2021 = 1609459200
"""2021-01-01T00:00:00Z in seconds since the epoch."""


class SecondsCodec:
    """Codec writing whole seconds; decodes like the default codec."""

    def encode(self, instant):
        return str(instant.seconds).encode("ascii")

    def decode(self, data):
        return decode(data)


@pytest.fixture
def new_year():
    return Instant.from_unix(NEW_YEAR_2021)


@pytest.fixture
def seconds_codec():
    return SecondsCodec()
