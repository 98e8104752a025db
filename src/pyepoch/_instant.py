"""Nanosecond-resolution instant value type."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from pyepoch._constants import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
)
from pyepoch._utils import trunc_div

_EPOCH_DATETIME = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True, order=True)
class Instant:
    """An absolute point in time, stored as nanoseconds since the Unix epoch.

    Instants are immutable and compare, hash and sort by value. They carry
    no time zone; :meth:`to_datetime` and :meth:`isoformat` render in UTC.
    """

    unix_nanos: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.unix_nanos, bool) or not isinstance(self.unix_nanos, int):
            raise TypeError(
                f"unix_nanos must be an int, got {type(self.unix_nanos).__name__}"
            )

    @classmethod
    def from_unix(cls, seconds: int, nanos: int = 0) -> Instant:
        """Build an instant from seconds and a nanosecond offset.

        ``nanos`` may fall outside ``[0, 1e9)``; the excess carries into
        the seconds.
        """
        return cls(seconds * NANOS_PER_SECOND + nanos)

    @classmethod
    def from_datetime(cls, dt: datetime) -> Instant:
        """Build an instant from a datetime; naive values are taken as UTC."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        delta = dt - _EPOCH_DATETIME
        micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
        return cls(micros * NANOS_PER_MICROSECOND)

    @classmethod
    def now(cls) -> Instant:
        return cls(time.time_ns())

    @property
    def seconds(self) -> int:
        """Whole seconds since the epoch, rounded toward negative infinity."""
        return self.unix_nanos // NANOS_PER_SECOND

    @property
    def nanos(self) -> int:
        """Nanosecond offset within :attr:`seconds`, always in ``[0, 1e9)``."""
        return self.unix_nanos % NANOS_PER_SECOND

    def unix_millis(self) -> int:
        """Milliseconds since the epoch, truncated toward zero."""
        return trunc_div(self.unix_nanos, NANOS_PER_MILLISECOND)

    def to_datetime(self) -> datetime:
        """Return an aware UTC datetime, truncated to microseconds."""
        micros = self.unix_nanos // NANOS_PER_MICROSECOND
        return _EPOCH_DATETIME + timedelta(microseconds=micros)

    def isoformat(self) -> str:
        """RFC 3339 UTC text with up to nine fractional digits."""
        whole = _EPOCH_DATETIME + timedelta(seconds=self.seconds)
        base = whole.replace(tzinfo=None).isoformat()
        if self.nanos:
            base += "." + f"{self.nanos:09d}".rstrip("0")
        return base + "Z"

    def __str__(self) -> str:
        return self.isoformat()


EPOCH = Instant(0)
"""1970-01-01T00:00:00Z."""
