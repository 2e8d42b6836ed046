"""Millisecond timestamps with local-time formatting."""

from __future__ import annotations

import math
import time
from functools import total_ordering

_STRFTIME_LIMIT = 64

# Offset subtracted from the clock when reading the current time.
_tm_offset = 0
# Offset subtracted from a timestamp before it is formatted.
_tz_offset = 0


def current_msec_since_epoch() -> int:
    """Milliseconds since the Unix epoch, from the system clock."""
    return time.time_ns() // 1_000_000


def current_sec_since_epoch() -> int:
    """Whole seconds since the Unix epoch, from the system clock."""
    return current_msec_since_epoch() // 1000


def set_time_zone_offset(offset: int) -> int:
    """Set the offset in milliseconds applied when formatting; return it."""
    global _tz_offset
    _tz_offset = int(offset)
    return _tz_offset


def _msec_to_sec(msec: int) -> int:
    """Divide by 1000, rounding toward zero."""
    quotient = abs(msec) // 1000
    return quotient if msec >= 0 else -quotient


@total_ordering
class DateTime:
    """A point in time held as milliseconds since the Unix epoch."""

    __slots__ = ("msec",)

    def __init__(self, msec: int | None = None) -> None:
        if msec is None:
            msec = current_msec_since_epoch() - _tm_offset
        self.msec = int(msec)

    def time_span(self, other: DateTime) -> int:
        """Absolute distance to ``other`` in milliseconds."""
        return abs(self.msec - other.msec)

    @classmethod
    def current(cls) -> DateTime:
        """The current time."""
        return cls(current_msec_since_epoch() - _tm_offset)

    @classmethod
    def today(cls) -> DateTime:
        """Local midnight at the start of the current day."""
        sec = _msec_to_sec(current_msec_since_epoch() - _tm_offset)
        local = time.localtime(sec)
        midnight = time.mktime(
            (local.tm_year, local.tm_mon, local.tm_mday, 0, 0, 0,
             local.tm_wday, local.tm_yday, -1)
        )
        return cls(int(midnight) * 1000)

    @classmethod
    def from_sec(cls, sec: int) -> DateTime:
        """A time given in whole seconds since the epoch."""
        return cls(int(sec) * 1000)

    def format(self, fmt: str) -> str:
        """Format as local time with a ``strftime`` pattern.

        Results of 64 characters or more come back as an empty string.
        """
        sec = _msec_to_sec(self.msec - _tz_offset)
        text = time.strftime(fmt, time.localtime(sec))
        return text if len(text) < _STRFTIME_LIMIT else ""

    def __str__(self) -> str:
        millis = str(int(math.fmod(self.msec, 1000)))
        return self.format("%Y-%m-%d %H:%M:%S.") + ("000" + millis)[-3:]

    def __repr__(self) -> str:
        return f"DateTime({self.msec})"

    @staticmethod
    def _msec_of(other: DateTime | int) -> int:
        if isinstance(other, DateTime):
            return other.msec
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        raise TypeError(f"cannot combine DateTime with {type(other).__name__}")

    def __add__(self, other: DateTime | int) -> DateTime:
        return DateTime(self.msec + self._msec_of(other))

    def __sub__(self, other: DateTime | int) -> DateTime:
        return DateTime(self.msec - self._msec_of(other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.msec == other.msec

    def __lt__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.msec < other.msec

    def __hash__(self) -> int:
        return hash(self.msec)