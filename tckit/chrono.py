"""Microsecond time spans and UTC timestamps counted from 1970-01-01."""

from __future__ import annotations

import functools
import time
from dataclasses import dataclass

_MICROS_PER_MILLI = 1000
_MICROS_PER_SECOND = 1000 * _MICROS_PER_MILLI
_MICROS_PER_MINUTE = 60 * _MICROS_PER_SECOND
_MICROS_PER_HOUR = 60 * _MICROS_PER_MINUTE
_MICROS_PER_DAY = 24 * _MICROS_PER_HOUR


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


@dataclass(frozen=True, order=True)
class Timespan:
    """A signed duration in microseconds."""

    delta: int = 0

    def __add__(self, other):
        if isinstance(other, Timespan):
            return Timespan(self.delta + other.delta)
        if isinstance(other, Timestamp):
            return other + self
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Timespan):
            return Timespan(self.delta - other.delta)
        return NotImplemented

    def __mul__(self, times):
        if isinstance(times, int):
            return Timespan(self.delta * times)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        """Divide by a count, or by another span giving a whole ratio (0 for a zero span)."""
        if isinstance(other, Timespan):
            if other.delta == 0:
                return 0
            return _trunc_div(self.delta, other.delta)
        if isinstance(other, int):
            return Timespan(_trunc_div(self.delta, other))
        return NotImplemented

    __floordiv__ = __truediv__

    def __neg__(self) -> "Timespan":
        return Timespan(-self.delta)

    def total_days(self) -> int:
        return _trunc_div(self.delta, _MICROS_PER_DAY)

    def total_hours(self) -> int:
        return _trunc_div(self.delta, _MICROS_PER_HOUR)

    def total_minutes(self) -> int:
        return _trunc_div(self.delta, _MICROS_PER_MINUTE)

    def total_seconds(self) -> int:
        return _trunc_div(self.delta, _MICROS_PER_SECOND)

    def total_milliseconds(self) -> int:
        return _trunc_div(self.delta, _MICROS_PER_MILLI)

    def total_microseconds(self) -> int:
        return self.delta

    @classmethod
    def days(cls, count: int) -> "Timespan":
        return cls(count * _MICROS_PER_DAY)

    @classmethod
    def hours(cls, count: int) -> "Timespan":
        return cls(count * _MICROS_PER_HOUR)

    @classmethod
    def minutes(cls, count: int) -> "Timespan":
        return cls(count * _MICROS_PER_MINUTE)

    @classmethod
    def seconds(cls, count: int) -> "Timespan":
        return cls(count * _MICROS_PER_SECOND)

    @classmethod
    def milliseconds(cls, count: int) -> "Timespan":
        return cls(count * _MICROS_PER_MILLI)

    @classmethod
    def microseconds(cls, count: int) -> "Timespan":
        return cls(count)


@functools.total_ordering
class Timestamp:
    """A UTC instant in microseconds since 1970-01-01 00:00:00."""

    __slots__ = ("_tick",)

    def __init__(self, tick: int = 0) -> None:
        self._tick = int(tick)

    def tick(self) -> int:
        return self._tick

    @classmethod
    def now(cls) -> "Timestamp":
        return cls(time.time_ns() // 1000)

    def __eq__(self, other) -> bool:
        if isinstance(other, Timestamp):
            return self._tick == other._tick
        return NotImplemented

    def __lt__(self, other) -> bool:
        if isinstance(other, Timestamp):
            return self._tick < other._tick
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._tick)

    def __add__(self, other):
        if isinstance(other, Timespan):
            return Timestamp(self._tick + other.total_microseconds())
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Timespan):
            return Timestamp(self._tick - other.total_microseconds())
        if isinstance(other, Timestamp):
            return Timespan(self._tick - other._tick)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Timestamp({self._tick})"


_localtime_offset = Timespan()


def localtime_offset() -> Timespan:
    """The offset added to UTC to get local time."""
    return _localtime_offset


def set_localtime_offset(span: Timespan) -> None:
    """Set the offset added to UTC to get local time."""
    global _localtime_offset
    if not isinstance(span, Timespan):
        raise TypeError("localtime offset must be a Timespan")
    _localtime_offset = span