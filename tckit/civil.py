"""Breaking timestamps down into calendar fields (UTC, proleptic Gregorian)."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from tckit.chrono import Timestamp

_MONTH_DAYS = (
    (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
    (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
)

_WDAY_LABELS = (
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "tuesday",
    "friday",
    "saturday",
)


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_in_years(start: int, end: int) -> int:
    """Total days in the years from ``start`` to ``end`` inclusive."""
    return sum(days_in_year(year) for year in range(start, end + 1))


class DayOfWeek(enum.IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    def label(self) -> str:
        return _WDAY_LABELS[self.value]


@dataclass(frozen=True)
class DateTime:
    """Calendar fields of a timestamp."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int
    wday: DayOfWeek

    @classmethod
    def from_timestamp(cls, ts: Timestamp) -> "DateTime":
        tick = ts.tick()
        millisecond = _trunc_mod(_trunc_div(tick, 1000), 1000)
        seconds = _trunc_div(tick, 1_000_000)

        second = _trunc_mod(seconds, 60)
        minute = _trunc_div(_trunc_mod(seconds, 3600), 60)
        hour = _trunc_div(_trunc_mod(seconds, 86400), 3600)

        day_count = _trunc_div(seconds, 86400)
        wday = DayOfWeek(_trunc_mod(day_count + 4, 7) % 7)

        year = 1970
        while day_count >= days_in_year(year):
            day_count -= days_in_year(year)
            year += 1

        month_days = _MONTH_DAYS[1 if is_leap_year(year) else 0]
        month = 0
        while day_count >= month_days[month]:
            day_count -= month_days[month]
            month += 1

        return cls(
            year=year,
            month=month + 1,
            day=day_count + 1,
            hour=hour,
            minute=minute,
            second=second,
            millisecond=millisecond,
            wday=wday,
        )

    @classmethod
    def now(cls) -> "DateTime":
        return cls.from_timestamp(Timestamp.now())