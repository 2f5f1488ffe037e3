"""
Calendar arithmetic behind the year progress picture
"""
from dataclasses import dataclass
from datetime import date
from typing import FrozenSet


def is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def total_days(year: int) -> int:
    return 366 if is_leap(year) else 365


def day_of_year(when: date) -> int:
    """1-based ordinal day within the year (Jan 1 = 1)"""
    return when.timetuple().tm_yday


def percent_complete(day: int, days_in_year: int) -> float:
    return day * 100 / days_in_year


def month_start_days(year: int) -> FrozenSet[int]:
    """Day-of-year index of the 1st of each month"""
    return frozenset(day_of_year(date(year, month, 1)) for month in range(1, 13))


@dataclass(frozen=True)
class YearMeta:
    """Everything the renderer needs to know about one date"""
    year: int
    day_of_year: int
    total_days: int
    is_leap: bool
    percent: float
    month_starts: FrozenSet[int]

    @classmethod
    def from_date(cls, when: date) -> "YearMeta":
        year = when.year
        day = day_of_year(when)
        days = total_days(year)
        return cls(
            year=year,
            day_of_year=day,
            total_days=days,
            is_leap=is_leap(year),
            percent=percent_complete(day, days),
            month_starts=month_start_days(year),
        )

    def is_month_start(self, index: int) -> bool:
        return index in self.month_starts
