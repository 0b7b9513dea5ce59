"""
luach.engines.gregorian
-----------------------
Proleptic Gregorian calendar <-> absolute day (Rata Die, 1 January 1 CE = 1).

Years are astronomical: year 0 is 1 BCE, year -1 is 2 BCE. Every division
is Python floor division, which keeps the closed forms valid before year 1.
"""

from __future__ import annotations

from typing import Tuple

from ..core.errors import InvalidDateError
from ..core.types import GregorianDate

MONTH_LENGTHS: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
LEAP_MONTH_LENGTHS: Tuple[int, ...] = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

DAYS_IN_400_YEARS = 146097
DAYS_IN_100_YEARS = 36524
DAYS_IN_4_YEARS = 1461
DAYS_IN_YEAR = 365


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    if not (1 <= month <= 12):
        raise InvalidDateError(f"Invalid month, {month} is not in range 1..12")
    table = LEAP_MONTH_LENGTHS if is_leap_year(year) else MONTH_LENGTHS
    return table[month - 1]


def to_absolute(year: int, month: int, day: int) -> int:
    """Absolute day of a proleptic Gregorian date."""
    if not (1 <= day <= days_in_month(month, year)):
        raise InvalidDateError(f"Invalid day, {year:04d}-{month:02d}-{day:02d} does not exist")

    prev = year - 1
    if month <= 2:
        correction = 0
    elif is_leap_year(year):
        correction = -1
    else:
        correction = -2

    return (
        DAYS_IN_YEAR * prev
        + prev // 4
        - prev // 100
        + prev // 400
        + (367 * month - 362) // 12
        + correction
        + day
    )


def year_from_absolute(absolute: int) -> int:
    """
    Gregorian year containing an absolute day.

    The last day of a 400-year cycle leaves n100 == 4, and the last day of a
    leap 4-year block leaves n1 == 4; in both cases the day still belongs to
    the year just counted, not the next one.
    """
    d0 = absolute - 1
    n400, d1 = divmod(d0, DAYS_IN_400_YEARS)
    n100, d2 = divmod(d1, DAYS_IN_100_YEARS)
    n4, d3 = divmod(d2, DAYS_IN_4_YEARS)
    n1 = d3 // DAYS_IN_YEAR

    year = 400 * n400 + 100 * n100 + 4 * n4 + n1
    if n100 == 4 or n1 == 4:
        return year
    return year + 1


def from_absolute(absolute: int) -> GregorianDate:
    year = year_from_absolute(absolute)
    prior_days = absolute - to_absolute(year, 1, 1)

    if absolute < to_absolute(year, 3, 1):
        correction = 0
    elif is_leap_year(year):
        correction = 1
    else:
        correction = 2

    month = (12 * (prior_days + correction) + 373) // 367
    day = absolute - to_absolute(year, month, 1) + 1
    return GregorianDate(year, month, day)
