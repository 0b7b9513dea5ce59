"""
luach.engines.molad
-------------------
Mean lunar conjunction (molad) of a Hebrew month.

The molad is the raw mean conjunction: no postponement rule touches it.
Conjunction arithmetic counts each day from 18:00 the evening before; the
molad is reported on the midnight-based civil clock, i.e. shifted six
hours back (BaHaRaD reads as Sunday 23:11 and 6 chalakim).
"""

from __future__ import annotations

from ..core.errors import InvalidDateError
from ..core.types import HebrewMonth, MoladTime
from .metonic import STANDARD, MetonicParams, conjunction, months_before_year, months_in_year

# Hours between civil midnight and the 18:00 start of the traditional day
EVENING_SHIFT_HOURS = 6


def months_since_tishrei(year: int, month: HebrewMonth, p: MetonicParams = STANDARD) -> int:
    """Position of month in year counted from Tishrei = 0 (Nisan..Elul follow Adar)."""
    offset = month - HebrewMonth.Tishrei
    if offset < 0:
        offset += months_in_year(year, p)
    return offset


def molad(year: int, month: HebrewMonth, p: MetonicParams = STANDARD) -> MoladTime:
    if year < 1:
        raise InvalidDateError(f"Hebrew year must be >= 1, got {year}")
    month = HebrewMonth(month)
    if month > months_in_year(year, p):
        raise InvalidDateError(f"{month} does not exist in common year {year}")

    months = months_before_year(year, p) + months_since_tishrei(year, month, p)
    c = conjunction(months, p, hour_shift=-EVENING_SHIFT_HOURS)

    parts_per_minute = p.parts_per_hour // 60
    return MoladTime(
        year=year,
        month=month,
        day_of_week=c.day % 7,
        hour=c.hours % p.hours_per_day,
        minute=c.parts // parts_per_minute,
        chalakim=c.parts % parts_per_minute,
    )
