from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from .core import time as _time
from .core.types import GregorianDate, HebrewDate, HebrewMonth, MoladTime, YearInfo
from .engines import gregorian as _greg
from .engines.hebrew import HebrewCalendar, MonthLike

logger = logging.getLogger(__name__)

_calendar: Optional[HebrewCalendar] = None

def set_calendar(cal: HebrewCalendar) -> None:
    global _calendar
    logger.debug("installing default calendar %r", cal.info())
    _calendar = cal

def _cal() -> HebrewCalendar:
    if _calendar is None:
        raise RuntimeError("Default calendar not initialized")
    return _calendar

def get_calendar() -> HebrewCalendar:
    return _cal()

# ============================================================
# Hebrew <-> absolute
# ============================================================

def hebrew_to_absolute(year: int, month: MonthLike, day: int) -> int:
    return _cal().to_absolute(year, month, day)

def absolute_to_hebrew(absolute: int) -> HebrewDate:
    """Raises BeforeEpochError for days before 1 Tishrei AM 1."""
    return _cal().from_absolute(absolute)

def is_leap_year_hebrew(year: int) -> bool:
    return _cal().is_leap_year(year)

def months_in_year(year: int) -> int:
    return _cal().months_in_year(year)

def days_in_month_hebrew(month: MonthLike, year: int) -> int:
    return _cal().days_in_month(month, year)

def days_in_year_hebrew(year: int) -> int:
    return _cal().days_in_year(year)

def elapsed_days(year: int) -> int:
    return _cal().elapsed_days(year)

def new_year_day(year: int) -> int:
    """Absolute day of Rosh Hashana (1 Tishrei) of year."""
    return _cal().new_year(year)

def year_info(year: int) -> YearInfo:
    return _cal().year_info(year)

def try_month_from_number(month: int, year: int) -> HebrewMonth:
    """Raises BadMonthError when month is not valid for year."""
    return _cal().month_from_number(month, year)

def molad(year: int, month: MonthLike) -> MoladTime:
    return _cal().molad(year, month)

# ============================================================
# Gregorian <-> absolute
# ============================================================

def gregorian_to_absolute(year: int, month: int, day: int) -> int:
    return _greg.to_absolute(year, month, day)

def absolute_to_gregorian(absolute: int) -> GregorianDate:
    return _greg.from_absolute(absolute)

def is_leap_year_gregorian(year: int) -> bool:
    return _greg.is_leap_year(year)

def days_in_month_gregorian(month: int, year: int) -> int:
    return _greg.days_in_month(month, year)

# ============================================================
# Cross-calendar helpers
# ============================================================

def hebrew_to_gregorian(year: int, month: MonthLike, day: int) -> GregorianDate:
    return absolute_to_gregorian(hebrew_to_absolute(year, month, day))

def gregorian_to_hebrew(year: int, month: int, day: int) -> HebrewDate:
    return absolute_to_hebrew(gregorian_to_absolute(year, month, day))

def hebrew_from_date(d: date) -> HebrewDate:
    return absolute_to_hebrew(_time.to_absolute(d))

def hebrew_to_date(h: HebrewDate) -> date:
    return _time.from_absolute(_cal().date_to_absolute(h))

def weekday(absolute: int) -> int:
    """0=Sunday..6=Saturday."""
    return _time.weekday(absolute)

def absolute_to_jdn(absolute: int) -> int:
    """Julian Day Number of the day (JDN of absolute day 0 is 1721425)."""
    return _time.absolute_to_jdn(absolute)

def jdn_to_absolute(jdn: int) -> int:
    return _time.jdn_to_absolute(jdn)
