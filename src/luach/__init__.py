"""luach public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Install the default calendar on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    hebrew_to_absolute,
    absolute_to_hebrew,
    gregorian_to_absolute,
    absolute_to_gregorian,
    hebrew_to_gregorian,
    gregorian_to_hebrew,
    hebrew_from_date,
    hebrew_to_date,
    is_leap_year_hebrew,
    is_leap_year_gregorian,
    months_in_year,
    days_in_month_hebrew,
    days_in_month_gregorian,
    days_in_year_hebrew,
    elapsed_days,
    new_year_day,
    year_info,
    try_month_from_number,
    molad,
    weekday,
    absolute_to_jdn,
    jdn_to_absolute,
    get_calendar,
    set_calendar,
)
from .core.errors import LuachError, BeforeEpochError, BadMonthError, InvalidDateError
from .core.types import GregorianDate, HebrewDate, HebrewMonth, MoladTime, YearInfo
from .engines.hebrew import HebrewCalendar
from .engines.metonic import MetonicParams

__all__ = [
    "hebrew_to_absolute",
    "absolute_to_hebrew",
    "gregorian_to_absolute",
    "absolute_to_gregorian",
    "hebrew_to_gregorian",
    "gregorian_to_hebrew",
    "hebrew_from_date",
    "hebrew_to_date",
    "is_leap_year_hebrew",
    "is_leap_year_gregorian",
    "months_in_year",
    "days_in_month_hebrew",
    "days_in_month_gregorian",
    "days_in_year_hebrew",
    "elapsed_days",
    "new_year_day",
    "year_info",
    "try_month_from_number",
    "molad",
    "weekday",
    "absolute_to_jdn",
    "jdn_to_absolute",
    "get_calendar",
    "set_calendar",
    "HebrewCalendar",
    "MetonicParams",
    "HebrewDate",
    "HebrewMonth",
    "GregorianDate",
    "MoladTime",
    "YearInfo",
    "LuachError",
    "BeforeEpochError",
    "BadMonthError",
    "InvalidDateError",
]
