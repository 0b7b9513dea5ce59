"""
luach.engines.hebrew
--------------------
The fixed (Hillel II) Hebrew calendar: year arithmetic, month lengths and
the conversion between Hebrew dates and absolute days.

Everything here derives from a single year-keyed quantity, elapsed_days(Y):
the day number of 1 Tishrei of year Y counted from the epoch, after the
postponement rules (dehiyyot) have been applied. Year lengths, month
lengths and both conversion directions are differences of that value, so it
is memoized through the calendar's year cache.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Optional, Union

from ..core.cache import ElapsedDaysCache
from ..core.errors import BadMonthError, BeforeEpochError, InvalidDateError
from ..core.types import HebrewDate, HebrewMonth, MoladTime, YearInfo, YearKind
from . import metonic
from .interfaces import YearCacheProtocol
from .metonic import STANDARD, MetonicParams
from .molad import molad as _molad

MonthLike = Union[HebrewMonth, int]

# Weekdays (0=Sunday) on which 1 Tishrei may not fall: Sunday, Wednesday, Friday
_FORBIDDEN_NEW_YEAR_DAYS = (0, 3, 5)

_LEGAL_YEAR_LENGTHS = (353, 354, 355, 383, 384, 385)


def _as_month(month: MonthLike) -> HebrewMonth:
    try:
        return HebrewMonth(month)
    except ValueError:
        raise InvalidDateError(f"Unknown Hebrew month value {month!r}; expected 1..13") from None


class HebrewCalendar:
    """
    Hebrew <-> absolute day engine.

    Each instance owns its elapsed-days cache, so independent calendars (or
    tests) never observe each other's entries. Pass `cache` to inject a
    shared or instrumented store.
    """

    def __init__(self, params: MetonicParams = STANDARD, cache: Optional[YearCacheProtocol] = None):
        self.p = params
        self.cache: YearCacheProtocol = ElapsedDaysCache() if cache is None else cache

        # Dehiyyot thresholds, as parts since the start of the day (18:00 the evening before)
        self._molad_zaken = params.hp(18, 0)
        self._gatarad = params.hp(9, 204)
        self._betutakpat = params.hp(15, 589)

    def info(self) -> dict:
        return {"params": asdict(self.p), "cache": repr(self.cache)}

    # ---------------------------------------------------------
    # Year arithmetic
    # ---------------------------------------------------------

    def is_leap_year(self, year: int) -> bool:
        return metonic.is_leap_year(year, self.p)

    def months_in_year(self, year: int) -> int:
        return metonic.months_in_year(year, self.p)

    def elapsed_days(self, year: int) -> int:
        """Day number of 1 Tishrei of year, counted from the epoch (elapsed_days(1) == 1)."""
        if year < 1:
            raise InvalidDateError(f"Hebrew year must be >= 1, got {year}")
        return self.cache.get_or_compute(year, self._compute_elapsed_days)

    def _compute_elapsed_days(self, year: int) -> int:
        molad = metonic.conjunction(metonic.months_before_year(year, self.p), self.p)
        parts = molad.time_of_day(self.p)
        day = molad.day
        weekday = day % 7

        if (
            parts >= self._molad_zaken
            or (weekday == 2 and parts >= self._gatarad and not self.is_leap_year(year))
            or (weekday == 1 and parts >= self._betutakpat and self.is_leap_year(year - 1))
        ):
            day += 1

        if day % 7 in _FORBIDDEN_NEW_YEAR_DAYS:
            day += 1
        return day

    def new_year(self, year: int) -> int:
        """Absolute day of 1 Tishrei of year."""
        return self.p.epoch_offset + self.elapsed_days(year)

    @property
    def first_day(self) -> int:
        """Absolute day of 1 Tishrei AM 1, the earliest representable date."""
        return self.new_year(1)

    def days_in_year(self, year: int) -> int:
        n = self.elapsed_days(year + 1) - self.elapsed_days(year)
        if n not in _LEGAL_YEAR_LENGTHS:
            raise RuntimeError(f"Hebrew year {year} has impossible length {n}")
        return n

    def is_long_cheshvan(self, year: int) -> bool:
        return self.days_in_year(year) % 10 == 5

    def is_short_kislev(self, year: int) -> bool:
        return self.days_in_year(year) % 10 == 3

    def year_kind(self, year: int) -> YearKind:
        if self.is_short_kislev(year):
            return "deficient"
        if self.is_long_cheshvan(year):
            return "complete"
        return "regular"

    def year_info(self, year: int) -> YearInfo:
        ny = self.new_year(year)
        return YearInfo(
            year=year,
            is_leap=self.is_leap_year(year),
            months=self.months_in_year(year),
            days=self.days_in_year(year),
            kind=self.year_kind(year),
            new_year=ny,
            new_year_weekday=ny % 7,
        )

    # ---------------------------------------------------------
    # Months
    # ---------------------------------------------------------

    def days_in_month(self, month: MonthLike, year: int) -> int:
        m = _as_month(month)
        if m in (HebrewMonth.Iyyar, HebrewMonth.Tamuz, HebrewMonth.Elul,
                 HebrewMonth.Tevet, HebrewMonth.AdarII):
            return 29
        if m == HebrewMonth.AdarI:
            return 30 if self.is_leap_year(year) else 29
        if m == HebrewMonth.Cheshvan:
            return 30 if self.is_long_cheshvan(year) else 29
        if m == HebrewMonth.Kislev:
            return 29 if self.is_short_kislev(year) else 30
        return 30

    def month_from_number(self, month: int, year: int) -> HebrewMonth:
        """
        Normalize a user-supplied month number for year.

        13 names AdarII in a leap year and the following Nisan in a common
        year; 14 is the following Nisan of a leap year and is invalid otherwise.
        """
        if month < 1 or month > 14:
            raise BadMonthError(f"Month must fall in range 1..14, got {month}")
        if self.is_leap_year(year):
            return HebrewMonth.Nisan if month == 14 else HebrewMonth(month)
        if month == 14:
            raise BadMonthError(f"Month 14 is invalid in common year {year}")
        if month == 13:
            return HebrewMonth.Nisan
        return HebrewMonth(month)

    # ---------------------------------------------------------
    # Forward: Hebrew date to absolute day
    # ---------------------------------------------------------

    def to_absolute(self, year: int, month: MonthLike, day: int) -> int:
        if year < 1:
            raise InvalidDateError(f"Hebrew year must be >= 1, got {year}")
        m = _as_month(month)
        if m > self.months_in_year(year):
            raise InvalidDateError(f"{m} does not exist in common year {year}")
        if not (1 <= day <= self.days_in_month(m, year)):
            raise InvalidDateError(f"Invalid day {day} for {m} {year}")

        # 1-based day of the year, counted from 1 Tishrei
        day_of_year = day
        if m < HebrewMonth.Tishrei:
            for i in range(HebrewMonth.Tishrei, self.months_in_year(year) + 1):
                day_of_year += self.days_in_month(i, year)
            for i in range(HebrewMonth.Nisan, m):
                day_of_year += self.days_in_month(i, year)
        else:
            for i in range(HebrewMonth.Tishrei, m):
                day_of_year += self.days_in_month(i, year)

        return self.p.epoch_offset + self.elapsed_days(year) + day_of_year - 1

    def date_to_absolute(self, d: HebrewDate) -> int:
        return self.to_absolute(d.year, d.month, d.day)

    # ---------------------------------------------------------
    # Inverse: absolute day to Hebrew date
    # ---------------------------------------------------------

    def _year_seed(self, absolute: int) -> int:
        """Lower estimate of the year from the exact mean year (cycle length / cycle years)."""
        p = self.p
        num = (absolute - p.epoch_offset) * p.cycle_years * p.parts_per_day
        return max(1, num // (p.cycle_months * p.lunation_in_parts))

    def from_absolute(self, absolute: int) -> HebrewDate:
        if absolute < self.first_day:
            raise BeforeEpochError(f"{absolute} is before creation of time ({self.first_day})")

        year = self._year_seed(absolute)
        while year > 1 and self.new_year(year) > absolute:
            year -= 1
        while self.new_year(year + 1) <= absolute:
            year += 1

        if absolute < self.to_absolute(year, HebrewMonth.Nisan, 1):
            month = HebrewMonth.Tishrei
        else:
            month = HebrewMonth.Nisan

        while absolute > self.to_absolute(year, month, self.days_in_month(month, year)):
            month = HebrewMonth(month + 1)

        day = 1 + absolute - self.to_absolute(year, month, 1)
        return HebrewDate(year, month, day)

    # ---------------------------------------------------------
    # Molad
    # ---------------------------------------------------------

    def molad(self, year: int, month: MonthLike) -> MoladTime:
        return _molad(year, _as_month(month), self.p)
