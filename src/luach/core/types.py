from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import IntEnum
from functools import total_ordering
from typing import Literal, Tuple

SHORT_DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


class HebrewMonth(IntEnum):
    """Month numbering counts from Nisan; the civil year starts at Tishrei (7)."""
    Nisan = 1
    Iyyar = 2
    Sivan = 3
    Tamuz = 4
    Av = 5
    Elul = 6
    Tishrei = 7
    Cheshvan = 8
    Kislev = 9
    Tevet = 10
    Shvat = 11
    AdarI = 12
    AdarII = 13

    def __str__(self) -> str:
        return self.name


@total_ordering
@dataclass(frozen=True)
class HebrewDate:
    """
    Hebrew date as (year, month, day).

    Dates compare chronologically: within a year Tishrei..Adar come before
    Nisan..Elul, so the order agrees with the absolute day of valid dates.
    The helpers below go through the default calendar installed by luach.api.
    """
    year: int
    month: HebrewMonth
    day: int

    def _chrono_key(self) -> Tuple[int, bool, int, int]:
        return (self.year, self.month < HebrewMonth.Tishrei, self.month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HebrewDate):
            return NotImplemented
        return self._chrono_key() < other._chrono_key()

    @classmethod
    def today(cls) -> "HebrewDate":
        from .. import api
        return api.hebrew_from_date(date.today())

    def to_absolute(self) -> int:
        from .. import api
        return api.get_calendar().date_to_absolute(self)

    def weekday(self) -> int:
        """0=Sunday..6=Saturday."""
        return self.to_absolute() % 7

    def is_leap_year(self) -> bool:
        from .. import api
        return api.is_leap_year_hebrew(self.year)

    def days_in_month(self) -> int:
        from .. import api
        return api.days_in_month_hebrew(self.month, self.year)

    def __str__(self) -> str:
        return f"{self.day} {self.month} {self.year}"


@dataclass(frozen=True, order=True)
class GregorianDate:
    """Proleptic Gregorian date; year 0 is 1 BCE."""
    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, d: date) -> "GregorianDate":
        return cls(d.year, d.month, d.day)

    def to_date(self) -> date:
        # datetime.date only covers years 1..9999
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        if self.year < 0:
            return f"-{-self.year:04d}-{self.month:02d}-{self.day:02d}"
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class MoladTime:
    year: int
    month: HebrewMonth
    day_of_week: int  # 0=Sunday..6=Saturday
    hour: int
    minute: int
    chalakim: int  # 0..17, 1/18 of a minute

    def __str__(self) -> str:
        day_name = SHORT_DAY_NAMES[self.day_of_week]
        return (
            f"Molad {self.month} {self.year}: {day_name}, "
            f"{self.minute} minutes and {self.chalakim} chalakim after {self.hour}:00"
        )


YearKind = Literal["deficient", "regular", "complete"]


@dataclass(frozen=True)
class YearInfo:
    year: int
    is_leap: bool
    months: int
    days: int
    kind: YearKind
    new_year: int  # absolute day of 1 Tishrei
    new_year_weekday: int
