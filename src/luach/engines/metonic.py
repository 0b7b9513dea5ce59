"""
luach.engines.metonic
---------------------
Integer molad arithmetic on the 19-year cycle.

All time is kept in whole days, hours and parts (chalakim, 1/1080 hour).
The mean lunation is 29d 12h 793p and the epoch molad (BaHaRaD) falls on
day 1 (Monday) at 5h 204p, counted from the evening that starts the day.
Both the Hebrew engine (new-year offsets) and the molad calculator build on
the functions below, so they can never disagree about a conjunction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class MetonicParams:
    """
    Constants of the fixed Hebrew calendar.

    epoch_offset is the absolute day that elapsed day 0 maps to, so that
    1 Tishrei AM 1 (elapsed day 1) lands on absolute day -1373427.
    """
    cycle_years: int = 19
    cycle_months: int = 235
    leap_years_per_cycle: int = 7

    lunation_days: int = 29
    lunation_hours: int = 12
    lunation_parts: int = 793

    parts_per_hour: int = 1080
    hours_per_day: int = 24

    epoch_hours: int = 5
    epoch_parts: int = 204
    epoch_offset: int = -1373428

    def __post_init__(self) -> None:
        if self.cycle_years <= 0 or self.parts_per_hour <= 0 or self.hours_per_day <= 0:
            raise ValueError("cycle_years, parts_per_hour and hours_per_day must be positive")
        if not (0 < self.leap_years_per_cycle < self.cycle_years):
            raise ValueError("leap_years_per_cycle must be in 1..cycle_years-1")
        if self.cycle_months != 12 * self.cycle_years + self.leap_years_per_cycle:
            raise ValueError("cycle_months must equal 12*cycle_years + leap_years_per_cycle")
        if not (0 <= self.lunation_parts < self.parts_per_hour):
            raise ValueError("lunation_parts must be in 0..parts_per_hour-1")
        if not (0 <= self.epoch_parts < self.parts_per_hour):
            raise ValueError("epoch_parts must be in 0..parts_per_hour-1")
        if not (0 <= self.lunation_hours < self.hours_per_day):
            raise ValueError("lunation_hours must be in 0..hours_per_day-1")

    @property
    def parts_per_day(self) -> int:
        return self.parts_per_hour * self.hours_per_day

    @property
    def lunation_in_parts(self) -> int:
        return (
            self.lunation_days * self.parts_per_day
            + self.lunation_hours * self.parts_per_hour
            + self.lunation_parts
        )

    def hp(self, hours: int, parts: int) -> int:
        """Time of day as parts since the start of the day."""
        return hours * self.parts_per_hour + parts


STANDARD = MetonicParams()


class Conjunction(NamedTuple):
    day: int       # elapsed day number; day % 7 is the weekday (0=Sunday)
    hours: int     # elapsed hours since the epoch day start
    parts: int     # parts within the current hour

    def time_of_day(self, p: MetonicParams = STANDARD) -> int:
        """Parts elapsed since the start of the day (18:00 the previous evening)."""
        return p.hp(self.hours % p.hours_per_day, self.parts)


def is_leap_year(year: int, p: MetonicParams = STANDARD) -> bool:
    return (1 + p.leap_years_per_cycle * year) % p.cycle_years < p.leap_years_per_cycle


def months_in_year(year: int, p: MetonicParams = STANDARD) -> int:
    return 13 if is_leap_year(year, p) else 12


def months_before_year(year: int, p: MetonicParams = STANDARD) -> int:
    """Lunations from the epoch molad to the molad of Tishrei of year."""
    prev = year - 1
    cycles, in_cycle = divmod(prev, p.cycle_years)
    leap_months = (p.leap_years_per_cycle * in_cycle + 1) // p.cycle_years
    return p.cycle_months * cycles + 12 * in_cycle + leap_months


def conjunction(months: int, p: MetonicParams = STANDARD, *, hour_shift: int = 0) -> Conjunction:
    """
    Molad reached after `months` mean lunations from the epoch molad.

    The month count is split at parts_per_hour so the hour carry stays exact:
    lunation_parts * months = lunation_parts * (months mod 1080)
                              + lunation_parts hours * (months div 1080).
    """
    q, r = divmod(months, p.parts_per_hour)
    elapsed_parts = p.epoch_parts + p.lunation_parts * r
    elapsed_hours = (
        p.epoch_hours
        + p.lunation_hours * months
        + p.lunation_parts * q
        + elapsed_parts // p.parts_per_hour
        + hour_shift
    )
    day = 1 + p.lunation_days * months + elapsed_hours // p.hours_per_day
    return Conjunction(day=day, hours=elapsed_hours, parts=elapsed_parts % p.parts_per_hour)
