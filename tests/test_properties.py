# tests/test_properties.py
"""Randomized and exhaustive invariants of the two calendars."""

import random

import pytest

from luach.core.types import GregorianDate, HebrewDate, HebrewMonth as M
from luach.engines import gregorian as greg
from luach.engines.hebrew import HebrewCalendar


@pytest.fixture(scope="module")
def cal():
    return HebrewCalendar()


def successor_month(cal: HebrewCalendar, year: int, month: M):
    """(year, month) following month in calendar order."""
    if month == M.Elul:
        return year + 1, M.Tishrei
    if month == cal.months_in_year(year):
        return year, M.Nisan
    return year, M(month + 1)


def next_day(cal: HebrewCalendar, h: HebrewDate) -> HebrewDate:
    if h.day < cal.days_in_month(h.month, h.year):
        return HebrewDate(h.year, h.month, h.day + 1)
    year, month = successor_month(cal, h.year, h.month)
    return HebrewDate(year, month, 1)


def test_random_hebrew_round_trip(cal):
    rng = random.Random(20240101)
    lo, hi = cal.first_day, greg.to_absolute(3000, 12, 31)
    for _ in range(3000):
        n = rng.randint(lo, hi)
        h = cal.from_absolute(n)
        assert cal.to_absolute(h.year, h.month, h.day) == n


def test_round_trip_near_epoch(cal):
    for n in range(cal.first_day, cal.first_day + 800):
        h = cal.from_absolute(n)
        assert cal.to_absolute(h.year, h.month, h.day) == n


def test_random_gregorian_round_trip_including_negative_years():
    rng = random.Random(7)
    for _ in range(3000):
        n = rng.randint(-1500000, 1200000)
        g = greg.from_absolute(n)
        assert greg.to_absolute(g.year, g.month, g.day) == n


def test_consecutive_days_are_adjacent(cal):
    start = greg.to_absolute(2015, 1, 1)
    prev = cal.from_absolute(start)
    for n in range(start + 1, start + 4000):
        cur = cal.from_absolute(n)
        assert cur == next_day(cal, prev), n
        prev = cur


def test_consecutive_gregorian_days_are_adjacent():
    prev = greg.from_absolute(-800)
    for n in range(-799, 1200):
        cur = greg.from_absolute(n)
        if cur.day == 1:
            if cur.month == 1:
                assert (prev.year + 1, prev.month, prev.day) == (cur.year, 12, 31)
            else:
                assert prev.month == cur.month - 1
                assert prev.day == greg.days_in_month(prev.month, prev.year)
        else:
            assert prev == GregorianDate(cur.year, cur.month, cur.day - 1)
        prev = cur


def test_nineteen_year_leap_density(cal):
    for start in range(1, 800):
        assert sum(cal.is_leap_year(y) for y in range(start, start + 19)) == 7


def test_leap_positions_in_cycle(cal):
    # years 3, 6, 8, 11, 14, 17 and 19 of each cycle
    assert [y for y in range(1, 20) if cal.is_leap_year(y)] == [3, 6, 8, 11, 14, 17, 19]


def test_year_lengths_are_legal(cal):
    for year in range(1, 7000):
        n = cal.days_in_year(year)
        if cal.is_leap_year(year):
            assert n in (383, 384, 385)
        else:
            assert n in (353, 354, 355)
        assert n % 10 in (3, 4, 5, 7)


def test_new_year_never_on_forbidden_days(cal):
    for year in range(1, 7000):
        assert cal.new_year(year) % 7 not in (0, 3, 5), year


def test_new_year_is_first_of_tishrei(cal):
    for year in range(5700, 5800):
        assert cal.from_absolute(cal.new_year(year)) == HebrewDate(year, M.Tishrei, 1)
        assert cal.from_absolute(cal.new_year(year) - 1) == HebrewDate(year - 1, M.Elul, 29)
