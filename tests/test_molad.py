# tests/test_molad.py

import pytest

from luach.core.errors import InvalidDateError
from luach.core.types import HebrewMonth as M, MoladTime
from luach.engines.hebrew import HebrewCalendar
from luach.engines.metonic import STANDARD, conjunction, months_before_year

# one week in parts (chalakim)
WEEK_PARTS = 7 * 24 * 1080
LUNATION_MOD_WEEK = 39673


def week_position(m: MoladTime) -> int:
    return (m.day_of_week * 24 + m.hour) * 1080 + m.minute * 18 + m.chalakim


def months_of_year(cal: HebrewCalendar, year: int):
    """Months of year in calendar order, Tishrei first."""
    tail = list(range(M.Tishrei, cal.months_in_year(year) + 1))
    return [M(m) for m in tail] + [M(m) for m in range(M.Nisan, M.Tishrei)]


@pytest.fixture
def cal():
    return HebrewCalendar()


def test_molad_tevet_5769(cal):
    m = cal.molad(5769, M.Tevet)
    assert (m.day_of_week, m.hour, m.minute, m.chalakim) == (6, 16, 10, 16)
    assert m.year == 5769
    assert m.month == M.Tevet


def test_molad_of_epoch(cal):
    # BaHaRaD on the civil clock: Sunday 23:11 and 6 chalakim
    m = cal.molad(1, M.Tishrei)
    assert (m.day_of_week, m.hour, m.minute, m.chalakim) == (0, 23, 11, 6)


def test_molad_str(cal):
    assert str(cal.molad(5769, M.Tevet)) == (
        "Molad Tevet 5769: Sat, 10 minutes and 16 chalakim after 16:00"
    )


def test_field_ranges(cal):
    for year in (1, 2, 3761, 5769, 5784, 6000):
        for month in months_of_year(cal, year):
            m = cal.molad(year, month)
            assert 0 <= m.day_of_week <= 6
            assert 0 <= m.hour <= 23
            assert 0 <= m.minute <= 59
            assert 0 <= m.chalakim <= 17


def test_consecutive_molads_advance_by_one_lunation(cal):
    prev = None
    for year in range(5780, 5790):
        for month in months_of_year(cal, year):
            cur = week_position(cal.molad(year, month))
            if prev is not None:
                assert (cur - prev) % WEEK_PARTS == LUNATION_MOD_WEEK, (year, month)
            prev = cur


def test_molad_matches_new_year_conjunction(cal):
    # Tishrei molad is the year's conjunction shifted six hours back
    for year in (2, 100, 5000, 5784):
        c = conjunction(months_before_year(year, STANDARD), STANDARD)
        m = cal.molad(year, M.Tishrei)
        total = c.day * 24 * 1080 + c.hours % 24 * 1080 + c.parts - 6 * 1080
        assert total % WEEK_PARTS == week_position(m)


def test_adar_ii_in_common_year_raises(cal):
    with pytest.raises(InvalidDateError):
        cal.molad(5785, M.AdarII)


def test_year_before_epoch_raises(cal):
    with pytest.raises(InvalidDateError):
        cal.molad(0, M.Tishrei)


def test_plain_month_number(cal):
    assert cal.molad(5769, 10) == cal.molad(5769, M.Tevet)
