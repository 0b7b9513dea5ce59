# tests/test_gregorian.py

import pytest
import random
from datetime import date

from luach.core.errors import InvalidDateError
from luach.core.types import GregorianDate
from luach.engines import gregorian as greg


@pytest.mark.parametrize("ymd, absolute", [
    ((1995, 12, 17), 728644),
    ((1888, 12, 31), 689578),
    ((2005, 4, 2), 732038),
    ((88, 12, 30), 32141),
    ((1, 1, 1), 1),
    ((0, 12, 31), 0),
    ((-1, 1, 1), -730),
    ((-1, 3, 1), -671),
    ((-100, 12, 20), -36536),
    ((-1000, 6, 15), -365442),
])
def test_to_absolute_known_values(ymd, absolute):
    assert greg.to_absolute(*ymd) == absolute


@pytest.mark.parametrize("absolute, ymd", [
    (737553, (2020, 5, 8)),
    (689578, (1888, 12, 31)),
    (732038, (2005, 4, 2)),
    (32141, (88, 12, 30)),
    (32142, (88, 12, 31)),
    (32143, (89, 1, 1)),
    (1, (1, 1, 1)),
    (0, (0, 12, 31)),
    (-1, (0, 12, 30)),
    (-730, (-1, 1, 1)),
    (-36536, (-100, 12, 20)),
])
def test_from_absolute_known_values(absolute, ymd):
    assert greg.from_absolute(absolute) == GregorianDate(*ymd)


def test_matches_python_ordinal():
    """Absolute days coincide with datetime.date ordinals for years 1..9999."""
    random.seed(42)
    for _ in range(5000):
        n = random.randint(1, date(9999, 12, 31).toordinal())
        d = date.fromordinal(n)
        assert greg.to_absolute(d.year, d.month, d.day) == n
        assert greg.from_absolute(n) == GregorianDate(d.year, d.month, d.day)


def test_cycle_boundaries():
    """Last days of 4-, 100- and 400-year blocks stay in their own year."""
    for year in (-401, -400, -101, -100, -5, -4, -1, 0, 3, 4, 99, 100, 399, 400, 1600, 2000, 2100):
        last = greg.to_absolute(year, 12, 31)
        assert greg.from_absolute(last) == GregorianDate(year, 12, 31)
        assert greg.from_absolute(last + 1) == GregorianDate(year + 1, 1, 1)
        assert greg.year_from_absolute(last) == year


def test_is_leap_year():
    assert greg.is_leap_year(2020)
    assert greg.is_leap_year(2016)
    assert greg.is_leap_year(2000)
    assert greg.is_leap_year(1980)
    assert greg.is_leap_year(0)
    assert greg.is_leap_year(-4)
    assert not greg.is_leap_year(2019)
    assert not greg.is_leap_year(2100)
    assert not greg.is_leap_year(-100)


def test_days_in_month():
    assert greg.days_in_month(2, 2020) == 29
    assert greg.days_in_month(2, 2019) == 28
    assert greg.days_in_month(5, 2020) == 31
    assert greg.days_in_month(2, 2100) == 28
    assert greg.days_in_month(4, 2021) == 30


@pytest.mark.parametrize("month", [0, 13, -1])
def test_days_in_month_rejects_bad_month(month):
    with pytest.raises(InvalidDateError):
        greg.days_in_month(month, 2020)


@pytest.mark.parametrize("ymd", [(2019, 2, 29), (2020, 4, 31), (2020, 1, 0), (2020, 13, 1)])
def test_to_absolute_rejects_invalid_dates(ymd):
    with pytest.raises(InvalidDateError):
        greg.to_absolute(*ymd)


def test_gregorian_date_helpers():
    g = GregorianDate.from_date(date(2005, 4, 2))
    assert g == GregorianDate(2005, 4, 2)
    assert g.to_date() == date(2005, 4, 2)
    assert str(g) == "2005-04-02"
    assert GregorianDate(-100, 12, 20).isoformat() == "-0100-12-20"
    assert GregorianDate(2005, 4, 2) < GregorianDate(2005, 4, 3)
