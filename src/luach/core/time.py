from __future__ import annotations
from datetime import date

# Julian Day Number of absolute day 0 (31 December 1 BCE, proleptic Gregorian)
JDN_OFFSET = 1721425


def to_absolute(d: date) -> int:
    """Absolute day (Rata Die) of a datetime.date; identical to date.toordinal()."""
    return d.toordinal()

def from_absolute(absolute: int) -> date:
    """Inverse of to_absolute. Raises ValueError outside years 1..9999."""
    return date.fromordinal(absolute)

def absolute_to_jdn(absolute: int) -> int:
    return absolute + JDN_OFFSET

def jdn_to_absolute(jdn: int) -> int:
    return jdn - JDN_OFFSET

def weekday(absolute: int) -> int:
    """Day of week with 0=Sunday..6=Saturday (absolute day 1 was a Monday)."""
    return absolute % 7
