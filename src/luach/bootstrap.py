from __future__ import annotations
from luach.engines.hebrew import HebrewCalendar
from luach.engines.metonic import STANDARD

def build_calendar() -> HebrewCalendar:
    return HebrewCalendar(STANDARD)
