"""
luach.engines.interfaces
------------------------
Boundary between the pure Hebrew year arithmetic and the memoization layer
that sits in front of it.

Every year-keyed quantity the Hebrew engine derives (elapsed days, year
lengths, month lengths) is a pure function of the year, so a cache only has
to answer "value for this year, computing it if absent". Any object with
that shape can be injected into a HebrewCalendar.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol


class YearCacheProtocol(Protocol):
    """
    Read-through cache keyed by Hebrew year.

    Implementations must tolerate concurrent callers: reads may run in
    parallel, and inserting a freshly computed value must not corrupt the
    backing store. Computing the same year twice under a race is acceptable
    since the value is deterministic.
    """

    def get(self, year: int) -> Optional[int]:
        """Cached value for year, or None."""
        ...

    def get_or_compute(self, year: int, compute: Callable[[int], int]) -> int:
        """Return the cached value, calling compute(year) and storing it on a miss."""
        ...

    def clear(self) -> None:
        ...
