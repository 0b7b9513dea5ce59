from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)


class ElapsedDaysCache:
    """
    Append-only year -> elapsed-days store shared by all conversions of one calendar.

    Lookups are plain dict reads; only the counters and inserts take the
    lock. A miss computes outside the lock and then inserts under it; if two threads race on the same year the first insert
    is kept and the other result (equal by construction) is dropped.
    """

    def __init__(self) -> None:
        self._data: Dict[int, int] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, year: int) -> Optional[int]:
        return self._data.get(year)

    def get_or_compute(self, year: int, compute: Callable[[int], int]) -> int:
        value = self._data.get(year)
        if value is not None:
            with self._lock:
                self.hits += 1
            return value

        value = compute(year)
        with self._lock:
            self.misses += 1
            value = self._data.setdefault(year, value)
        logger.debug("elapsed-days cache miss for year %d -> %d", year, value)
        return value

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
            self.hits = 0
            self.misses = 0

    def __contains__(self, year: object) -> bool:
        return year in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ElapsedDaysCache(size={len(self._data)}, hits={self.hits}, misses={self.misses})"
