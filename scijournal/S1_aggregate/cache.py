"""Single-slot TTL cache for the aggregated result."""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from ..models import ArticleGroup

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    data: list[ArticleGroup]
    timestamp: float


class AggregationCache:
    """
    One slot, replaced wholesale on refresh, expired purely by age.

    Usage:
        cache = AggregationCache(ttl=3600)
        groups = cache.get()       # None on miss
        cache.set(groups)
    """

    def __init__(self, ttl: float = 3600.0, clock: Callable[[], float] = time.time):
        self.ttl = ttl
        self._clock = clock
        self._entry: Optional[CacheEntry] = None

    def get(self) -> Optional[list[ArticleGroup]]:
        """Cached groups if fresh, else None (a miss, not an empty result)."""
        entry = self._entry
        if entry is None:
            return None
        if self._clock() - entry.timestamp < self.ttl:
            logger.info("Returning cached RSS data")
            return entry.data
        return None

    def set(self, data: list[ArticleGroup]) -> None:
        self._entry = CacheEntry(data=data, timestamp=self._clock())
        logger.info(f"RSS data cached for {self.ttl:.0f}s")

    def age(self) -> Optional[float]:
        """Seconds since the last set(), or None if never set."""
        if self._entry is None:
            return None
        return self._clock() - self._entry.timestamp

    def clear(self) -> None:
        self._entry = None
