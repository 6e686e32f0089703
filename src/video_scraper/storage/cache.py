"""In-memory search result cache with a fixed TTL."""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable

from ..interfaces import Video

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """Full, unsliced result list for one query."""

    timestamp: float
    videos: tuple[Video, ...]


class ResultCache:
    """Query -> videos cache with lazy expiry.

    Expired entries stay in the map until overwritten; lookups treat
    them as absent.
    """

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def lookup(self, query: str) -> list[Video] | None:
        """Return cached videos if the entry is still fresh, else None."""
        with self._lock:
            entry = self._entries.get(query)
        if entry is None:
            return None
        if self._clock() - entry.timestamp >= self.ttl_seconds:
            return None
        return list(entry.videos)

    def store(self, query: str, videos: list[Video]) -> None:
        """Replace the entry for a query."""
        entry = CacheEntry(timestamp=self._clock(), videos=tuple(videos))
        with self._lock:
            self._entries[query] = entry
        logger.debug("Cached %d videos for %r", len(videos), query)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
