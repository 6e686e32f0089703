"""Per-client fixed-window rate limiting."""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass
class WindowState:
    """Request count since window_start."""

    count: int
    window_start: float


class RateLimiter:
    """Fixed-window request counter keyed by client identifier.

    Counters reset at discrete window boundaries, so a client can get up
    to twice the quota through across a boundary.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: dict[str, WindowState] = {}
        self._lock = threading.Lock()

    def admit(self, client_key: str) -> bool:
        """
        Count a request and decide whether it may proceed.

        Denied requests still advance the counter.

        Returns:
            True if the request is within quota, False otherwise
        """
        with self._lock:
            now = self._clock()
            state = self._windows.get(client_key)
            if state is None:
                state = WindowState(count=0, window_start=now)
                self._windows[client_key] = state
            elif now - state.window_start > self.window_seconds:
                state.count = 0
                state.window_start = now

            state.count += 1
            count = state.count

        if count > self.max_requests:
            logger.warning(
                "Rate limit exceeded for %s (%d/%d)", client_key, count, self.max_requests
            )
            return False
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._windows)
