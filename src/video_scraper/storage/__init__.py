"""Process-local state for result caching and rate limiting."""

from .cache import CacheEntry, ResultCache
from .ratelimit import RateLimiter, WindowState

__all__ = [
    "CacheEntry",
    "ResultCache",
    "RateLimiter",
    "WindowState",
]
