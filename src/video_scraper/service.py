"""Search Service - Core business logic."""

import logging
import re

from .config import Settings, settings as default_settings
from .exceptions import (
    ExtractionError,
    NetworkError,
    RateLimitError,
    UpstreamError,
    ValidationError,
)
from .interfaces import PageExtractor, PageFetcher, Video
from .scraper.extractor import extract_videos
from .storage.cache import ResultCache
from .storage.ratelimit import RateLimiter

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT = "unknown"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def resolve_limit(
    limit: str | int | None,
    default_limit: int,
    max_limit: int,
) -> int:
    """Parse a requested limit and clamp it into [1, max_limit].

    Strings are read leniently: the leading integer counts ("2abc" -> 2,
    "2.9" -> 2). Missing or unparsable values give default_limit.
    """
    if limit is None:
        return default_limit

    if isinstance(limit, int):
        parsed = limit
    else:
        match = _LEADING_INT.match(limit)
        if not match:
            return default_limit
        parsed = int(match.group(1))

    return max(1, min(parsed, max_limit))


class SearchService:
    """Service layer for cached, rate-limited video search."""

    def __init__(
        self,
        fetcher: PageFetcher,
        extractor: PageExtractor = extract_videos,
        cache: ResultCache | None = None,
        limiter: RateLimiter | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or default_settings
        self.fetcher = fetcher
        self.extractor = extractor
        if cache is None:
            cache = ResultCache(self.settings.cache_ttl_seconds)
        if limiter is None:
            limiter = RateLimiter(
                self.settings.rate_limit_max,
                self.settings.rate_limit_window_seconds,
            )
        self.cache = cache
        self.limiter = limiter

    async def search(
        self,
        query: str | None,
        limit: str | int | None = None,
        client_key: str = UNKNOWN_CLIENT,
    ) -> list[Video]:
        """
        Search videos for a query.

        Args:
            query: Search text, used verbatim as the cache key
            limit: Requested number of results (parsed and clamped)
            client_key: Caller identity for rate limiting

        Returns:
            Up to the resolved limit of videos, highest views first

        Raises:
            RateLimitError: If the client is over quota
            ValidationError: If the query is empty
            UpstreamError: If the page could not be fetched or parsed
        """
        if self.settings.rate_limit_enabled and not self.limiter.admit(client_key):
            raise RateLimitError(self.limiter.max_requests, self.limiter.window_seconds)

        if not query:
            raise ValidationError("q parameter is required")

        resolved = resolve_limit(limit, self.settings.default_limit, self.settings.max_limit)

        videos = self.cache.lookup(query)
        if videos is not None:
            logger.info("Serving from cache: %r", query)
        else:
            videos = await self._scrape(query)
            self.cache.store(query, videos)

        return videos[:resolved]

    async def _scrape(self, query: str) -> list[Video]:
        """Fetch and extract a fresh result list."""
        try:
            html = await self.fetcher.fetch(query)
            videos = self.extractor(html)
        except (NetworkError, ExtractionError) as e:
            logger.error("Error while scraping %r: %s", query, e)
            raise UpstreamError("An error occurred while scraping") from e
        except Exception as e:
            logger.exception("Unexpected error while scraping %r", query)
            raise UpstreamError("An error occurred while scraping") from e

        logger.info("Scraped %d videos for %r", len(videos), query)
        return videos
