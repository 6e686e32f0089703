"""Video Scraper - YouTube search scraping with caching and rate limiting."""

__version__ = "0.1.0"

from .interfaces import Video, PageFetcher, PageExtractor
from .exceptions import (
    ScraperError,
    ValidationError,
    RateLimitError,
    UpstreamError,
    NetworkError,
    ExtractionError,
    MarkerNotFound,
    MalformedPayload,
    SchemaMismatch,
)
from .service import SearchService, resolve_limit

__all__ = [
    "Video",
    "PageFetcher",
    "PageExtractor",
    "ScraperError",
    "ValidationError",
    "RateLimitError",
    "UpstreamError",
    "NetworkError",
    "ExtractionError",
    "MarkerNotFound",
    "MalformedPayload",
    "SchemaMismatch",
    "SearchService",
    "resolve_limit",
]
