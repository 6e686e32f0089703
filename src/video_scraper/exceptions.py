class ScraperError(Exception):
    """Base exception for video scraper."""


class ValidationError(ScraperError):
    """Raised when a request is missing required input."""


class RateLimitError(ScraperError):
    """Raised when a client exceeds its request quota."""

    def __init__(self, max_requests: int, window_seconds: float):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        super().__init__(
            f"Rate limit exceeded. Max {max_requests} requests per {window_seconds:g} seconds."
        )


class UpstreamError(ScraperError):
    """Raised when the upstream page could not be fetched or parsed."""


class NetworkError(ScraperError):
    """Raised when the upstream page is unreachable."""


class ExtractionError(ScraperError):
    """Raised when the embedded page data cannot be extracted."""


class MarkerNotFound(ExtractionError):
    """Raised when the embedded JSON markers are missing from the HTML."""


class MalformedPayload(ExtractionError):
    """Raised when the embedded JSON does not parse."""


class SchemaMismatch(ExtractionError):
    """Raised when the parsed JSON lacks the search results item list."""
