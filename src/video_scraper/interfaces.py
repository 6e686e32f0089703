"""Interfaces (Protocols) for dependency injection and testing."""

from dataclasses import asdict, dataclass
from typing import Protocol


@dataclass(frozen=True)
class Video:
    """A single search result scraped from the upstream page."""

    title: str
    link: str
    channel: str
    thumbnail: str
    views: int

    def to_dict(self) -> dict:
        return asdict(self)


class PageFetcher(Protocol):
    """Protocol for retrieving the raw search results page."""

    async def fetch(self, query: str) -> str:
        """Return the search page HTML for a query."""
        ...


class PageExtractor(Protocol):
    """Protocol for turning search page HTML into videos."""

    def __call__(self, html: str) -> list[Video]:
        """Extract videos sorted by views, highest first."""
        ...
