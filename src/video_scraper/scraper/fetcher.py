"""Upstream search page fetcher using httpx."""

import logging
from urllib.parse import quote

import httpx

from ..config import Settings, settings as default_settings
from ..exceptions import NetworkError

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone
_QUERY_SAFE = "-_.!~*'()"


def build_search_url(query: str, base_url: str) -> str:
    """Build the upstream search URL for a query."""
    return f"{base_url}?search_query={quote(query, safe=_QUERY_SAFE)}"


class HttpFetcher:
    """Fetches the upstream search page with a desktop browser identity.

    The upstream serves script-free markup to clients it does not
    recognise as browsers, so the User-Agent is required.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or default_settings
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            timeout=self.settings.fetch_timeout_seconds,
            follow_redirects=True,
        )

    async def fetch(self, query: str) -> str:
        """Return the search page HTML.

        Non-2xx responses are returned as text too; only transport
        failures raise.
        """
        url = build_search_url(query, self.settings.search_url)
        logger.info("Fetching %s", url)

        try:
            response = await self.client.get(
                url, headers={"User-Agent": self.settings.user_agent}
            )
            html = response.text
        except httpx.HTTPError as e:
            raise NetworkError(f"Failed to fetch {url}: {e}") from e

        if response.is_error:
            logger.warning("Upstream returned HTTP %d for %r", response.status_code, query)
        return html

    async def aclose(self) -> None:
        """Close the underlying client if this fetcher created it."""
        if self._owns_client:
            await self.client.aclose()
