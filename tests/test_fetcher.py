import unittest

import httpx

from video_scraper.config import Settings
from video_scraper.exceptions import NetworkError
from video_scraper.scraper.fetcher import HttpFetcher, build_search_url


class TestBuildSearchUrl(unittest.TestCase):
    def test_percent_encodes_query(self):
        url = build_search_url("lofi beats & chill", "https://www.youtube.com/results")
        self.assertEqual(
            url, "https://www.youtube.com/results?search_query=lofi%20beats%20%26%20chill"
        )

    def test_keeps_unreserved_marks(self):
        url = build_search_url("it's (live)!", "https://example.com/results")
        self.assertEqual(url, "https://example.com/results?search_query=it's%20(live)!")

    def test_encodes_unicode(self):
        url = build_search_url("café", "https://example.com/results")
        self.assertEqual(url, "https://example.com/results?search_query=caf%C3%A9")


class TestHttpFetcher(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.settings = Settings(user_agent="TestBrowser/1.0")
        self.requests: list[httpx.Request] = []

    def make_fetcher(self, handler) -> HttpFetcher:
        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(record))
        self.addAsyncCleanup(client.aclose)
        return HttpFetcher(client=client, settings=self.settings)

    async def test_returns_body_text(self):
        fetcher = self.make_fetcher(lambda r: httpx.Response(200, text="<html>ok</html>"))
        html = await fetcher.fetch("lofi beats")

        self.assertEqual(html, "<html>ok</html>")
        request = self.requests[0]
        self.assertEqual(request.url.host, "www.youtube.com")
        self.assertEqual(request.url.path, "/results")
        self.assertEqual(request.url.params["search_query"], "lofi beats")
        self.assertEqual(request.headers["User-Agent"], "TestBrowser/1.0")

    async def test_error_status_still_returns_body(self):
        fetcher = self.make_fetcher(lambda r: httpx.Response(503, text="<html>busy</html>"))
        self.assertEqual(await fetcher.fetch("lofi"), "<html>busy</html>")

    async def test_transport_error_raises_network_error(self):
        def fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        fetcher = self.make_fetcher(fail)
        with self.assertRaises(NetworkError):
            await fetcher.fetch("lofi")

    async def test_timeout_raises_network_error(self):
        def fail(request):
            raise httpx.ReadTimeout("timed out", request=request)

        fetcher = self.make_fetcher(fail)
        with self.assertRaises(NetworkError):
            await fetcher.fetch("lofi")

    async def test_injected_client_is_not_closed(self):
        fetcher = self.make_fetcher(lambda r: httpx.Response(200))
        await fetcher.aclose()
        self.assertFalse(fetcher.client.is_closed)

    async def test_owned_client_is_closed(self):
        fetcher = HttpFetcher(settings=self.settings)
        await fetcher.aclose()
        self.assertTrue(fetcher.client.is_closed)


if __name__ == "__main__":
    unittest.main()
