"""FastAPI routes for video scraper API."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Header, Request
from fastapi.responses import JSONResponse

from video_scraper.api.schemas import ErrorResponse, RootResponse, SearchResponse, VideoItem

from .. import __version__
from ..config import Settings, settings as default_settings
from ..exceptions import RateLimitError, UpstreamError, ValidationError
from ..scraper.fetcher import HttpFetcher
from ..service import UNKNOWN_CLIENT, SearchService

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing search query"},
    429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
    500: {"model": ErrorResponse, "description": "Scraping failed"},
}


def client_key_from_header(forwarded_for: str | None) -> str:
    """Use the first X-Forwarded-For hop as the client identity."""
    if not forwarded_for:
        return UNKNOWN_CLIENT
    return forwarded_for.split(",")[0].strip() or UNKNOWN_CLIENT


def create_app(
    service: SearchService | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create the API app.

    Without an explicit service, one is built at startup around a shared
    HttpFetcher and torn down at shutdown.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        fetcher = None
        if getattr(app.state, "service", None) is None:
            fetcher = HttpFetcher(settings=settings)
            app.state.service = SearchService(fetcher=fetcher, settings=settings)
        try:
            yield
        finally:
            if fetcher is not None:
                await fetcher.aclose()
                app.state.service = None

    app = FastAPI(
        title="Video Scraper API",
        description="YouTube search scraping with caching and rate limiting",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.service = service

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(RateLimitError)
    async def rate_limit_handler(request: Request, exc: RateLimitError):
        return JSONResponse(status_code=429, content={"error": str(exc)})

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError):
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.get("/", response_model=RootResponse)
    async def root():
        """API root endpoint."""
        return RootResponse(message="Video Scraper API", version=__version__)

    @app.get("/search", response_model=SearchResponse, responses=ERROR_RESPONSES)
    @app.get(
        "/api/search",
        response_model=SearchResponse,
        responses=ERROR_RESPONSES,
        include_in_schema=False,
    )
    async def search(
        request: Request,
        q: str | None = None,
        limit: str | None = None,
        x_forwarded_for: str | None = Header(None),
    ):
        """
        Search YouTube and return the most viewed results.

        Query parameters:
        - q: search term (required)
        - limit: number of results (optional, clamped to the configured maximum)
        """
        service: SearchService = request.app.state.service
        videos = await service.search(
            q, limit, client_key=client_key_from_header(x_forwarded_for)
        )
        return SearchResponse(videos=[VideoItem(**v.to_dict()) for v in videos])

    return app


app = create_app()
