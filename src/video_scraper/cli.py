"""CLI interface for video scraper."""

import asyncio
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .config import settings
from .exceptions import ScraperError
from .interfaces import Video
from .scraper.fetcher import HttpFetcher
from .service import SearchService
from .utils.logger import setup_cli_logging

app = typer.Typer(help="Video Scraper - YouTube search results sorted by views")
console = Console()


@app.callback()
def main(
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Increase verbosity"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only show warnings and errors"),
):
    """Video Scraper CLI"""
    setup_cli_logging(verbosity=-1 if quiet else verbose, level=settings.log_level)


async def _run_search(query: str, limit: Optional[int]) -> list[Video]:
    fetcher = HttpFetcher(settings=settings)
    try:
        service = SearchService(fetcher=fetcher, settings=settings)
        return await service.search(query, limit, client_key="cli")
    finally:
        await fetcher.aclose()


@app.command()
def search(
    query: str = typer.Argument(..., help="Search query"),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Maximum results"),
):
    """Search YouTube and show the most viewed results."""
    try:
        with console.status("Searching..."):
            videos = asyncio.run(_run_search(query, limit))
    except ScraperError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if not videos:
        console.print("[yellow]No results found.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Search Results: '{query}'")
    table.add_column("Title", style="cyan", no_wrap=True)
    table.add_column("Channel", style="magenta", no_wrap=True)
    table.add_column("Views", style="yellow", justify="right", no_wrap=True)
    table.add_column("Link", style="green", overflow="fold")

    for v in videos:
        table.add_row(v.title[:50], v.channel[:25], f"{v.views:,}", v.link)

    console.print(table)


@app.command()
def config():
    """Show current configuration."""
    console.print(f"\n[bold]Current Configuration[/bold]")
    console.print(f"Default limit: {settings.default_limit}")
    console.print(f"Max limit: {settings.max_limit}")
    console.print(f"Cache TTL: {settings.cache_ttl_seconds:g} seconds")
    console.print(f"Search URL: {settings.search_url}")
    console.print(f"Fetch timeout: {settings.fetch_timeout_seconds:g} seconds")

    console.print(f"\n[bold]Rate Limiting[/bold]")
    console.print(f"Enabled: {settings.rate_limit_enabled}")
    if settings.rate_limit_enabled:
        console.print(
            f"Max {settings.rate_limit_max} requests per "
            f"{settings.rate_limit_window_seconds:g} seconds"
        )


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", "-h", help="Host to bind"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to bind"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Start the API server."""
    import uvicorn

    console.print(f"Starting server at http://{host}:{port}")
    uvicorn.run("video_scraper.api.routes:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
