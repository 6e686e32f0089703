"""Scraper module for fetching and parsing upstream search pages."""

from .extractor import extract_videos, parse_video_renderer, parse_views
from .fetcher import HttpFetcher, build_search_url

__all__ = [
    "extract_videos",
    "parse_video_renderer",
    "parse_views",
    "HttpFetcher",
    "build_search_url",
]
