"""Extraction of video records from the embedded ytInitialData blob."""

import json
import logging
import re
from typing import Any

from ..exceptions import MalformedPayload, MarkerNotFound, SchemaMismatch
from ..interfaces import Video

logger = logging.getLogger(__name__)

INITIAL_DATA_MARKER = "var ytInitialData = "
END_MARKER = ";</script>"
WATCH_URL = "https://www.youtube.com/watch?v={video_id}"

UNKNOWN_CHANNEL = "Unknown"
DEFAULT_VIEWS_TEXT = "0 views"

# contents[0] of the section list holds the organic results
ITEMS_PATH: tuple[str | int, ...] = (
    "contents",
    "twoColumnSearchResultsRenderer",
    "primaryContents",
    "sectionListRenderer",
    "contents",
    0,
    "itemSectionRenderer",
    "contents",
)

_MISSING = object()
_NON_DIGITS = re.compile(r"\D")


def _dig(data: Any, *path: str | int) -> Any:
    """Walk nested dicts/lists, returning _MISSING at the first absent step."""
    current = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return _MISSING
            current = current[step]
        else:
            if not isinstance(current, dict) or step not in current:
                return _MISSING
            current = current[step]
    return current


def _text(data: Any, *path: str | int, default: str = "") -> str:
    value = _dig(data, *path)
    if value is _MISSING or not isinstance(value, str) or not value:
        return default
    return value


def locate_initial_data(html: str) -> str:
    """Return the raw JSON text assigned to ytInitialData."""
    start = html.find(INITIAL_DATA_MARKER)
    if start == -1:
        logger.debug("ytInitialData marker missing, HTML head: %s", html[:500])
        raise MarkerNotFound("Failed to locate ytInitialData")

    start += len(INITIAL_DATA_MARKER)
    end = html.find(END_MARKER, start)
    if end == -1:
        logger.debug("ytInitialData end marker missing, HTML head: %s", html[:500])
        raise MarkerNotFound("Failed to locate end of ytInitialData")

    return html[start:end]


def parse_views(text: str) -> int:
    """Parse a localized view count such as '1,234,567 views'."""
    digits = _NON_DIGITS.sub("", text)
    if not digits:
        return 0
    try:
        return int(digits)
    except ValueError:
        # Past the interpreter's int_max_str_digits limit
        return 0


def _views_text(renderer: dict) -> str:
    simple = _text(renderer, "viewCountText", "simpleText")
    if simple:
        return simple

    # Live streams report "1,234 watching" as runs
    runs = _dig(renderer, "viewCountText", "runs")
    if isinstance(runs, list):
        joined = "".join(r["text"] for r in runs if isinstance(r, dict) and isinstance(r.get("text"), str))
        if joined:
            return joined

    return DEFAULT_VIEWS_TEXT


def _thumbnail(renderer: dict) -> str:
    thumbnails = _dig(renderer, "thumbnail", "thumbnails")
    if not isinstance(thumbnails, list) or not thumbnails:
        return ""
    # The ladder is ordered by resolution, largest last
    return _text(thumbnails[-1], "url")


def parse_video_renderer(renderer: dict) -> Video | None:
    """Build a Video from a videoRenderer, or None if it has no video id."""
    video_id = _text(renderer, "videoId")
    if not video_id:
        return None

    return Video(
        title=_text(renderer, "title", "runs", 0, "text"),
        link=WATCH_URL.format(video_id=video_id),
        channel=_text(renderer, "ownerText", "runs", 0, "text", default=UNKNOWN_CHANNEL),
        thumbnail=_thumbnail(renderer),
        views=parse_views(_views_text(renderer)),
    )


def extract_videos(html: str) -> list[Video]:
    """
    Extract search results from a YouTube search page.

    Only the structural anchors are hard failures: the ytInitialData
    markers, the JSON parse and the items list. Everything below that
    falls back to per-field defaults, and items that are not videos
    (ads, shelves, channel cards) are skipped.

    Args:
        html: Raw search results page

    Returns:
        Videos sorted by view count, highest first (stable for ties)

    Raises:
        MarkerNotFound: If the ytInitialData block cannot be located
        MalformedPayload: If the block is not valid JSON
        SchemaMismatch: If the results item list is missing
    """
    raw = locate_initial_data(html)

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedPayload(f"ytInitialData is not valid JSON: {e}") from e

    items = _dig(data, *ITEMS_PATH)
    if items is _MISSING or not isinstance(items, list):
        raise SchemaMismatch("Failed to extract video contents")

    videos = []
    for item in items:
        renderer = _dig(item, "videoRenderer")
        if not isinstance(renderer, dict):
            continue
        video = parse_video_renderer(renderer)
        if video is not None:
            videos.append(video)

    logger.debug("Extracted %d videos from %d items", len(videos), len(items))
    return sorted(videos, key=lambda v: v.views, reverse=True)
