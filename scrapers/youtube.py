"""YouTube search scraper.

YouTube has no public HTML result list; instead the search page embeds its
results as a JSON object assigned to ``var ytInitialData`` inside a script
block. That shape is unversioned and changes without notice, so everything
that knows about it lives in ``parse_initial_data`` and
``videos_from_initial_data``. When either finds nothing the source simply
returns no videos.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from scrapling.parser import Selector

from core.models import NO_LINK, ContentRecord
from scrapers.base import BaseSource, HttpConfig
from scrapers.catalog import encode_component
from scrapers.extract import is_duplicate

log = logging.getLogger(__name__)

SEARCH_URL = "https://www.youtube.com/results?search_query={q}"
WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
INITIAL_DATA_MARKER = "var ytInitialData"
MAX_VIDEOS = 6

_decoder = json.JSONDecoder()


def parse_initial_data(markup: str) -> dict[str, Any] | None:
    """Return the decoded ``ytInitialData`` object, or None if absent/malformed."""
    if not markup or INITIAL_DATA_MARKER not in markup:
        return None

    page = Selector(markup)
    for script in page.css("script"):
        content = str(script.text or "")
        idx = content.find(INITIAL_DATA_MARKER)
        if idx == -1:
            continue
        start = content.find("{", idx)
        if start == -1:
            continue
        try:
            data, _ = _decoder.raw_decode(content, start)
        except ValueError as e:
            log.debug("Malformed ytInitialData payload: %s", e)
            continue
        if isinstance(data, dict):
            return data
    return None


def _search_items(data: dict[str, Any]) -> list[dict[str, Any]]:
    try:
        sections = data["contents"]["twoColumnSearchResultsRenderer"][
            "primaryContents"
        ]["sectionListRenderer"]["contents"]
        items = sections[0]["itemSectionRenderer"]["contents"]
    except (KeyError, IndexError, TypeError):
        return []
    return items if isinstance(items, list) else []


def _video_record(video: dict[str, Any]) -> ContentRecord:
    runs = (video.get("title") or {}).get("runs") or []
    title = (runs[0].get("text") if runs else None) or "No title"

    video_id = video.get("videoId")
    url = WATCH_URL.format(video_id=video_id) if video_id else NO_LINK

    # Thumbnails are listed smallest first.
    thumbnails = (video.get("thumbnail") or {}).get("thumbnails") or []
    thumbnail = thumbnails[-1].get("url", "") if thumbnails else ""

    return ContentRecord(title=title, url=url, thumbnail=thumbnail, source="YouTube")


def videos_from_initial_data(
    data: dict[str, Any] | None, limit: int = MAX_VIDEOS
) -> list[ContentRecord]:
    """Walk the search payload down to its video entries.

    Only the first ``limit`` items are considered; channels, shelves and ads
    among them are skipped rather than replaced, as are repeats of a title
    or URL already taken.
    """
    if not data:
        return []
    videos: list[ContentRecord] = []
    for item in _search_items(data)[:limit]:
        video = item.get("videoRenderer") if isinstance(item, dict) else None
        if not isinstance(video, dict):
            continue
        record = _video_record(video)
        if not is_duplicate(videos, record):
            videos.append(record)
    return videos


class YouTubeSource(BaseSource):
    key = "youtube"
    label = "YouTube"
    limit = MAX_VIDEOS

    def __init__(self, client: httpx.AsyncClient, config: HttpConfig) -> None:
        self._client = client
        self._config = config

    async def collect(self, query: str, location: str) -> list[ContentRecord]:
        url = SEARCH_URL.format(q=encode_component(query))
        resp = await self._client.get(url, timeout=self._config.video_timeout)
        resp.raise_for_status()

        data = parse_initial_data(resp.text)
        if data is None:
            log.info("No ytInitialData found for '%s'", query)
            return []
        videos = videos_from_initial_data(data)
        log.info("Scraped youtube query '%s': %d videos", query, len(videos))
        return videos
