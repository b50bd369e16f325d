from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Sequence

import httpx

from core.exceptions import InvalidQueryError
from core.models import FetchResult, ResultBundle
from scrapers.base import BaseSource, HttpConfig
from scrapers.news import news_sources
from scrapers.social import InstagramSource, TikTokSource, TwitchSource
from scrapers.youtube import YouTubeSource

log = logging.getLogger(__name__)


def default_sources(client: httpx.AsyncClient, config: HttpConfig) -> list[BaseSource]:
    return [
        YouTubeSource(client, config),
        TikTokSource(),
        InstagramSource(),
        TwitchSource(),
        *news_sources(client, config),
    ]


class Aggregator:
    """Fans a search out to every source and assembles the result bundle."""

    def __init__(self, sources: Sequence[BaseSource]) -> None:
        self._sources = list(sources)

    @classmethod
    def from_client(cls, client: httpx.AsyncClient, config: HttpConfig) -> Aggregator:
        return cls(default_sources(client, config))

    @property
    def sources(self) -> list[BaseSource]:
        return list(self._sources)

    async def search(self, query: str | None, location: str | None = "") -> ResultBundle:
        query = (query or "").strip()
        location = (location or "").strip()
        if not query:
            raise InvalidQueryError()

        log.info("Search request | query=%r | location=%r", query, location or "none")
        start = time.monotonic()

        # Every source writes to its own key, so completion order is irrelevant.
        results: list[FetchResult] = await asyncio.gather(
            *(source.fetch(query, location) for source in self._sources)
        )
        by_key = {r.source: r for r in results}
        bundle = ResultBundle.from_results(by_key)

        for r in results:
            if r.errors or r.fallback_used:
                log.info(
                    "Source %s | %d items | fallback=%s | %.2fs | errors: %s",
                    r.source,
                    len(r.items),
                    r.fallback_used,
                    r.duration_seconds,
                    "; ".join(r.errors) or "none",
                )
        log.info(
            "Search finished | %s | %.1fs",
            " ".join(f"{k}={n}" for k, n in bundle.counts().items()),
            time.monotonic() - start,
        )
        return bundle
