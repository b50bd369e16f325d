from __future__ import annotations

import asyncio
import dataclasses
import logging

import httpx

from core.models import ContentRecord
from scrapers.base import BaseSource, HttpConfig
from scrapers.catalog import OUTLETS, Outlet
from scrapers.enrich import extract_page_image
from scrapers.extract import MAX_RECORDS, extract_records
from scrapers.fallback import synthesize

log = logging.getLogger(__name__)


class NewsSource(BaseSource):
    """Scrapes one outlet's search page using its catalog entry.

    Anything short of at least one extracted article (HTTP error, timeout,
    markup the selectors no longer match) falls back to synthesized entries.
    """

    limit = MAX_RECORDS

    def __init__(
        self, outlet: Outlet, client: httpx.AsyncClient, config: HttpConfig
    ) -> None:
        self.outlet = outlet
        self.key = outlet.key
        self.label = outlet.label
        self._client = client
        self._config = config

    async def collect(self, query: str, location: str) -> list[ContentRecord]:
        url = self.outlet.search_url(query)
        log.info("Scraping %s for query: %s, location: %s", self.key, query, location)

        resp = await self._client.get(url, timeout=self._config.news_timeout)
        resp.raise_for_status()

        records = extract_records(
            resp.text,
            self.outlet.strategies,
            self.outlet.base_url,
            self.label,
            limit=self.limit,
        )
        log.info("Found %d results from %s", len(records), self.key)

        if records and self._config.enrich_thumbnails:
            records = await self._enrich(records)
        return records

    def fallback(self, query: str, location: str) -> list[ContentRecord]:
        return synthesize(self.key, query, location)

    async def _enrich(self, records: list[ContentRecord]) -> list[ContentRecord]:
        missing = [r for r in records if not r.thumbnail]
        if not missing:
            return records

        images = await asyncio.gather(
            *(
                extract_page_image(self._client, r.url, self._config.enrich_timeout)
                for r in missing
            )
        )
        found = {r.url: img for r, img in zip(missing, images) if img}
        return [
            dataclasses.replace(r, thumbnail=found[r.url]) if r.url in found else r
            for r in records
        ]


def news_sources(client: httpx.AsyncClient, config: HttpConfig) -> list[NewsSource]:
    return [NewsSource(outlet, client, config) for outlet in OUTLETS.values()]
