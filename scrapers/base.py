from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import httpx

from config.settings import Settings
from core.models import ContentRecord, FetchResult

log = logging.getLogger(__name__)

BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
}


@dataclass(frozen=True)
class HttpConfig:
    """Outbound HTTP options shared by every network source."""

    timeout: float = 10.0
    news_timeout: float = 10.0
    video_timeout: float = 10.0
    enrich_timeout: float = 5.0
    enrich_thumbnails: bool = False
    headers: dict[str, str] = field(default_factory=lambda: dict(BROWSER_HEADERS))

    @classmethod
    def from_settings(cls, settings: Settings) -> HttpConfig:
        headers = dict(BROWSER_HEADERS)
        headers["User-Agent"] = settings.USER_AGENT
        return cls(
            timeout=settings.REQUEST_TIMEOUT_SECONDS,
            news_timeout=settings.NEWS_TIMEOUT_SECONDS,
            video_timeout=settings.VIDEO_TIMEOUT_SECONDS,
            enrich_timeout=settings.ENRICH_TIMEOUT_SECONDS,
            enrich_thumbnails=settings.ENRICH_THUMBNAILS,
            headers=headers,
        )

    def build_client(self, **kwargs) -> httpx.AsyncClient:
        """Create the async client; extra kwargs (e.g. ``transport``) pass through."""
        return httpx.AsyncClient(
            headers=self.headers,
            timeout=self.timeout,
            follow_redirects=True,
            **kwargs,
        )


class BaseSource(ABC):
    """One external platform or outlet.

    Subclasses implement ``collect``; callers only ever use ``fetch``, which
    contains every failure and turns an empty yield into the source's
    fallback output.
    """

    key: str
    label: str
    limit: int = 5

    @abstractmethod
    async def collect(self, query: str, location: str) -> list[ContentRecord]:
        """Gather live records. May raise."""
        ...

    def fallback(self, query: str, location: str) -> list[ContentRecord]:
        return []

    async def fetch(self, query: str, location: str = "") -> FetchResult:
        errors: list[str] = []
        start = time.monotonic()

        try:
            items = await self.collect(query, location)
        except Exception as e:
            msg = f"{self.key}: {type(e).__name__}: {e}"
            log.warning("Source fetch error: %s", msg)
            errors.append(msg)
            items = []

        fallback_used = False
        if not items:
            items = self.fallback(query, location)
            fallback_used = bool(items)
            if fallback_used:
                log.info("Using fallback data for %s", self.key)

        return FetchResult(
            source=self.key,
            items=items[: self.limit],
            errors=errors,
            duration_seconds=time.monotonic() - start,
            fallback_used=fallback_used,
        )
