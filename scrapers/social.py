"""Social platforms without a scrapable search page.

TikTok, Instagram and Twitch only render results client-side behind a login
wall, so these sources produce a fixed set of entries that point the user at
each platform's own search for the query.
"""

from __future__ import annotations

import re
from abc import abstractmethod

from core.models import ContentRecord
from scrapers.base import BaseSource
from scrapers.catalog import encode_component

_WHITESPACE_RE = re.compile(r"\s+")


def hashtag(query: str) -> str:
    return _WHITESPACE_RE.sub("", query).lower()


class TemplateSource(BaseSource):
    """Three deterministic entries derived from the query; no network access."""

    limit = 3
    thumbnail: str
    titles: tuple[str, ...]

    @abstractmethod
    def search_url(self, query: str) -> str:
        ...

    def records(self, query: str) -> list[ContentRecord]:
        url = self.search_url(query)
        tag = hashtag(query)
        return [
            ContentRecord(
                title=title.format(query=query, tag=tag),
                url=url,
                thumbnail=self.thumbnail,
                source=self.label,
            )
            for title in self.titles
        ]

    async def collect(self, query: str, location: str) -> list[ContentRecord]:
        return self.records(query)


class TikTokSource(TemplateSource):
    key = "tiktok"
    label = "TikTok"
    thumbnail = "https://via.placeholder.com/640x360/000000/FFFFFF?text=TikTok"
    titles = (
        "{query} trending on TikTok",
        "{query} viral content",
        "Latest {query} videos",
    )

    def search_url(self, query: str) -> str:
        return f"https://www.tiktok.com/search?q={encode_component(query)}"


class InstagramSource(TemplateSource):
    key = "instagram"
    label = "Instagram"
    thumbnail = "https://via.placeholder.com/640x360/E4405F/FFFFFF?text=Instagram"
    titles = (
        "#{tag} on Instagram",
        "{query} posts and reels",
        "Explore {query} content",
    )

    def search_url(self, query: str) -> str:
        return f"https://www.instagram.com/explore/tags/{encode_component(hashtag(query))}/"


class TwitchSource(TemplateSource):
    key = "twitch"
    label = "Twitch"
    thumbnail = "https://via.placeholder.com/640x360/9146FF/FFFFFF?text=Twitch"
    titles = (
        "{query} live streams on Twitch",
        "Watch {query} gameplay",
        "{query} streamers and clips",
    )

    def search_url(self, query: str) -> str:
        return f"https://www.twitch.tv/search?term={encode_component(query)}"
