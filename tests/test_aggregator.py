from __future__ import annotations

import asyncio

import httpx
import pytest

from core.exceptions import InvalidQueryError
from core.models import NEWS_KEYS, SOCIAL_KEYS, ContentRecord
from scrapers.aggregator import Aggregator
from scrapers.base import BaseSource
from scrapers.fallback import synthesize

CNN_HTML = """
<html><body>
  <div class="card"><a href="/a"><img src="/a.jpg"></a><h3>Live CNN headline one</h3></div>
  <div class="card"><a href="/b"></a><h3>Live CNN headline two</h3></div>
</body></html>
"""


def _router(request: httpx.Request) -> httpx.Response:
    host = request.url.host
    if host == "www.cnn.com":
        return httpx.Response(200, text=CNN_HTML)
    if host == "www.foxnews.com":
        raise httpx.ReadTimeout("timed out", request=request)
    # YouTube and BBC serve pages with nothing recognisable on them.
    return httpx.Response(200, text="<html><body></body></html>")


async def test_bundle_has_every_key(make_client, http_config):
    client, _ = make_client(_router)
    bundle = await Aggregator.from_client(client, http_config).search("election", "")

    assert tuple(bundle.social) == SOCIAL_KEYS
    assert tuple(bundle.news) == NEWS_KEYS
    assert bundle.social["youtube"] == []
    for key in ("tiktok", "instagram", "twitch"):
        assert len(bundle.social[key]) == 3
    for key in NEWS_KEYS:
        assert 0 < len(bundle.news[key]) <= 5


async def test_timed_out_outlet_gets_fallback_others_unaffected(make_client, http_config):
    client, _ = make_client(_router)
    bundle = await Aggregator.from_client(client, http_config).search("election", "Ohio")

    assert bundle.news["fox"] == synthesize("fox", "election", "Ohio")
    assert [r.title for r in bundle.news["cnn"]] == [
        "Live CNN headline one",
        "Live CNN headline two",
    ]
    assert bundle.news["bbc"] == synthesize("bbc", "election", "Ohio")


@pytest.mark.parametrize("query", ["", "   ", None])
async def test_blank_query_rejected_before_any_fetch(make_client, http_config, query):
    client, transport = make_client(_router)
    with pytest.raises(InvalidQueryError):
        await Aggregator.from_client(client, http_config).search(query, "Ohio")
    assert transport.requests == []


class _RendezvousSource(BaseSource):
    """Completes only once every sibling has started."""

    def __init__(
        self, key: str, started: list[str], all_started: asyncio.Event, total: int
    ) -> None:
        self.key = key
        self.label = key
        self._started = started
        self._all_started = all_started
        self._total = total

    async def collect(self, query, location):
        self._started.append(self.key)
        if len(self._started) == self._total:
            self._all_started.set()
        await self._all_started.wait()
        return [ContentRecord(f"{self.key} {query}", f"https://{self.key}.test", "", self.key)]


class _ExplodingSource(BaseSource):
    key = "cnn"
    label = "CNN"

    async def collect(self, query, location):
        raise RuntimeError("selector engine crashed")


async def test_fetches_run_concurrently():
    keys = ("tiktok", "fox", "bbc")
    started: list[str] = []
    all_started = asyncio.Event()
    sources = [_RendezvousSource(k, started, all_started, len(keys)) for k in keys]

    bundle = await asyncio.wait_for(Aggregator(sources).search("q"), timeout=2)

    assert sorted(started) == sorted(keys)
    assert bundle.social["tiktok"][0].title == "tiktok q"
    assert bundle.news["fox"][0].url == "https://fox.test"


async def test_source_exception_is_contained():
    bundle = await Aggregator([_ExplodingSource()]).search("q")
    assert bundle.news["cnn"] == []
    assert bundle.news["bbc"] == []


async def test_query_and_location_are_trimmed(make_client, http_config):
    client, _ = make_client(_router)
    bundle = await Aggregator.from_client(client, http_config).search("  storm ", " Ohio ")
    assert bundle.news["fox"][0].title == "storm situation unfolds in Ohio"
