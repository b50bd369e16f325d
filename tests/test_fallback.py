from __future__ import annotations

import json

import pytest

from scrapers.catalog import OUTLETS
from scrapers.fallback import synthesize


@pytest.mark.parametrize("key", sorted(OUTLETS))
def test_every_title_mentions_the_query(key):
    records = synthesize(key, "election", "")
    assert len(records) == 5
    assert all("election" in r.title for r in records)


@pytest.mark.parametrize("key", sorted(OUTLETS))
def test_fallback_is_deterministic(key):
    first = json.dumps([r.to_dict() for r in synthesize(key, "storm", "Ohio")])
    second = json.dumps([r.to_dict() for r in synthesize(key, "storm", "Ohio")])
    assert first == second


def test_location_is_appended_to_lead_title_only():
    records = synthesize("cnn", "storm", "Austin, TX")
    assert records[0].title == "Breaking: storm developments in Austin, TX"
    assert all("Austin" not in r.title for r in records[1:])


def test_no_location_phrase_when_blank():
    assert synthesize("fox", "storm", "  ")[0].title == "storm situation unfolds"
    assert synthesize("bbc", "storm", None)[0].title == "storm: What's happening"


def test_entries_point_at_outlet_homepage():
    assert {r.url for r in synthesize("cnn", "q")} == {"https://www.cnn.com"}
    assert {r.url for r in synthesize("fox", "q")} == {"https://www.foxnews.com"}
    assert {r.url for r in synthesize("bbc", "q")} == {"https://www.bbc.com/news"}


def test_entries_share_one_placeholder_thumbnail_and_label():
    records = synthesize("bbc", "q")
    assert {r.thumbnail for r in records} == {OUTLETS["bbc"].thumbnail}
    assert {r.source for r in records} == {"BBC"}


def test_query_braces_are_not_treated_as_placeholders():
    records = synthesize("cnn", "{location}")
    assert records[1].title == "Analysis: Understanding {location}"


def test_unknown_outlet_yields_nothing():
    assert synthesize("reuters", "q") == []
