from __future__ import annotations

from core.models import ContentRecord
from scrapers.catalog import OUTLETS


def location_phrase(location: str | None) -> str:
    location = (location or "").strip()
    return f" in {location}" if location else ""


def synthesize(source_key: str, query: str, location: str | None = "") -> list[ContentRecord]:
    """Placeholder headlines for an outlet whose live page yielded nothing.

    Deterministic for a given (source_key, query, location); every entry
    links to the outlet's front page. Unknown outlets produce an empty list.
    """
    outlet = OUTLETS.get(source_key)
    if outlet is None:
        return []

    loc = location_phrase(location)
    return [
        ContentRecord(
            title=template.format(query=query, location=loc),
            url=outlet.home_url,
            thumbnail=outlet.thumbnail,
            source=outlet.label,
        )
        for template in outlet.templates
    ]
