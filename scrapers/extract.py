"""Turn search-result markup into normalised ``ContentRecord`` lists."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from scrapling.parser import Selector

from core.models import ContentRecord
from scrapers.catalog import SelectorStrategy

log = logging.getLogger(__name__)

MAX_RECORDS = 5
MAX_CONTAINERS = 8
MIN_TITLE_LENGTH = 10
MAX_THUMBNAIL_LENGTH = 500

# Checked in order; lazy-loading sites leave ``src`` empty or a placeholder.
IMAGE_ATTRIBUTES = ("src", "data-src", "data-lazy-src")


def absolutize(ref: str, base_url: str) -> str:
    """Resolve ``ref`` against ``base_url`` unless it is already absolute."""
    if ref.startswith("http"):
        return ref
    if ref.startswith("//"):
        scheme = base_url.split(":", 1)[0] or "https"
        return f"{scheme}:{ref}"
    base = base_url.rstrip("/")
    return f"{base}{ref}" if ref.startswith("/") else f"{base}/{ref}"


def clean_thumbnail(ref: str | None, base_url: str) -> str:
    """Absolutize an image reference, discarding inline data and junk values."""
    if not ref:
        return ""
    ref = ref.strip()
    if not ref or ref.startswith("data:") or "data:image" in ref:
        return ""
    url = absolutize(ref, base_url)
    return "" if len(url) > MAX_THUMBNAIL_LENGTH else url


def is_duplicate(accepted: Iterable[ContentRecord], candidate: ContentRecord) -> bool:
    return any(
        r.title == candidate.title or r.url == candidate.url for r in accepted
    )


def _first(element: Selector, css: str) -> Selector | None:
    matches = element.css(css)
    return matches[0] if matches else None


def _text(element: Selector | None) -> str:
    if element is None:
        return ""
    return " ".join(str(element.get_all_text(separator=" ", strip=True)).split())


def _image_ref(element: Selector | None) -> str | None:
    if element is None:
        return None
    for attr in IMAGE_ATTRIBUTES:
        value = element.attrib.get(attr)
        if value:
            return str(value)
    return None


def extract_records(
    markup: str,
    strategies: Sequence[SelectorStrategy],
    base_url: str,
    source: str,
    *,
    limit: int = MAX_RECORDS,
    scan: int = MAX_CONTAINERS,
    min_title_length: int = MIN_TITLE_LENGTH,
) -> list[ContentRecord]:
    """Apply ``strategies`` in priority order until ``limit`` records are found.

    Each strategy looks at no more than ``scan`` containers. A container
    yields a record only if it has a link and a title of at least
    ``min_title_length`` characters; shorter titles are usually navigation
    or boilerplate. Later strategies only run while the quota is unfilled.
    """
    records: list[ContentRecord] = []
    if not markup or not markup.strip():
        return records
    page = Selector(markup, url=base_url)

    for strategy in strategies:
        if len(records) >= limit:
            break

        for container in list(page.css(strategy.container))[:scan]:
            if len(records) >= limit:
                break

            title = _text(_first(container, strategy.title))
            link_el = _first(container, strategy.link)
            link = str(link_el.attrib.get("href", "")).strip() if link_el is not None else ""

            if not title or not link or len(title) < min_title_length:
                continue

            candidate = ContentRecord(
                title=title,
                url=absolutize(link, base_url),
                thumbnail=clean_thumbnail(
                    _image_ref(_first(container, strategy.image)), base_url
                ),
                source=source,
            )
            if not is_duplicate(records, candidate):
                records.append(candidate)

    log.debug("Extracted %d records for %s", len(records), source)
    return records
