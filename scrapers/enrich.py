from __future__ import annotations

import logging
from urllib.parse import urlsplit

import httpx
from scrapling.parser import Selector

from scrapers.extract import clean_thumbnail

log = logging.getLogger(__name__)

# (css selector, attribute) pairs, most reliable first.
PAGE_IMAGE_SELECTORS = (
    ('meta[property="og:image"]', "content"),
    ('meta[name="twitter:image"]', "content"),
    ("article img, .article img", "src"),
)


def page_image(markup: str, page_url: str) -> str:
    """Pick the representative image of an article page."""
    if not markup or not markup.strip():
        return ""
    parts = urlsplit(page_url)
    origin = f"{parts.scheme}://{parts.netloc}"

    page = Selector(markup, url=page_url)
    for css, attr in PAGE_IMAGE_SELECTORS:
        matches = page.css(css)
        if not matches:
            continue
        value = matches[0].attrib.get(attr)
        if value:
            return clean_thumbnail(str(value), origin)
    return ""


async def extract_page_image(
    client: httpx.AsyncClient, url: str, timeout: float = 5.0
) -> str:
    """Fetch ``url`` and return its image; "" on any failure."""
    try:
        resp = await client.get(url, timeout=timeout)
        resp.raise_for_status()
        return page_image(resp.text, str(resp.url))
    except Exception as e:
        log.warning("Error extracting image from %s: %s", url, e)
        return ""
