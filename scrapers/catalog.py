from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote


def encode_component(value: str) -> str:
    """Percent-encode a value for use inside a query string or path segment."""
    return quote(value, safe="!~*'()")


@dataclass(frozen=True)
class SelectorStrategy:
    """Where to find article cards on a page and the fields inside each card."""

    container: str
    title: str
    link: str = "a"
    image: str = "img"


@dataclass(frozen=True)
class Outlet:
    key: str
    label: str
    base_url: str
    search_path: str  # appended to base_url, ``{q}`` is the encoded query
    empty_query_url: str
    home_url: str  # destination for synthesized entries
    thumbnail: str  # placeholder image for synthesized entries
    templates: tuple[str, ...]  # ``{query}`` and ``{location}`` placeholders
    strategies: tuple[SelectorStrategy, ...]

    def search_url(self, query: str) -> str:
        if not query:
            return self.empty_query_url
        return self.base_url + self.search_path.format(q=encode_component(query))


# Per-outlet extraction config. Strategies are tried in order until the
# per-source quota is filled; reordering or adding one is a data change only.
OUTLETS: dict[str, Outlet] = {
    "cnn": Outlet(
        key="cnn",
        label="CNN",
        base_url="https://www.cnn.com",
        search_path="/search?q={q}",
        empty_query_url="https://www.cnn.com",
        home_url="https://www.cnn.com",
        thumbnail="https://via.placeholder.com/640x360/CC0000/FFFFFF?text=CNN",
        templates=(
            "Breaking: {query} developments{location}",
            "Analysis: Understanding {query}",
            "{query} impact on communities",
            "Latest updates on {query}",
            "Experts weigh in on {query}",
        ),
        strategies=(
            SelectorStrategy(".container__item", ".container__title"),
            SelectorStrategy(".card", "h3"),
            SelectorStrategy("article", "h2, h3"),
        ),
    ),
    "fox": Outlet(
        key="fox",
        label="FOX",
        base_url="https://www.foxnews.com",
        search_path="/search-results/search?q={q}",
        empty_query_url="https://www.foxnews.com",
        home_url="https://www.foxnews.com",
        thumbnail="https://via.placeholder.com/640x360/003366/FFFFFF?text=Fox+News",
        templates=(
            "{query} situation unfolds{location}",
            "What you need to know about {query}",
            "{query}: Key takeaways",
            "Breaking coverage: {query}",
            "{query} update: Full story",
        ),
        strategies=(
            SelectorStrategy("article.article", "h2.title, h3"),
            SelectorStrategy(".content-list article", "h4, h3"),
            SelectorStrategy(".collection-article-list article", "h2, h3"),
        ),
    ),
    "bbc": Outlet(
        key="bbc",
        label="BBC",
        base_url="https://www.bbc.com",
        search_path="/search?q={q}",
        empty_query_url="https://www.bbc.com/news",
        home_url="https://www.bbc.com/news",
        thumbnail="https://via.placeholder.com/640x360/000000/FFFFFF?text=BBC",
        templates=(
            "{query}: What's happening{location}",
            "{query} explained",
            "The story behind {query}",
            "{query}: Latest developments",
            "In-depth: {query} coverage",
        ),
        strategies=(
            SelectorStrategy('[data-testid="card"]', "h3"),
            SelectorStrategy("article", "h3, h2"),
            SelectorStrategy(".gel-layout__item", "h3"),
        ),
    ),
}
