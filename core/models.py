from __future__ import annotations

from dataclasses import asdict, dataclass, field

# Placeholder destination for records that have nowhere to link to.
NO_LINK = "#"

SOCIAL_KEYS = ("youtube", "tiktok", "instagram", "twitch")
NEWS_KEYS = ("cnn", "fox", "bbc")


@dataclass(frozen=True)
class ContentRecord:
    """A single piece of content normalised from any source."""

    title: str
    url: str  # absolute URL or NO_LINK
    thumbnail: str  # absolute image URL or ""
    source: str  # display label, e.g. "YouTube", "CNN"

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass
class FetchResult:
    """Outcome of a single source fetch. Never carries an exception."""

    source: str
    items: list[ContentRecord]
    errors: list[str] = field(default_factory=list)
    duration_seconds: float = 0.0
    fallback_used: bool = False


@dataclass
class ResultBundle:
    social: dict[str, list[ContentRecord]]
    news: dict[str, list[ContentRecord]]

    @classmethod
    def from_results(cls, results: dict[str, FetchResult]) -> ResultBundle:
        def pick(keys: tuple[str, ...]) -> dict[str, list[ContentRecord]]:
            return {
                key: list(results[key].items) if key in results else []
                for key in keys
            }

        return cls(social=pick(SOCIAL_KEYS), news=pick(NEWS_KEYS))

    def counts(self) -> dict[str, int]:
        return {
            key: len(records)
            for group in (self.social, self.news)
            for key, records in group.items()
        }

    def to_dict(self) -> dict:
        return {
            "social": {
                k: [r.to_dict() for r in v] for k, v in self.social.items()
            },
            "news": {k: [r.to_dict() for r in v] for k, v in self.news.items()},
        }
