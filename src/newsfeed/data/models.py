"""Core data models for newsfeed."""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum


class ResultStatus(StrEnum):
    """Status reported alongside a search result."""

    OK = "ok"


class TimeUnit(StrEnum):
    """Units an interval grouping can be expressed in."""

    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Naive timestamps are taken to be UTC.
    """
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


@dataclass(frozen=True)
class Article:
    """A news article returned by the provider or the offline fixtures."""

    title: str
    description: str
    url: str
    published_at: str

    @property
    def published_datetime(self) -> datetime:
        return parse_timestamp(self.published_at)


@dataclass(frozen=True)
class SearchResult:
    """Articles matching a keyword.

    ``total_results`` always equals ``len(articles)``; construction fails otherwise.
    """

    articles: tuple[Article, ...]
    total_results: int
    status: ResultStatus = ResultStatus.OK

    def __post_init__(self) -> None:
        if self.total_results < 0:
            raise ValueError(f"total_results must be non-negative, got {self.total_results}")
        if self.total_results != len(self.articles):
            raise ValueError(
                f"total_results ({self.total_results}) does not match "
                f"article count ({len(self.articles)})"
            )

    @classmethod
    def of(cls, articles: "list[Article] | tuple[Article, ...]") -> "SearchResult":
        articles = tuple(articles)
        return cls(articles=articles, total_results=len(articles))


@dataclass(frozen=True)
class Bucket:
    """Articles sharing the same elapsed-time interval since publication."""

    label: str
    articles: tuple[Article, ...] = ()

    @property
    def count(self) -> int:
        return len(self.articles)
