"""Data models for newsfeed."""

from newsfeed.data.models import (
    Article,
    Bucket,
    ResultStatus,
    SearchResult,
    TimeUnit,
    parse_timestamp,
)

__all__ = [
    "Article",
    "Bucket",
    "ResultStatus",
    "SearchResult",
    "TimeUnit",
    "parse_timestamp",
]
