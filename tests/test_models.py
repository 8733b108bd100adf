"""Tests for data models."""

from datetime import UTC, datetime

import pytest

from newsfeed.data import Article, Bucket, ResultStatus, SearchResult, parse_timestamp


def _article(title: str = "Apple news") -> Article:
    return Article(
        title=title,
        description="Description",
        url="https://example.com/a",
        published_at="2026-02-01T10:00:00Z",
    )


def test_article_is_frozen() -> None:
    article = _article()
    with pytest.raises(AttributeError):
        article.title = "changed"  # type: ignore[misc]


def test_article_published_datetime_is_utc() -> None:
    article = _article()
    assert article.published_datetime == datetime(2026, 2, 1, 10, 0, tzinfo=UTC)


def test_parse_timestamp_naive_is_utc() -> None:
    assert parse_timestamp("2026-02-01T10:00:00") == datetime(2026, 2, 1, 10, 0, tzinfo=UTC)


def test_parse_timestamp_converts_offset_to_utc() -> None:
    assert parse_timestamp("2026-02-01T12:00:00+02:00") == datetime(2026, 2, 1, 10, 0, tzinfo=UTC)


def test_search_result_of_counts_articles() -> None:
    result = SearchResult.of([_article("a"), _article("b")])
    assert result.status == ResultStatus.OK
    assert result.total_results == 2
    assert isinstance(result.articles, tuple)


def test_search_result_rejects_mismatched_count() -> None:
    with pytest.raises(ValueError, match="does not match"):
        SearchResult(articles=(_article(),), total_results=3)


def test_search_result_rejects_negative_count() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        SearchResult(articles=(), total_results=-1)


def test_bucket_count() -> None:
    bucket = Bucket(label="12 hours ago", articles=(_article(), _article()))
    assert bucket.count == 2
    assert Bucket(label="empty").count == 0
