"""Keyword relevance filtering."""

from collections.abc import Iterable

from newsfeed.data import Article, SearchResult
from newsfeed.errors import NoContentError


def matches_keyword(article: Article, keyword: str) -> bool:
    """Case-insensitive substring match against title or description."""
    needle = keyword.casefold()
    return needle in article.title.casefold() or needle in article.description.casefold()


def filter_articles(keyword: str, articles: Iterable[Article]) -> SearchResult:
    """Keep the articles mentioning ``keyword``, preserving order.

    Raises:
        NoContentError: If no article matches.
    """
    matched = [article for article in articles if matches_keyword(article, keyword)]
    if not matched:
        raise NoContentError("No news found for the given keyword")
    return SearchResult.of(matched)
