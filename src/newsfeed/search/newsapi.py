"""Article fetching from a NewsAPI-style HTTP endpoint."""

import logging
from typing import Any

import httpx

from newsfeed.data import Article, SearchResult, parse_timestamp
from newsfeed.errors import FetchError, NoContentError

logger = logging.getLogger(__name__)

NEWS_API_URL = "https://newsapi.org/v2/everything?q={keyword}&apiKey={apiKey}"


class NewsApiFetcher:
    """Fetch articles for a keyword with a single GET request.

    Args:
        url_template: Endpoint URL containing ``{keyword}`` and ``{apiKey}``
            placeholders.
        timeout: Request timeout in seconds. A timeout is reported as FetchError.
    """

    def __init__(
        self,
        *,
        url_template: str = NEWS_API_URL,
        timeout: float = 10.0,
    ) -> None:
        self._url_template = url_template
        self._timeout = timeout

    def build_url(self, keyword: str, api_key: str) -> str:
        return self._url_template.replace("{apiKey}", api_key).replace("{keyword}", keyword)

    async def fetch(self, keyword: str, *, api_key: str) -> SearchResult:
        """Fetch the provider's articles for ``keyword``.

        Raises:
            NoContentError: On a non-200 status or an empty article list.
            FetchError: On transport errors, timeouts, or an unparseable body.
        """
        url = self.build_url(keyword, api_key)
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            raise FetchError(f"Request to news provider failed: {e}") from e

        if response.status_code != httpx.codes.OK:
            logger.info(
                "News provider returned status %s for keyword %r",
                response.status_code,
                keyword,
            )
            raise NoContentError("No news found for the given keyword")

        try:
            articles = _parse_articles(response.json())
        except (ValueError, TypeError, AttributeError) as e:
            raise FetchError(f"Unreadable response from news provider: {e}") from e

        if not articles:
            raise NoContentError("No news found for the given keyword")
        return SearchResult.of(articles)


def _parse_articles(data: Any) -> list[Article]:
    """Convert the provider's JSON body to Articles.

    Items without a publication time are skipped. Malformed timestamps and
    non-text fields raise.
    """
    articles: list[Article] = []
    for item in data.get("articles") or []:
        published_at = item.get("publishedAt")
        if not published_at:
            continue
        parse_timestamp(published_at)
        articles.append(
            Article(
                title=_text_field(item, "title"),
                description=_text_field(item, "description"),
                url=_text_field(item, "url"),
                published_at=published_at,
            )
        )
    return articles


def _text_field(item: dict[str, Any], name: str) -> str:
    """Return a text field of a provider item, with ``None`` read as empty."""
    value = item.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"article field {name!r} must be a string, got {type(value).__name__}")
    return value
