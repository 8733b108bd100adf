from typing import Protocol

from newsfeed.data import SearchResult


class ArticleFetcher(Protocol):
    """Interface for fetching articles for a keyword from a remote provider."""

    async def fetch(self, keyword: str, *, api_key: str) -> SearchResult:
        """Fetch the articles the provider returns for ``keyword``.

        Args:
            keyword: Validated search keyword.
            api_key: Provider credential.

        Returns:
            Unfiltered search result with at least one article.

        Raises:
            NoContentError: If the provider confirmed there are no articles.
            FetchError: If the request failed or the response was unreadable.
        """
        ...
