"""News search service: validation, mode switch, fetch with cache fallback."""

import logging

from newsfeed.cache import ArticleCache
from newsfeed.credentials import CredentialProvider
from newsfeed.data import Article, Bucket, SearchResult, TimeUnit
from newsfeed.errors import FetchError, NoContentError
from newsfeed.filtering import filter_articles
from newsfeed.grouping import group_articles
from newsfeed.mode import Mode, ModeSwitch
from newsfeed.search.base import ArticleFetcher
from newsfeed.search.offline import OfflineFixtures
from newsfeed.validation import validate_keyword

logger = logging.getLogger(__name__)


class NewsService:
    """Searches news for a keyword and groups the results by age.

    Flow:
    1. Validate the keyword
    2. Offline: use the built-in fixtures. Online: fetch from the provider,
       caching successful results and falling back to the cache on FetchError
    3. Filter the articles by keyword
    4. (grouped_search only) bucket the filtered articles by elapsed time

    The fetch is attempted once; the cache read is the only recovery.

    Args:
        fetcher: Remote article fetcher.
        credentials: Provider of the fetcher's API key.
        fixtures: Articles served in offline mode.
        cache: Fallback cache (a fresh one by default).
        mode: Mode switch (starts online by default).
    """

    def __init__(
        self,
        fetcher: ArticleFetcher,
        credentials: CredentialProvider,
        *,
        fixtures: OfflineFixtures | None = None,
        cache: ArticleCache | None = None,
        mode: ModeSwitch | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._credentials = credentials
        self._fixtures = fixtures or OfflineFixtures()
        self._cache = cache if cache is not None else ArticleCache()
        self._mode = mode or ModeSwitch()

    @property
    def cache(self) -> ArticleCache:
        return self._cache

    def get_mode(self) -> Mode:
        return self._mode.get()

    def set_mode(self, value: Mode | str) -> Mode:
        """Switch between online and offline.

        Raises:
            InvalidModeError: If value is not "online" or "offline".
        """
        return self._mode.set(value)

    async def search(self, keyword: str) -> SearchResult:
        """Return the articles relevant to ``keyword``.

        Raises:
            InvalidKeywordError: If the keyword is malformed.
            NoContentError: If nothing relevant was found, including when the
                fetch failed and the cache held nothing for the keyword.
        """
        validate_keyword(keyword)

        if self._mode.get() is Mode.OFFLINE:
            logger.debug("Offline mode, searching fixtures for %r", keyword)
            return filter_articles(keyword, self._fixtures.articles())

        articles = await self._fetch_with_fallback(keyword)
        return filter_articles(keyword, articles)

    async def grouped_search(
        self,
        keyword: str,
        interval: int = 12,
        unit: TimeUnit | str = TimeUnit.HOURS,
    ) -> dict[str, Bucket]:
        """Search for ``keyword`` and bucket the results by time since publication.

        Args:
            keyword: Search keyword.
            interval: Bucket width in ``unit``s.
            unit: Time unit of the interval.

        Returns:
            Mapping of bucket label (e.g. "24 hours ago") to Bucket.
        """
        result = await self.search(keyword)
        return group_articles(result.articles, interval, unit)

    async def _fetch_with_fallback(self, keyword: str) -> tuple[Article, ...]:
        try:
            api_key = self._credentials.get_credential()
            result = await self._fetcher.fetch(keyword, api_key=api_key)
        except FetchError as e:
            logger.warning("Fetch failed for keyword %r, falling back to cache: %s", keyword, e)
            cached = self._cache.get(keyword)
            if not cached:
                raise NoContentError("No news articles available for the given keyword.") from e
            logger.info("Serving %d cached articles for keyword %r", len(cached), keyword)
            return cached

        self._cache.put(keyword, result.articles)
        return result.articles
