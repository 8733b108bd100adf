from newsfeed.search.base import ArticleFetcher
from newsfeed.search.newsapi import NEWS_API_URL, NewsApiFetcher
from newsfeed.search.offline import EXAMPLE_ARTICLES, OfflineFixtures

__all__ = [
    "ArticleFetcher",
    "EXAMPLE_ARTICLES",
    "NEWS_API_URL",
    "NewsApiFetcher",
    "OfflineFixtures",
]
