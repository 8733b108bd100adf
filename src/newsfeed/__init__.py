"""Newsfeed: keyword news search with cache fallback and interval grouping."""

from newsfeed.cache import ArticleCache
from newsfeed.config import NewsfeedConfig, create_from_config, load_config
from newsfeed.credentials import (
    CredentialProvider,
    EnvCredentialProvider,
    StaticCredentialProvider,
)
from newsfeed.data import Article, Bucket, ResultStatus, SearchResult, TimeUnit
from newsfeed.errors import (
    CredentialError,
    FetchError,
    InvalidKeywordError,
    InvalidModeError,
    NewsError,
    NoContentError,
)
from newsfeed.filtering import filter_articles
from newsfeed.grouping import group_articles
from newsfeed.mode import Mode, ModeSwitch
from newsfeed.search import ArticleFetcher, NewsApiFetcher, OfflineFixtures
from newsfeed.service import NewsService
from newsfeed.validation import validate_keyword

__all__ = [
    # Models
    "Article",
    "Bucket",
    "ResultStatus",
    "SearchResult",
    "TimeUnit",
    "Mode",
    # Errors
    "CredentialError",
    "FetchError",
    "InvalidKeywordError",
    "InvalidModeError",
    "NewsError",
    "NoContentError",
    # Protocols
    "ArticleFetcher",
    "CredentialProvider",
    # Components
    "ArticleCache",
    "EnvCredentialProvider",
    "ModeSwitch",
    "NewsApiFetcher",
    "OfflineFixtures",
    "StaticCredentialProvider",
    # Functions
    "filter_articles",
    "group_articles",
    "validate_keyword",
    # Service
    "NewsService",
    # Config
    "NewsfeedConfig",
    "create_from_config",
    "load_config",
]
