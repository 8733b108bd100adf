"""Factory functions to create components from configuration."""

from newsfeed.config.models import NewsApiConfig, NewsfeedConfig
from newsfeed.credentials import EnvCredentialProvider
from newsfeed.mode import ModeSwitch
from newsfeed.search.newsapi import NewsApiFetcher
from newsfeed.service import NewsService


def create_fetcher(config: NewsApiConfig) -> NewsApiFetcher:
    """Create the remote article fetcher from config."""
    return NewsApiFetcher(url_template=config.url_template, timeout=config.timeout_seconds)


def create_from_config(
    config: NewsfeedConfig,
    *,
    api_key: str | None = None,
) -> NewsService:
    """Create a news service from root config.

    Args:
        config: Root configuration.
        api_key: Explicit API key; otherwise read from ``provider.api_key_env``.

    Returns:
        NewsService with an empty cache, starting in the configured mode.
    """
    return NewsService(
        fetcher=create_fetcher(config.provider),
        credentials=EnvCredentialProvider(config.provider.api_key_env, api_key=api_key),
        mode=ModeSwitch(config.service.mode),
    )
