"""Configuration module for newsfeed."""

from newsfeed.config.factory import create_fetcher, create_from_config
from newsfeed.config.loader import get_default_config_path, load_config
from newsfeed.config.models import (
    LoggingConfig,
    NewsApiConfig,
    NewsfeedConfig,
    ServiceConfig,
)

__all__ = [
    "LoggingConfig",
    "NewsApiConfig",
    "NewsfeedConfig",
    "ServiceConfig",
    "create_fetcher",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
