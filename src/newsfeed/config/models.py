"""Pydantic configuration models for newsfeed."""

from pydantic import BaseModel, Field

from newsfeed.mode import Mode
from newsfeed.search.newsapi import NEWS_API_URL

# ============================================================
# Provider Config
# ============================================================


class NewsApiConfig(BaseModel):
    """Configuration for NewsApiFetcher."""

    url_template: str = NEWS_API_URL
    timeout_seconds: float = Field(default=10.0, gt=0)
    api_key_env: str = "NEWS_API_KEY"

    model_config = {"frozen": True}


# ============================================================
# Service Config
# ============================================================


class ServiceConfig(BaseModel):
    """Configuration for NewsService."""

    mode: Mode = Mode.ONLINE

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for process logging."""

    level: str = "INFO"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class NewsfeedConfig(BaseModel):
    """Root configuration for newsfeed."""

    provider: NewsApiConfig = Field(default_factory=NewsApiConfig)
    service: ServiceConfig = Field(default_factory=ServiceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
