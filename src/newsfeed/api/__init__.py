"""HTTP surface for newsfeed."""

from newsfeed.api.app import create_app

__all__ = ["create_app"]
