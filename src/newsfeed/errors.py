"""Exceptions raised by the news search pipeline."""


class NewsError(Exception):
    """Base class for all newsfeed errors."""


class InvalidKeywordError(NewsError):
    """The search keyword is empty or contains characters outside [A-Za-z0-9]."""


class InvalidModeError(NewsError):
    """The requested mode is neither "online" nor "offline"."""


class NoContentError(NewsError):
    """The search produced no articles.

    This is a confirmed empty result and is never recovered from the cache.
    """


class FetchError(NewsError):
    """The provider could not be reached or returned an unreadable response.

    The service recovers from this once by reading the article cache.
    """


class CredentialError(FetchError):
    """The provider credential could not be resolved."""
