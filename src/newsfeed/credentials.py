"""Providers for the news API credential."""

import os
from typing import Protocol

from newsfeed.errors import CredentialError


class CredentialProvider(Protocol):
    """Interface for resolving the provider API key."""

    def get_credential(self) -> str:
        """Return the API key.

        Raises:
            CredentialError: If no key can be resolved.
        """
        ...


class EnvCredentialProvider:
    """Resolve the API key from an explicit value or an environment variable.

    The variable is read on every call, so rotating it takes effect without a
    restart.

    Args:
        env_var: Environment variable holding the key (default: NEWS_API_KEY).
        api_key: Explicit key; takes precedence over the environment.
    """

    def __init__(self, env_var: str = "NEWS_API_KEY", *, api_key: str | None = None) -> None:
        self._env_var = env_var
        self._api_key = api_key

    def get_credential(self) -> str:
        api_key = self._api_key or os.environ.get(self._env_var)
        if not api_key:
            raise CredentialError(
                f"News API key required. Pass api_key or set {self._env_var} env var."
            )
        return api_key


class StaticCredentialProvider:
    """Always return the same key."""

    def __init__(self, api_key: str) -> None:
        self._api_key = api_key

    def get_credential(self) -> str:
        return self._api_key
