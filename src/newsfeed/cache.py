"""In-memory last-known-good article store used for fetch fallback."""

import threading
from collections.abc import Iterable

from newsfeed.data import Article


class ArticleCache:
    """Per-keyword cache of the most recent successful fetch.

    Entries are stored as tuples and swapped under a lock, so a reader sees
    either the old list or the new one, never a mix. Last write wins; entries
    live until overwritten or the process exits.
    """

    def __init__(self) -> None:
        self._entries: dict[str, tuple[Article, ...]] = {}
        self._lock = threading.Lock()

    def get(self, keyword: str) -> tuple[Article, ...]:
        """Return the cached articles for ``keyword``, or an empty tuple."""
        with self._lock:
            return self._entries.get(keyword, ())

    def put(self, keyword: str, articles: Iterable[Article]) -> None:
        entry = tuple(articles)
        with self._lock:
            self._entries[keyword] = entry

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, keyword: object) -> bool:
        with self._lock:
            return keyword in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
