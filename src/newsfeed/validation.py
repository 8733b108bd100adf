"""Keyword validation run before any I/O."""

import re

from newsfeed.errors import InvalidKeywordError

_KEYWORD_RE = re.compile(r"[A-Za-z0-9]+")

INVALID_KEYWORD_MESSAGE = "Keyword must only contain letters and numbers and cannot be null."


def validate_keyword(keyword: str | None) -> None:
    """Reject keywords that are empty or contain anything but ASCII letters and digits.

    Raises:
        InvalidKeywordError: If the keyword is missing or malformed.
    """
    if not keyword or not _KEYWORD_RE.fullmatch(keyword):
        raise InvalidKeywordError(INVALID_KEYWORD_MESSAGE)
