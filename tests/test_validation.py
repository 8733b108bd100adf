"""Tests for keyword validation."""

import pytest

from newsfeed.errors import InvalidKeywordError
from newsfeed.validation import validate_keyword


@pytest.mark.parametrize("keyword", ["apple", "Apple", "tesla3", "2024", "A"])
def test_accepts_alphanumeric(keyword: str) -> None:
    validate_keyword(keyword)


@pytest.mark.parametrize(
    "keyword",
    ["", None, "invalid!", "two words", "apple-pie", "café", "apple\n", " apple", "a_b"],
)
def test_rejects_malformed(keyword: str | None) -> None:
    with pytest.raises(InvalidKeywordError, match="letters and numbers"):
        validate_keyword(keyword)
