"""Tests for the HTTP API."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from newsfeed.api import create_app
from newsfeed.credentials import StaticCredentialProvider
from newsfeed.data import Article, SearchResult
from newsfeed.errors import FetchError
from newsfeed.service import NewsService


def _article(title: str, hours_ago: float) -> Article:
    published = datetime.now(tz=UTC) - timedelta(hours=hours_ago)
    return Article(
        title=title,
        description="",
        url=f"https://example.com/{title.replace(' ', '-')}",
        published_at=published.isoformat(),
    )


@pytest.fixture
def mock_fetcher() -> MagicMock:
    fetcher = MagicMock()
    fetcher.fetch = AsyncMock(
        return_value=SearchResult.of(
            [
                _article("Apple launches phone", 1),
                _article("Apple earnings", 13),
                _article("Tesla recalls cars", 2),
            ]
        )
    )
    return fetcher


@pytest.fixture
def service(mock_fetcher: MagicMock) -> NewsService:
    return NewsService(mock_fetcher, StaticCredentialProvider("1234"))


@pytest.fixture
async def client(service: NewsService):
    app = create_app(service)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def test_health(client: AsyncClient) -> None:
    response = await client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "mode": "online"}


async def test_search_returns_result(client: AsyncClient) -> None:
    response = await client.get("/api/news/search", params={"keyword": "apple"})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["totalResults"] == 2
    assert len(body["articles"]) == 2
    assert "publishedAt" in body["articles"][0]


async def test_search_invalid_keyword_is_400(client: AsyncClient) -> None:
    response = await client.get("/api/news/search", params={"keyword": "invalid!"})

    assert response.status_code == 400
    body = response.json()
    assert body["status"] == 400
    assert body["error"] == "Invalid Keyword"
    assert "letters and numbers" in body["message"]
    assert body["path"] == "/api/news/search"


async def test_search_no_content_is_204(client: AsyncClient) -> None:
    response = await client.get("/api/news/search", params={"keyword": "zzzqqq"})
    assert response.status_code == 204
    assert response.content == b""


async def test_search_unexpected_error_is_500(
    client: AsyncClient, mock_fetcher: MagicMock
) -> None:
    mock_fetcher.fetch.side_effect = RuntimeError("secret internals")

    response = await client.get("/api/news/search", params={"keyword": "apple"})

    assert response.status_code == 500
    body = response.json()
    assert body["message"] == "An unexpected error occurred."
    assert "secret internals" not in response.text


async def test_search_fetch_error_uses_cache(client: AsyncClient, mock_fetcher: MagicMock) -> None:
    await client.get("/api/news/search", params={"keyword": "apple"})
    mock_fetcher.fetch.side_effect = FetchError("provider down")

    response = await client.get("/api/news/search", params={"keyword": "apple"})

    assert response.status_code == 200
    assert response.json()["totalResults"] == 2


async def test_group_by_interval(client: AsyncClient) -> None:
    response = await client.get(
        "/api/news/newsGroupByInterval",
        params={"keyword": "apple", "interval": 12, "unit": "hours"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["12 hours ago"]["count"] == 1
    assert body["24 hours ago"]["count"] == 1
    assert body["24 hours ago"]["articles"][0]["title"] == "Apple earnings"


async def test_group_by_interval_defaults(client: AsyncClient) -> None:
    response = await client.get("/api/news/newsGroupByInterval", params={"keyword": "apple"})
    assert response.status_code == 200
    assert "12 hours ago" in response.json()


async def test_group_by_interval_rejects_bad_unit(client: AsyncClient) -> None:
    response = await client.get(
        "/api/news/newsGroupByInterval",
        params={"keyword": "apple", "unit": "fortnights"},
    )
    assert response.status_code == 422


async def test_group_by_interval_rejects_zero_interval(client: AsyncClient) -> None:
    response = await client.get(
        "/api/news/newsGroupByInterval",
        params={"keyword": "apple", "interval": 0},
    )
    assert response.status_code == 422


async def test_toggle_mode(client: AsyncClient, mock_fetcher: MagicMock) -> None:
    response = await client.post("/api/news/toggle-mode", params={"mode": "OFFLINE"})
    assert response.status_code == 200
    assert response.text == "Mode successfully set to: offline"
    assert response.headers["content-type"].startswith("text/plain")

    response = await client.get("/api/news/search", params={"keyword": "apple"})
    assert response.status_code == 200
    mock_fetcher.fetch.assert_not_called()


async def test_toggle_mode_invalid_is_400(client: AsyncClient, service: NewsService) -> None:
    response = await client.post("/api/news/toggle-mode", params={"mode": "sideways"})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid Input"
    assert service.get_mode().value == "online"
