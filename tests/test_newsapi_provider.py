from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

import httpx
import pytest

from statbook.core.errors import JsonDecodeError, NewsApiError
from statbook.models.news import Article, NewsQuery
from statbook.providers.base.client import BaseHttpClient
from statbook.providers.newsapi.provider import NewsApiProvider, build_params

BASE_URL = "https://newsapi.org/v2"

ARTICLES_PAYLOAD = {
    "status": "ok",
    "totalResults": 2,
    "articles": [
        {"title": "Josh Allen leads Bills to victory", "publishedAt": "2024-01-15T10:00:00Z"},
        {"title": "Allen named AFC Player of the Week", "description": None},
    ],
}


@asynccontextmanager
async def _provider(
    handler: Callable[[httpx.Request], httpx.Response],
) -> AsyncIterator[NewsApiProvider]:
    async with BaseHttpClient(
        base_url=BASE_URL,
        headers={"User-Agent": "statbook-tests"},
        transport=httpx.MockTransport(handler),
    ) as http:
        yield NewsApiProvider(http=http, api_key="news-key")


def test_build_params_omits_from_without_date() -> None:
    params = build_params(NewsQuery.for_player("josh-allen"), "news-key")

    assert params == {
        "q": "josh-allen",
        "pageSize": "5",
        "sortBy": "publishedAt",
        "apiKey": "news-key",
    }


def test_build_params_includes_optional_filters() -> None:
    query = NewsQuery(
        player_name="josh-allen", from_date="2024-01-01", page_size=3, language="en"
    )

    params = build_params(query, "news-key")

    assert params["from"] == "2024-01-01"
    assert params["language"] == "en"
    assert params["pageSize"] == "3"


@pytest.mark.anyio
async def test_fetch_player_news_builds_request() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=ARTICLES_PAYLOAD)

    async with _provider(handler) as provider:
        articles = await provider.fetch_player_news(NewsQuery.for_player("josh-allen"))

    assert [a.title for a in articles] == [
        "Josh Allen leads Bills to victory",
        "Allen named AFC Player of the Week",
    ]
    assert articles[1] == Article(title="Allen named AFC Player of the Week")

    (request,) = seen
    assert request.url.path == "/v2/everything"
    assert request.url.params["q"] == "josh-allen"
    assert request.url.params["apiKey"] == "news-key"
    assert "from" not in request.url.params
    assert request.headers["User-Agent"] == "statbook-tests"


@pytest.mark.anyio
async def test_empty_articles_is_not_an_error() -> None:
    empty = {"status": "ok", "totalResults": 0, "articles": []}

    async with _provider(lambda request: httpx.Response(200, json=empty)) as provider:
        assert await provider.fetch_player_news(NewsQuery.for_player("nobody")) == []


@pytest.mark.anyio
async def test_upgrade_required_maps_to_news_api_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["from"] == "2024-01-01"
        return httpx.Response(426, json={"status": "error", "code": "parameterInvalid"})

    query = NewsQuery.for_player("josh-allen").with_date_range("2024-01-01")

    async with _provider(handler) as provider:
        with pytest.raises(NewsApiError) as exc_info:
            await provider.fetch_player_news(query)

    assert exc_info.value.status == 426
    assert str(exc_info.value).startswith("News API error: 426")


@pytest.mark.anyio
async def test_malformed_json_is_decode_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>oops</html>")

    async with _provider(handler) as provider:
        with pytest.raises(JsonDecodeError):
            await provider.fetch_player_news(NewsQuery.for_player("josh-allen"))
