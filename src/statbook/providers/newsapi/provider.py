from __future__ import annotations

import logging
from dataclasses import dataclass, field

from statbook.core.errors import ApiStatusError, NewsApiError
from statbook.models.news import Article, NewsQuery
from statbook.providers.base.client import BaseHttpClient
from statbook.providers.newsapi.parser import parse_articles

logger = logging.getLogger(__name__)


def build_params(query: NewsQuery, api_key: str) -> dict[str, str]:
    params: dict[str, str] = {
        "q": query.player_name,
        "pageSize": str(query.page_size),
        "sortBy": query.sort_by,
        "apiKey": api_key,
    }
    # `from` is a paid-tier feature; the free tier answers HTTP 426.
    if query.from_date:
        params["from"] = query.from_date
    if query.language:
        params["language"] = query.language
    return params


@dataclass
class NewsApiProvider:
    """
    NewsAPI.org "everything" search.

    Endpoint: GET /everything?q=...&pageSize=...&sortBy=...&apiKey=...[&from=...]
    """

    http: BaseHttpClient
    api_key: str = field(repr=False)

    async def fetch_player_news(self, query: NewsQuery) -> list[Article]:
        try:
            payload = await self.http.get_json("/everything", params=build_params(query, self.api_key))
        except ApiStatusError as e:
            raise NewsApiError(
                e.status, f"Failed to fetch news for '{query.player_name}'"
            ) from e

        articles = parse_articles(payload)
        logger.debug("Fetched %d articles for %s", len(articles), query.player_name)
        return articles
