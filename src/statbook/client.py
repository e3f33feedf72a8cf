from __future__ import annotations

from collections.abc import Sequence

import httpx

from statbook.core.config import NewsSettings, Settings, StatbookConfig
from statbook.models.news import NewsQuery
from statbook.providers.base.client import BaseHttpClient
from statbook.providers.base.protocols import NewsProvider, StatsProvider
from statbook.providers.mysportsfeeds.provider import MySportsFeedsStatsProvider
from statbook.providers.newsapi.provider import NewsApiProvider


class StatbookClient:
    """
    Entry point holding one StatsProvider and one NewsProvider.

    Providers are injected, so remote implementations and in-memory doubles are
    interchangeable. Use `from_config` / `from_env` for the remote pair; the
    client then owns their HTTP pools and closes them on `aclose()`:

        async with StatbookClient.from_env() as client:
            result = await get_player_summary(client, "Josh Allen")
    """

    def __init__(
        self,
        stats_provider: StatsProvider,
        news_provider: NewsProvider,
        *,
        news_settings: NewsSettings | None = None,
        owned_http: Sequence[BaseHttpClient] = (),
    ) -> None:
        self._stats_provider = stats_provider
        self._news_provider = news_provider
        self._news_settings = news_settings
        self._owned_http = list(owned_http)

    @classmethod
    def from_config(
        cls,
        config: StatbookConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> StatbookClient:
        headers = {"User-Agent": config.user_agent}
        stats_http = BaseHttpClient(
            base_url=config.stats_base_url,
            timeout_s=config.timeout_s,
            headers=headers,
            transport=transport,
        )
        news_http = BaseHttpClient(
            base_url=config.news_base_url,
            timeout_s=config.timeout_s,
            headers=headers,
            transport=transport,
        )
        return cls(
            MySportsFeedsStatsProvider(
                http=stats_http, api_key=config.stats_api_key, password=config.stats_password
            ),
            NewsApiProvider(http=news_http, api_key=config.news_api_key),
            news_settings=config.news,
            owned_http=[stats_http, news_http],
        )

    @classmethod
    def from_env(cls) -> StatbookClient:
        """Build from STATS_API_KEY / NEWS_API_KEY (and friends) in the environment or .env."""
        return cls.from_config(Settings.load().to_config())

    @property
    def stats_provider(self) -> StatsProvider:
        return self._stats_provider

    @property
    def news_provider(self) -> NewsProvider:
        return self._news_provider

    def news_query(self, player_name: str) -> NewsQuery:
        return NewsQuery.for_player(player_name, self._news_settings)

    async def aclose(self) -> None:
        for http in self._owned_http:
            await http.aclose()

    async def __aenter__(self) -> StatbookClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
