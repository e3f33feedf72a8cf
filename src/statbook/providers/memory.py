from __future__ import annotations

import copy
from dataclasses import dataclass, field

from statbook.core.errors import NewsApiError, PlayerNotFound, StatbookError
from statbook.models.news import Article, NewsQuery
from statbook.models.player import PlayerStats


@dataclass
class InMemoryStatsProvider:
    """
    Deterministic StatsProvider driven by canned data.

    Records every identifier it is asked for in `calls`. Stored errors are
    raised as a new copy on every call.
    """

    responses: dict[str, PlayerStats] = field(default_factory=dict)
    errors: dict[str, StatbookError] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)

    @classmethod
    def with_defaults(cls) -> InMemoryStatsProvider:
        provider = cls()
        provider.add_player_stats(
            "josh-allen",
            PlayerStats(
                first_name="Josh",
                last_name="Allen",
                primary_position="QB",
                jersey_number=17,
                current_team="BUF",
                injury="",
                rookie=False,
                games_played=16,
            ),
        )
        provider.add_player_stats(
            "tom-brady",
            PlayerStats(
                first_name="Tom",
                last_name="Brady",
                primary_position="QB",
                jersey_number=12,
                current_team="TB",
                injury="",
                rookie=False,
                games_played=17,
            ),
        )
        return provider

    def add_player_stats(self, identifier: str, stats: PlayerStats) -> None:
        self.responses[identifier] = stats

    def add_player_error(self, identifier: str, error: StatbookError) -> None:
        self.errors[identifier] = error

    def add_player_not_found(self, identifier: str) -> None:
        self.errors[identifier] = PlayerNotFound(identifier)

    async def fetch_player_stats(self, identifier: str, *, season: str = "latest") -> PlayerStats:
        self.calls.append(identifier)
        error = self.errors.get(identifier)
        if error is not None:
            raise copy.copy(error)

        stats = self.responses.get(identifier)
        if stats is None:
            raise PlayerNotFound(identifier)
        return stats


@dataclass
class InMemoryNewsProvider:
    """
    Deterministic NewsProvider driven by canned data.

    Unknown players get an empty list. Records every query in `calls`.
    Stored errors are raised as a new copy on every call.
    """

    responses: dict[str, list[Article]] = field(default_factory=dict)
    errors: dict[str, StatbookError] = field(default_factory=dict)
    calls: list[NewsQuery] = field(default_factory=list)

    @classmethod
    def with_defaults(cls) -> InMemoryNewsProvider:
        provider = cls()
        provider.add_news_articles(
            "josh-allen",
            [
                Article(
                    title="Josh Allen leads Bills to victory",
                    description="Quarterback throws for 300 yards",
                    published_at="2024-01-15T10:00:00Z",
                    content="Full article content here...",
                ),
                Article(
                    title="Allen named AFC Player of the Week",
                    description="Recognition for outstanding performance",
                    published_at="2024-01-14T15:30:00Z",
                    content="More article content...",
                ),
            ],
        )
        provider.add_news_articles(
            "tom-brady",
            [
                Article(
                    title="Brady announces retirement",
                    description="Legendary quarterback calls it a career",
                    published_at="2024-01-10T12:00:00Z",
                    content="Retirement announcement content...",
                )
            ],
        )
        return provider

    def add_news_articles(self, player_name: str, articles: list[Article]) -> None:
        self.responses[player_name] = list(articles)

    def add_news_error(
        self, player_name: str, error: StatbookError | None = None
    ) -> None:
        self.errors[player_name] = error or NewsApiError(500, "Mock news error")

    async def fetch_player_news(self, query: NewsQuery) -> list[Article]:
        self.calls.append(query)
        error = self.errors.get(query.player_name)
        if error is not None:
            raise copy.copy(error)
        return list(self.responses.get(query.player_name, []))
