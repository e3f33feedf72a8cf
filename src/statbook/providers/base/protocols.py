from __future__ import annotations

from typing import Protocol, runtime_checkable

from statbook.models.news import Article, NewsQuery
from statbook.models.player import PlayerStats


@runtime_checkable
class StatsProvider(Protocol):
    """
    Orchestration depends on this, not on any HTTP client.

    Implementations make a single attempt per call, keep no per-call mutable
    state and may be awaited concurrently.
    """

    async def fetch_player_stats(self, identifier: str, *, season: str = "latest") -> PlayerStats:
        """
        Fetch stats for a slugged player identifier (e.g. "josh-allen").
        Raises PlayerNotFound when the source has no entry for it.
        """
        ...


@runtime_checkable
class NewsProvider(Protocol):
    """Same contract as StatsProvider, for news articles."""

    async def fetch_player_news(self, query: NewsQuery) -> list[Article]:
        """An empty list means no coverage was found; it is not an error."""
        ...
