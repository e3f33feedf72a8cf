from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from statbook.core.errors import StatbookError
from statbook.models.news import Article
from statbook.models.player import PlayerStats


@dataclass(frozen=True)
class StatsOnly:
    """Fetch only player statistics."""


@dataclass(frozen=True)
class NewsOnly:
    """Fetch only news articles; stats come back zero-valued."""


@dataclass(frozen=True)
class Both:
    """Fetch stats and news concurrently.

    With fail_on_news_error the news failure fails the whole call; otherwise it
    is kept as data in PlayerSummaryResult.news_result.
    """

    fail_on_news_error: bool = False


FetchStrategy: TypeAlias = StatsOnly | NewsOnly | Both

DEFAULT_STRATEGY: FetchStrategy = Both(fail_on_news_error=False)


@dataclass(frozen=True)
class NewsSucceeded:
    articles: tuple[Article, ...] = ()

    def is_ok(self) -> bool:
        return True

    def is_error(self) -> bool:
        return False

    def unwrap(self) -> list[Article]:
        return list(self.articles)


@dataclass(frozen=True, eq=False)
class NewsFailed:
    error: StatbookError

    def is_ok(self) -> bool:
        return False

    def is_error(self) -> bool:
        return True

    def unwrap(self) -> list[Article]:
        raise self.error


NewsOutcome: TypeAlias = NewsSucceeded | NewsFailed


@dataclass(frozen=True)
class PlayerSummaryResult:
    player_stats: PlayerStats
    news_result: NewsOutcome
