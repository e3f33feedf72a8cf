from statbook.models.fetch import (
    DEFAULT_STRATEGY,
    Both,
    FetchStrategy,
    NewsFailed,
    NewsOnly,
    NewsOutcome,
    NewsSucceeded,
    PlayerSummaryResult,
    StatsOnly,
)
from statbook.models.news import Article, NewsQuery
from statbook.models.player import PlayerStats, Season, season_label

__all__ = [
    "DEFAULT_STRATEGY",
    "Article",
    "Both",
    "FetchStrategy",
    "NewsFailed",
    "NewsOnly",
    "NewsOutcome",
    "NewsQuery",
    "NewsSucceeded",
    "PlayerStats",
    "PlayerSummaryResult",
    "Season",
    "StatsOnly",
    "season_label",
]
