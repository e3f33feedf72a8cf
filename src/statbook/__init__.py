from statbook.api.players import (
    get_player_news,
    get_player_stats,
    get_player_summary,
    get_player_summary_concurrent,
)
from statbook.client import StatbookClient
from statbook.core.config import NewsSettings, Settings, SortBy, StatbookConfig
from statbook.core.errors import (
    ApiStatusError,
    ConfigError,
    JsonDecodeError,
    MissingApiKey,
    NetworkError,
    NewsApiError,
    PlayerNotFound,
    ProviderError,
    StatbookError,
    StatsApiError,
    ValidationError,
)
from statbook.models import (
    Article,
    Both,
    FetchStrategy,
    NewsFailed,
    NewsOnly,
    NewsQuery,
    NewsSucceeded,
    PlayerStats,
    PlayerSummaryResult,
    Season,
    StatsOnly,
)
from statbook.providers.base.protocols import NewsProvider, StatsProvider

__all__ = [
    "ApiStatusError",
    "Article",
    "Both",
    "ConfigError",
    "FetchStrategy",
    "JsonDecodeError",
    "MissingApiKey",
    "NetworkError",
    "NewsApiError",
    "NewsFailed",
    "NewsOnly",
    "NewsProvider",
    "NewsQuery",
    "NewsSettings",
    "NewsSucceeded",
    "PlayerNotFound",
    "PlayerStats",
    "PlayerSummaryResult",
    "ProviderError",
    "Season",
    "Settings",
    "SortBy",
    "StatbookClient",
    "StatbookConfig",
    "StatbookError",
    "StatsApiError",
    "StatsOnly",
    "StatsProvider",
    "ValidationError",
    "get_player_news",
    "get_player_stats",
    "get_player_summary",
    "get_player_summary_concurrent",
]
