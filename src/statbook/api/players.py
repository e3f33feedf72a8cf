from __future__ import annotations

import asyncio
import logging

from statbook.client import StatbookClient
from statbook.core.errors import StatbookError, ValidationError
from statbook.core.text import to_slug
from statbook.models.fetch import (
    DEFAULT_STRATEGY,
    Both,
    FetchStrategy,
    NewsFailed,
    NewsOnly,
    NewsSucceeded,
    PlayerSummaryResult,
    StatsOnly,
)
from statbook.models.news import Article, NewsQuery
from statbook.models.player import PlayerStats, Season, season_label

logger = logging.getLogger(__name__)


async def get_player_stats(
    client: StatbookClient,
    name: str,
    years: tuple[int, int] | None = None,
    season: Season = Season.LATEST,
) -> PlayerStats:
    """Stats for a player; `years` is (start, end) and is required for regular/playoff seasons."""

    label = season_label(season, years)
    return await client.stats_provider.fetch_player_stats(to_slug(name), season=label)


async def get_player_news(client: StatbookClient, query: NewsQuery) -> list[Article]:
    return await client.news_provider.fetch_player_news(query)


async def get_player_summary(
    client: StatbookClient,
    name: str,
    strategy: FetchStrategy = DEFAULT_STRATEGY,
) -> PlayerSummaryResult:
    """
    Fetch a player summary according to `strategy`.

    - StatsOnly: stats provider only; news_result is an empty success.
    - NewsOnly: news provider only; player_stats is zero-valued.
    - Both: both providers concurrently, see get_player_summary_concurrent.

    Stats failures always raise.
    """

    slug = to_slug(name)

    if isinstance(strategy, StatsOnly):
        stats = await client.stats_provider.fetch_player_stats(slug)
        return PlayerSummaryResult(player_stats=stats, news_result=NewsSucceeded())

    if isinstance(strategy, NewsOnly):
        articles = await client.news_provider.fetch_player_news(client.news_query(slug))
        return PlayerSummaryResult(
            player_stats=PlayerStats(), news_result=NewsSucceeded(tuple(articles))
        )

    if isinstance(strategy, Both):
        return await _fetch_both(client, slug, fail_on_news_error=strategy.fail_on_news_error)

    raise ValidationError(f"Unknown fetch strategy: {strategy!r}")


async def get_player_summary_concurrent(
    client: StatbookClient,
    name: str,
    fail_on_news_error: bool = False,
) -> PlayerSummaryResult:
    """
    Fetch stats and news concurrently and wait for both to settle.

    With fail_on_news_error a news failure is raised; otherwise it is returned
    as NewsFailed in `news_result` next to the stats.
    """

    return await _fetch_both(client, to_slug(name), fail_on_news_error=fail_on_news_error)


async def _fetch_both(
    client: StatbookClient,
    slug: str,
    *,
    fail_on_news_error: bool,
) -> PlayerSummaryResult:
    query = client.news_query(slug)

    # gather schedules both before awaiting either; cancelling the caller cancels both.
    stats_outcome, news_outcome = await asyncio.gather(
        client.stats_provider.fetch_player_stats(slug),
        client.news_provider.fetch_player_news(query),
        return_exceptions=True,
    )

    if isinstance(stats_outcome, BaseException):
        raise stats_outcome

    if isinstance(news_outcome, StatbookError):
        if fail_on_news_error:
            raise news_outcome
        logger.warning("News unavailable for %s: %s", slug, news_outcome)
        return PlayerSummaryResult(player_stats=stats_outcome, news_result=NewsFailed(news_outcome))

    # anything else is a bug, not a provider failure
    if isinstance(news_outcome, BaseException):
        raise news_outcome

    return PlayerSummaryResult(
        player_stats=stats_outcome, news_result=NewsSucceeded(tuple(news_outcome))
    )
