from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from enum import StrEnum
from typing import TypeVar

import typer

from statbook.api.players import get_player_news, get_player_stats, get_player_summary
from statbook.client import StatbookClient
from statbook.core.errors import StatbookError
from statbook.core.text import to_slug
from statbook.models.fetch import (
    Both,
    FetchStrategy,
    NewsFailed,
    NewsOnly,
    PlayerSummaryResult,
    StatsOnly,
)
from statbook.models.news import Article
from statbook.models.player import PlayerStats, Season

app = typer.Typer(help="Look up a player's stats and news.")

T = TypeVar("T")


class StrategyChoice(StrEnum):
    BOTH = "both"
    STATS = "stats"
    NEWS = "news"


def _run(fn: Callable[[StatbookClient], Awaitable[T]]) -> T:
    async def runner() -> T:
        async with StatbookClient.from_env() as client:
            return await fn(client)

    try:
        return asyncio.run(runner())
    except StatbookError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


def _echo_stats(stats: PlayerStats) -> None:
    typer.echo(
        " ".join(
            [
                f"{stats.full_name} - {stats.primary_position} #{stats.jersey_number}",
                f"team={stats.current_team or '-'}",
                f"games_played={stats.games_played}",
                f"rookie={stats.rookie}",
                f"injury={stats.injury or 'healthy'}",
            ]
        )
    )


def _echo_articles(articles: list[Article]) -> None:
    typer.echo(f"Found {len(articles)} news articles:")
    for i, article in enumerate(articles, start=1):
        typer.echo(f"  {i}. {article.title}")
        typer.echo(f"     Published: {article.published_at}")
        if article.description:
            typer.echo(f"     {article.description}")


@app.command("stats")
def stats_cmd(
    name: str = typer.Argument(..., help="Player name, e.g. 'Josh Allen'."),
    season: Season = typer.Option(Season.LATEST, "--season", help="Season selector."),
    start_year: int | None = typer.Option(None, "--start-year", help="Season start year."),
    end_year: int | None = typer.Option(None, "--end-year", help="Season end year."),
) -> None:
    """Fetch season totals for a player."""

    years = None
    if start_year is not None or end_year is not None:
        if start_year is None or end_year is None:
            raise typer.BadParameter("--start-year and --end-year go together.")
        years = (start_year, end_year)

    stats = _run(lambda client: get_player_stats(client, name, years, season))
    _echo_stats(stats)


@app.command("news")
def news_cmd(
    name: str = typer.Argument(..., help="Player name, e.g. 'Josh Allen'."),
    page_size: int | None = typer.Option(None, "--page-size", help="Max articles to return."),
    from_date: str | None = typer.Option(
        None, "--from-date", help="YYYY-MM-DD lower bound (paid NewsAPI plans only)."
    ),
) -> None:
    """Fetch recent news articles about a player."""

    async def fetch(client: StatbookClient) -> list[Article]:
        query = client.news_query(to_slug(name))
        if page_size is not None:
            query = query.with_page_size(page_size)
        if from_date:
            query = query.with_date_range(from_date)
        return await get_player_news(client, query)

    _echo_articles(_run(fetch))


@app.command("summary")
def summary_cmd(
    name: str = typer.Argument(..., help="Player name, e.g. 'Josh Allen'."),
    strategy: StrategyChoice = typer.Option(
        StrategyChoice.BOTH, "--strategy", help="Which sources to query."
    ),
    strict: bool = typer.Option(
        False, "--strict/--lenient", help="Fail the whole call when news fails (both only)."
    ),
) -> None:
    """Fetch stats and news together, tolerating news failures unless --strict."""

    fetch_strategy: FetchStrategy
    if strategy is StrategyChoice.STATS:
        fetch_strategy = StatsOnly()
    elif strategy is StrategyChoice.NEWS:
        fetch_strategy = NewsOnly()
    else:
        fetch_strategy = Both(fail_on_news_error=strict)

    result: PlayerSummaryResult = _run(
        lambda client: get_player_summary(client, name, fetch_strategy)
    )

    if strategy is not StrategyChoice.NEWS:
        _echo_stats(result.player_stats)

    if isinstance(result.news_result, NewsFailed):
        typer.echo(f"News unavailable: {result.news_result.error}")
    elif strategy is not StrategyChoice.STATS:
        _echo_articles(result.news_result.unwrap())
