from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, timedelta

from statbook.core.config import NewsSettings, SortBy


@dataclass(frozen=True)
class Article:
    title: str = ""
    description: str = ""
    # ISO-8601, passed through as received
    published_at: str = ""
    content: str = ""


@dataclass(frozen=True)
class NewsQuery:
    """Parameters for one news search.

    An empty from_date means no date filter, which keeps the query usable on
    NewsAPI's free tier. An empty language sends no language filter.
    """

    player_name: str
    from_date: str = ""
    page_size: int = 5
    sort_by: str = SortBy.PUBLISHED_AT.value
    language: str = ""

    @classmethod
    def for_player(
        cls,
        name: str,
        settings: NewsSettings | None = None,
        *,
        today: date | None = None,
    ) -> NewsQuery:
        if settings is None:
            return cls(player_name=name)

        from_date = ""
        if settings.days_back is not None:
            day = today or date.today()
            from_date = (day - timedelta(days=settings.days_back)).isoformat()

        return cls(
            player_name=name,
            from_date=from_date,
            page_size=settings.max_articles,
            sort_by=settings.sort_by.value,
            language=settings.language,
        )

    def with_page_size(self, size: int) -> NewsQuery:
        return replace(self, page_size=size)

    def with_date_range(self, from_date: str) -> NewsQuery:
        """Only use with a paid NewsAPI plan; the free tier answers HTTP 426."""
        return replace(self, from_date=from_date)
