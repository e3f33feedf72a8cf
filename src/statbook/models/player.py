from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from statbook.core.errors import ValidationError


class Season(StrEnum):
    """Season selector for the stats endpoint."""

    CURRENT = "current"
    LATEST = "latest"
    UPCOMING = "upcoming"
    REGULAR = "regular"
    PLAYOFFS = "playoff"

    def format_with_years(self, start_year: int, end_year: int) -> str:
        return f"{start_year}-{end_year}-{self.value}"


_KEYWORD_SEASONS = frozenset({Season.CURRENT, Season.LATEST, Season.UPCOMING})


def season_label(season: Season = Season.LATEST, years: tuple[int, int] | None = None) -> str:
    """Resolve the season path segment used by the stats endpoint.

    Keyword seasons (current/latest/upcoming) stand alone; regular and playoff
    seasons need an explicit year range, e.g. "2024-2025-regular".
    """

    if years is None:
        if season not in _KEYWORD_SEASONS:
            raise ValidationError(f"season {season.value!r} requires a year range")
        return season.value

    if season in _KEYWORD_SEASONS:
        raise ValidationError(f"season {season.value!r} does not take a year range")

    start_year, end_year = years
    if end_year < start_year:
        raise ValidationError(f"invalid year range {start_year}-{end_year}")
    return season.format_with_years(start_year, end_year)


@dataclass(frozen=True)
class PlayerStats:
    """Flat player record; every field has a zero value so it is always constructible."""

    first_name: str = ""
    last_name: str = ""
    primary_position: str = ""
    jersey_number: int = 0
    current_team: str = ""
    # empty string means healthy
    injury: str = ""
    rookie: bool = False
    games_played: int = 0
    season: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
