from __future__ import annotations

import base64
import logging
from dataclasses import dataclass, field

from statbook.core.config import MYSPORTSFEEDS_PASSWORD
from statbook.core.errors import ApiStatusError, StatsApiError
from statbook.models.player import PlayerStats
from statbook.providers.base.client import BaseHttpClient
from statbook.providers.mysportsfeeds.parser import parse_player_stats

logger = logging.getLogger(__name__)


def basic_auth_header(api_key: str, password: str = MYSPORTSFEEDS_PASSWORD) -> str:
    token = base64.b64encode(f"{api_key}:{password}".encode()).decode("ascii")
    return f"Basic {token}"


@dataclass
class MySportsFeedsStatsProvider:
    """
    MySportsFeeds NFL player stats.

    Endpoint: GET /pull/nfl/{season}/player_stats_totals.json?player={slug}
    Auth: HTTP Basic with the API key as user and a fixed password.
    """

    http: BaseHttpClient
    api_key: str = field(repr=False)
    password: str = field(default=MYSPORTSFEEDS_PASSWORD, repr=False)

    def _headers(self) -> dict[str, str]:
        return {"Authorization": basic_auth_header(self.api_key, self.password)}

    async def fetch_player_stats(self, identifier: str, *, season: str = "latest") -> PlayerStats:
        path = f"/pull/nfl/{season}/player_stats_totals.json"
        try:
            payload = await self.http.get_json(
                path, params={"player": identifier}, headers=self._headers()
            )
        except ApiStatusError as e:
            raise StatsApiError(
                e.status, f"Failed to fetch player stats for '{identifier}'"
            ) from e

        stats = parse_player_stats(payload, identifier=identifier, season=season)
        logger.debug("Fetched stats for %s (%s)", identifier, season)
        return stats
