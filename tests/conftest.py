from __future__ import annotations

from typing import Any

import pytest

from statbook.client import StatbookClient
from statbook.providers.memory import InMemoryNewsProvider, InMemoryStatsProvider


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def stats_provider() -> InMemoryStatsProvider:
    return InMemoryStatsProvider.with_defaults()


@pytest.fixture
def news_provider() -> InMemoryNewsProvider:
    return InMemoryNewsProvider.with_defaults()


@pytest.fixture
def mock_client(
    stats_provider: InMemoryStatsProvider, news_provider: InMemoryNewsProvider
) -> StatbookClient:
    return StatbookClient(stats_provider, news_provider)


@pytest.fixture
def josh_allen_payload() -> dict[str, Any]:
    return {
        "lastUpdatedOn": "2024-01-16T12:00:00.000Z",
        "playerStatsTotals": [
            {
                "player": {
                    "id": 8550,
                    "firstName": "Josh",
                    "lastName": "Allen",
                    "primaryPosition": "QB",
                    "jerseyNumber": 17,
                    "currentTeam": {"id": 48, "abbreviation": "BUF"},
                    "currentRosterStatus": "ROSTER",
                    "currentInjury": None,
                    "height": "6'5\"",
                    "weight": 237,
                    "birthDate": "1996-05-21",
                    "age": 27,
                    "rookie": False,
                    "college": "Wyoming",
                    "handedness": {"throws": "R"},
                    "socialMediaAccounts": [],
                },
                "team": {"id": 48, "abbreviation": "BUF"},
                "stats": {
                    "gamesPlayed": 17,
                    "passing": {
                        "passAttempts": 579,
                        "passCompletions": 385,
                        "passPct": 66.5,
                        "passYards": 4306,
                        "passTD": 29,
                        "passInt": 18,
                        "qbRating": 92.2,
                    },
                    "rushing": {"rushAttempts": 111, "rushYards": 524, "rushTD": 15},
                    "fumbles": {"fumbles": 6, "fumLost": 4},
                    "miscellaneous": {"gamesStarted": 17},
                    "snapCounts": {"offenseSnaps": 1121},
                },
            }
        ],
        "references": {"teamReferences": []},
    }
