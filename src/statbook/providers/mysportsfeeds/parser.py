from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from statbook.core.errors import JsonDecodeError, PlayerNotFound
from statbook.models.player import PlayerStats

# Upstream field names are mapped with pydantic aliases; every leaf is optional
# and unknown fields are ignored.


class _Upstream(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class TeamRef(_Upstream):
    id: int | None = None
    abbreviation: str | None = None


class PlayerInfo(_Upstream):
    id: int | None = None
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    primary_position: str | None = Field(default=None, alias="primaryPosition")
    jersey_number: int | None = Field(default=None, ge=0, alias="jerseyNumber")
    current_team: TeamRef | None = Field(default=None, alias="currentTeam")
    roster_status: str | None = Field(default=None, alias="currentRosterStatus")
    injury: str | None = Field(default=None, alias="currentInjury")
    height: str | None = None
    weight: int | None = None
    birth_date: str | None = Field(default=None, alias="birthDate")
    age: int | None = None
    birth_city: str | None = Field(default=None, alias="birthCity")
    birth_country: str | None = Field(default=None, alias="birthCountry")
    rookie: bool | None = None
    high_school: str | None = Field(default=None, alias="highSchool")
    college: str | None = None
    official_image_src: str | None = Field(default=None, alias="officialImageSrc")


class PassingStats(_Upstream):
    attempts: int | None = Field(default=None, alias="passAttempts")
    completions: int | None = Field(default=None, alias="passCompletions")
    percentage: float | None = Field(default=None, alias="passPct")
    yards_total: int | None = Field(default=None, alias="passYards")
    yards_average: float | None = Field(default=None, alias="passAvg")
    yards_per_attempt: float | None = Field(default=None, alias="passYardsPerAtt")
    touchdowns: int | None = Field(default=None, alias="passTD")
    touchdowns_percentage: float | None = Field(default=None, alias="passTDPct")
    interceptions: int | None = Field(default=None, alias="passInt")
    interception_percentage: float | None = Field(default=None, alias="passIntPct")
    longest_pass: int | None = Field(default=None, alias="passLng")
    twenty_plus_yards: int | None = Field(default=None, alias="pass20Plus")
    forty_plus_yards: int | None = Field(default=None, alias="pass40Plus")
    times_sacked: int | None = Field(default=None, alias="passSacks")
    sack_yards_lost: int | None = Field(default=None, alias="passSackY")
    quarterback_rating: float | None = Field(default=None, alias="qbRating")


class RushingStats(_Upstream):
    attempts: int | None = Field(default=None, alias="rushAttempts")
    yards_total: int | None = Field(default=None, alias="rushYards")
    yards_average: float | None = Field(default=None, alias="rushAverage")
    touchdowns: int | None = Field(default=None, alias="rushTD")
    longest_rush_yards: int | None = Field(default=None, alias="rushLng")
    first_downs: int | None = Field(default=None, alias="rush1stDowns")
    first_downs_percentage: float | None = Field(default=None, alias="rush1stDownsPct")
    twenty_plus_yards: int | None = Field(default=None, alias="rush20Plus")
    forty_plus_yards: int | None = Field(default=None, alias="rush40Plus")
    fumbles: int | None = Field(default=None, alias="rushFumbles")


class ReceivingStats(_Upstream):
    targets: int | None = None
    receptions: int | None = None
    yards_total: int | None = Field(default=None, alias="recYards")
    yards_average: float | None = Field(default=None, alias="recAverage")
    touchdowns: int | None = Field(default=None, alias="recTD")
    longest_reception_yards: int | None = Field(default=None, alias="recLng")
    first_downs: int | None = Field(default=None, alias="rec1stDowns")
    twenty_plus_yards: int | None = Field(default=None, alias="rec20Plus")
    forty_plus_yards: int | None = Field(default=None, alias="rec40Plus")
    fumbles: int | None = Field(default=None, alias="recFumbles")


class TackleStats(_Upstream):
    solo: int | None = Field(default=None, alias="tackleSolo")
    total: int | None = Field(default=None, alias="tackleTotal")
    assisted: int | None = Field(default=None, alias="tackleAst")
    sacks: float | None = None
    sack_yards: int | None = Field(default=None, alias="sackYds")
    tackles_for_loss: int | None = Field(default=None, alias="tacklesForLoss")


class InterceptionStats(_Upstream):
    interceptions: int | None = None
    touchdowns: int | None = Field(default=None, alias="intTD")
    yards_total: int | None = Field(default=None, alias="intYds")
    yards_average: float | None = Field(default=None, alias="intAverage")
    longest_interception: int | None = Field(default=None, alias="intLng")
    passes_defended: int | None = Field(default=None, alias="passesDefended")
    stuffs: int | None = None
    stuff_yards: int | None = Field(default=None, alias="stuffYds")
    safeties: int | None = None
    knockdowns: int | None = Field(default=None, alias="kB")


class FumbleStats(_Upstream):
    fumbles: int | None = None
    lost: int | None = Field(default=None, alias="fumLost")
    forced: int | None = Field(default=None, alias="fumForced")
    own_recovered: int | None = Field(default=None, alias="fumOwnRec")
    opponent_recovered: int | None = Field(default=None, alias="fumOppRec")
    recovery_yards: int | None = Field(default=None, alias="fumRecYds")
    recovered_total: int | None = Field(default=None, alias="fumTotalRec")
    recovery_touchdowns: int | None = Field(default=None, alias="fumTD")
    offensive_fumble_touchdowns: int | None = Field(default=None, alias="offFumTD")


class KickoffReturnStats(_Upstream):
    returns: int | None = Field(default=None, alias="krRet")
    yards_total: int | None = Field(default=None, alias="krYds")
    yards_average: float | None = Field(default=None, alias="krAvg")
    longest_return: int | None = Field(default=None, alias="krLng")
    touchdowns: int | None = Field(default=None, alias="krTD")
    twenty_plus_yards: int | None = Field(default=None, alias="kr20Plus")
    forty_plus_yards: int | None = Field(default=None, alias="kr40Plus")
    fair_catches: int | None = Field(default=None, alias="krFC")
    fumbles: int | None = Field(default=None, alias="krFum")


class PuntReturnStats(_Upstream):
    returns: int | None = Field(default=None, alias="prRet")
    yards_total: int | None = Field(default=None, alias="prYds")
    yards_average: float | None = Field(default=None, alias="prAvg")
    longest_return: int | None = Field(default=None, alias="prLng")
    touchdowns: int | None = Field(default=None, alias="prTD")
    twenty_plus_yards: int | None = Field(default=None, alias="pr20Plus")
    forty_plus_yards: int | None = Field(default=None, alias="pr40Plus")
    fair_catches: int | None = Field(default=None, alias="prFC")
    fumbles: int | None = Field(default=None, alias="prFum")


class MiscellaneousStats(_Upstream):
    games_started: int | None = Field(default=None, alias="gamesStarted")


class TwoPointAttemptStats(_Upstream):
    attempts: int | None = Field(default=None, alias="twoPtAtt")
    made: int | None = Field(default=None, alias="twoPtMade")
    pass_attempts: int | None = Field(default=None, alias="twoPtPassAtt")
    pass_made: int | None = Field(default=None, alias="twoPtPassMade")
    pass_receptions: int | None = Field(default=None, alias="twoPtPassRec")
    rush_attempts: int | None = Field(default=None, alias="twoPtRushAtt")
    rush_made: int | None = Field(default=None, alias="twoPtRushMade")


class SnapCountStats(_Upstream):
    offense_snaps: int | None = Field(default=None, alias="offenseSnaps")
    defense_snaps: int | None = Field(default=None, alias="defenseSnaps")
    special_team_snaps: int | None = Field(default=None, alias="specialTeamSnaps")


class StatisticsTotals(_Upstream):
    games_played: int | None = Field(default=None, ge=0, alias="gamesPlayed")
    passing: PassingStats | None = None
    rushing: RushingStats | None = None
    receiving: ReceivingStats | None = None
    tackles: TackleStats | None = None
    interceptions: InterceptionStats | None = None
    fumbles: FumbleStats | None = None
    kickoff_returns: KickoffReturnStats | None = Field(default=None, alias="kickoffReturns")
    punt_returns: PuntReturnStats | None = Field(default=None, alias="puntReturns")
    miscellaneous: MiscellaneousStats | None = None
    two_point_attempts: TwoPointAttemptStats | None = Field(default=None, alias="twoPointAttempts")
    snap_counts: SnapCountStats | None = Field(default=None, alias="snapCounts")


class PlayerStatsTotalsEntry(_Upstream):
    player: PlayerInfo | None = None
    team: TeamRef | None = None
    stats: StatisticsTotals | None = None

    def to_player_stats(self, *, season: str | None = None) -> PlayerStats:
        info = self.player or PlayerInfo()
        team = info.current_team or TeamRef()
        stats = self.stats or StatisticsTotals()

        return PlayerStats(
            first_name=info.first_name or "",
            last_name=info.last_name or "",
            primary_position=info.primary_position or "",
            jersey_number=info.jersey_number or 0,
            current_team=team.abbreviation or "",
            injury=info.injury or "",
            rookie=bool(info.rookie),
            games_played=stats.games_played or 0,
            season=season,
        )


class PlayerStatsTotalsResponse(_Upstream):
    last_updated_on: str | None = Field(default=None, alias="lastUpdatedOn")
    entries: list[PlayerStatsTotalsEntry] | None = Field(default=None, alias="playerStatsTotals")


def decode_player_stats_totals(payload: Mapping[str, Any]) -> PlayerStatsTotalsResponse:
    """Decode a player_stats_totals payload; structural mismatches raise JsonDecodeError."""

    try:
        return PlayerStatsTotalsResponse.model_validate(payload)
    except PydanticValidationError as e:
        raise JsonDecodeError(
            f"Unexpected player_stats_totals payload ({e.error_count()} error(s)): {e}"
        ) from e


def parse_player_stats(
    payload: Mapping[str, Any],
    *,
    identifier: str,
    season: str | None = None,
) -> PlayerStats:
    """Flatten the first entry of a payload into PlayerStats.

    An empty or absent entry list is the only not-found signal; missing fields
    inside an entry fall back to zero values.
    """

    response = decode_player_stats_totals(payload)
    if not response.entries:
        raise PlayerNotFound(identifier)
    return response.entries[0].to_player_stats(season=season)
