"""Requests and responses exchanged with BoardGameArena."""

# Carca Manager
# Copyright (C) 2025  Carca Manager developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from dateutil import tz

from carcamanager.constants import (
    BEST_OF_MATCHES,
    BGA_DATE_FORMAT,
    BGA_TIME_FORMAT,
    CARCASSONNE_GAME_ID,
    DEFAULT_TOURNAMENT_HOUR,
    GAME_DURATION_SECONDS,
    HEAD_TO_HEAD_PLAYERS,
    STATUS_WAITING,
)
from carcamanager.models.naming import championship_name, tournament_name


def default_tournament_time(now: Optional[datetime] = None) -> datetime:
    """Today at 21:00 in the local time zone."""
    now = now or datetime.now(tz.tzlocal())
    return now.replace(hour=DEFAULT_TOURNAMENT_HOUR, minute=0, second=0, microsecond=0)


@dataclass
class TournamentConfig:
    """Settings of a tournament to create.

    Attributes
    ----------
    championship_name : str
        ``"Division <code> - 1era Temporada"``.
    tournament_name : str
        ``"<round> Fecha - Duelo <match> - <home> vs <away>"``.
    base_date : str
        Start date, ``YYYY-MM-DD``.
    base_time : str
        Start time, ``HH:MM``.
    division : str
        Division code.
    local_player : str
        Home player.
    visitor_player : str
        Away player.
    game_id : int
        BGA game id, 1 for Carcassonne.
    max_players, min_players : int
        Participants, 2 for a duel.
    game_duration : int
        Maximum game duration in seconds.
    matches_count : int
        Games per duel, 3 for best-of-3.
    round_number : int
        Fixture round.
    match_number : int
        Fixture duel number.
    """

    championship_name: str
    tournament_name: str
    base_date: str
    base_time: str
    division: str = ""
    local_player: str = ""
    visitor_player: str = ""
    game_id: int = CARCASSONNE_GAME_ID
    max_players: int = HEAD_TO_HEAD_PLAYERS
    min_players: int = HEAD_TO_HEAD_PLAYERS
    game_duration: int = GAME_DURATION_SECONDS
    matches_count: int = BEST_OF_MATCHES
    round_number: int = 0
    match_number: int = 0

    @classmethod
    def head_to_head(
        cls,
        division: str,
        home_player: str,
        away_player: str,
        round_number: int,
        match_number: int,
        scheduled_time: Optional[datetime] = None,
    ) -> "TournamentConfig":
        """Best-of-3 duel between two players of a division."""
        scheduled_time = scheduled_time or default_tournament_time()
        return cls(
            championship_name=championship_name(division),
            tournament_name=tournament_name(
                round_number, match_number, home_player, away_player
            ),
            base_date=scheduled_time.strftime(BGA_DATE_FORMAT),
            base_time=scheduled_time.strftime(BGA_TIME_FORMAT),
            division=division,
            local_player=home_player,
            visitor_player=away_player,
            round_number=round_number,
            match_number=match_number,
        )

    def missing_fields(self) -> List[str]:
        """Names of required fields that are empty."""
        required = {
            "local_player": self.local_player,
            "visitor_player": self.visitor_player,
            "tournament_name": self.tournament_name,
        }
        return [name for name, value in required.items() if not value]


@dataclass
class TournamentResponse:
    """Outcome of a creation request.

    ``success`` False with ``error`` set is a rejection by the service, as
    opposed to a transport failure which is raised as an exception.
    ``invalid_fields`` names the request fields the service refused.
    """

    success: bool
    tournament_id: int = 0
    link: str = ""
    error: str = ""
    invalid_fields: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentResponse":
        return cls(
            success=bool(data.get("success", False)),
            tournament_id=int(data.get("tournament_id") or 0),
            link=data.get("link") or "",
            error=data.get("error") or "",
            invalid_fields=list(data.get("invalid_fields") or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "tournament_id": self.tournament_id,
            "link": self.link,
            "error": self.error,
            "invalid_fields": list(self.invalid_fields),
        }


@dataclass
class MatchStatus:
    """One game inside a tournament."""

    id: int
    status: str = STATUS_WAITING
    home_player: str = ""
    away_player: str = ""
    home_score: int = 0
    away_score: int = 0
    winner: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchStatus":
        return cls(
            id=int(data.get("id", 0)),
            status=data.get("status", STATUS_WAITING),
            home_player=data.get("home_player", ""),
            away_player=data.get("away_player", ""),
            home_score=int(data.get("home_score", 0)),
            away_score=int(data.get("away_score", 0)),
            winner=data.get("winner") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "status": self.status,
            "home_player": self.home_player,
            "away_player": self.away_player,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "winner": self.winner,
        }


@dataclass
class TournamentStatus:
    """Snapshot of a tournament, used for diagnostics."""

    id: int
    name: str = ""
    status: str = STATUS_WAITING
    players_count: int = 0
    matches: List[MatchStatus] = field(default_factory=list)
    # player -> games won
    results: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentStatus":
        return cls(
            id=int(data.get("id", 0)),
            name=data.get("name", ""),
            status=data.get("status", STATUS_WAITING),
            players_count=int(data.get("players_count", 0)),
            matches=[MatchStatus.from_dict(m) for m in data.get("matches") or []],
            results={k: int(v) for k, v in (data.get("results") or {}).items()},
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status,
            "players_count": self.players_count,
            "matches": [m.to_dict() for m in self.matches],
            "results": dict(self.results),
        }
