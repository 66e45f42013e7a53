"""Fixture match data class."""

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

from dataclasses import dataclass
from typing import Any, Dict
from urllib.parse import parse_qs, urlparse


@dataclass
class Match:
    """One head-to-head duel of the fixture.

    Attributes
    ----------
    id : int
        Duel number, unique within the division (not necessarily contiguous).
    home_player : str
        Local player name.
    away_player : str
        Visiting player name.
    home_score : int
        Games won by the local player. Zero until played.
    away_score : int
        Games won by the visiting player. Zero until played.
    date_time : str
        Free-text schedule label from the fixture, empty if unset.
    reference_link : str
        BoardGameArena tournament link, empty until a tournament is created.
        An unplayed match may already have one.
    played : bool
        Whether the result is final.
    """

    id: int
    home_player: str
    away_player: str
    home_score: int = 0
    away_score: int = 0
    date_time: str = ""
    reference_link: str = ""
    played: bool = False

    @property
    def result_label(self) -> str:
        """Score as ``"home-away"``, or ``"-"`` while unplayed."""
        if not self.played:
            return "-"
        return f"{self.home_score}-{self.away_score}"

    @property
    def tournament_id(self) -> str:
        """The ``id`` query parameter of the reference link, or ``""``."""
        if not self.reference_link:
            return ""
        query = parse_qs(urlparse(self.reference_link).query)
        return query.get("id", [""])[0]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "home_player": self.home_player,
            "away_player": self.away_player,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "date_time": self.date_time,
            "reference_link": self.reference_link,
            "played": self.played,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        return cls(
            id=data["id"],
            home_player=data["home_player"],
            away_player=data["away_player"],
            home_score=data.get("home_score", 0),
            away_score=data.get("away_score", 0),
            date_time=data.get("date_time", ""),
            reference_link=data.get("reference_link", ""),
            played=data.get("played", False),
        )
