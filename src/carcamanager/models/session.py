"""Wizard session data class."""

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

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from carcamanager.models.fixture import Division, Match
from carcamanager.models.naming import championship_name, tournament_name


@dataclass(frozen=True)
class WizardSession:
    """Everything the tournament wizard carries from screen to screen.

    Attributes
    ----------
    division : str
        Division code.
    home_player : str
        Local player.
    away_player : str
        Visiting player.
    round_index : int
        Position of the round in the division (0-based). Used to find the
        match again when the result comes back.
    round_number : int
        Round number as read from the fixture header.
    match_number : int
        Duel number shown in the tournament name (the match id).
    match_id : int
        Id of the match in the fixture.
    scheduled_time : datetime or None
        Chosen start time, None until the date/time screen is confirmed.
    """

    division: str
    home_player: str
    away_player: str
    round_index: int
    round_number: int
    match_number: int
    match_id: int
    scheduled_time: Optional[datetime] = None

    @classmethod
    def for_match(
        cls, division: Division, round_index: int, match: Match
    ) -> "WizardSession":
        """Start a session for ``match`` in the round at ``round_index``."""
        return cls(
            division=division.name,
            home_player=match.home_player,
            away_player=match.away_player,
            round_index=round_index,
            round_number=division.rounds[round_index].number,
            match_number=match.id,
            match_id=match.id,
        )

    def with_datetime(self, scheduled_time: datetime) -> "WizardSession":
        return replace(self, scheduled_time=scheduled_time)

    @property
    def championship_name(self) -> str:
        return championship_name(self.division)

    @property
    def tournament_name(self) -> str:
        return tournament_name(
            self.round_number, self.match_number, self.home_player, self.away_player
        )
