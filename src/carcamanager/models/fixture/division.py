"""Data model for a division fixture."""

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
from typing import Any, Dict, Iterator, List, Optional

from carcamanager.models.fixture.match import Match
from carcamanager.models.fixture.round_data import Round


@dataclass
class Division:
    """A named competition group and its rounds.

    Attributes
    ----------
    name : str
        Division code taken from the fixture filename (``"E"``, ``"P.A"``...).
        Empty when the filename does not follow the naming convention.
    rounds : list of Round
        Rounds in file order.
    """

    name: str = ""
    rounds: List[Round] = field(default_factory=list)

    def iter_matches(self) -> Iterator[Match]:
        """Yield every match of every round, in file order."""
        for round_ in self.rounds:
            yield from round_.matches

    @property
    def match_count(self) -> int:
        return sum(len(round_.matches) for round_ in self.rounds)

    @property
    def played_count(self) -> int:
        return sum(1 for match in self.iter_matches() if match.played)

    def unplayed_matches(self) -> List[Match]:
        """Matches that still need a tournament."""
        return [match for match in self.iter_matches() if not match.played]

    def find_round(self, number: int) -> Optional[Round]:
        """Return the first round numbered ``number``, or None."""
        for round_ in self.rounds:
            if round_.number == number:
                return round_
        return None

    def round_number_of(self, match_id: int) -> int:
        """Number of the round holding ``match_id``, 0 if it is not in the fixture."""
        for round_ in self.rounds:
            if round_.find_match(match_id) is not None:
                return round_.number
        return 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize division to dictionary."""
        return {
            "name": self.name,
            "rounds": [r.to_dict() for r in self.rounds],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Division":
        """Deserialize division from dictionary."""
        return cls(
            name=data.get("name", ""),
            rounds=[Round.from_dict(r) for r in data.get("rounds", [])],
        )
