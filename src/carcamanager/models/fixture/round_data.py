"""Data model for a fixture round."""

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
from typing import Any, Dict, List, Optional

from carcamanager.models.fixture.match import Match


@dataclass
class Round:
    """One scheduling period ("Fecha") of a division.

    Attributes
    ----------
    number : int
        Round number taken from the header, 1 when the header has none.
    date_range : str
        Free-text label such as ``"11/08 - 17/08"``.
    matches : list of Match
        Matches in file order.
    """

    number: int
    date_range: str = ""
    matches: List[Match] = field(default_factory=list)

    def find_match(self, match_id: int) -> Optional[Match]:
        """Return the match with ``match_id``, or None."""
        for match in self.matches:
            if match.id == match_id:
                return match
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round to dictionary."""
        return {
            "number": self.number,
            "date_range": self.date_range,
            "matches": [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Round":
        """Deserialize round from dictionary."""
        return cls(
            number=data["number"],
            date_range=data.get("date_range", ""),
            matches=[Match.from_dict(m) for m in data.get("matches", [])],
        )
