"""Cursor over the rounds and matches of a division."""

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

from typing import Optional

from carcamanager.models.fixture import Division, Match, Round
from carcamanager.type_hints import CursorPosition


def wrap_index(index: int, length: int) -> int:
    """``index`` wrapped into ``[0, length)``; 0 for an empty collection."""
    if length <= 0:
        return 0
    return index % length


class SelectionCursor:
    """Selected round and match of a division.

    Both indices are always valid for the division's shape. Moving past
    either end wraps around. Accessors return None instead of raising when
    the division has no rounds or the round has no matches.
    """

    def __init__(self, division: Division):
        self.division = division
        self.round_index = 0
        self.match_index = 0

    @property
    def position(self) -> CursorPosition:
        return self.round_index, self.match_index

    def advance_round(self, delta: int) -> None:
        """Move ``delta`` rounds and select the round's first match."""
        self.round_index = wrap_index(self.round_index + delta, len(self.division.rounds))
        self.match_index = 0

    def advance_match(self, delta: int) -> None:
        current = self.current_round()
        if current is None or not current.matches:
            self.match_index = 0
            return
        self.match_index = wrap_index(self.match_index + delta, len(current.matches))

    def current_round(self) -> Optional[Round]:
        if 0 <= self.round_index < len(self.division.rounds):
            return self.division.rounds[self.round_index]
        return None

    def current_match(self) -> Optional[Match]:
        current = self.current_round()
        if current is None:
            return None
        if 0 <= self.match_index < len(current.matches):
            return current.matches[self.match_index]
        return None
