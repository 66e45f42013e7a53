"""Main menu and division selection screens."""

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

from typing import List, Optional

from carcamanager.controllers.events import (
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_UP,
    BackToMenu,
    DivisionSelected,
    Effect,
    Emit,
    Quit,
    ViewFixtureSelected,
)
from carcamanager.controllers.navigation import wrap_index
from carcamanager.fixtures.parser import FixtureEntry
from carcamanager.type_hints import KeyName

CHOICE_VIEW_FIXTURE = "View Fixture"
CHOICE_EXIT = "Exit"
MENU_CHOICES = [CHOICE_VIEW_FIXTURE, CHOICE_EXIT]

UP_KEYS = (KEY_UP, "k")
DOWN_KEYS = (KEY_DOWN, "j")


class MenuModel:
    """Main menu. Enter picks the highlighted choice, q or Esc quits."""

    def __init__(self, choices: Optional[List[str]] = None):
        self.choices = list(choices or MENU_CHOICES)
        self.cursor = 0

    @property
    def selected_choice(self) -> str:
        if 0 <= self.cursor < len(self.choices):
            return self.choices[self.cursor]
        return ""

    def handle_key(self, key: KeyName) -> List[Effect]:
        if key in UP_KEYS:
            self.cursor = wrap_index(self.cursor - 1, len(self.choices))
        elif key in DOWN_KEYS:
            self.cursor = wrap_index(self.cursor + 1, len(self.choices))
        elif key in (KEY_ESCAPE, "q"):
            return [Quit()]
        elif key == KEY_ENTER:
            if self.selected_choice == CHOICE_VIEW_FIXTURE:
                return [Emit(ViewFixtureSelected())]
            if self.selected_choice == CHOICE_EXIT:
                return [Quit()]
        return []


class DivisionSelectModel:
    """List of fixture files to open.

    Attributes
    ----------
    entries : list of FixtureEntry
        Fixture files found in the data directory.
    cursor : int
        Highlighted entry.
    error : str
        Last loading error, shown under the list until the next selection.
    """

    def __init__(self, entries: List[FixtureEntry]):
        self.entries = entries
        self.cursor = 0
        self.error = ""

    @property
    def selected_entry(self) -> Optional[FixtureEntry]:
        if 0 <= self.cursor < len(self.entries):
            return self.entries[self.cursor]
        return None

    def handle_key(self, key: KeyName) -> List[Effect]:
        if key in UP_KEYS:
            self.cursor = wrap_index(self.cursor - 1, len(self.entries))
        elif key in DOWN_KEYS:
            self.cursor = wrap_index(self.cursor + 1, len(self.entries))
        elif key in (KEY_ESCAPE, "q"):
            return [Emit(BackToMenu())]
        elif key == KEY_ENTER:
            entry = self.selected_entry
            if entry is not None:
                self.error = ""
                return [Emit(DivisionSelected(entry))]
        return []
