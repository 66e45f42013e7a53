"""Top-level screen coordinator: menu, division selection and fixture."""

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

from enum import Enum, auto
from pathlib import Path
from typing import Callable, List, Optional

from carcamanager.config import AppConfig
from carcamanager.controllers.events import (
    KEY_CTRL_C,
    BackToMenu,
    DivisionSelected,
    Effect,
    Event,
    KeyPressed,
    Quit,
    ViewFixtureSelected,
    drain,
)
from carcamanager.controllers.menu import DivisionSelectModel, MenuModel
from carcamanager.controllers.submission import SubmissionOrchestrator
from carcamanager.controllers.wizard import FixtureWizard
from carcamanager.exceptions import FixtureException
from carcamanager.fixtures.parser import (
    FixtureEntry,
    discover_fixture_files,
    parse_fixture_file,
)
from carcamanager.models.fixture import Division
from carcamanager.utils import setup_logger

logger = setup_logger(__name__)

FixtureLoader = Callable[[Path], Division]


class Screen(Enum):
    MENU = auto()
    DIVISION_SELECT = auto()
    FIXTURE = auto()


class AppModel:
    """Routes events to the active screen.

    Ctrl+C quits from every screen. Loading errors keep the user on the
    division selection screen with the error shown under the list.
    """

    def __init__(
        self,
        config: AppConfig,
        orchestrator: SubmissionOrchestrator,
        loader: FixtureLoader = parse_fixture_file,
    ):
        self.config = config
        self.orchestrator = orchestrator
        self.loader = loader
        self.screen = Screen.MENU
        self.menu = MenuModel()
        self.division_select: Optional[DivisionSelectModel] = None
        self.wizard: Optional[FixtureWizard] = None

    def dispatch(self, event: Event) -> List[Effect]:
        """Handle ``event`` and everything it emits.

        Returns:
            Effects for the event loop: Deferred, Schedule and Quit
        """
        return drain(self.handle, event)

    def handle(self, event: Event) -> List[Effect]:
        if isinstance(event, KeyPressed):
            if event.key == KEY_CTRL_C:
                return [Quit()]
            return self._handle_key(event)
        if isinstance(event, ViewFixtureSelected):
            return self._open_division_select()
        if isinstance(event, DivisionSelected):
            return self._open_fixture(event.entry)
        if isinstance(event, BackToMenu):
            return self._back_to_menu()
        if self.wizard is not None:
            # Timers and submission results belong to the fixture screen
            return self.wizard.handle(event)
        return []

    def _handle_key(self, event: KeyPressed) -> List[Effect]:
        if self.screen is Screen.MENU:
            return self.menu.handle_key(event.key)
        if self.screen is Screen.DIVISION_SELECT and self.division_select is not None:
            return self.division_select.handle_key(event.key)
        if self.screen is Screen.FIXTURE and self.wizard is not None:
            return self.wizard.handle(event)
        return []

    def _open_division_select(self) -> List[Effect]:
        entries = discover_fixture_files(self.config.data_dir)
        self.division_select = DivisionSelectModel(entries)
        if not entries:
            self.division_select.error = f"No fixture files found in {self.config.data_dir}"
        self.screen = Screen.DIVISION_SELECT
        return []

    def _open_fixture(self, entry: FixtureEntry) -> List[Effect]:
        try:
            division = self.loader(entry.path)
        except FixtureException as e:
            logger.error("Could not load %s: %s", entry.path, e)
            if self.division_select is not None:
                self.division_select.error = f"Error loading {entry.display_name}: {e}"
            return []

        if not division.name:
            division.name = entry.code
        self.wizard = FixtureWizard(division, self.orchestrator)
        self.screen = Screen.FIXTURE
        return []

    def _back_to_menu(self) -> List[Effect]:
        self.screen = Screen.MENU
        self.division_select = None
        self.wizard = None
        return []
