"""Review screen shown before a tournament is created."""

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

from datetime import datetime
from typing import List, Tuple

from carcamanager.constants import BGA_DATE_FORMAT, BGA_TIME_FORMAT
from carcamanager.controllers.events import (
    KEY_ENTER,
    KEY_ESCAPE,
    ConfirmationCanceled,
    Confirmed,
    Effect,
    Emit,
    EditRequested,
)
from carcamanager.exceptions import CarcaManagerException
from carcamanager.models.session import WizardSession
from carcamanager.type_hints import KeyName

KEY_EDIT = "e"


class ConfirmationModel:
    """Shows the tournament that is about to be created.

    Enter confirms, ``e`` goes back to the date/time picker and Esc cancels.
    """

    def __init__(self, session: WizardSession):
        if session.scheduled_time is None:
            raise CarcaManagerException("cannot confirm a tournament without a start time")
        self.session = session

    @property
    def scheduled_time(self) -> datetime:
        return self.session.scheduled_time

    def tournament_details(self) -> Tuple[str, str]:
        """(championship name, tournament name)"""
        return self.session.championship_name, self.session.tournament_name

    def scheduling_info(self) -> Tuple[str, str]:
        """(``YYYY-MM-DD``, ``HH:MM``) as sent to BoardGameArena"""
        return (
            self.scheduled_time.strftime(BGA_DATE_FORMAT),
            self.scheduled_time.strftime(BGA_TIME_FORMAT),
        )

    def handle_key(self, key: KeyName) -> List[Effect]:
        if key == KEY_ENTER:
            return [Emit(Confirmed())]
        if key == KEY_EDIT:
            return [Emit(EditRequested())]
        if key == KEY_ESCAPE:
            return [Emit(ConfirmationCanceled())]
        return []
