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

from carcamanager.controllers.app import AppModel, Screen
from carcamanager.controllers.confirmation import ConfirmationModel
from carcamanager.controllers.datetime_picker import DateTimePicker, PickerField
from carcamanager.controllers.menu import DivisionSelectModel, MenuModel
from carcamanager.controllers.navigation import SelectionCursor, wrap_index
from carcamanager.controllers.submission import (
    SubmissionErrorKind,
    SubmissionOrchestrator,
    SubmissionResult,
)
from carcamanager.controllers.wizard import FixtureWizard, WizardState

__all__ = [
    "AppModel",
    "Screen",
    "ConfirmationModel",
    "DateTimePicker",
    "PickerField",
    "DivisionSelectModel",
    "MenuModel",
    "SelectionCursor",
    "wrap_index",
    "SubmissionErrorKind",
    "SubmissionOrchestrator",
    "SubmissionResult",
    "FixtureWizard",
    "WizardState",
]
