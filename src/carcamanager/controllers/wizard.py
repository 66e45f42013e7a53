"""Fixture browser and tournament creation wizard.

The wizard moves through these states::

    BROWSING -> PICKING_DATETIME -> CONFIRMING_DETAILS -> SUBMITTING -> SETTLED

Esc on the picker or the confirmation screen goes back to BROWSING, and
``e`` on the confirmation screen reopens the picker with the chosen time.
SETTLED behaves like BROWSING and becomes BROWSING on the next key.
"""

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

import itertools
from enum import Enum, auto
from typing import List, Optional

from carcamanager.constants import (
    CANCEL_NOTICE_SECONDS,
    MSG_CREATE_HINT,
    MSG_CREATING,
    MSG_CREATION_CANCELED,
    MSG_LINK_COPIED,
    MSG_LINK_COPY_FAILED,
    MSG_SUBMISSION_IN_FLIGHT,
    RESULT_NOTICE_SECONDS,
)
from carcamanager.controllers.confirmation import ConfirmationModel
from carcamanager.controllers.datetime_picker import DateTimePicker
from carcamanager.controllers.events import (
    KEY_CTRL_C,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_PAGE_DOWN,
    KEY_PAGE_UP,
    KEY_RIGHT,
    KEY_UP,
    BackToMenu,
    ClearStatus,
    ConfirmationCanceled,
    Confirmed,
    DateTimeSelected,
    Deferred,
    EditRequested,
    Effect,
    Emit,
    Event,
    KeyPressed,
    PickerCanceled,
    Quit,
    Schedule,
    SubmissionFinished,
)
from carcamanager.controllers.navigation import SelectionCursor
from carcamanager.controllers.submission import SubmissionOrchestrator, SubmissionResult
from carcamanager.models.fixture import Division
from carcamanager.models.session import WizardSession
from carcamanager.type_hints import KeyName
from carcamanager.utils import setup_logger
from carcamanager.utils.clipboard import copy_to_clipboard

logger = setup_logger(__name__)

PREVIOUS_ROUND_KEYS = (KEY_LEFT, "h", KEY_PAGE_UP)
NEXT_ROUND_KEYS = (KEY_RIGHT, "l", KEY_PAGE_DOWN)
PREVIOUS_MATCH_KEYS = (KEY_UP, "k")
NEXT_MATCH_KEYS = (KEY_DOWN, "j")
BACK_KEYS = (KEY_ESCAPE, "q")
KEY_CREATE = "c"

# Status tokens are unique across every wizard of the process
_status_tokens = itertools.count(1)


class WizardState(Enum):
    BROWSING = auto()
    PICKING_DATETIME = auto()
    CONFIRMING_DETAILS = auto()
    SUBMITTING = auto()  # A submission is in flight
    SETTLED = auto()  # Last submission finished, result notice showing


class FixtureWizard:
    """Reducer for the fixture screen.

    Attributes
    ----------
    division : Division
        The fixture being browsed. Only :meth:`SubmissionOrchestrator.settle`
        changes it.
    cursor : SelectionCursor
        Selected round and match.
    state : WizardState
        Current wizard step.
    session : WizardSession or None
        Match being scheduled, None while browsing.
    picker : DateTimePicker or None
        Active while PICKING_DATETIME.
    confirmation : ConfirmationModel or None
        Active while CONFIRMING_DETAILS.
    status : str
        Status notice, empty when there is none.
    last_result : SubmissionResult or None
        Result of the most recent submission.
    """

    def __init__(self, division: Division, orchestrator: SubmissionOrchestrator):
        self.division = division
        self.orchestrator = orchestrator
        self.cursor = SelectionCursor(division)
        self.state = WizardState.BROWSING
        self.session: Optional[WizardSession] = None
        self.picker: Optional[DateTimePicker] = None
        self.confirmation: Optional[ConfirmationModel] = None
        self.status = ""
        self.status_token = 0
        self.last_result: Optional[SubmissionResult] = None

    # ========== Status notices ==========

    def set_status(self, text: str, clear_after: Optional[float] = None) -> List[Effect]:
        """Show ``text``; with ``clear_after``, schedule its removal."""
        self.status_token = next(_status_tokens)
        self.status = text
        if clear_after is None:
            return []
        return [Schedule(clear_after, ClearStatus(self.status_token))]

    def _clear_status(self, token: int) -> List[Effect]:
        # A newer notice has its own timer
        if token == self.status_token:
            self.status = ""
        return []

    # ========== Event handling ==========

    def handle(self, event: Event) -> List[Effect]:
        if isinstance(event, KeyPressed):
            return self._handle_key(event.key)
        if isinstance(event, ClearStatus):
            return self._clear_status(event.token)
        if isinstance(event, DateTimeSelected):
            return self._on_datetime_selected(event)
        if isinstance(event, (PickerCanceled, ConfirmationCanceled)):
            return self._cancel()
        if isinstance(event, EditRequested):
            return self._edit()
        if isinstance(event, Confirmed):
            return self._submit()
        if isinstance(event, SubmissionFinished):
            return self._on_submission_finished(event.result)
        return []

    def _handle_key(self, key: KeyName) -> List[Effect]:
        if key == KEY_CTRL_C:
            return [Quit()]
        if self.state is WizardState.PICKING_DATETIME and self.picker is not None:
            return self.picker.handle_key(key)
        if self.state is WizardState.CONFIRMING_DETAILS and self.confirmation is not None:
            return self.confirmation.handle_key(key)
        if self.state is WizardState.SETTLED:
            self.state = WizardState.BROWSING
        return self._handle_browsing_key(key)

    def _handle_browsing_key(self, key: KeyName) -> List[Effect]:
        if key in PREVIOUS_ROUND_KEYS:
            self.cursor.advance_round(-1)
        elif key in NEXT_ROUND_KEYS:
            self.cursor.advance_round(1)
        elif key in PREVIOUS_MATCH_KEYS:
            self.cursor.advance_match(-1)
        elif key in NEXT_MATCH_KEYS:
            self.cursor.advance_match(1)
        elif key == KEY_ENTER:
            return self._select_match()
        elif key in BACK_KEYS:
            if self.state is WizardState.SUBMITTING:
                return self.set_status(MSG_SUBMISSION_IN_FLIGHT, CANCEL_NOTICE_SECONDS)
            return [Emit(BackToMenu())]
        elif key == KEY_CREATE:
            if self.state is WizardState.SUBMITTING:
                return self.set_status(MSG_SUBMISSION_IN_FLIGHT, CANCEL_NOTICE_SECONDS)
            return self._start_wizard()
        return []

    def _select_match(self) -> List[Effect]:
        match = self.cursor.current_match()
        if match is None:
            return []
        if match.played:
            if not match.reference_link:
                return []
            if copy_to_clipboard(self.orchestrator.clipboard, match.reference_link):
                return self.set_status(MSG_LINK_COPIED, RESULT_NOTICE_SECONDS)
            return self.set_status(MSG_LINK_COPY_FAILED, RESULT_NOTICE_SECONDS)
        return self.set_status(MSG_CREATE_HINT, RESULT_NOTICE_SECONDS)

    # ========== Wizard steps ==========

    def _start_wizard(self) -> List[Effect]:
        match = self.cursor.current_match()
        if match is None or match.played:
            return []
        self.session = WizardSession.for_match(
            self.division, self.cursor.round_index, match
        )
        self.picker = DateTimePicker(self.session)
        self.state = WizardState.PICKING_DATETIME
        logger.debug("Scheduling duel %d: %s", match.id, self.session.tournament_name)
        return []

    def _on_datetime_selected(self, event: DateTimeSelected) -> List[Effect]:
        if self.state is not WizardState.PICKING_DATETIME or self.session is None:
            return []
        self.session = self.session.with_datetime(event.value)
        self.confirmation = ConfirmationModel(self.session)
        self.picker = None
        self.state = WizardState.CONFIRMING_DETAILS
        return []

    def _edit(self) -> List[Effect]:
        if self.state is not WizardState.CONFIRMING_DETAILS or self.session is None:
            return []
        self.picker = DateTimePicker(self.session, initial=self.session.scheduled_time)
        self.confirmation = None
        self.state = WizardState.PICKING_DATETIME
        return []

    def _cancel(self) -> List[Effect]:
        if self.state not in (
            WizardState.PICKING_DATETIME,
            WizardState.CONFIRMING_DETAILS,
        ):
            return []
        self._discard_session()
        self.state = WizardState.BROWSING
        return self.set_status(MSG_CREATION_CANCELED, CANCEL_NOTICE_SECONDS)

    def _discard_session(self) -> None:
        self.session = None
        self.picker = None
        self.confirmation = None

    def _submit(self) -> List[Effect]:
        if self.state is not WizardState.CONFIRMING_DETAILS or self.session is None:
            return []
        session = self.session
        orchestrator = self.orchestrator
        self._discard_session()
        self.state = WizardState.SUBMITTING

        def work() -> Event:
            return SubmissionFinished(orchestrator.submit(session))

        effects = self.set_status(
            MSG_CREATING.format(home=session.home_player, away=session.away_player)
        )
        return effects + [Deferred(work)]

    def _on_submission_finished(self, result: SubmissionResult) -> List[Effect]:
        self.last_result = result
        notice = self.orchestrator.settle(self.division, result)
        self.state = WizardState.SETTLED
        return self.set_status(notice, RESULT_NOTICE_SECONDS)
