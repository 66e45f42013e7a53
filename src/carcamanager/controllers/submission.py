"""Creating a tournament for a confirmed wizard session.

:meth:`SubmissionOrchestrator.submit` talks to BoardGameArena and runs off
the event loop; it reports every failure as a :class:`SubmissionResult`
instead of raising. :meth:`SubmissionOrchestrator.settle` applies a result
to the division and runs on the event loop, so the fixture is only ever
changed from one thread.
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

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from prompt_toolkit.clipboard import Clipboard

from carcamanager.bga.interface import APIClient
from carcamanager.bga.links import tournament_link
from carcamanager.constants import (
    MSG_CREATED,
    MSG_CREATED_NO_CLIPBOARD,
    MSG_CREATION_FAILED,
)
from carcamanager.credentials import CredentialProvider
from carcamanager.exceptions import (
    APIException,
    AuthenticationException,
    CredentialsException,
    NetworkException,
)
from carcamanager.models.fixture import Division
from carcamanager.models.session import WizardSession
from carcamanager.utils import setup_logger
from carcamanager.utils.clipboard import copy_to_clipboard

logger = setup_logger(__name__)


class SubmissionErrorKind(Enum):
    CREDENTIALS = "credentials"  # No credentials available
    AUTHENTICATION = "authentication"  # Login refused
    VALIDATION = "validation"  # Request fields refused by BGA
    NETWORK = "network"  # BGA unreachable
    CREATION = "creation"  # Any other creation failure


@dataclass
class SubmissionResult:
    """Outcome of one tournament creation attempt.

    Attributes
    ----------
    session : WizardSession
        The session that was submitted.
    success : bool
        Whether BoardGameArena created the tournament.
    tournament_id : int
        New tournament id, 0 on failure.
    link : str
        New tournament link, empty on failure.
    error_kind : SubmissionErrorKind or None
        Failure category, None on success.
    error_message : str
        Failure reason shown to the user.
    """

    session: WizardSession
    success: bool
    tournament_id: int = 0
    link: str = ""
    error_kind: Optional[SubmissionErrorKind] = None
    error_message: str = ""

    @classmethod
    def failure(
        cls, session: WizardSession, kind: SubmissionErrorKind, message: str
    ) -> "SubmissionResult":
        return cls(session=session, success=False, error_kind=kind, error_message=message)


class SubmissionOrchestrator:
    """Logs in when needed, creates the tournament and records its link."""

    def __init__(
        self,
        client: APIClient,
        credential_provider: CredentialProvider,
        clipboard: Clipboard,
    ):
        self.client = client
        self.credential_provider = credential_provider
        self.clipboard = clipboard

    def submit(self, session: WizardSession) -> SubmissionResult:
        """Create the tournament for ``session``. Never raises."""
        try:
            return self._submit(session)
        except Exception as e:
            logger.exception("Unexpected error creating tournament %r", session.tournament_name)
            return SubmissionResult.failure(session, SubmissionErrorKind.CREATION, str(e))

    def _submit(self, session: WizardSession) -> SubmissionResult:
        if not self.client.is_authenticated():
            try:
                credentials = self.credential_provider.get_credentials(allow_prompt=False)
            except CredentialsException as e:
                logger.warning("No BGA credentials: %s", e)
                return SubmissionResult.failure(
                    session,
                    SubmissionErrorKind.CREDENTIALS,
                    f"Failed to get credentials: {e}",
                )

            try:
                self.client.authenticate(credentials)
            except AuthenticationException as e:
                logger.warning("BGA login failed: %s", e)
                return SubmissionResult.failure(
                    session, SubmissionErrorKind.AUTHENTICATION, f"Login failed: {e}"
                )
            except NetworkException as e:
                logger.warning("BGA login failed: %s", e)
                return SubmissionResult.failure(
                    session, SubmissionErrorKind.NETWORK, f"Login failed: {e}"
                )

        try:
            response = self.client.create_head_to_head_contest(
                session.division,
                session.home_player,
                session.away_player,
                session.round_number,
                session.match_number,
                session.scheduled_time,
            )
        except NetworkException as e:
            logger.warning("Tournament request failed: %s", e)
            return SubmissionResult.failure(session, SubmissionErrorKind.NETWORK, str(e))
        except APIException as e:
            logger.warning("Tournament creation failed: %s", e)
            return SubmissionResult.failure(session, SubmissionErrorKind.CREATION, str(e))

        if not response.success:
            kind = (
                SubmissionErrorKind.VALIDATION
                if response.invalid_fields
                else SubmissionErrorKind.CREATION
            )
            logger.warning("BGA rejected tournament %r: %s", session.tournament_name, response.error)
            return SubmissionResult.failure(
                session, kind, response.error or "tournament was not created"
            )

        link = response.link
        if not link and response.tournament_id > 0:
            link = tournament_link(response.tournament_id)
        logger.info(
            "Created tournament %d for %s vs %s",
            response.tournament_id,
            session.home_player,
            session.away_player,
        )
        return SubmissionResult(
            session=session,
            success=True,
            tournament_id=response.tournament_id,
            link=link,
        )

    def settle(self, division: Division, result: SubmissionResult) -> str:
        """Record a successful result in ``division``; return the notice text.

        Only the reference link of the submitted match changes. Its played
        flag and scores are left as they are.
        """
        if not result.success:
            return MSG_CREATION_FAILED.format(error=result.error_message)

        session = result.session
        if not result.link:
            logger.warning("Tournament %d was created without a link", result.tournament_id)
            return MSG_CREATED_NO_CLIPBOARD

        match = None
        if 0 <= session.round_index < len(division.rounds):
            match = division.rounds[session.round_index].find_match(session.match_id)
        if match is None:
            logger.warning(
                "Match %d not found in round %d of division %r",
                session.match_id,
                session.round_number,
                division.name,
            )
        else:
            match.reference_link = result.link

        if copy_to_clipboard(self.clipboard, result.link):
            return MSG_CREATED
        return MSG_CREATED_NO_CLIPBOARD
