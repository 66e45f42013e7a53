"""In-memory BoardGameArena client."""

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

import copy
from typing import Dict, List

from carcamanager.bga.interface import APIClient
from carcamanager.bga.links import tournament_link
from carcamanager.bga.models import (
    MatchStatus,
    TournamentConfig,
    TournamentResponse,
    TournamentStatus,
)
from carcamanager.constants import (
    BEST_OF_MATCHES,
    BGA_BASE_URL,
    HEAD_TO_HEAD_PLAYERS,
    MOCK_FIRST_TOURNAMENT_ID,
    STATUS_FINISHED,
    STATUS_IN_PROGRESS,
    STATUS_OPEN,
    STATUS_WAITING,
)
from carcamanager.credentials import Credentials
from carcamanager.exceptions import (
    AuthenticationException,
    NetworkException,
    NotAuthenticatedException,
    TournamentNotFoundException,
)
from carcamanager.utils import setup_logger

logger = setup_logger(__name__)


class MockClient(APIClient):
    """Deterministic stand-in for :class:`BGAClient`.

    Tournament ids start at 423762 and increase by one per creation.
    ``fail_login``, ``fail_create`` and ``fail_network`` make the
    corresponding calls fail the way the live client would.
    """

    def __init__(self, base_url: str = BGA_BASE_URL):
        self.base_url = base_url
        self.tournaments: Dict[int, TournamentStatus] = {}
        self.created: List[TournamentConfig] = []
        self.next_tournament_id = MOCK_FIRST_TOURNAMENT_ID
        self.username = ""
        self.fail_login = False
        self.fail_create = False
        self.fail_network = False
        self._authenticated = False

    def authenticate(self, credentials: Credentials) -> None:
        if self.fail_network:
            raise NetworkException("failed to perform login request: connection refused")
        if self.fail_login:
            raise AuthenticationException("authentication failed: invalid credentials")
        if not credentials.complete:
            raise AuthenticationException("username and password are required")

        self.username = credentials.username
        self._authenticated = True
        logger.debug("Mock login as %s", credentials.username)

    def is_authenticated(self) -> bool:
        return self._authenticated

    def create_tournament(self, config: TournamentConfig) -> TournamentResponse:
        if not self._authenticated:
            raise NotAuthenticatedException("not authenticated: call authenticate() first")
        if self.fail_network:
            raise NetworkException("tournament creation request failed: connection reset")
        if self.fail_create:
            return TournamentResponse(
                success=False, error="tournament creation failed: server error"
            )

        missing = config.missing_fields()
        if "local_player" in missing or "visitor_player" in missing:
            return TournamentResponse(
                success=False,
                error="both local and visitor players are required",
                invalid_fields=missing,
            )
        if missing:
            return TournamentResponse(
                success=False, error="tournament name is required", invalid_fields=missing
            )

        tournament_id = self.next_tournament_id
        self.next_tournament_id += 1
        self.created.append(config)
        self.tournaments[tournament_id] = TournamentStatus(
            id=tournament_id,
            name=config.tournament_name,
            status=STATUS_WAITING,
            players_count=HEAD_TO_HEAD_PLAYERS,
            matches=[
                MatchStatus(
                    id=game,
                    home_player=config.local_player,
                    away_player=config.visitor_player,
                )
                for game in range(1, BEST_OF_MATCHES + 1)
            ],
            results={config.local_player: 0, config.visitor_player: 0},
        )
        logger.info("Mock tournament %d created: %s", tournament_id, config.tournament_name)

        return TournamentResponse(
            success=True,
            tournament_id=tournament_id,
            link=tournament_link(tournament_id, self.base_url),
        )

    def _tournament(self, tournament_id: int) -> TournamentStatus:
        try:
            return self.tournaments[tournament_id]
        except KeyError:
            raise TournamentNotFoundException(
                f"tournament not found: {tournament_id}"
            ) from None

    def get_tournament_status(self, tournament_id: int) -> TournamentStatus:
        if not self._authenticated:
            raise NotAuthenticatedException("not authenticated: call authenticate() first")
        return copy.deepcopy(self._tournament(tournament_id))

    def logout(self) -> None:
        self._authenticated = False

    def launch_tournament(self, tournament_id: int) -> None:
        """Open a waiting tournament for play."""
        if not self._authenticated:
            raise NotAuthenticatedException("not authenticated: call authenticate() first")
        tournament = self._tournament(tournament_id)
        if tournament.status == STATUS_WAITING:
            tournament.status = STATUS_OPEN

    def simulate_match_result(
        self,
        tournament_id: int,
        match_id: int,
        home_score: int,
        away_score: int,
        winner: str = "",
    ) -> None:
        """Record a finished game and update the tournament state."""
        tournament = self._tournament(tournament_id)
        for match in tournament.matches:
            if match.id != match_id:
                continue
            match.status = STATUS_FINISHED
            match.home_score = home_score
            match.away_score = away_score
            match.winner = winner
            if winner:
                tournament.results[winner] = tournament.results.get(winner, 0) + 1
            break

        if all(m.status == STATUS_FINISHED for m in tournament.matches):
            tournament.status = STATUS_FINISHED
        else:
            tournament.status = STATUS_IN_PROGRESS

    def get_tournaments(self) -> Dict[int, TournamentStatus]:
        """Copies of every tournament created so far."""
        return copy.deepcopy(self.tournaments)

    def reset(self) -> None:
        self.tournaments = {}
        self.created = []
        self.next_tournament_id = MOCK_FIRST_TOURNAMENT_ID
        self.username = ""
        self.fail_login = False
        self.fail_create = False
        self.fail_network = False
        self._authenticated = False
