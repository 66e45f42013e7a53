"""Abstract BoardGameArena client."""

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

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from carcamanager.bga.models import TournamentConfig, TournamentResponse, TournamentStatus
from carcamanager.credentials import Credentials


class APIClient(ABC):
    """Operations the application needs from BoardGameArena.

    Implementations raise :class:`~carcamanager.exceptions.APIException`
    subclasses for authentication and transport problems, and return a
    :class:`TournamentResponse` with ``success=False`` when the service
    itself rejects a request.
    """

    @abstractmethod
    def authenticate(self, credentials: Credentials) -> None:
        """Log in and keep the session.

        Raises:
            AuthenticationException: If the login is refused
            NetworkException: If the service cannot be reached
        """

    @abstractmethod
    def is_authenticated(self) -> bool:
        pass

    @abstractmethod
    def create_tournament(self, config: TournamentConfig) -> TournamentResponse:
        """Create a tournament from ``config``.

        Raises:
            NotAuthenticatedException: If :meth:`authenticate` was not called
        """

    def create_head_to_head_contest(
        self,
        division: str,
        home_player: str,
        away_player: str,
        round_number: int,
        match_number: int,
        scheduled_time: Optional[datetime] = None,
    ) -> TournamentResponse:
        """Create a best-of-3 Swiss tournament between two players.

        Without ``scheduled_time`` the tournament starts today at 21:00.
        """
        config = TournamentConfig.head_to_head(
            division, home_player, away_player, round_number, match_number, scheduled_time
        )
        return self.create_tournament(config)

    @abstractmethod
    def get_tournament_status(self, tournament_id: int) -> TournamentStatus:
        pass

    @abstractmethod
    def logout(self) -> None:
        pass
