"""BoardGameArena client over HTTP.

BoardGameArena has no public API for tournaments; the client drives the
same form endpoints the website uses, keeping the login cookie in a
:class:`requests.Session`.
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

import json
import time
from typing import Dict, Optional

import requests

from carcamanager.bga.interface import APIClient
from carcamanager.bga.links import find_tournament_id, tournament_link
from carcamanager.bga.models import TournamentConfig, TournamentResponse, TournamentStatus
from carcamanager.constants import (
    BGA_BASE_URL,
    BGA_REQUEST_TIMEOUT,
    BGA_SESSION_COOKIES,
    BGA_USER_AGENT,
)
from carcamanager.credentials import Credentials
from carcamanager.exceptions import (
    AuthenticationException,
    NetworkException,
    NotAuthenticatedException,
    TournamentCreationException,
    TournamentNotFoundException,
)
from carcamanager.utils import setup_logger

logger = setup_logger(__name__)

LOGIN_PATH = "/account/account/login.html"
LOGOUT_PATH = "/account/account/logout.html"
CREATE_PATH = "/newtournament/newtournament/create.html"
STATUS_PATH = "/tournament/tournament/tournamentStatus.html"

# Phrases of the HTML page shown after a successful creation
CREATED_MARKERS = (
    "successfully created",
    "Tournament created",
    "tournament has been created",
)

FormData = Dict[str, str]


class BGAClient(APIClient):
    """Live BoardGameArena client.

    Attributes
    ----------
    base_url : str
        Site root, ``https://boardgamearena.com`` by default.
    timeout : float
        Per-request timeout in seconds.
    session_id : str
        Login cookie value, empty while logged out.
    """

    def __init__(
        self,
        base_url: str = BGA_BASE_URL,
        timeout: float = BGA_REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": BGA_USER_AGENT})
        self.session_id = ""

    def _url(self, path: str) -> str:
        return self.base_url + path

    def _require_session(self) -> None:
        if not self.session_id:
            raise NotAuthenticatedException("not authenticated: call authenticate() first")

    # ========== Session ==========

    def authenticate(self, credentials: Credentials) -> None:
        if not credentials.complete:
            raise AuthenticationException("username and password are required")

        form = {
            "email": credentials.username,
            "password": credentials.password,
            "form_id": "connection_form",
            "request_id": str(int(time.time())),
        }
        try:
            response = self.session.post(
                self._url(LOGIN_PATH), data=form, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise NetworkException(f"failed to perform login request: {e}") from e

        for name in BGA_SESSION_COOKIES:
            value = response.cookies.get(name) or self.session.cookies.get(name)
            if value:
                self.session_id = value
                break

        if not self.session_id:
            raise AuthenticationException(
                "failed to authenticate: no session cookie received"
            )
        logger.info("Logged in to BoardGameArena as %s", credentials.username)

    def is_authenticated(self) -> bool:
        return bool(self.session_id)

    def logout(self) -> None:
        if not self.session_id:
            return
        try:
            self.session.post(self._url(LOGOUT_PATH), timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkException(f"failed to logout: {e}") from e
        self.session_id = ""
        self.session.cookies.clear()
        logger.info("Logged out of BoardGameArena")

    # ========== Tournaments ==========

    def create_tournament(self, config: TournamentConfig) -> TournamentResponse:
        self._require_session()

        form = build_tournament_form(config)
        form["form_id"] = "createnewtournament"
        form["dojo.preventCache"] = str(int(time.time() * 1000))

        logger.info("Creating tournament %r", config.tournament_name)
        try:
            response = self.session.post(
                self._url(CREATE_PATH), data=form, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise NetworkException(f"tournament creation request failed: {e}") from e

        if response.status_code != requests.codes.ok:
            raise TournamentCreationException(
                f"tournament creation failed with status {response.status_code}: "
                f"{response.text}"
            )
        return self.parse_tournament_response(response.text)

    def parse_tournament_response(self, body: str) -> TournamentResponse:
        """Read a creation response, JSON first and the HTML page otherwise."""
        try:
            data = json.loads(body)
        except ValueError:
            data = None

        if isinstance(data, dict):
            result = TournamentResponse.from_dict(data)
        elif any(marker in body for marker in CREATED_MARKERS):
            result = TournamentResponse(
                success=True, tournament_id=find_tournament_id(body) or 0
            )
        else:
            return TournamentResponse(success=False, error="Tournament creation failed")

        if result.tournament_id > 0:
            result.link = tournament_link(result.tournament_id, self.base_url)
        return result

    def get_tournament_status(self, tournament_id: int) -> TournamentStatus:
        self._require_session()
        try:
            response = self.session.get(
                self._url(STATUS_PATH),
                params={"id": tournament_id},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise NetworkException(f"failed to get tournament status: {e}") from e

        if response.status_code == requests.codes.not_found:
            raise TournamentNotFoundException(f"tournament not found: {tournament_id}")
        try:
            return TournamentStatus.from_dict(response.json())
        except (ValueError, TypeError, AttributeError) as e:
            raise NetworkException(f"failed to parse tournament status: {e}") from e


# ========== Tournament form ==========


def build_tournament_form(config: TournamentConfig) -> FormData:
    """Form fields of the tournament creation page."""
    form: FormData = {}
    _set_basic_settings(form, config)
    _set_registration(form, config)
    _set_table_access(form)
    _set_general_settings(form, config)
    _set_carcassonne_options(form)
    _set_swiss_options(form, config)
    form["players"] = "confirm_players"
    return form


def _set_basic_settings(form: FormData, config: TournamentConfig) -> None:
    form["game"] = str(config.game_id)
    form["championship_name"] = config.championship_name
    form["tournament_name"] = config.tournament_name
    form["base_date"] = config.base_date
    form["base_date_hour"] = config.base_time


def _set_registration(form: FormData, config: TournamentConfig) -> None:
    form["registration_type"] = "invitation_only"
    form["registration_group"] = "0"
    form["registration_starts"] = "30"
    form["min_players"] = str(config.min_players)
    form["max_players"] = str(config.max_players)


def _set_table_access(form: FormData) -> None:
    for level in ("Averagelevel", "Goodplayers", "Strongplayers", "Experts", "Masters"):
        form[f"tableaccess_{level}"] = "on"


def _set_general_settings(form: FormData, config: TournamentConfig) -> None:
    form["karma"] = "1"
    form["restrictedCountries"] = ""
    form["stage_type"] = "swissSystemV2"
    form["game_max_duration"] = str(config.game_duration)
    form["players_out_of_time"] = "vote_kick"


def _set_carcassonne_options(form: FormData) -> None:
    # International field and city scoring
    form["gameoption_200"] = "5"
    form["gameoption_204"] = "900"
    # Base game only: no River, no Inns & Cathedrals, no other expansions
    for option in ("201", "206", "106", "103", "104", "107", "100", "101", "102"):
        form[f"gameoption_{option}"] = "0"
    form["stage_playernbr"] = "2"
    form["stage_playernbr_min"] = "2"


def _set_stage_options(form: FormData, prefix: str, swiss_games: str) -> None:
    form[f"{prefix}mode_option_bracketElimination_100"] = "1"
    form[f"{prefix}mode_option_swissSystemV2_100"] = "1"
    form[f"{prefix}mode_option_swissSystemV2_101"] = "100"
    form[f"{prefix}mode_option_swissSystemV2_102"] = "1"
    form[f"{prefix}mode_option_swissSystemV2_103"] = swiss_games
    form[f"{prefix}mode_option_twoStage_100"] = "1"
    form[f"{prefix}mode_option_twoStage_101"] = "8"
    form[f"{prefix}mode_option_twoStage_102"] = "2"
    form[f"{prefix}mode_option_twoStage_103"] = "1"


def _set_swiss_options(form: FormData, config: TournamentConfig) -> None:
    _set_stage_options(form, "", str(config.matches_count))
    _set_stage_options(form, "stage_1_", "5")
    _set_stage_options(form, "stage_2_", "5")
