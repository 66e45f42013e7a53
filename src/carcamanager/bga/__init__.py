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

from carcamanager.bga.client import BGAClient, build_tournament_form
from carcamanager.bga.interface import APIClient
from carcamanager.bga.links import extract_tournament_id, tournament_link
from carcamanager.bga.mock_client import MockClient
from carcamanager.bga.models import (
    MatchStatus,
    TournamentConfig,
    TournamentResponse,
    TournamentStatus,
)

__all__ = [
    "APIClient",
    "BGAClient",
    "MockClient",
    "TournamentConfig",
    "TournamentResponse",
    "TournamentStatus",
    "MatchStatus",
    "build_tournament_form",
    "extract_tournament_id",
    "tournament_link",
]
