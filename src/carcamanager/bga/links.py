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

import re
from typing import Optional, Union
from urllib.parse import parse_qs, urlparse

from carcamanager.constants import BGA_BASE_URL
from carcamanager.exceptions import InvalidTournamentLinkException

# tournament.php?id=123456 or tournament?id=123456
TOURNAMENT_LINK_PATTERN = re.compile(r"tournament(?:\.php)?\?id=(\d+)")
# {"tournament_id": 123456}
TOURNAMENT_ID_JSON_PATTERN = re.compile(r'"tournament_id":\s*(\d+)')


def tournament_link(tournament_id: int, base_url: str = BGA_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/tournament?id={tournament_id}"


def extract_tournament_id(link: Union[str, int]) -> int:
    """Tournament id from a link like ``https://boardgamearena.com/tournament?id=423761``.

    A bare number is accepted as well.

    Raises:
        InvalidTournamentLinkException: If no positive id can be found
    """
    text = str(link).strip()
    if not text:
        raise InvalidTournamentLinkException("empty tournament link")
    if text.isdigit():
        return int(text)

    values = parse_qs(urlparse(text).query).get("id")
    if not values:
        raise InvalidTournamentLinkException(f"invalid tournament link format: {text}")
    try:
        return int(values[0])
    except ValueError:
        raise InvalidTournamentLinkException(
            f"invalid tournament ID in link: {values[0]}"
        ) from None


def find_tournament_id(body: str) -> Optional[int]:
    """First tournament id mentioned in a response body, if any."""
    for pattern in (TOURNAMENT_LINK_PATTERN, TOURNAMENT_ID_JSON_PATTERN):
        found = pattern.search(body)
        if found:
            return int(found.group(1))
    return None
