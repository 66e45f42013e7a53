"""Tournament names and date labels shared by the screens and the BGA client."""

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

from carcamanager.constants import (
    CHAMPIONSHIP_NAME_FORMAT,
    DIVISION_NAMES,
    TOURNAMENT_NAME_FORMAT,
)


def championship_name(division: str) -> str:
    """``"Division E - 1era Temporada"``"""
    return CHAMPIONSHIP_NAME_FORMAT.format(division=division)


def tournament_name(
    round_number: int, match_number: int, home_player: str, away_player: str
) -> str:
    """``"1 Fecha - Duelo 15 - herchu vs Lord Trooper"``"""
    return TOURNAMENT_NAME_FORMAT.format(
        round_number=round_number,
        match_number=match_number,
        home=home_player,
        away=away_player,
    )


def division_display_name(code: str) -> str:
    """Human name for a division code, the code itself when unknown."""
    return DIVISION_NAMES.get(code, code)


def format_utc_offset(moment: datetime) -> str:
    """Offset of an aware datetime as ``UTC-3`` or ``UTC+5:30``."""
    offset = moment.utcoffset()
    total_minutes = int(offset.total_seconds() // 60) if offset is not None else 0
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    if minutes == 0:
        return f"UTC{sign}{hours}"
    return f"UTC{sign}{hours}:{minutes:02d}"


def format_display_datetime(moment: datetime) -> str:
    """``"Saturday, September 6, 2025 at 9:30 PM"``"""
    hour = moment.hour % 12 or 12
    return (
        f"{moment:%A, %B} {moment.day}, {moment.year} "
        f"at {hour}:{moment:%M} {moment:%p}"
    )
