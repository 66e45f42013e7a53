"""Screen rendering.

Every function returns prompt_toolkit formatted text, a list of
``(style, text)`` fragments, so the views can be checked without a terminal.
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

from typing import List

from prompt_toolkit.styles import Style

from carcamanager.constants import APP_NAME
from carcamanager.controllers.app import AppModel, Screen
from carcamanager.controllers.confirmation import ConfirmationModel
from carcamanager.controllers.datetime_picker import DateTimePicker, PickerField
from carcamanager.controllers.menu import DivisionSelectModel, MenuModel
from carcamanager.controllers.wizard import FixtureWizard, WizardState
from carcamanager.models.fixture import Match, Round
from carcamanager.models.naming import (
    division_display_name,
    format_display_datetime,
    format_utc_offset,
)
from carcamanager.type_hints import Fragments

STYLE = Style.from_dict(
    {
        "title": "#7d56f4 bold",
        "subtitle": "#fafafa",
        "cursor": "#7d56f4 bold",
        "selected": "bg:#7d56f4 #ffffff",
        "header": "#7d56f4 bold",
        "played": "#50c878",
        "status": "#50c878",
        "error": "#ff6b6b",
        "detail": "#04b575 bold",
        "highlight": "#ee6ff8 bold",
        "focused": "reverse bold",
        "help": "#626262 italic",
    }
)

TABLE_HEADERS = ["DUELO", "PLAYED", "HOME", "AWAY", "RESULT", "DATE", "TOURNAMENT_ID"]
COLUMN_GAP = "  "
PLAYED_MARK = "✓"
UNPLAYED_MARK = "○"

FIXTURE_HELP = [
    "Press ←/→, h/l, or PgUp/PgDown to navigate rounds",
    "Press ↑/↓, j/k to select matches, Enter to copy link",
    "Press 'c' to create tournament for unplayed matches",
    "Press esc/q to go back.",
]

PICKER_HELP = [
    "• ↑/↓ arrows: Change date or time values",
    "• PgUp/PgDown: Change by month or hour",
    "• ←/→ arrows: Move between date and time fields",
    "• Tab/Space: Switch between components",
    "• Enter: Confirm selection | Esc: Cancel",
]

TOURNAMENT_SETTINGS = [
    "• Format:       Swiss System (Best-of-3)",
    "• Game:         Carcassonne",
    "• Duration:     30 minutes (15 min per player)",
    "• Players:      2 (Private tournament)",
    "• Rules:        International scoring",
    "  - Field scoring: 3 points per city",
    "  - City scoring:  4 points per two tile city",
    "• Expansions:   None",
    "• Variants:     None",
]


def _line(fragments: Fragments, text: str = "", style: str = "") -> None:
    fragments.append((style, text + "\n"))


def render_list(choices: List[str], cursor: int) -> Fragments:
    fragments: Fragments = []
    for i, choice in enumerate(choices):
        if i == cursor:
            _line(fragments, f"> {choice}", "class:cursor")
        else:
            _line(fragments, f"  {choice}")
    return fragments


def render_menu(menu: MenuModel) -> Fragments:
    fragments: Fragments = []
    _line(fragments)
    _line(fragments, APP_NAME, "class:title")
    _line(fragments)
    _line(fragments, "Please select an option:", "class:subtitle")
    _line(fragments)
    fragments.extend(render_list(menu.choices, menu.cursor))
    _line(fragments)
    _line(fragments, "Press q to quit, ↑/↓ to navigate, enter to select.", "class:help")
    return fragments


def render_division_select(model: DivisionSelectModel) -> Fragments:
    fragments: Fragments = []
    _line(fragments)
    _line(fragments, "Select Division", "class:title")
    _line(fragments)
    _line(fragments, "Choose a division to view fixtures:", "class:subtitle")
    _line(fragments)
    fragments.extend(render_list([e.display_name for e in model.entries], model.cursor))
    if model.error:
        _line(fragments)
        _line(fragments, model.error, "class:error")
    _line(fragments)
    _line(fragments, "Press esc/q to go back, ↑/↓ to navigate, enter to select.", "class:help")
    return fragments


def _match_cells(match: Match) -> List[str]:
    return [
        str(match.id),
        PLAYED_MARK if match.played else UNPLAYED_MARK,
        match.home_player,
        match.away_player,
        match.result_label,
        match.date_time or "-",
        match.tournament_id or "-",
    ]


def render_match_table(round_: Round, selected: int) -> Fragments:
    """Matches of a round as an aligned table with the selected row highlighted."""
    rows = [_match_cells(m) for m in round_.matches]
    widths = [len(h) for h in TABLE_HEADERS]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]

    def fmt(cells: List[str]) -> str:
        return COLUMN_GAP.join(cell.ljust(w) for cell, w in zip(cells, widths)).rstrip()

    fragments: Fragments = []
    _line(fragments, fmt(TABLE_HEADERS), "class:header")
    for i, row in enumerate(rows):
        style = "class:selected" if i == selected else ""
        _line(fragments, fmt(row), style)
    return fragments


def render_fixture(wizard: FixtureWizard) -> Fragments:
    if wizard.state is WizardState.PICKING_DATETIME and wizard.picker is not None:
        return render_picker(wizard.picker)
    if wizard.state is WizardState.CONFIRMING_DETAILS and wizard.confirmation is not None:
        return render_confirmation(wizard.confirmation)

    fragments: Fragments = []
    division = wizard.division
    current = wizard.cursor.current_round()
    if current is None:
        _line(fragments, "No fixtures available for this division.")
        _line(fragments)
        _line(fragments, "Press esc/q to go back.", "class:help")
        return fragments

    _line(fragments)
    _line(
        fragments,
        f"Division {division_display_name(division.name)} - Round {current.number}",
        "class:title",
    )
    _line(fragments, f"Date Range: {current.date_range}", "class:subtitle")
    _line(fragments)
    if current.matches:
        fragments.extend(render_match_table(current, wizard.cursor.match_index))
    else:
        _line(fragments, "No matches in this round", "class:error")
    _line(fragments)
    _line(fragments, f"Round {wizard.cursor.round_index + 1} of {len(division.rounds)}")
    if wizard.status:
        _line(fragments)
        _line(fragments, wizard.status, "class:status")
    _line(fragments)
    for text in FIXTURE_HELP:
        _line(fragments, text, "class:help")
    return fragments


def render_picker(picker: DateTimePicker) -> Fragments:
    session = picker.session
    value = picker.value
    offset = format_utc_offset(value)

    fragments: Fragments = []
    _line(
        fragments,
        f"Schedule Tournament: {session.home_player} vs {session.away_player}",
        "class:title",
    )
    _line(fragments)
    _line(
        fragments,
        f"Division: {session.division} - Round {session.round_number} "
        f"- Duelo {session.match_number}",
    )
    _line(fragments, f"Timezone: {picker.timezone_name} ({offset})")
    _line(fragments)

    date_style = "class:focused" if picker.focus is PickerField.DATE else ""
    time_style = "class:focused" if picker.focus is PickerField.TIME else ""
    fragments.append(("", "  Date: "))
    fragments.append((date_style, f" {picker.date_label} "))
    fragments.append(("", "    Time: "))
    fragments.append((time_style, f" {picker.time_label} "))
    _line(fragments)
    _line(fragments)
    _line(fragments, f"Selected: {format_display_datetime(value)} ({offset})")
    _line(fragments)
    _line(fragments, "Navigation:")
    for text in PICKER_HELP:
        _line(fragments, text, "class:help")
    return fragments


def _detail(fragments: Fragments, label: str, value: str) -> None:
    fragments.append(("", f"• {label}"))
    fragments.append(("class:highlight", value))
    fragments.append(("", "\n"))


def render_confirmation(model: ConfirmationModel) -> Fragments:
    session = model.session
    championship, tournament = model.tournament_details()
    when = model.scheduled_time

    fragments: Fragments = []
    _line(fragments, "Tournament Confirmation", "class:title")
    _line(fragments)
    _line(fragments, "Tournament Details:", "class:detail")
    _detail(fragments, "Championship: ", championship)
    _detail(fragments, "Tournament:   ", tournament)
    _line(fragments)
    _line(fragments, "Match Information:", "class:detail")
    _detail(fragments, "Division:     ", session.division)
    _detail(fragments, "Round:        ", str(session.round_number))
    _detail(fragments, "Match (Duelo): ", str(session.match_number))
    _detail(fragments, "Players:      ", f"{session.home_player} vs {session.away_player}")
    _line(fragments)
    _line(fragments, "Scheduling:", "class:detail")
    _detail(fragments, "Date & Time:  ", format_display_datetime(when))
    _detail(fragments, "Timezone:     ", f"{when.tzname() or ''} ({format_utc_offset(when)})")
    _line(fragments)
    _line(fragments, "Tournament Settings:", "class:detail")
    for text in TOURNAMENT_SETTINGS:
        _line(fragments, text)
    _line(fragments)
    _line(
        fragments,
        "Press Enter to create tournament • Press 'e' to edit date/time • "
        "Press Esc to cancel",
        "class:help",
    )
    return fragments


def render_app(app: AppModel) -> Fragments:
    if app.screen is Screen.DIVISION_SELECT and app.division_select is not None:
        return render_division_select(app.division_select)
    if app.screen is Screen.FIXTURE and app.wizard is not None:
        return render_fixture(app.wizard)
    return render_menu(app.menu)
