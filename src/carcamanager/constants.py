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

# --- Application ---
APP_NAME = "Carcassonne Tournament Manager"
APP_PACKAGE = "carcamanager"

# --- Fixture files ---
FIXTURE_FILE_SUFFIX = "-Fixture"
FIXTURE_FILE_GLOB = f"*{FIXTURE_FILE_SUFFIX}.csv"
FILENAME_SEPARATOR = " - "
DEFAULT_DATA_DIR = "data"

# A line starting with this prefix opens a new round block
ROUND_HEADER_PREFIX = "Duelo,Fecha"
FIELD_SEPARATOR = ","

# Round header layout
HEADER_MIN_FIELDS = 6
HEADER_ROUND_FIELD = 1
HEADER_DATE_RANGE_FIELD = 5
DEFAULT_ROUND_NUMBER = 1

# Match row layout
MATCH_MIN_FIELDS = 10
MATCH_ID_FIELD = 0
MATCH_HOME_PLAYER_FIELD = 1
MATCH_HOME_SCORE_FIELD = 2
MATCH_AWAY_SCORE_FIELD = 3
MATCH_AWAY_PLAYER_FIELD = 4
MATCH_DATETIME_FIELD = 5
MATCH_LINK_FIELD = 6
MATCH_PLAYED_FIELD = 8
PLAYED_FLAG = "1"

# Division codes as they appear in fixture filenames, in display order
DIVISION_NAMES = {
    "E": "Elite",
    "P.A": "Platinum A",
    "P.B": "Platinum B",
    "O.A": "Oro A",
    "O.B": "Oro B",
    "O.C": "Oro C",
    "O.D": "Oro D",
}

# --- Tournament naming ---
CHAMPIONSHIP_NAME_FORMAT = "Division {division} - 1era Temporada"
TOURNAMENT_NAME_FORMAT = "{round_number} Fecha - Duelo {match_number} - {home} vs {away}"

# --- BoardGameArena ---
BGA_BASE_URL = "https://boardgamearena.com"
BGA_USER_AGENT = "Carcassonne Tournament Manager/1.0"
BGA_REQUEST_TIMEOUT = 30.0
BGA_SESSION_COOKIES = ("TournamentSession", "PHPSESSID")
BGA_USER_ENV = "BGA_USER"
BGA_PASS_ENV = "BGA_PASS"
DEFAULT_ENV_FILE = ".env"

CARCASSONNE_GAME_ID = 1
HEAD_TO_HEAD_PLAYERS = 2
GAME_DURATION_SECONDS = 1800  # 30 minutes
BEST_OF_MATCHES = 3
DEFAULT_TOURNAMENT_HOUR = 21  # 9 PM

# Mock client ids start just past a real tournament id
MOCK_FIRST_TOURNAMENT_ID = 423762

# Tournament status values reported by BGA
STATUS_WAITING = "waiting"
STATUS_OPEN = "open"
STATUS_IN_PROGRESS = "in_progress"
STATUS_FINISHED = "finished"

# --- Status notices ---
CANCEL_NOTICE_SECONDS = 2.0
RESULT_NOTICE_SECONDS = 3.0

MSG_CREATION_CANCELED = "Tournament creation canceled"
MSG_CREATE_HINT = "Press 'c' to create tournament for this match"
MSG_LINK_COPIED = "Tournament link copied to clipboard!"
MSG_LINK_COPY_FAILED = "Failed to copy link to clipboard"
MSG_CREATED = "Tournament created successfully! Link copied to clipboard."
MSG_CREATED_NO_CLIPBOARD = (
    "Tournament created successfully! (Failed to copy link to clipboard)"
)
MSG_CREATION_FAILED = "Tournament creation failed: {error}"
MSG_CREATING = "Creating tournament for {home} vs {away}..."
MSG_SUBMISSION_IN_FLIGHT = "Please wait, a tournament is still being created"

# --- Date/time formats ---
BGA_DATE_FORMAT = "%Y-%m-%d"
BGA_TIME_FORMAT = "%H:%M"

# --- Logging ---
DEFAULT_LOG_FILE = "carca.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
