"""Fixture file parsing.

A fixture file is a CSV export of the league spreadsheet. Each round starts
with a header row whose first two cells are ``Duelo`` and ``Fecha <n>``;
the rows below it, up to the next header, are the duels of that round::

    Duelo,Fecha 1,,,,11/08 - 17/08,Link,,...
    1,herchu,2,1,Lord Trooper,12/08 - 09:30,https://...?id=423761,,1,1,0
    17,webbi,0,0,herchu,,,,0,0,0

Rows made only of separators and blank rows are layout filler and are skipped.
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

import csv
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from carcamanager.constants import (
    DEFAULT_ROUND_NUMBER,
    DIVISION_NAMES,
    FIELD_SEPARATOR,
    FILENAME_SEPARATOR,
    FIXTURE_FILE_GLOB,
    FIXTURE_FILE_SUFFIX,
    HEADER_DATE_RANGE_FIELD,
    HEADER_MIN_FIELDS,
    HEADER_ROUND_FIELD,
    MATCH_AWAY_PLAYER_FIELD,
    MATCH_AWAY_SCORE_FIELD,
    MATCH_DATETIME_FIELD,
    MATCH_HOME_PLAYER_FIELD,
    MATCH_HOME_SCORE_FIELD,
    MATCH_ID_FIELD,
    MATCH_LINK_FIELD,
    MATCH_MIN_FIELDS,
    MATCH_PLAYED_FIELD,
    PLAYED_FLAG,
    ROUND_HEADER_PREFIX,
)
from carcamanager.exceptions import FixtureLoadException, FixtureParseException
from carcamanager.models.fixture import Division, Match, Round
from carcamanager.type_hints import CsvRow, NumberedLine
from carcamanager.utils import setup_logger

logger = setup_logger(__name__)

# "Fecha 12" -> 12
ROUND_NUMBER_PATTERN = re.compile(r"^\s*\S+\s+(\d+)\s*$")

FILENAME_PATTERN = re.compile(
    r"^.+"
    + re.escape(FILENAME_SEPARATOR)
    + r".+"
    + re.escape(FILENAME_SEPARATOR)
    + r"(?P<code>.+?)"
    + re.escape(FIXTURE_FILE_SUFFIX)
    + r"\.[^.]+$"
)


def _read_row(line: str, line_number: Optional[int]) -> CsvRow:
    try:
        return next(csv.reader([line]))
    except (csv.Error, StopIteration) as e:
        raise FixtureParseException(
            f"failed to parse CSV line: {e}", line_number=line_number
        ) from e


def _parse_int(value: str, what: str, line_number: Optional[int]) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise FixtureParseException(
            f"invalid {what}: {value!r}", line_number=line_number
        ) from None


def is_round_header(line: str) -> bool:
    return line.strip().startswith(ROUND_HEADER_PREFIX)


def is_filler(line: str) -> bool:
    """Blank lines and lines made only of field separators."""
    return not line.strip().replace(FIELD_SEPARATOR, "").strip()


def parse_match(line: str, line_number: Optional[int] = None) -> Match:
    """Parse one duel row.

    Args:
        line: CSV row ``id,home,home_score,away_score,away,datetime,link,_,played,...``
        line_number: Source line, only used in error messages

    Returns:
        The parsed match

    Raises:
        FixtureParseException: If the row has fewer than 10 fields or a
            non-numeric id or score
    """
    fields = _read_row(line, line_number)
    if len(fields) < MATCH_MIN_FIELDS:
        raise FixtureParseException(
            f"invalid CSV format: expected at least {MATCH_MIN_FIELDS} fields, "
            f"got {len(fields)}",
            line_number=line_number,
        )

    return Match(
        id=_parse_int(fields[MATCH_ID_FIELD], "match ID", line_number),
        home_player=fields[MATCH_HOME_PLAYER_FIELD],
        home_score=_parse_int(fields[MATCH_HOME_SCORE_FIELD], "home score", line_number),
        away_score=_parse_int(fields[MATCH_AWAY_SCORE_FIELD], "away score", line_number),
        away_player=fields[MATCH_AWAY_PLAYER_FIELD],
        date_time=fields[MATCH_DATETIME_FIELD],
        reference_link=fields[MATCH_LINK_FIELD],
        played=fields[MATCH_PLAYED_FIELD] == PLAYED_FLAG,
    )


def parse_round_number(token: str) -> int:
    """Round number of a ``"<label> <n>"`` header cell, 1 when there is none."""
    found = ROUND_NUMBER_PATTERN.match(token)
    if found is None:
        return DEFAULT_ROUND_NUMBER
    return int(found.group(1))


def _numbered(lines: Sequence[Union[str, NumberedLine]]) -> List[NumberedLine]:
    numbered = []
    for position, line in enumerate(lines, start=1):
        if isinstance(line, tuple):
            numbered.append(line)
        else:
            numbered.append((position, line))
    return numbered


def parse_round(
    lines: Sequence[Union[str, NumberedLine]], block_index: Optional[int] = None
) -> Round:
    """Parse a round block: a header row followed by at least one duel row.

    Args:
        lines: Block lines, either plain strings or ``(line_number, text)`` pairs
        block_index: Position of the block in the file, for error messages

    Raises:
        FixtureParseException: If the header is malformed, the block has no
            duels, or any duel row is malformed
    """
    numbered = [(n, text) for n, text in _numbered(lines) if not is_filler(text)]
    if len(numbered) < 2:
        first_line = numbered[0][0] if numbered else None
        raise FixtureParseException(
            "invalid round data: need at least header and one match",
            line_number=first_line,
            block_index=block_index,
        )

    header_line, header_text = numbered[0]
    try:
        header = _read_row(header_text.strip(), header_line)
    except FixtureParseException as e:
        raise e.locate(block_index=block_index) from e
    if len(header) < HEADER_MIN_FIELDS:
        raise FixtureParseException(
            f"invalid header format: expected at least {HEADER_MIN_FIELDS} fields, "
            f"got {len(header)}",
            line_number=header_line,
            block_index=block_index,
        )

    round_ = Round(
        number=parse_round_number(header[HEADER_ROUND_FIELD]),
        date_range=header[HEADER_DATE_RANGE_FIELD],
    )

    for line_number, text in numbered[1:]:
        try:
            round_.matches.append(parse_match(text.strip(), line_number))
        except FixtureParseException as e:
            raise e.locate(block_index=block_index) from e

    return round_


@dataclass
class _Block:
    lines: List[NumberedLine] = field(default_factory=list)


def split_round_blocks(text: str) -> List[List[NumberedLine]]:
    """Split fixture text into round blocks of numbered lines.

    Lines before the first header are ignored; filler lines are dropped.
    """
    blocks: List[_Block] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if is_round_header(line):
            blocks.append(_Block([(line_number, line)]))
        elif is_filler(line):
            continue
        elif blocks:
            blocks[-1].lines.append((line_number, line))
    return [block.lines for block in blocks]


def parse_division(text: str, name: str = "") -> Division:
    """Parse a whole fixture into a division.

    Raises:
        FixtureParseException: If any round block is malformed. Nothing is
            returned for a partially valid fixture.
    """
    rounds = [
        parse_round(block, block_index=index)
        for index, block in enumerate(split_round_blocks(text))
    ]
    division = Division(name=name, rounds=rounds)
    logger.debug(
        "Parsed division %r: %d rounds, %d matches",
        name,
        len(division.rounds),
        division.match_count,
    )
    return division


def division_name_from_filename(path: Union[str, Path]) -> str:
    """Division code from ``"<league> - <season> - <code>-Fixture.<ext>"``.

    Returns ``""`` when the filename does not follow the convention.
    """
    filename = Path(path).name
    found = FILENAME_PATTERN.match(filename)
    if found is None:
        logger.debug("Fixture filename %r does not name a division", filename)
        return ""
    return found.group("code")


def parse_fixture_file(path: Union[str, Path], encoding: str = "utf-8") -> Division:
    """Read and parse a fixture file.

    Raises:
        FixtureLoadException: If the file cannot be read
        FixtureParseException: If its content is malformed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise FixtureLoadException(f"failed to read fixture file {path}: {e}") from e

    division = parse_division(text, name=division_name_from_filename(path))
    logger.info(
        "Loaded fixture %s (division %r, %d rounds)",
        path,
        division.name,
        len(division.rounds),
    )
    return division


def get_unplayed_matches(division: Division) -> List[Match]:
    """All matches of the division that have not been played yet."""
    return division.unplayed_matches()


@dataclass
class FixtureEntry:
    """A fixture file offered on the division selection screen."""

    code: str
    display_name: str
    path: Path


def discover_fixture_files(data_dir: Union[str, Path]) -> List[FixtureEntry]:
    """Find fixture files in ``data_dir``, known divisions first in league order."""
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        logger.warning("Fixture directory %s does not exist", data_dir)
        return []

    order: Dict[str, int] = {code: i for i, code in enumerate(DIVISION_NAMES)}
    entries = []
    for path in data_dir.glob(FIXTURE_FILE_GLOB):
        code = division_name_from_filename(path)
        display = DIVISION_NAMES.get(code, code or path.stem)
        entries.append(FixtureEntry(code=code, display_name=display, path=path))

    entries.sort(key=lambda e: (order.get(e.code, len(order)), e.display_name))
    return entries


@dataclass
class DivisionSummary:
    """Counts shown by ``carca summary``."""

    name: str
    rounds: int
    matches: int
    played: int
    unplayed: int
    # (match id, home, away, round number) of the first matches needing a tournament
    pending: List[tuple] = field(default_factory=list)
    more_pending: int = 0


def summarize_division(division: Division, limit: int = 5) -> DivisionSummary:
    """Count matches and list the first ``limit`` that need a tournament."""
    unplayed = division.unplayed_matches()
    pending = [
        (m.id, m.home_player, m.away_player, division.round_number_of(m.id))
        for m in unplayed[:limit]
    ]
    return DivisionSummary(
        name=division.name,
        rounds=len(division.rounds),
        matches=division.match_count,
        played=division.played_count,
        unplayed=len(unplayed),
        pending=pending,
        more_pending=max(0, len(unplayed) - limit),
    )
