from datetime import datetime, timedelta, timezone

from prompt_toolkit.formatted_text import fragment_list_to_text

from carcamanager.config import AppConfig
from carcamanager.controllers.app import AppModel
from carcamanager.controllers.confirmation import ConfirmationModel
from carcamanager.controllers.datetime_picker import DateTimePicker
from carcamanager.controllers.events import KEY_ENTER, KEY_LEFT, KeyPressed
from carcamanager.controllers.wizard import FixtureWizard
from carcamanager.models.fixture import Division, Round
from carcamanager.models.session import WizardSession
from carcamanager.tui.views import (
    render_app,
    render_confirmation,
    render_fixture,
    render_match_table,
    render_picker,
)

from conftest import DATA_DIR

ART = timezone(timedelta(hours=-3))
WHEN = datetime(2025, 9, 6, 21, 30, tzinfo=ART)
SESSION = WizardSession("E", "herchu", "Lord Trooper", 0, 1, 15, 15)


def text_of(fragments):
    return fragment_list_to_text(fragments)


def test_menu(orchestrator):
    text = text_of(render_app(AppModel(AppConfig(data_dir=DATA_DIR), orchestrator)))

    assert "Carcassonne Tournament Manager" in text
    assert "> View Fixture" in text
    assert "  Exit" in text


def test_division_select(orchestrator):
    app = AppModel(AppConfig(data_dir=DATA_DIR), orchestrator)
    app.dispatch(KeyPressed(KEY_ENTER))

    text = text_of(render_app(app))

    assert "Select Division" in text
    assert "> Elite" in text
    assert "  Platinum A" in text


def test_match_table(division):
    fragments = render_match_table(division.rounds[0], 1)
    lines = text_of(fragments).splitlines()

    assert lines[0].split() == [
        "DUELO", "PLAYED", "HOME", "AWAY", "RESULT", "DATE", "TOURNAMENT_ID",
    ]
    assert "herchu" in lines[1] and "2-1" in lines[1] and "423761" in lines[1]
    assert "✓" in lines[1]
    assert [style for style, _ in fragments[1:]] == ["", "class:selected", "", ""]


def test_unplayed_rows_show_placeholders(division):
    lines = text_of(render_match_table(division.rounds[2], 0)).splitlines()

    assert "○" in lines[1]
    assert lines[1].split()[-3:] == ["-", "-", "-"]
    assert lines[2].split()[-1] == "430001"


def test_fixture_screen(division, orchestrator):
    wizard = FixtureWizard(division, orchestrator)
    wizard.set_status("Tournament link copied to clipboard!")

    text = text_of(render_fixture(wizard))

    assert "Division Elite - Round 1" in text
    assert "Date Range: 11/08 - 17/08" in text
    assert "Round 1 of 3" in text
    assert "Tournament link copied to clipboard!" in text
    assert "Press 'c' to create tournament for unplayed matches" in text


def test_fixture_screen_without_rounds(orchestrator):
    text = text_of(render_fixture(FixtureWizard(Division("E"), orchestrator)))

    assert "No fixtures available for this division." in text


def test_round_without_matches(orchestrator):
    wizard = FixtureWizard(Division("E", [Round(3, "01/09 - 07/09")]), orchestrator)

    assert "No matches in this round" in text_of(render_fixture(wizard))


def test_fixture_screen_shows_picker(division, orchestrator):
    wizard = FixtureWizard(division, orchestrator)
    wizard.handle(KeyPressed(KEY_LEFT))
    wizard.handle(KeyPressed("c"))

    text = text_of(render_fixture(wizard))

    assert "Schedule Tournament: webbi vs herchu" in text
    assert "Division: E - Round 5 - Duelo 17" in text


def test_picker():
    picker = DateTimePicker(SESSION, initial=WHEN)

    fragments = render_picker(picker)
    text = text_of(fragments)

    assert "Timezone: UTC-03:00 (UTC-3)" in text
    assert "Selected: Saturday, September 6, 2025 at 9:30 PM (UTC-3)" in text
    assert ("class:focused", " 2025-09-06 ") in fragments
    assert ("", " 21:30 ") in fragments


def test_confirmation():
    text = text_of(render_confirmation(ConfirmationModel(SESSION.with_datetime(WHEN))))

    assert "Championship: Division E - 1era Temporada" in text
    assert "Tournament:   1 Fecha - Duelo 15 - herchu vs Lord Trooper" in text
    assert "Players:      herchu vs Lord Trooper" in text
    assert "Date & Time:  Saturday, September 6, 2025 at 9:30 PM" in text
    assert "Press Enter to create tournament" in text
