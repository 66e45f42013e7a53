from datetime import datetime, timedelta, timezone

import pytest

from carcamanager.constants import (
    MSG_CREATE_HINT,
    MSG_CREATED,
    MSG_CREATION_CANCELED,
    MSG_LINK_COPIED,
    MSG_SUBMISSION_IN_FLIGHT,
)
from carcamanager.controllers.events import (
    KEY_CTRL_C,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_TAB,
    KEY_UP,
    BackToMenu,
    ClearStatus,
    DateTimeSelected,
    Deferred,
    Emit,
    KeyPressed,
    Quit,
    Schedule,
    drain,
)
from carcamanager.controllers.wizard import FixtureWizard, WizardState
from carcamanager.models.fixture import Division, Match, Round

ART = timezone(timedelta(hours=-3))


@pytest.fixture
def wizard(division, orchestrator):
    return FixtureWizard(division, orchestrator)


def press(wizard, *keys):
    effects = []
    for key in keys:
        effects.extend(drain(wizard.handle, KeyPressed(key)))
    return effects


def run_deferred(wizard, effects):
    deferred = [e for e in effects if isinstance(e, Deferred)]
    assert len(deferred) == 1
    return drain(wizard.handle, deferred[0].work())


def open_confirmation(wizard):
    """Select duel 17 (last round, first match) and confirm the default time."""
    press(wizard, KEY_LEFT, "c", KEY_ENTER, KEY_ENTER)
    assert wizard.state is WizardState.CONFIRMING_DETAILS


def test_browsing_keys_move_the_cursor(wizard):
    press(wizard, KEY_RIGHT, KEY_DOWN, KEY_DOWN)
    assert wizard.cursor.position == (1, 2)

    press(wizard, "h", "k")
    assert wizard.cursor.position == (0, 3)

    press(wizard, "l", "j")
    assert wizard.cursor.position == (1, 1)


def test_enter_on_played_match_copies_link(wizard, clipboard):
    effects = press(wizard, KEY_ENTER)

    assert wizard.status == MSG_LINK_COPIED
    assert clipboard.get_data().text == "https://boardgamearena.com/tournament?id=423761"
    assert effects == [Schedule(3.0, ClearStatus(wizard.status_token))]


def test_enter_on_played_match_without_link(orchestrator):
    division = Division("E", [Round(1, matches=[Match(1, "a", "b", played=True)])])
    wizard = FixtureWizard(division, orchestrator)

    assert press(wizard, KEY_ENTER) == []
    assert wizard.status == ""


def test_enter_on_unplayed_match_shows_hint(wizard):
    press(wizard, KEY_LEFT, KEY_ENTER)

    assert wizard.status == MSG_CREATE_HINT
    assert wizard.state is WizardState.BROWSING


def test_create_on_played_match_does_nothing(wizard):
    press(wizard, "c")

    assert wizard.state is WizardState.BROWSING
    assert wizard.session is None


def test_create_opens_picker_for_selected_match(wizard):
    press(wizard, KEY_LEFT, "c")

    assert wizard.state is WizardState.PICKING_DATETIME
    assert wizard.session.match_id == 17
    assert wizard.session.round_number == 5
    assert wizard.picker is not None


def test_successful_creation(wizard, division, client, clipboard):
    before = division.to_dict()
    open_confirmation(wizard)
    scheduled = wizard.session.scheduled_time

    effects = press(wizard, KEY_ENTER)
    assert wizard.state is WizardState.SUBMITTING
    assert wizard.status == "Creating tournament for webbi vs herchu..."

    effects = run_deferred(wizard, effects)

    match = division.rounds[2].find_match(17)
    assert wizard.state is WizardState.SETTLED
    assert wizard.status == MSG_CREATED
    assert effects == [Schedule(3.0, ClearStatus(wizard.status_token))]
    assert wizard.last_result.success
    assert match.reference_link == "https://boardgamearena.com/tournament?id=423762"
    assert match.played is False
    assert clipboard.get_data().text == match.reference_link
    assert client.created[0].base_time == scheduled.strftime("%H:%M")

    # Only the link of duel 17 changed
    before["rounds"][2]["matches"][0]["reference_link"] = match.reference_link
    assert division.to_dict() == before


def test_failed_creation_leaves_division_unchanged(wizard, division, client):
    client.fail_create = True
    before = division.to_dict()
    open_confirmation(wizard)

    run_deferred(wizard, press(wizard, KEY_ENTER))

    assert wizard.state is WizardState.SETTLED
    assert wizard.status.startswith("Tournament creation failed:")
    assert division.to_dict() == before


def test_cancel_from_picker(wizard, division):
    before = division.to_dict()
    press(wizard, KEY_LEFT, "c")

    effects = press(wizard, KEY_ESCAPE)

    assert wizard.state is WizardState.BROWSING
    assert wizard.session is None
    assert wizard.picker is None
    assert wizard.status == MSG_CREATION_CANCELED
    assert effects == [Schedule(2.0, ClearStatus(wizard.status_token))]
    assert division.to_dict() == before


def test_cancel_from_confirmation(wizard, division, client):
    before = division.to_dict()
    open_confirmation(wizard)

    press(wizard, KEY_ESCAPE)

    assert wizard.state is WizardState.BROWSING
    assert wizard.confirmation is None
    assert wizard.status == MSG_CREATION_CANCELED
    assert client.created == []
    assert division.to_dict() == before


def test_single_enter_on_time_field_does_not_confirm(wizard):
    press(wizard, KEY_LEFT, "c", KEY_TAB, KEY_ENTER)

    assert wizard.state is WizardState.PICKING_DATETIME
    assert wizard.session.scheduled_time is None

    press(wizard, KEY_ENTER)
    assert wizard.state is WizardState.CONFIRMING_DETAILS


def test_edit_reopens_picker_with_chosen_time(wizard):
    press(wizard, KEY_LEFT, "c", KEY_TAB, KEY_UP, KEY_ENTER, KEY_ENTER)
    assert wizard.state is WizardState.CONFIRMING_DETAILS
    chosen = wizard.session.scheduled_time
    assert chosen.minute == 15

    press(wizard, "e")

    assert wizard.state is WizardState.PICKING_DATETIME
    assert wizard.picker.value == chosen
    assert wizard.confirmation is None


def test_datetime_from_an_old_picker_is_ignored(wizard):
    drain(wizard.handle, DateTimeSelected(datetime(2025, 9, 6, 21, 0, tzinfo=ART)))

    assert wizard.state is WizardState.BROWSING
    assert wizard.session is None


def test_stale_clear_does_not_remove_newer_notice(wizard):
    first = wizard.set_status("first", 2.0)[0].event
    wizard.set_status("second", 2.0)

    wizard.handle(first)
    assert wizard.status == "second"

    wizard.handle(ClearStatus(wizard.status_token))
    assert wizard.status == ""


def test_timer_from_a_closed_screen_keeps_new_notice(division, orchestrator):
    closed = FixtureWizard(division, orchestrator)
    pending = closed.set_status("old notice", 3.0)[0].event
    fresh = FixtureWizard(division, orchestrator)
    fresh.set_status("fresh notice", 3.0)

    fresh.handle(pending)

    assert fresh.status == "fresh notice"


def test_back_keys_leave_while_browsing(wizard):
    assert wizard.handle(KeyPressed(KEY_ESCAPE)) == [Emit(BackToMenu())]
    assert wizard.handle(KeyPressed("q")) == [Emit(BackToMenu())]


def test_submission_in_flight_blocks_leaving_and_creating(wizard):
    open_confirmation(wizard)
    effects = press(wizard, KEY_ENTER)

    assert press(wizard, KEY_ESCAPE) == [Schedule(2.0, ClearStatus(wizard.status_token))]
    assert wizard.status == MSG_SUBMISSION_IN_FLIGHT
    press(wizard, KEY_RIGHT, "c")
    assert wizard.state is WizardState.SUBMITTING
    assert wizard.session is None

    run_deferred(wizard, effects)
    assert wizard.state is WizardState.SETTLED


def test_settled_returns_to_browsing_on_next_key(wizard):
    open_confirmation(wizard)
    run_deferred(wizard, press(wizard, KEY_ENTER))

    press(wizard, KEY_DOWN)

    assert wizard.state is WizardState.BROWSING
    assert wizard.cursor.position == (2, 1)
    assert wizard.status == MSG_CREATED


def test_ctrl_c_quits_from_every_state(wizard):
    assert press(wizard, KEY_CTRL_C) == [Quit()]
    press(wizard, KEY_LEFT, "c")
    assert press(wizard, KEY_CTRL_C) == [Quit()]


def test_empty_division_is_browsable(orchestrator):
    wizard = FixtureWizard(Division("E"), orchestrator)

    assert press(wizard, KEY_RIGHT, KEY_DOWN, KEY_ENTER, "c") == []
    assert wizard.state is WizardState.BROWSING
