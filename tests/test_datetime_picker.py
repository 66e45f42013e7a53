from datetime import datetime, timedelta, timezone

import pytest

from carcamanager.controllers.datetime_picker import DateTimePicker, PickerField
from carcamanager.controllers.events import (
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_PAGE_DOWN,
    KEY_PAGE_UP,
    KEY_SPACE,
    KEY_TAB,
    KEY_UP,
    DateTimeSelected,
    Emit,
    PickerCanceled,
)
from carcamanager.models.session import WizardSession

ART = timezone(timedelta(hours=-3))
START = datetime(2025, 1, 31, 21, 0, tzinfo=ART)


@pytest.fixture
def session():
    return WizardSession("E", "webbi", "herchu", 2, 5, 17, 17)


@pytest.fixture
def picker(session):
    return DateTimePicker(session, initial=START)


def test_defaults_to_nine_pm_in_the_given_zone(session):
    picker = DateTimePicker(session, timezone=ART)

    assert picker.value.tzinfo is ART
    assert (picker.value.hour, picker.value.minute) == (21, 0)
    assert picker.focus is PickerField.DATE


def test_initial_value_seeds_the_fields(picker):
    assert picker.value == START
    assert picker.date_label == "2025-01-31"
    assert picker.time_label == "21:00"
    assert picker.timezone_name == "UTC-03:00"


def test_confirming_takes_two_enters(picker):
    assert picker.handle_key(KEY_ENTER) == []
    assert picker.date_committed
    assert picker.focus is PickerField.TIME

    assert picker.handle_key(KEY_ENTER) == [Emit(DateTimeSelected(START))]


def test_time_focus_still_needs_two_enters(picker):
    picker.handle_key(KEY_TAB)

    assert picker.handle_key(KEY_ENTER) == []
    assert picker.date_committed
    assert picker.focus is PickerField.TIME

    assert picker.handle_key(KEY_ENTER) == [Emit(DateTimeSelected(START))]


def test_returning_to_date_uncommits_it(picker):
    picker.handle_key(KEY_ENTER)
    picker.handle_key(KEY_LEFT)
    picker.handle_key(KEY_UP)

    assert not picker.date_committed
    assert picker.handle_key(KEY_ENTER) == []
    assert picker.handle_key(KEY_ENTER) == [
        Emit(DateTimeSelected(START + timedelta(days=1)))
    ]


def test_escape_cancels(picker):
    assert picker.handle_key(KEY_ESCAPE) == [Emit(PickerCanceled())]


def test_date_steps_by_day_and_month(picker):
    picker.handle_key(KEY_UP)
    assert picker.date_label == "2025-02-01"

    picker.handle_key(KEY_DOWN)
    picker.handle_key(KEY_PAGE_UP)
    # Month arithmetic clamps to the end of February
    assert picker.date_label == "2025-02-28"

    picker.handle_key(KEY_PAGE_DOWN)
    assert picker.date_label == "2025-01-28"
    assert picker.time_label == "21:00"


def test_time_steps_by_quarter_hour_and_hour(picker):
    picker.handle_key(KEY_TAB)

    picker.handle_key(KEY_UP)
    assert picker.time_label == "21:15"
    picker.handle_key(KEY_PAGE_UP)
    assert picker.time_label == "22:15"
    picker.handle_key(KEY_DOWN)
    picker.handle_key(KEY_PAGE_DOWN)
    assert picker.time_label == "21:00"


def test_time_wraps_without_changing_the_date(picker):
    picker.handle_key(KEY_TAB)
    for _ in range(3):
        picker.handle_key(KEY_PAGE_UP)

    assert picker.time_label == "00:00"
    assert picker.date_label == "2025-01-31"

    picker.handle_key(KEY_DOWN)
    assert picker.time_label == "23:45"
    assert picker.date_label == "2025-01-31"


@pytest.mark.parametrize("key", [KEY_LEFT, KEY_TAB, KEY_SPACE])
def test_switch_keys_toggle_focus(picker, key):
    picker.handle_key(key)
    assert picker.focus is PickerField.TIME

    picker.handle_key(key)
    assert picker.focus is PickerField.DATE


def test_unknown_keys_are_ignored(picker):
    assert picker.handle_key("x") == []
    assert picker.value == START
