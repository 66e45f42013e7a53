"""Date and time selection for a new tournament."""

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

from datetime import date, datetime, time, timedelta, tzinfo
from enum import Enum
from typing import List, Optional

from dateutil import tz
from dateutil.relativedelta import relativedelta

from carcamanager.bga.models import default_tournament_time
from carcamanager.constants import BGA_DATE_FORMAT, BGA_TIME_FORMAT
from carcamanager.controllers.events import (
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_PAGE_DOWN,
    KEY_PAGE_UP,
    KEY_RIGHT,
    KEY_SPACE,
    KEY_TAB,
    KEY_UP,
    DateTimeSelected,
    Effect,
    Emit,
    PickerCanceled,
)
from carcamanager.models.session import WizardSession
from carcamanager.type_hints import KeyName

TIME_STEP = timedelta(minutes=15)
TIME_COARSE_STEP = timedelta(hours=1)
MINUTES_PER_DAY = 24 * 60

SWITCH_KEYS = (KEY_LEFT, KEY_RIGHT, KEY_TAB, KEY_SPACE)


class PickerField(Enum):
    DATE = "date"
    TIME = "time"


class DateTimePicker:
    """Two-field date/time picker.

    The date field is focused first. The first Enter commits the date and
    moves to the time field, even when the time field already has focus;
    only an Enter after that yields the final value. Going back to the date
    field uncommits it, so confirming always takes two presses. The time field
    wraps within the day and never changes the date.

    Attributes
    ----------
    session : WizardSession
        Match being scheduled.
    focus : PickerField
        Field receiving ↑/↓ and PgUp/PgDown.
    date_committed : bool
        Whether the date was confirmed since the date field last had focus.
    """

    def __init__(
        self,
        session: WizardSession,
        initial: Optional[datetime] = None,
        timezone: Optional[tzinfo] = None,
    ):
        self.session = session
        self.timezone = timezone or (initial.tzinfo if initial else None) or tz.tzlocal()
        start = initial or default_tournament_time(datetime.now(self.timezone))
        self._date: date = start.date()
        self._minutes = start.hour * 60 + start.minute
        self.focus = PickerField.DATE
        self.date_committed = False

    @property
    def value(self) -> datetime:
        hours, minutes = divmod(self._minutes, 60)
        return datetime.combine(self._date, time(hours, minutes), tzinfo=self.timezone)

    @property
    def date_label(self) -> str:
        return self._date.strftime(BGA_DATE_FORMAT)

    @property
    def time_label(self) -> str:
        return self.value.strftime(BGA_TIME_FORMAT)

    @property
    def timezone_name(self) -> str:
        return self.value.tzname() or ""

    def _shift_date(self, delta: relativedelta) -> None:
        self._date = self._date + delta

    def _shift_time(self, delta: timedelta) -> None:
        step = int(delta.total_seconds() // 60)
        self._minutes = (self._minutes + step) % MINUTES_PER_DAY

    def _step(self, direction: int, coarse: bool) -> None:
        if self.focus is PickerField.DATE:
            delta = relativedelta(months=1) if coarse else relativedelta(days=1)
            self._shift_date(delta * direction)
        else:
            self._shift_time((TIME_COARSE_STEP if coarse else TIME_STEP) * direction)

    def toggle_focus(self) -> None:
        if self.focus is PickerField.DATE:
            self.focus = PickerField.TIME
        else:
            self.focus = PickerField.DATE
            self.date_committed = False

    def handle_key(self, key: KeyName) -> List[Effect]:
        if key == KEY_ESCAPE:
            return [Emit(PickerCanceled())]
        if key == KEY_ENTER:
            if not self.date_committed:
                self.date_committed = True
                self.focus = PickerField.TIME
                return []
            return [Emit(DateTimeSelected(self.value))]

        if key == KEY_UP:
            self._step(1, coarse=False)
        elif key == KEY_DOWN:
            self._step(-1, coarse=False)
        elif key == KEY_PAGE_UP:
            self._step(1, coarse=True)
        elif key == KEY_PAGE_DOWN:
            self._step(-1, coarse=True)
        elif key in SWITCH_KEYS:
            self.toggle_focus()
        return []
