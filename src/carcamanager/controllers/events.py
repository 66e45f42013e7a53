"""Events delivered to the screen controllers and the effects they request.

Controllers are reducers: they take one event, update their own state, and
return a list of effects for the event loop to carry out. Nothing in a
controller blocks or touches the terminal.
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

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any, Callable, List

from carcamanager.type_hints import KeyName

if TYPE_CHECKING:
    from carcamanager.controllers.submission import SubmissionResult
    from carcamanager.fixtures.parser import FixtureEntry

# Key names, as produced by the terminal front end
KEY_UP = "up"
KEY_DOWN = "down"
KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_PAGE_UP = "pageup"
KEY_PAGE_DOWN = "pagedown"
KEY_ENTER = "enter"
KEY_ESCAPE = "escape"
KEY_TAB = "tab"
KEY_SPACE = "space"
KEY_CTRL_C = "c-c"


class Event:
    """Base class of everything a controller can be asked to handle."""


@dataclass(frozen=True)
class KeyPressed(Event):
    key: KeyName


@dataclass(frozen=True)
class ClearStatus(Event):
    """Clear the status notice, but only if it is still the one numbered ``token``."""

    token: int


@dataclass(frozen=True)
class DateTimeSelected(Event):
    value: datetime


@dataclass(frozen=True)
class PickerCanceled(Event):
    pass


@dataclass(frozen=True)
class Confirmed(Event):
    pass


@dataclass(frozen=True)
class EditRequested(Event):
    pass


@dataclass(frozen=True)
class ConfirmationCanceled(Event):
    pass


@dataclass(frozen=True)
class SubmissionFinished(Event):
    result: "SubmissionResult"


@dataclass(frozen=True)
class BackToMenu(Event):
    pass


@dataclass(frozen=True)
class ViewFixtureSelected(Event):
    pass


@dataclass(frozen=True)
class DivisionSelected(Event):
    entry: "FixtureEntry"


class Effect:
    """Base class of the work a controller hands back to the event loop."""


@dataclass(frozen=True)
class Deferred(Effect):
    """Run ``work`` off the event loop; its return value is the next event."""

    work: Callable[[], Event]


@dataclass(frozen=True)
class Schedule(Effect):
    """Post ``event`` after ``delay`` seconds."""

    delay: float
    event: Event


@dataclass(frozen=True)
class Emit(Effect):
    """Handle ``event`` immediately, before the next input."""

    event: Event


@dataclass(frozen=True)
class Quit(Effect):
    pass


def drain(handler: Callable[[Event], List[Effect]], event: Event) -> List[Effect]:
    """Feed ``event`` to ``handler`` and resolve any :class:`Emit` effects.

    Returns:
        The effects that must be carried out by the event loop
    """
    pending: List[Any] = [event]
    external: List[Effect] = []
    while pending:
        for effect in handler(pending.pop(0)):
            if isinstance(effect, Emit):
                pending.append(effect.event)
            else:
                external.append(effect)
    return external
