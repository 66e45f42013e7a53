"""Full-screen terminal front end.

Key presses become :class:`KeyPressed` events for :class:`AppModel`. The
effects it returns are carried out on prompt_toolkit's asyncio loop:
deferred work runs in the executor and posts its result back to the loop,
scheduled events are posted after a sleep.
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

import asyncio
from typing import Callable, Dict, Optional, Tuple

from prompt_toolkit.application import Application
from prompt_toolkit.clipboard import Clipboard
from prompt_toolkit.eventloop import run_in_executor_with_context
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl

from carcamanager.controllers.app import AppModel
from carcamanager.controllers.events import (
    KEY_CTRL_C,
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
    Deferred,
    Effect,
    Event,
    KeyPressed,
    Quit,
    Schedule,
)
from carcamanager.tui.views import STYLE, render_app
from carcamanager.utils import setup_logger

logger = setup_logger(__name__)

# Application key name -> prompt_toolkit key
KEY_BINDINGS: Dict[str, Tuple[str, ...]] = {
    KEY_UP: (Keys.Up,),
    KEY_DOWN: (Keys.Down,),
    KEY_LEFT: (Keys.Left,),
    KEY_RIGHT: (Keys.Right,),
    KEY_PAGE_UP: (Keys.PageUp,),
    KEY_PAGE_DOWN: (Keys.PageDown,),
    KEY_ENTER: (Keys.Enter,),
    KEY_ESCAPE: (Keys.Escape,),
    KEY_TAB: (Keys.Tab,),
    KEY_CTRL_C: (Keys.ControlC,),
}

# Seconds to wait for the rest of an escape sequence
ESCAPE_TIMEOUT = 0.05


class TerminalApp:
    """prompt_toolkit application driving an :class:`AppModel`."""

    def __init__(self, model: AppModel, clipboard: Optional[Clipboard] = None):
        self.model = model
        self.control = FormattedTextControl(
            lambda: render_app(self.model), focusable=True, show_cursor=False
        )
        self.application: Application = Application(
            layout=Layout(HSplit([Window(self.control, wrap_lines=False)])),
            key_bindings=self._create_key_bindings(),
            style=STYLE,
            clipboard=clipboard,
            full_screen=True,
        )
        self.application.ttimeoutlen = ESCAPE_TIMEOUT

    def _create_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()

        # Registered first so the named keys below take precedence
        @kb.add(Keys.Any)
        def _typed(event: KeyPressEvent) -> None:
            data = event.data
            if data == " ":
                self.post(KeyPressed(KEY_SPACE))
            elif len(data) == 1 and data.isprintable():
                self.post(KeyPressed(data))

        for name, keys in KEY_BINDINGS.items():
            kb.add(*keys, eager=name == KEY_ESCAPE)(self._key_handler(name))
        return kb

    def _key_handler(self, name: str) -> Callable[[KeyPressEvent], None]:
        def handler(event: KeyPressEvent) -> None:
            self.post(KeyPressed(name))

        return handler

    def post(self, event: Event) -> None:
        """Dispatch ``event`` on the loop thread and redraw."""
        for effect in self.model.dispatch(event):
            self._apply(effect)
        self.application.invalidate()

    def _apply(self, effect: Effect) -> None:
        if isinstance(effect, Deferred):
            self.application.create_background_task(self._run_deferred(effect.work))
        elif isinstance(effect, Schedule):
            self.application.create_background_task(self._post_later(effect))
        elif isinstance(effect, Quit):
            if self.application.is_running:
                self.application.exit()

    async def _run_deferred(self, work: Callable[[], Event]) -> None:
        event = await run_in_executor_with_context(work)
        self.post(event)

    async def _post_later(self, effect: Schedule) -> None:
        await asyncio.sleep(effect.delay)
        self.post(effect.event)

    def run(self) -> None:
        logger.info("Starting terminal UI")
        self.application.run()
        logger.info("Terminal UI closed")
