"""Clipboard access for tournament links.

The rest of the application talks to prompt_toolkit's ``Clipboard``
interface, so tests can hand in an ``InMemoryClipboard``.
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

import pyperclip
from prompt_toolkit.clipboard import Clipboard, ClipboardData
from prompt_toolkit.clipboard.pyperclip import PyperclipClipboard

from carcamanager.utils import setup_logger

logger = setup_logger(__name__)


def create_system_clipboard() -> Clipboard:
    """Clipboard backed by the operating system (via pyperclip)."""
    return PyperclipClipboard()


def copy_to_clipboard(clipboard: Clipboard, text: str) -> bool:
    """Copy ``text`` to ``clipboard``.

    Returns:
        True if the text was stored, False if the clipboard refused it.
        A failed copy is never fatal for the caller.
    """
    try:
        clipboard.set_data(ClipboardData(text))
    except (pyperclip.PyperclipException, OSError) as e:
        logger.warning("Could not copy to clipboard: %s", e)
        return False
    return True


__all__ = ["create_system_clipboard", "copy_to_clipboard"]
