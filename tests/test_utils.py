import logging

from prompt_toolkit.clipboard import InMemoryClipboard

from carcamanager.controllers.events import Emit, Event, Quit, Schedule, drain
from carcamanager.utils import configure_logging, setup_logger
from carcamanager.utils.clipboard import copy_to_clipboard

from conftest import BrokenClipboard


def test_configure_logging_to_file(tmp_path):
    log_file = tmp_path / "carca.log"

    configure_logging("DEBUG", log_file)
    configure_logging("DEBUG", log_file)
    setup_logger("carcamanager.fixtures.parser").debug("parsed %d rounds", 3)

    handlers = logging.getLogger("carcamanager").handlers
    assert sum(isinstance(h, logging.FileHandler) for h in handlers) == 1
    for handler in handlers:
        handler.flush()
    assert "parsed 3 rounds" in log_file.read_text(encoding="utf-8")


def test_copy_to_clipboard():
    clipboard = InMemoryClipboard()

    assert copy_to_clipboard(clipboard, "https://boardgamearena.com/tournament?id=1")
    assert clipboard.get_data().text.endswith("id=1")
    assert not copy_to_clipboard(BrokenClipboard(), "x")


class Ping(Event):
    pass


class Pong(Event):
    pass


def test_drain_resolves_emitted_events():
    seen = []

    def handler(event):
        seen.append(type(event).__name__)
        if isinstance(event, Ping):
            return [Emit(Pong()), Schedule(1.0, Ping())]
        return [Quit()]

    effects = drain(handler, Ping())

    assert seen == ["Ping", "Pong"]
    assert [type(e) for e in effects] == [Schedule, Quit]
