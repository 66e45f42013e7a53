import logging
from pathlib import Path

import pytest
from prompt_toolkit.clipboard import InMemoryClipboard

from carcamanager.bga import MockClient
from carcamanager.controllers.submission import SubmissionOrchestrator
from carcamanager.credentials import StaticCredentialProvider
from carcamanager.fixtures import parse_fixture_file

DATA_DIR = Path(__file__).parent / "data"
ELITE_FIXTURE = DATA_DIR / "Liga Argentina - 1° Temporada - E-Fixture.csv"
BROKEN_FIXTURE = DATA_DIR / "Liga Argentina - 1° Temporada - P.A-Fixture.csv"


class BrokenClipboard(InMemoryClipboard):
    """Clipboard that refuses every copy, like a headless session."""

    def set_data(self, data):
        raise OSError("no clipboard available")


@pytest.fixture
def division():
    return parse_fixture_file(ELITE_FIXTURE)


@pytest.fixture
def client():
    return MockClient()


@pytest.fixture
def clipboard():
    return InMemoryClipboard()


@pytest.fixture
def credential_provider():
    return StaticCredentialProvider("organizer", "secret")


@pytest.fixture
def orchestrator(client, credential_provider, clipboard):
    return SubmissionOrchestrator(client, credential_provider, clipboard)


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    package_logger = logging.getLogger("carcamanager")
    for handler in list(package_logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)
            handler.close()
