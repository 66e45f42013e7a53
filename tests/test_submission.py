from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from carcamanager.bga import MockClient, TournamentResponse
from carcamanager.constants import MSG_CREATED, MSG_CREATED_NO_CLIPBOARD
from carcamanager.controllers.submission import (
    SubmissionErrorKind,
    SubmissionOrchestrator,
    SubmissionResult,
)
from carcamanager.credentials import EnvCredentialProvider
from carcamanager.exceptions import TournamentCreationException
from carcamanager.models.session import WizardSession

from conftest import BrokenClipboard

ART = timezone(timedelta(hours=-3))
WHEN = datetime(2025, 9, 10, 21, 0, tzinfo=ART)


@pytest.fixture
def session(division):
    match = division.rounds[2].find_match(17)
    return WizardSession.for_match(division, 2, match).with_datetime(WHEN)


def test_submit_creates_tournament(orchestrator, client, session):
    result = orchestrator.submit(session)

    assert result.success
    assert result.tournament_id == 423762
    assert result.link == "https://boardgamearena.com/tournament?id=423762"
    assert client.username == "organizer"

    config = client.created[0]
    assert config.tournament_name == "5 Fecha - Duelo 17 - webbi vs herchu"
    assert config.championship_name == "Division E - 1era Temporada"
    assert (config.base_date, config.base_time) == ("2025-09-10", "21:00")


def test_submit_reuses_existing_login(orchestrator, client, session):
    orchestrator.submit(session)
    client.fail_login = True

    assert orchestrator.submit(session).tournament_id == 423763


def test_missing_credentials(client, clipboard, session, tmp_path):
    provider = EnvCredentialProvider(tmp_path / ".env", environ={})
    orchestrator = SubmissionOrchestrator(client, provider, clipboard)

    result = orchestrator.submit(session)

    assert not result.success
    assert result.error_kind is SubmissionErrorKind.CREDENTIALS
    assert result.error_message.startswith("Failed to get credentials: BGA_USER and BGA_PASS")
    assert client.created == []


def test_login_refused(orchestrator, client, session):
    client.fail_login = True

    result = orchestrator.submit(session)

    assert result.error_kind is SubmissionErrorKind.AUTHENTICATION
    assert result.error_message == "Login failed: authentication failed: invalid credentials"


def test_network_failure(orchestrator, client, session):
    client.fail_network = True

    result = orchestrator.submit(session)

    assert result.error_kind is SubmissionErrorKind.NETWORK
    assert result.error_message.startswith("Login failed:")


def test_network_failure_after_login(orchestrator, client, session):
    orchestrator.submit(session)
    client.fail_network = True

    result = orchestrator.submit(session)

    assert result.error_kind is SubmissionErrorKind.NETWORK
    assert "connection reset" in result.error_message


def test_server_rejection(orchestrator, client, session):
    client.fail_create = True

    result = orchestrator.submit(session)

    assert result.error_kind is SubmissionErrorKind.CREATION
    assert result.error_message == "tournament creation failed: server error"


def test_validation_failure(orchestrator, client, session):
    result = orchestrator.submit(replace(session, away_player=""))

    assert result.error_kind is SubmissionErrorKind.VALIDATION
    assert result.error_message == "both local and visitor players are required"


def test_api_exception_is_reported(orchestrator, client, session, monkeypatch):
    def refuse(config):
        raise TournamentCreationException("tournament creation failed with status 500: oops")

    monkeypatch.setattr(client, "create_tournament", refuse)
    client.authenticate(orchestrator.credential_provider.get_credentials())

    result = orchestrator.submit(session)

    assert result.error_kind is SubmissionErrorKind.CREATION
    assert "status 500" in result.error_message


def test_unexpected_error_never_escapes(orchestrator, client, session, monkeypatch):
    def explode(config):
        raise RuntimeError("boom")

    monkeypatch.setattr(client, "create_tournament", explode)

    result = orchestrator.submit(session)

    assert result.error_kind is SubmissionErrorKind.CREATION
    assert result.error_message == "boom"


def test_link_is_built_when_response_has_none(orchestrator, client, session, monkeypatch):
    monkeypatch.setattr(
        client,
        "create_tournament",
        lambda config: TournamentResponse(success=True, tournament_id=500),
    )

    result = orchestrator.submit(session)

    assert result.link == "https://boardgamearena.com/tournament?id=500"


def test_settle_records_link_without_marking_played(orchestrator, clipboard, division, session):
    result = orchestrator.submit(session)

    notice = orchestrator.settle(division, result)

    match = division.rounds[2].find_match(17)
    assert notice == MSG_CREATED
    assert match.reference_link == result.link
    assert match.played is False
    assert (match.home_score, match.away_score) == (0, 0)
    assert clipboard.get_data().text == result.link


def test_settle_overwrites_a_previous_link(orchestrator, division):
    match = division.rounds[2].find_match(18)
    session = WizardSession.for_match(division, 2, match).with_datetime(WHEN)

    orchestrator.settle(division, orchestrator.submit(session))

    assert match.reference_link == "https://boardgamearena.com/tournament?id=423762"


def test_settle_with_clipboard_failure(client, credential_provider, division, session):
    orchestrator = SubmissionOrchestrator(client, credential_provider, BrokenClipboard())

    notice = orchestrator.settle(division, orchestrator.submit(session))

    assert notice == MSG_CREATED_NO_CLIPBOARD
    assert division.rounds[2].find_match(17).reference_link.endswith("id=423762")


def test_settle_failure_leaves_division_unchanged(orchestrator, client, division, session):
    client.fail_create = True
    before = division.to_dict()

    notice = orchestrator.settle(division, orchestrator.submit(session))

    assert notice == "Tournament creation failed: tournament creation failed: server error"
    assert division.to_dict() == before


def test_settle_success_without_link(orchestrator, division, session):
    before = division.to_dict()
    result = SubmissionResult(session=session, success=True, tournament_id=0)

    assert orchestrator.settle(division, result) == MSG_CREATED_NO_CLIPBOARD
    assert division.to_dict() == before


def test_settle_for_match_no_longer_in_division(orchestrator, clipboard, division):
    session = WizardSession("E", "a", "b", 2, 5, 99, 99, scheduled_time=WHEN)
    before = division.to_dict()

    notice = orchestrator.settle(division, orchestrator.submit(session))

    assert notice == MSG_CREATED
    assert division.to_dict() == before
