from datetime import datetime, timedelta, timezone

from carcamanager.bga.models import (
    MatchStatus,
    TournamentConfig,
    TournamentResponse,
    TournamentStatus,
    default_tournament_time,
)
from carcamanager.models.fixture import Division, Match, Round
from carcamanager.models.naming import (
    championship_name,
    division_display_name,
    format_display_datetime,
    format_utc_offset,
    tournament_name,
)
from carcamanager.models.session import WizardSession

ART = timezone(timedelta(hours=-3))


def test_championship_and_tournament_names():
    assert championship_name("E") == "Division E - 1era Temporada"
    assert (
        tournament_name(1, 15, "herchu", "Lord Trooper")
        == "1 Fecha - Duelo 15 - herchu vs Lord Trooper"
    )


def test_division_display_name_falls_back_to_code():
    assert division_display_name("O.B") == "Oro B"
    assert division_display_name("X") == "X"


def test_format_utc_offset():
    assert format_utc_offset(datetime(2025, 9, 6, 21, 0, tzinfo=ART)) == "UTC-3"
    india = timezone(timedelta(hours=5, minutes=30))
    assert format_utc_offset(datetime(2025, 9, 6, 21, 0, tzinfo=india)) == "UTC+5:30"
    assert format_utc_offset(datetime(2025, 9, 6, 21, 0)) == "UTC+0"


def test_format_display_datetime():
    moment = datetime(2025, 9, 6, 21, 30, tzinfo=ART)
    assert format_display_datetime(moment) == "Saturday, September 6, 2025 at 9:30 PM"


def test_division_queries():
    division = Division(
        name="E",
        rounds=[
            Round(1, matches=[Match(1, "a", "b", played=True), Match(2, "c", "d")]),
            Round(3, matches=[Match(7, "a", "c")]),
        ],
    )

    assert division.match_count == 3
    assert division.played_count == 1
    assert [m.id for m in division.unplayed_matches()] == [2, 7]
    assert division.find_round(3).matches[0].id == 7
    assert division.find_round(2) is None
    assert division.round_number_of(7) == 3
    assert division.round_number_of(99) == 0


def test_division_dict_round_trip(division):
    assert Division.from_dict(division.to_dict()) == division


def test_session_for_match_uses_header_round_number(division):
    match = division.rounds[2].matches[0]

    session = WizardSession.for_match(division, 2, match)

    assert session.round_index == 2
    assert session.round_number == 5
    assert session.match_number == session.match_id == 17
    assert session.scheduled_time is None
    assert session.championship_name == "Division E - 1era Temporada"
    assert session.tournament_name == "5 Fecha - Duelo 17 - webbi vs herchu"


def test_session_with_datetime_returns_a_copy(division):
    session = WizardSession.for_match(division, 2, division.rounds[2].matches[0])
    when = datetime(2025, 9, 6, 21, 0, tzinfo=ART)

    scheduled = session.with_datetime(when)

    assert scheduled.scheduled_time == when
    assert session.scheduled_time is None


def test_default_tournament_time_is_nine_pm_today():
    now = datetime(2025, 9, 6, 14, 12, 33, tzinfo=ART)

    assert default_tournament_time(now) == datetime(2025, 9, 6, 21, 0, tzinfo=ART)


def test_head_to_head_config():
    when = datetime(2025, 9, 6, 21, 30, tzinfo=ART)

    config = TournamentConfig.head_to_head("E", "herchu", "Lord Trooper", 1, 15, when)

    assert config.championship_name == "Division E - 1era Temporada"
    assert config.tournament_name == "1 Fecha - Duelo 15 - herchu vs Lord Trooper"
    assert (config.base_date, config.base_time) == ("2025-09-06", "21:30")
    assert (config.game_id, config.max_players, config.min_players) == (1, 2, 2)
    assert (config.game_duration, config.matches_count) == (1800, 3)
    assert config.missing_fields() == []


def test_missing_fields():
    config = TournamentConfig("c", "", "2025-09-06", "21:00", local_player="a")

    assert config.missing_fields() == ["visitor_player", "tournament_name"]


def test_tournament_response_from_dict_tolerates_nulls():
    response = TournamentResponse.from_dict(
        {"success": True, "tournament_id": "423762", "link": None, "error": None}
    )

    assert response.success is True
    assert response.tournament_id == 423762
    assert response.link == ""
    assert response.invalid_fields == []


def test_tournament_status_from_dict():
    status = TournamentStatus.from_dict(
        {
            "id": 423762,
            "name": "1 Fecha - Duelo 15 - a vs b",
            "status": "in_progress",
            "players_count": 2,
            "matches": [{"id": 1, "status": "finished", "winner": "a"}],
            "results": {"a": "1", "b": 0},
        }
    )

    assert status.matches == [MatchStatus(id=1, status="finished", winner="a")]
    assert status.results == {"a": 1, "b": 0}
    assert TournamentStatus.from_dict(status.to_dict()) == status
