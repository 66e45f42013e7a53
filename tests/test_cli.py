from carcamanager.cli import create_parser, main

from conftest import BROKEN_FIXTURE, ELITE_FIXTURE


def test_parser_defaults():
    args = create_parser().parse_args([])

    assert args.command is None
    assert not args.mock


def test_summary(capsys):
    assert main(["summary", str(ELITE_FIXTURE), "--limit", "2"]) == 0

    out = capsys.readouterr().out
    assert "Division: Elite" in out
    assert "Rounds: 3" in out
    assert "Matches: 12" in out
    assert "Played: 8" in out
    assert "Unplayed: 4" in out
    assert "  Round 5 - Duelo 17: webbi vs herchu" in out
    assert "  Round 5 - Duelo 18: Academia47 vs maticarrizoc" in out
    assert "  ... and 2 more" in out


def test_summary_of_broken_file(capsys):
    assert main(["summary", str(BROKEN_FIXTURE)]) == 1

    assert "Error: round block 1, line 3:" in capsys.readouterr().err


def test_status_with_mock_client(capsys, tmp_path):
    env_file = tmp_path / ".env"

    code = main(["--mock", "--env-file", str(env_file), "status", "423762"])

    assert code == 1
    assert "tournament not found: 423762" in capsys.readouterr().err


def test_status_with_bad_link(capsys, tmp_path):
    env_file = tmp_path / ".env"

    code = main(["--mock", "--env-file", str(env_file), "status", "https://x/tournament"])

    assert code == 1
    assert "invalid tournament link format" in capsys.readouterr().err
