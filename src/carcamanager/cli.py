"""Command line entry point (``carca``)."""

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

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from prompt_toolkit.clipboard import Clipboard

from carcamanager.bga import APIClient, BGAClient, MockClient, extract_tournament_id
from carcamanager.config import AppConfig
from carcamanager.constants import APP_NAME
from carcamanager.controllers.app import AppModel
from carcamanager.controllers.submission import SubmissionOrchestrator
from carcamanager.credentials import (
    CredentialProvider,
    EnvCredentialProvider,
    StaticCredentialProvider,
)
from carcamanager.exceptions import (
    APIException,
    CarcaManagerException,
    CredentialsException,
    FixtureException,
)
from carcamanager.fixtures.parser import parse_fixture_file, summarize_division
from carcamanager.models.naming import division_display_name
from carcamanager.utils import configure_logging, setup_logger
from carcamanager.utils.clipboard import create_system_clipboard

logger = setup_logger(__name__)

MOCK_USERNAME = "organizer"
MOCK_PASSWORD = "mock"


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="carca",
        description=f"{APP_NAME}: browse league fixtures and create "
        "BoardGameArena tournaments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Browse fixtures in ./data and create tournaments
  carca

  # Try the interface without touching BoardGameArena
  carca --mock

  # Print the match counts of one division
  carca summary "data/Liga Argentina - 1° Temporada - E-Fixture.csv"

  # Show the state of a tournament
  carca status https://boardgamearena.com/tournament?id=423761
        """,
    )
    parser.add_argument("--data-dir", help="Directory with *-Fixture.csv files (default: data)")
    parser.add_argument("--env-file", help="File with BGA_USER/BGA_PASS (default: .env)")
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use an in-memory BoardGameArena instead of the real site",
    )
    parser.add_argument("--log-file", help="Log file used by the interface (default: carca.log)")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command")

    summary = subparsers.add_parser("summary", help="Print a fixture summary")
    summary.add_argument("file", help="Fixture CSV file")
    summary.add_argument(
        "--limit",
        type=int,
        default=5,
        help="Matches needing a tournament to list (default: 5)",
    )

    status = subparsers.add_parser("status", help="Print a tournament status")
    status.add_argument("tournament", help="Tournament id or link")

    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    """Configuration from ``CARCA_*`` settings, overridden by CLI flags."""
    config = AppConfig.from_env(args.env_file)
    if args.data_dir:
        config.data_dir = Path(args.data_dir)
    if args.log_file:
        config.log_file = Path(args.log_file)
    if args.mock:
        config.use_mock = True
    if args.verbose:
        config.log_level = "DEBUG"
    return config


def build_client(config: AppConfig) -> APIClient:
    if config.use_mock:
        return MockClient(base_url=config.base_url)
    return BGAClient(base_url=config.base_url, timeout=config.request_timeout)


def build_orchestrator(
    client: APIClient,
    credential_provider: CredentialProvider,
    clipboard: Optional[Clipboard] = None,
) -> SubmissionOrchestrator:
    return SubmissionOrchestrator(
        client, credential_provider, clipboard or create_system_clipboard()
    )


def run_summary(args: argparse.Namespace) -> int:
    try:
        division = parse_fixture_file(args.file)
    except FixtureException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    summary = summarize_division(division, limit=args.limit)
    name = division_display_name(summary.name) if summary.name else Path(args.file).stem
    print(f"Division: {name}")
    print(f"Rounds: {summary.rounds}")
    print(f"Matches: {summary.matches}")
    print(f"Played: {summary.played}")
    print(f"Unplayed: {summary.unplayed}")
    if summary.pending:
        print("\nMatches needing tournaments:")
        for match_id, home, away, round_number in summary.pending:
            print(f"  Round {round_number} - Duelo {match_id}: {home} vs {away}")
        if summary.more_pending:
            print(f"  ... and {summary.more_pending} more")
    return 0


def run_status(
    args: argparse.Namespace, config: AppConfig, credential_provider: CredentialProvider
) -> int:
    try:
        tournament_id = extract_tournament_id(args.tournament)
        client = build_client(config)
        client.authenticate(credential_provider.get_credentials(allow_prompt=True))
        status = client.get_tournament_status(tournament_id)
    except (APIException, CredentialsException) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Tournament {status.id}: {status.name}")
    print(f"Status: {status.status}")
    print(f"Players: {status.players_count}")
    for match in status.matches:
        line = (
            f"  Game {match.id}: {match.home_player} {match.home_score}-"
            f"{match.away_score} {match.away_player} ({match.status})"
        )
        if match.winner:
            line += f", winner {match.winner}"
        print(line)
    for player, wins in status.results.items():
        print(f"  {player}: {wins}")
    return 0


def run_tui(config: AppConfig, credential_provider: CredentialProvider) -> int:
    # Ask for missing credentials now; the full-screen UI cannot prompt
    if not config.use_mock:
        try:
            credential_provider.get_credentials(allow_prompt=True)
        except CredentialsException as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    # Imported late so the summary and status commands work without a terminal
    from carcamanager.tui.runner import TerminalApp

    clipboard = create_system_clipboard()
    orchestrator = build_orchestrator(build_client(config), credential_provider, clipboard)
    TerminalApp(AppModel(config, orchestrator), clipboard=clipboard).run()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except CarcaManagerException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command is None:
        configure_logging(config.log_level, config.log_file)
    else:
        configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    credential_provider: CredentialProvider
    if config.use_mock:
        credential_provider = StaticCredentialProvider(MOCK_USERNAME, MOCK_PASSWORD)
    else:
        credential_provider = EnvCredentialProvider(config.env_file, save_prompted=True)

    try:
        if args.command == "summary":
            return run_summary(args)
        if args.command == "status":
            return run_status(args, config, credential_provider)
        return run_tui(config, credential_provider)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
