"""Interactive command-line interface for Chess Pairing.

Runs a tournament from the terminal: register players, generate rounds,
record results and export the standings shortlist.
"""

# Chess Pairing
# Copyright (C) 2025  Chess Pairing developers
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
import sys
from pathlib import Path
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from chesspairing.cli.shell import COMMANDS, Colors, TournamentShell
from chesspairing.constants import (
    DEFAULT_PAIRING_SYSTEM,
    DEFAULT_TOURNAMENT_NAME,
    PAIRING_SYSTEMS,
    SORT_KEYS,
)
from chesspairing.tournament import Tournament
from chesspairing.utils import set_log_level, setup_logger
from chesspairing.utils.player_input import parse_player_input

logger = setup_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def print_banner(tournament: Tournament) -> None:
    """Print the application banner."""
    banner = f"""
{Colors.OKBLUE}╔═══════════════════════════════════════════════════════════════╗
║                                                               ║
║                     CHESS PAIRING - CLI                       ║
║                                                               ║
║            [Swiss, round robin and knockout pairing]          ║
║                                                               ║
╚═══════════════════════════════════════════════════════════════╝{Colors.ENDC}

Tournament: {Colors.BOLD}{tournament.name}{Colors.ENDC} ({tournament.pairing_system}), {len(tournament.players)} players
Type {Colors.BOLD}help{Colors.ENDC} to see all available commands
Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave
"""
    print(banner)


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    completions = {}
    for cmd, info in COMMANDS.items():
        options = [opt for opt in info["options"] if opt.startswith("--")]
        if cmd == "generate":
            options += list(PAIRING_SYSTEMS)
        elif cmd == "standings":
            options += list(SORT_KEYS)
        elif cmd == "help":
            options += list(COMMANDS)
        completions[cmd] = WordCompleter(options) if options else None

    return NestedCompleter.from_nested_dict(completions)


def run_interactive_mode(shell: TournamentShell) -> int:
    """Run in interactive mode with autocomplete."""
    print_banner(shell.tournament)

    style = Style.from_dict(
        {
            "prompt": "#00aa00 bold",
        }
    )

    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )

    while True:
        try:
            user_input = session.prompt("chess-pairing> ")
            if not shell.execute(user_input):
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break
        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break
    return 0


def create_main_parser() -> argparse.ArgumentParser:
    """Create the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="chess-pairing",
        description="Swiss, round robin and knockout tournament pairing",
    )
    parser.add_argument(
        "--players-file",
        type=Path,
        help="Text file with one 'Name [rating]' entry per line",
    )
    parser.add_argument(
        "--system",
        choices=PAIRING_SYSTEMS,
        default=DEFAULT_PAIRING_SYSTEM,
        help=f"Pairing system (default: {DEFAULT_PAIRING_SYSTEM})",
    )
    parser.add_argument("--name", default=DEFAULT_TOURNAMENT_NAME, help="Tournament name")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging verbosity (default: CHESS_PAIRING_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        dest="commands",
        metavar="COMMAND",
        help="Run a shell command and exit instead of starting the prompt (repeatable)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the chess-pairing CLI."""
    args = create_main_parser().parse_args(argv)

    if args.log_level:
        set_log_level(args.log_level)

    tournament = Tournament(name=args.name, pairing_system=args.system)

    if args.players_file:
        try:
            text = args.players_file.read_text(encoding="utf-8-sig")
        except OSError as e:
            print(f"{Colors.FAIL}Cannot read {args.players_file}: {e}{Colors.ENDC}")
            return 1
        added = tournament.register(parse_player_input(text))
        logger.info(f"Loaded {added} players from {args.players_file}")

    shell = TournamentShell(tournament)

    if args.commands:
        for command in args.commands:
            if not shell.execute(command):
                break
        return 0

    return run_interactive_mode(shell)


if __name__ == "__main__":
    sys.exit(main())
