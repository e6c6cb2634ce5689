"""Command interpreter behind the interactive Chess Pairing shell.

Each line typed at the prompt is handled by :meth:`TournamentShell.execute`,
which keeps the prompt loop itself free of tournament logic and lets the
commands be driven from tests or from ``--command`` on the command line.
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
import shlex
from typing import Callable, Dict, List, Optional

from chesspairing.constants import (
    DEFAULT_SORT_KEY,
    PAIRING_SYSTEMS,
    SORT_KEYS,
    SYSTEM_KNOCKOUT,
)
from chesspairing.exceptions import ChampionDecidedException, ChessPairingException
from chesspairing.models.tournament import Pairing
from chesspairing.tournament import Tournament
from chesspairing.utils import format_score, setup_logger
from chesspairing.utils.export import write_shortlist_csv
from chesspairing.utils.player_input import (
    generate_numbered_players,
    is_player_count,
    parse_player_input,
)
from chesspairing.utils.validation import validate_result_strict

logger = setup_logger(__name__)

# Typed in place of the second player of a bye pairing
BYE_TOKENS = ("BYE", "-")
EXIT_COMMANDS = ("exit", "quit", "q")


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Command definitions with descriptions and options
COMMANDS: Dict[str, Dict] = {
    "add": {
        "description": "Register players from a list",
        "options": {
            "<players>": "Comma separated entries: 'Alice 1800, Bob, Carol Ann 1650'",
        },
    },
    "random": {
        "description": "Register numbered test players (Player1, Player2, ...)",
        "options": {
            "<count>": "How many players (default: 100, max: 10000)",
            "<players>": "Or a player list, handled like 'add'",
        },
    },
    "clear": {"description": "Remove all players and rounds", "options": {}},
    "generate": {
        "description": "Generate pairings for the next round",
        "options": {
            "--system": "swiss, round-robin or knockout (default: tournament system)",
        },
    },
    "result": {
        "description": "Record a Swiss or round-robin result",
        "options": {
            "<round>": "Round number",
            "<player1>": "First player (quote names with spaces)",
            "<player2>": "Second player, or BYE",
            "<result>": "1-0, 0-1 or 0.5-0.5 (omit for a bye)",
        },
    },
    "winner": {
        "description": "Record the winner of a knockout pairing",
        "options": {
            "<round>": "Round number",
            "<player1>": "First player",
            "<player2>": "Second player, or BYE",
            "<winner>": "Winning player",
        },
    },
    "pairings": {
        "description": "Show the pairings of a round",
        "options": {"<round>": "Round number (default: latest)"},
    },
    "standings": {
        "description": "Show the standings table",
        "options": {"--sort": "score, rating or name (default: score)"},
    },
    "export": {
        "description": "Write the standings shortlist as CSV",
        "options": {
            "<path>": "File or directory (default: dated file in current directory)",
            "--knockout": "Only players still in contention",
        },
    },
    "reset": {
        "description": "Restart the tournament keeping the players",
        "options": {},
    },
    "help": {
        "description": "Show help for specific command",
        "options": {"<command>": "Command name to get help for"},
    },
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


def _player_or_bye(value: str) -> Optional[str]:
    return None if value.upper() in BYE_TOKENS else value


def create_generate_parser() -> argparse.ArgumentParser:
    """Create parser for generate command."""
    parser = argparse.ArgumentParser(prog="generate", description="Generate pairings")
    parser.add_argument("system", nargs="?", choices=PAIRING_SYSTEMS)
    parser.add_argument("--system", dest="system_option", choices=PAIRING_SYSTEMS)
    return parser


def create_result_parser() -> argparse.ArgumentParser:
    """Create parser for result command."""
    parser = argparse.ArgumentParser(prog="result", description="Record a result")
    parser.add_argument("round", type=int)
    parser.add_argument("player1")
    parser.add_argument("player2", type=_player_or_bye)
    parser.add_argument("result", nargs="?")
    return parser


def create_winner_parser() -> argparse.ArgumentParser:
    """Create parser for winner command."""
    parser = argparse.ArgumentParser(prog="winner", description="Record a knockout winner")
    parser.add_argument("round", type=int)
    parser.add_argument("player1")
    parser.add_argument("player2", type=_player_or_bye)
    parser.add_argument("winner", nargs="?")
    return parser


def create_pairings_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pairings", description="Show pairings")
    parser.add_argument("round", type=int, nargs="?")
    return parser


def create_standings_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="standings", description="Show standings")
    parser.add_argument("--sort", choices=SORT_KEYS, default=DEFAULT_SORT_KEY)
    return parser


def create_export_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="export", description="Export shortlist")
    parser.add_argument("path", nargs="?", default=".")
    parser.add_argument("--knockout", action="store_true", default=None)
    return parser


def print_commands_list() -> None:
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:15}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str) -> None:
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")

    if cmd_info["options"]:
        print(f"{Colors.BOLD}Options:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:20}{Colors.ENDC} {description}")
    print()


class TournamentShell:
    """Runs shell commands against a single tournament."""

    def __init__(self, tournament: Optional[Tournament] = None) -> None:
        self.tournament = tournament or Tournament()
        self._handlers: Dict[str, Callable[[str], None]] = {
            "add": self.do_add,
            "random": self.do_random,
            "clear": self.do_clear,
            "generate": self.do_generate,
            "result": self.do_result,
            "winner": self.do_winner,
            "pairings": self.do_pairings,
            "standings": self.do_standings,
            "export": self.do_export,
            "reset": self.do_reset,
            "help": self.do_help,
        }

    def execute(self, line: str) -> bool:
        """Run one command line.

        Returns:
            False when the shell should exit, True otherwise
        """
        line = line.strip()
        if not line:
            return True

        command, _, rest = line.partition(" ")
        command = command.lstrip("/").lower()
        rest = rest.strip()

        if command in EXIT_COMMANDS:
            return False
        if command == "?":
            command = "help"

        handler = self._handlers.get(command)
        if handler is None:
            print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
            print(f"Type {Colors.BOLD}help{Colors.ENDC} to see available commands")
            return True

        try:
            handler(rest)
        except SystemExit:
            # argparse calls sys.exit on error, usage has been printed
            pass
        except ChampionDecidedException as e:
            print(f"{Colors.OKGREEN}{Colors.BOLD}{e}{Colors.ENDC}")
        except ChessPairingException as e:
            print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        except (ValueError, OSError) as e:
            print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
            logger.debug(f"Command '{command}' failed", exc_info=True)
        return True

    # ========== Players ==========

    def _register(self, candidates: List) -> None:
        added = self.tournament.register(candidates)
        print(
            f"{Colors.OKGREEN}{added} player(s) added{Colors.ENDC}, "
            f"{len(self.tournament.players)} registered"
        )

    def do_add(self, rest: str) -> None:
        candidates = parse_player_input(rest)
        if not candidates:
            print(f"{Colors.WARNING}No players given{Colors.ENDC}")
            return
        self._register(candidates)

    def do_random(self, rest: str) -> None:
        if not rest:
            self._register(generate_numbered_players())
        elif is_player_count(rest):
            self._register(generate_numbered_players(int(rest)))
        else:
            self.do_add(rest)

    def do_clear(self, rest: str) -> None:
        self.tournament.clear()
        print(f"{Colors.OKGREEN}All players and rounds removed{Colors.ENDC}")

    def do_reset(self, rest: str) -> None:
        self.tournament.reset()
        print(
            f"{Colors.OKGREEN}Tournament reset{Colors.ENDC}, "
            f"{len(self.tournament.players)} players kept"
        )

    # ========== Rounds ==========

    def do_generate(self, rest: str) -> None:
        args = create_generate_parser().parse_args(shlex.split(rest))
        pairings = self.tournament.generate_pairings(args.system_option or args.system)
        self._print_pairings(self.tournament.current_round, pairings)

    def do_pairings(self, rest: str) -> None:
        args = create_pairings_parser().parse_args(shlex.split(rest))
        round_number = args.round or self.tournament.current_round
        round_data = self.tournament.get_round(round_number)
        if round_data is None:
            print(f"{Colors.WARNING}No round {round_number}{Colors.ENDC}")
            return
        self._print_pairings(round_number, round_data.pairings)

    def _print_pairings(self, round_number: int, pairings: List[Pairing]) -> None:
        print(f"\n{Colors.BOLD}Round {round_number}{Colors.ENDC}")
        board = 0
        for pairing in pairings:
            if pairing.is_bye:
                line = f"  Bye: {pairing.player1_id}"
            else:
                board += 1
                line = f"  Board {board}: {pairing.player1_id} vs {pairing.player2_id}"
            if pairing.result:
                line += f"  [{pairing.result}]"
            elif pairing.winner_id:
                line += f"  [winner: {pairing.winner_id}]"
            print(line)
        print()

    # ========== Results ==========

    def do_result(self, rest: str) -> None:
        args = create_result_parser().parse_args(shlex.split(rest))
        if args.player2 is not None:
            validate_result_strict(args.result)
        ok = self.tournament.record_round_result(
            args.round, args.player1, args.player2, args.result
        )
        self._report(ok)

    def do_winner(self, rest: str) -> None:
        args = create_winner_parser().parse_args(shlex.split(rest))
        winner = args.winner or args.player1
        ok = self.tournament.record_knockout_result(
            args.round, args.player1, args.player2, winner
        )
        self._report(ok)

    def _report(self, ok: bool) -> None:
        if ok:
            print(f"{Colors.OKGREEN}Result recorded{Colors.ENDC}")
        else:
            print(
                f"{Colors.FAIL}Result not recorded: unknown pairing, already "
                f"reported or wrong round type{Colors.ENDC}"
            )

    # ========== Standings ==========

    def do_standings(self, rest: str) -> None:
        args = create_standings_parser().parse_args(shlex.split(rest))
        standings = self.tournament.standings(args.sort)
        if not standings:
            print(f"{Colors.WARNING}No players registered{Colors.ENDC}")
            return

        print(
            f"\n{Colors.BOLD}{'Rank':>4}  {'Player':24} {'Rating':>7} {'Score':>6} "
            f"{'W':>3} {'L':>3} {'D':>3} {'Games':>5}{Colors.ENDC}"
        )
        for entry in standings:
            status = "  (eliminated)" if entry.is_eliminated else ""
            print(
                f"{entry.rank:>4}  {entry.player_id:24} {entry.rating:>7g} "
                f"{format_score(entry.score):>6} {entry.wins:>3} {entry.losses:>3} "
                f"{entry.draws:>3} {entry.games_played:>5}{status}"
            )
        print()

    def do_export(self, rest: str) -> None:
        args = create_export_parser().parse_args(shlex.split(rest))
        knockout = args.knockout
        if knockout is None:
            knockout = self.tournament.pairing_system == SYSTEM_KNOCKOUT
        standings = self.tournament.standings()
        path = write_shortlist_csv(args.path, standings, knockout=knockout)
        print(f"{Colors.OKGREEN}Shortlist written to {path}{Colors.ENDC}")

    def do_help(self, rest: str) -> None:
        if rest:
            print_command_help(rest.split()[0].lstrip("/"))
        else:
            print_commands_list()
