"""Example script demonstrating the three pairing systems.

This script drives small Swiss, round robin and knockout events through the
``Tournament`` API and prints the pairings and standings.
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

import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from chesspairing import Tournament
from chesspairing.exceptions import ChampionDecidedException, TournamentCompleteException
from chesspairing.utils.export import export_shortlist_csv
from chesspairing.utils.player_input import parse_player_input

PLAYERS = "Alice 2100, Bob 1950, Carol Ann 1800, Dave 1720, Erin 1650, Frank"


def print_standings(tournament):
    for entry in tournament.standings():
        flag = " (out)" if entry.is_eliminated else ""
        print(f"  {entry.rank:>2}. {entry.player_id:12} {entry.score:>4.1f}{flag}")


def example_swiss():
    """Example: three Swiss rounds where the higher-rated player always wins."""

    print("\n" + "=" * 70)
    print("EXAMPLE 1: Swiss")
    print("=" * 70 + "\n")

    tournament = Tournament(name="Club Swiss", pairing_system="swiss")
    tournament.register(parse_player_input(PLAYERS))

    for _ in range(3):
        pairings = tournament.generate_pairings()
        print(f"Round {tournament.current_round}:")
        for pairing in pairings:
            print(f"  {pairing}")
            if pairing.is_bye:
                tournament.record_round_result(pairing.round_number, pairing.player1_id, None, None)
            else:
                p1 = tournament.get_player(pairing.player1_id)
                p2 = tournament.get_player(pairing.player2_id)
                result = "1-0" if p1.rating >= p2.rating else "0-1"
                tournament.record_round_result(pairing.round_number, p1.id, p2.id, result)

    print("\nStandings:")
    print_standings(tournament)
    print("\nShortlist CSV:\n")
    print(export_shortlist_csv(tournament.standings()))


def example_round_robin():
    """Example: full round robin schedule with all games drawn."""

    print("\n" + "=" * 70)
    print("EXAMPLE 2: Round Robin")
    print("=" * 70 + "\n")

    tournament = Tournament(name="Club Round Robin", pairing_system="round-robin")
    tournament.register(["Alice", "Bob", "Carol", "Dave", "Erin"])

    while True:
        try:
            pairings = tournament.generate_pairings()
        except TournamentCompleteException as e:
            print(e)
            break
        print(f"Round {tournament.current_round}: " + ", ".join(str(p) for p in pairings))
        for pairing in pairings:
            tournament.record_round_result(
                pairing.round_number, pairing.player1_id, pairing.player2_id, "0.5-0.5"
            )

    print("\nStandings:")
    print_standings(tournament)


def example_knockout():
    """Example: knockout won by the top seed."""

    print("\n" + "=" * 70)
    print("EXAMPLE 3: Knockout")
    print("=" * 70 + "\n")

    tournament = Tournament(name="Club Knockout", pairing_system="knockout")
    tournament.register(parse_player_input(PLAYERS))

    while True:
        try:
            pairings = tournament.generate_pairings()
        except ChampionDecidedException as e:
            print(f"Champion: {e.winner_id}")
            break
        print(f"Round {tournament.current_round}: " + ", ".join(str(p) for p in pairings))
        for pairing in pairings:
            if pairing.is_bye:
                continue
            p1 = tournament.get_player(pairing.player1_id)
            p2 = tournament.get_player(pairing.player2_id)
            winner = p1 if p1.rating >= p2.rating else p2
            tournament.record_knockout_result(pairing.round_number, p1.id, p2.id, winner.id)

    print("\nStandings:")
    print_standings(tournament)


if __name__ == "__main__":
    example_swiss()
    example_round_robin()
    example_knockout()
