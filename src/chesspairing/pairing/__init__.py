"""Pairing systems for Chess Pairing.

Each system is a pure function of the current players (and, for round
robin, the round index): nothing here mutates players or the ledger.
"""

from chesspairing.pairing.knockout import create_knockout_pairings, round_winners
from chesspairing.pairing.round_robin import RoundRobin, create_round_robin
from chesspairing.pairing.seeding import pair_by_rating
from chesspairing.pairing.swiss import create_swiss_pairings, select_bye_player

__all__ = [
    "create_swiss_pairings",
    "select_bye_player",
    "RoundRobin",
    "create_round_robin",
    "create_knockout_pairings",
    "round_winners",
    "pair_by_rating",
]
