"""Exceptions for use in Chess Pairing"""

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

from typing import Optional


# ========== Base Application Exception ==========


class ChessPairingException(Exception):
    """Base exception for all Chess Pairing errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(ChessPairingException):
    """Base exception for pairing-related errors."""

    pass


class InsufficientPlayersException(PairingException):
    """Raised when a round is requested with fewer than two registered players."""

    def __init__(self, player_count: int, minimum: int = 2):
        self.player_count = player_count
        self.minimum = minimum
        super().__init__(
            f"Need at least {minimum} players to generate pairings "
            f"(have {player_count})"
        )


class UnknownPairingSystemException(PairingException):
    """Raised when an unsupported pairing system is requested."""

    def __init__(self, system: str):
        self.system = system
        super().__init__(
            f"Unknown pairing system: {system!r}. "
            "Valid systems: swiss, round-robin, knockout"
        )


# ========== Tournament Exceptions ==========


class TournamentException(ChessPairingException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class IncompleteRoundException(TournamentException):
    """Raised when a knockout round is requested before the previous one is resolved."""

    def __init__(self, round_number: int, unresolved: int):
        self.round_number = round_number
        self.unresolved = unresolved
        super().__init__(
            f"Please record results for all matches in round {round_number} "
            f"before generating the next round ({unresolved} unresolved)"
        )


class TournamentCompleteException(TournamentException):
    """Raised when every round-robin round has already been scheduled."""

    def __init__(self, total_rounds: int):
        self.total_rounds = total_rounds
        super().__init__(
            f"Round-robin tournament complete after {total_rounds} rounds: "
            "all players have played each other"
        )


class ChampionDecidedException(TournamentException):
    """Raised when a knockout has a single player left standing.

    This is terminal: generating another knockout round will raise again.
    """

    def __init__(self, winner_id: str):
        self.winner_id = winner_id
        super().__init__(f"Tournament complete! Winner: {winner_id}")


class EmptyBracketException(TournamentException):
    """Raised when a knockout has no players left in contention."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "No players remaining in tournament")


class InvalidSortKeyException(TournamentException):
    """Raised when standings are requested with an unknown sort key."""

    def __init__(self, sort_by: str):
        self.sort_by = sort_by
        super().__init__(
            f"Unknown sort key: {sort_by!r}. Valid keys: score, rating, name"
        )


# ========== Player Exceptions ==========


class PlayerException(ChessPairingException):
    """Base exception for player-related errors."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when player data is invalid or incomplete."""

    pass


# ========== Result Exceptions ==========


class ResultException(ChessPairingException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result string cannot be parsed (e.g., "2-x")."""

    pass


class DuplicateResultException(ResultException):
    """Raised when attempting to record a result that already exists."""

    pass
