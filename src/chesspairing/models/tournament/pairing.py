"""A single pairing within a round."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from chesspairing.exceptions import DuplicateResultException


@dataclass
class Pairing:
    """One game (or bye) of a round.

    Attributes
    ----------
    round_number : int
        Round the pairing belongs to (1-indexed).
    player1_id : str
        First player; the bye recipient for a bye.
    player2_id : str or None
        Second player, ``None`` for a bye.
    is_bye : bool
        Whether this pairing is a bye.
    is_knockout : bool
        Whether the outcome is reported as a winner (knockout) rather than a
        result string.
    result_recorded : bool
        Set once the outcome is known; outcome fields are frozen afterwards.
    result : str or None
        Result string for Swiss and round-robin pairings ("1-0", "0.5-0.5").
    winner_id : str or None
        Winner for knockout pairings.
    """

    round_number: int
    player1_id: str
    player2_id: Optional[str] = None
    is_bye: bool = False
    is_knockout: bool = False
    result_recorded: bool = False
    result: Optional[str] = None
    winner_id: Optional[str] = None

    @property
    def is_resolved(self) -> bool:
        """A pairing no longer blocks the next knockout round."""
        return self.result_recorded or self.is_bye

    def matches(self, player1_id: str, player2_id: Optional[str]) -> bool:
        """Check whether the pairing is the one reported by a caller.

        A bye pairing matches any falsy ``player2_id``.
        """
        if self.player1_id != player1_id:
            return False
        if self.is_bye:
            return not player2_id
        return self.player2_id == player2_id

    def involves(self, player_id: str) -> bool:
        """Check whether ``player_id`` plays in this pairing."""
        return player_id in (self.player1_id, self.player2_id)

    def opponent_of(self, player_id: str) -> Optional[str]:
        """Return the other player's id, or None for a bye."""
        if player_id == self.player1_id:
            return self.player2_id
        if player_id == self.player2_id:
            return self.player1_id
        return None

    def mark_recorded(
        self, result: Optional[str] = None, winner_id: Optional[str] = None
    ) -> None:
        """Freeze the outcome of this pairing.

        Raises:
            DuplicateResultException: If the outcome was already recorded
        """
        if self.result_recorded:
            raise DuplicateResultException(
                f"Result already recorded for {self.player1_id} vs "
                f"{self.player2_id or 'BYE'} in round {self.round_number}"
            )
        self.result = result
        self.winner_id = winner_id
        self.result_recorded = True

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        return {
            "round": self.round_number,
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "bye": self.is_bye,
            "knockout": self.is_knockout,
            "result_recorded": self.result_recorded,
            "result": self.result,
            "winner_id": self.winner_id,
        }

    def __str__(self) -> str:
        if self.is_bye:
            return f"{self.player1_id} - BYE"
        return f"{self.player1_id} vs {self.player2_id}"
