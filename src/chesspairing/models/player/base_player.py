"""A player in a tournament."""

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

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from chesspairing.constants import (
    DEFAULT_RATING,
    HALF_POINTS_PER_POINT,
    LAST_RESULT_BYE,
    LAST_RESULT_DRAW,
    LAST_RESULT_LOSS,
    LAST_RESULT_WIN,
    WIN_HALF_POINTS,
)
from chesspairing.type_hints import LastResult
from chesspairing.utils import setup_logger

logger = setup_logger(__name__)


class Player:
    """Represents a player in the tournament.

    Scores are kept on an integer half-point lattice so that score groups can
    be compared for exact equality; :attr:`score` exposes the familiar
    1 / 0.5 / 0 view.

    Attributes:
        id: Unique identifier for the player (trimmed, non-empty)
        rating: Static rating used for seeding and tie-breaking
        half_points: Twice the current tournament score
        wins: Games won (byes count as wins)
        losses: Games lost
        draws: Games drawn
        opponents: Ids of players already met, in order, without duplicates
        has_received_bye: Whether a bye has been assigned to this player
        is_eliminated: Knockout only, whether the player is out of contention
        last_result: Advisory tag of the last outcome
    """

    def __init__(self, player_id: str, rating: Union[int, float] = DEFAULT_RATING) -> None:
        self.id: str = player_id
        self.rating: Union[int, float] = rating

        self.half_points: int = 0
        self.wins: int = 0
        self.losses: int = 0
        self.draws: int = 0
        self.opponents: List[str] = []
        self.has_received_bye: bool = False
        self.is_eliminated: bool = False
        self.last_result: Optional[LastResult] = None

    @property
    def score(self) -> float:
        """Current score (1 per win, 0.5 per draw)."""
        return self.half_points / HALF_POINTS_PER_POINT

    @property
    def games_played(self) -> int:
        """Number of games with a recorded outcome, byes included."""
        return self.wins + self.losses + self.draws

    def has_played(self, opponent_id: str) -> bool:
        """Check whether this player has already met ``opponent_id``."""
        return opponent_id in self.opponents

    def add_opponent(self, opponent_id: str) -> None:
        """Remember an opponent; adding the same id twice is a no-op."""
        if opponent_id not in self.opponents:
            self.opponents.append(opponent_id)

    def add_game_result(
        self, opponent: Player, own_half_points: int, opponent_half_points: int
    ) -> None:
        """Record the outcome of a played game for this player only.

        The caller records the mirror result on the opponent.

        Args:
            opponent: Player faced
            own_half_points: Half-points credited to this player
            opponent_half_points: Half-points credited to the opponent
        """
        self.half_points += own_half_points

        if own_half_points > opponent_half_points:
            self.wins += 1
            self.last_result = LAST_RESULT_WIN
        elif own_half_points < opponent_half_points:
            self.losses += 1
            self.last_result = LAST_RESULT_LOSS
        else:
            self.draws += 1
            self.last_result = LAST_RESULT_DRAW

        self.add_opponent(opponent.id)

    def add_bye_result(self) -> None:
        """Credit a bye: one full point and a win, no opponent."""
        self.half_points += WIN_HALF_POINTS
        self.wins += 1
        self.last_result = LAST_RESULT_BYE
        logger.debug("Player %s credited with a bye", self.id)

    def add_knockout_win(self, opponent: Optional[Player] = None) -> None:
        """Credit a knockout win (or a bye advancing without opponent)."""
        self.half_points += WIN_HALF_POINTS
        self.wins += 1
        if opponent is None:
            self.last_result = LAST_RESULT_BYE
        else:
            self.last_result = LAST_RESULT_WIN
            self.add_opponent(opponent.id)

    def add_knockout_loss(self, opponent: Player) -> None:
        """Record a knockout loss, which eliminates the player."""
        self.losses += 1
        self.is_eliminated = True
        self.last_result = LAST_RESULT_LOSS
        self.add_opponent(opponent.id)

    def reset(self) -> None:
        """Zero every tournament field, keeping identity and rating."""
        self.half_points = 0
        self.wins = 0
        self.losses = 0
        self.draws = 0
        self.opponents = []
        self.has_received_bye = False
        self.is_eliminated = False
        self.last_result = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player data to a plain dictionary.

        Returns:
            Dictionary with the public player fields and the derived score
        """
        return {
            "id": self.id,
            "rating": self.rating,
            "score": self.score,
            "wins": self.wins,
            "losses": self.losses,
            "draws": self.draws,
            "games_played": self.games_played,
            "opponents": list(self.opponents),
            "bye": self.has_received_bye,
            "eliminated": self.is_eliminated,
            "last_result": self.last_result,
        }

    def __repr__(self) -> str:
        return f"Player(id='{self.id}', rating={self.rating}, score={self.score})"

    def __str__(self) -> str:
        return f"{self.id} ({self.rating})"
