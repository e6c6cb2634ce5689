"""Standings calculation for tournaments.

This module ranks the registered players by score, rating or name and
produces immutable snapshot rows for display and export.
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

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from chesspairing.constants import SORT_BY_NAME, SORT_BY_RATING, SORT_BY_SCORE
from chesspairing.exceptions import InvalidSortKeyException
from chesspairing.models.player import Player


@dataclass(frozen=True)
class StandingEntry:
    """One row of the standings table."""

    rank: int
    player_id: str
    rating: float
    score: float
    wins: int
    losses: int
    draws: int
    games_played: int
    opponents: Tuple[str, ...]
    has_received_bye: bool
    is_eliminated: bool
    last_result: Optional[str]

    @classmethod
    def from_player(cls, rank: int, player: Player) -> "StandingEntry":
        return cls(
            rank=rank,
            player_id=player.id,
            rating=player.rating,
            score=player.score,
            wins=player.wins,
            losses=player.losses,
            draws=player.draws,
            games_played=player.games_played,
            opponents=tuple(player.opponents),
            has_received_bye=player.has_received_bye,
            is_eliminated=player.is_eliminated,
            last_result=player.last_result,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rank": self.rank,
            "id": self.player_id,
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


class StandingsCalculator:
    """Orders players for the standings table.

    Sorts are stable, so ties keep registration order:

    - ``score``: half-points descending, then rating descending
    - ``rating``: rating descending
    - ``name``: identifier ascending by code point
    """

    SORT_KEYS: Dict[str, Callable[[Player], Any]] = {
        SORT_BY_SCORE: lambda p: (-p.half_points, -p.rating),
        SORT_BY_RATING: lambda p: -p.rating,
        SORT_BY_NAME: lambda p: p.id,
    }

    def sort_players(self, players: Iterable[Player], sort_by: str) -> List[Player]:
        """Return the players ordered by ``sort_by``.

        Raises:
            InvalidSortKeyException: If ``sort_by`` is not a known key
        """
        key = self.SORT_KEYS.get(sort_by)
        if key is None:
            raise InvalidSortKeyException(sort_by)
        return sorted(players, key=key)

    def get_standings(
        self, players: Iterable[Player], sort_by: str = SORT_BY_SCORE
    ) -> List[StandingEntry]:
        """Ranked snapshot rows, rank starting at 1."""
        ordered = self.sort_players(players, sort_by)
        return [
            StandingEntry.from_player(rank, player)
            for rank, player in enumerate(ordered, start=1)
        ]
