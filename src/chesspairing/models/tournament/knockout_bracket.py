"""Knockout bookkeeping: who is still in contention."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Set


@dataclass
class KnockoutBracket:
    """
    Partition of the registered players into active and eliminated.

    The two lists are disjoint and together always hold every registered
    player id.

    Attributes
    ----------
    active_ids : list of str
        Players still in contention, in registration order.
    eliminated_ids : list of str
        Players knocked out, in elimination order.
    """

    active_ids: List[str] = field(default_factory=list)
    eliminated_ids: List[str] = field(default_factory=list)

    def seed(self, player_ids: Iterable[str]) -> None:
        """Start a fresh bracket with everyone active."""
        self.active_ids = list(player_ids)
        self.eliminated_ids = []

    def add_player(self, player_id: str) -> None:
        """Late registrants join the active side."""
        if player_id not in self.active_ids and player_id not in self.eliminated_ids:
            self.active_ids.append(player_id)

    def is_active(self, player_id: str) -> bool:
        return player_id in self.active_ids

    def eliminate(self, player_id: str) -> bool:
        """Move a player from active to eliminated.

        Returns:
            True if the player was active
        """
        if player_id not in self.active_ids:
            return False
        self.active_ids.remove(player_id)
        self.eliminated_ids.append(player_id)
        return True

    def keep_only(self, winner_ids: Set[str]) -> List[str]:
        """Restrict the active side to ``winner_ids``.

        Anyone else still active is moved to the eliminated side.

        Returns:
            Ids that were moved
        """
        dropped = [pid for pid in self.active_ids if pid not in winner_ids]
        for player_id in dropped:
            self.eliminate(player_id)
        return dropped

    def clear(self) -> None:
        self.active_ids = []
        self.eliminated_ids = []

    def to_dict(self) -> Dict[str, Any]:
        return {
            "active": list(self.active_ids),
            "eliminated": list(self.eliminated_ids),
        }
