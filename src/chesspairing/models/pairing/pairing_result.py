"""PairingResult data class."""

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

from dataclasses import dataclass, field
from typing import List, Optional

from chesspairing.models.player import Player
from chesspairing.type_hints import PairingIDs, PlayerPair


@dataclass(slots=True)
class PairingResult:
    """Result of a pairing computation for a single round."""

    pairings: List[PlayerPair] = field(default_factory=list)
    bye_player: Optional[Player] = None

    @property
    def pairing_ids(self) -> List[PairingIDs]:
        return [(p1.id, p2.id) for p1, p2 in self.pairings]

    @property
    def bye_player_id(self) -> Optional[str]:
        return self.bye_player.id if self.bye_player else None

    @property
    def seated_ids(self) -> List[str]:
        """Every player id placed this round, bye included."""
        ids = [pid for pair in self.pairing_ids for pid in pair]
        if self.bye_player is not None:
            ids.append(self.bye_player.id)
        return ids


#  LocalWords:  PairingResult
