"""The set of registered players."""

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

from typing import Dict, Iterable, Iterator, List, Optional

from chesspairing.models.player import Player, PlayerFactory
from chesspairing.type_hints import RawCandidate
from chesspairing.utils import setup_logger

logger = setup_logger(__name__)


class PlayerRegistry:
    """Owns the participants and their mutable tournament state.

    Players are kept in registration order, which is the final tie-break of
    every sort in the engine.
    """

    def __init__(self, factory: Optional[PlayerFactory] = None) -> None:
        self.factory = factory or PlayerFactory()
        self.players: Dict[str, Player] = {}

    def register(self, candidates: Iterable[RawCandidate]) -> List[Player]:
        """Add players, silently dropping blank and duplicate identifiers.

        Args:
            candidates: Bare ids, ``(id, rating)`` pairs or candidate objects

        Every candidate is converted before any player is added, so a batch
        containing an unsupported candidate leaves the registry untouched.

        Returns:
            The players actually added, in order

        Raises:
            InvalidPlayerDataException: If a candidate has an unsupported shape
        """
        created = [self.factory.create_player(raw) for raw in candidates]

        added: List[Player] = []
        for player in created:
            if player is None:
                continue
            if player.id in self.players:
                logger.debug("Skipping duplicate player id: %s", player.id)
                continue
            self.players[player.id] = player
            added.append(player)

        if added:
            logger.info(f"Registered {len(added)} player(s), total {len(self.players)}")
        return added

    def get(self, player_id: Optional[str]) -> Optional[Player]:
        if player_id is None:
            return None
        return self.players.get(player_id)

    def get_player_list(self) -> List[Player]:
        """Players in registration order."""
        return list(self.players.values())

    def reset_players(self) -> None:
        """Zero every player's tournament fields, keeping ids and ratings."""
        for player in self.players.values():
            player.reset()

    def clear(self) -> None:
        self.players.clear()

    def __contains__(self, player_id: object) -> bool:
        return player_id in self.players

    def __iter__(self) -> Iterator[Player]:
        return iter(list(self.players.values()))

    def __len__(self) -> int:
        return len(self.players)
