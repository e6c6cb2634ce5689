"""Round Robin Pairing Implementation (circle method)."""

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

from typing import List, Optional, Sequence, Tuple

from chesspairing.exceptions import InsufficientPlayersException, TournamentCompleteException
from chesspairing.models.pairing import PairingResult
from chesspairing.models.player import Player
from chesspairing.type_hints import PlayerPair


class RoundRobin:
    """Single round-robin schedule built with the circle method.

    One seat is fixed (the anchor) and the others rotate one position per
    round. With an even field the anchor is the first registered player and
    the remaining ``n - 1`` players rotate. With an odd field the anchor is an
    empty bye seat and all ``n`` players rotate, so whoever faces the anchor
    sits out. Either way the ring has an odd length ``m`` and ring slots
    ``i`` and ``m - i`` meet, which makes every pair meet exactly once over
    ``m`` rounds.

    Attributes:
        players: Players in registration order
    """

    def __init__(self, players: Sequence[Player]) -> None:
        if len(players) < 2:
            raise InsufficientPlayersException(len(players))
        self.players: List[Player] = list(players)

    @property
    def has_bye_seat(self) -> bool:
        return len(self.players) % 2 == 1

    @property
    def number_of_rounds(self) -> int:
        """n rounds for an odd field (one bye each), n - 1 for an even field."""
        n = len(self.players)
        return n if n % 2 == 1 else n - 1

    def _anchor_and_ring(self) -> Tuple[Optional[Player], Sequence[Player]]:
        if self.has_bye_seat:
            return None, self.players
        return self.players[0], self.players[1:]

    def get_round_pairings(self, round_index: int) -> PairingResult:
        """Pairings for a 0-indexed round.

        With an odd field the fixed seat is the empty bye seat rather than
        the first player, so the bye moves through the whole field and no
        pair repeats.

        Raises:
            TournamentCompleteException: If every round has been played
        """
        if round_index >= self.number_of_rounds:
            raise TournamentCompleteException(self.number_of_rounds)

        anchor, ring = self._anchor_and_ring()
        size = len(ring)
        rotated = [ring[(i + round_index) % size] for i in range(size)]

        pairings: List[PlayerPair] = []
        bye_player: Optional[Player] = None

        if anchor is None:
            bye_player = rotated[0]
        else:
            pairings.append((anchor, rotated[0]))

        for i in range(1, size // 2 + 1):
            pairings.append((rotated[i], rotated[size - i]))

        return PairingResult(pairings=pairings, bye_player=bye_player)


def create_round_robin(players: Sequence[Player]) -> RoundRobin:
    """Build the round-robin schedule for the current field."""
    return RoundRobin(players)
