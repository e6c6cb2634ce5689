"""Rating-based seeding shared by the pairing systems."""

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

from typing import List, Sequence

from chesspairing.models.pairing import PairingResult
from chesspairing.models.player import Player
from chesspairing.type_hints import PlayerPair


def sort_by_rating(players: Sequence[Player]) -> List[Player]:
    """Sort by rating descending; equal ratings keep their input order."""
    return sorted(players, key=lambda p: -p.rating)


def pair_consecutively(players: Sequence[Player]) -> List[PlayerPair]:
    """Pair 1v2, 3v4, ... ; a trailing odd player is left out."""
    return [(players[i], players[i + 1]) for i in range(0, len(players) - 1, 2)]


def pair_by_rating(players: Sequence[Player]) -> PairingResult:
    """Pair players of nearly equal strength.

    Players are sorted by rating, the lowest-rated player sits out with a bye
    when the count is odd, and the rest are paired 1v2, 3v4, ...
    """
    ordered = sort_by_rating(players)
    bye_player = ordered.pop() if len(ordered) % 2 == 1 else None
    return PairingResult(pairings=pair_consecutively(ordered), bye_player=bye_player)
