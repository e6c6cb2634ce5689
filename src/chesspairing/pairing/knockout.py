"""Knockout (single elimination) pairing.

Every round re-seeds the players still in contention by rating rather than
advancing them through fixed bracket slots: 1v2, 3v4, ... with the
lowest-rated player receiving a bye when the field is odd.
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

from typing import List, Sequence

from chesspairing.models.pairing import PairingResult
from chesspairing.models.player import Player
from chesspairing.models.tournament.round_data import RoundData
from chesspairing.pairing.seeding import pair_by_rating


def create_knockout_pairings(active_players: Sequence[Player]) -> PairingResult:
    """Pair the players still in contention by rating."""
    return pair_by_rating(active_players)


def round_winners(round_data: RoundData) -> List[str]:
    """Ids that advance from a round, in pairing order.

    Unresolved byes count as wins for their recipient since they are credited
    automatically before the next round is drawn.
    """
    winners: List[str] = []
    for pairing in round_data.pairings:
        if pairing.winner_id:
            winners.append(pairing.winner_id)
        elif pairing.is_bye and not pairing.result_recorded:
            winners.append(pairing.player1_id)
    return winners
