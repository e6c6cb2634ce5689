"""Swiss System Pairing Implementation.

Round 1 pairs by rating (1v2, 3v4, ...). From round 2 on, players are paired
within score groups, highest group first, with odd groups floating their
lowest-rated member down into the next group.
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

from typing import Dict, List, Optional, Sequence

from chesspairing.models.pairing import PairingResult
from chesspairing.models.player import Player
from chesspairing.pairing.seeding import pair_by_rating, pair_consecutively, sort_by_rating
from chesspairing.type_hints import PlayerPair
from chesspairing.utils import setup_logger

logger = setup_logger(__name__)


def _sort_players_for_pairing(players: Sequence[Player]) -> List[Player]:
    """Sort players by score desc, then rating desc (stable)."""
    return sorted(players, key=lambda p: (-p.half_points, -p.rating))


def select_bye_player(ordered: Sequence[Player]) -> Optional[Player]:
    """Pick the bye recipient from a score/rating ordered field.

    Scans from the bottom for the first player without a bye. If everyone has
    already had one, the last player gets a second bye.
    """
    if not ordered:
        return None

    for player in reversed(ordered):
        if not player.has_received_bye:
            return player

    logger.warning(
        "All players have already received a bye. "
        f"Assigning second bye to {ordered[-1].id} as last resort."
    )
    return ordered[-1]


def group_by_score(players: Sequence[Player]) -> Dict[int, List[Player]]:
    """Partition players into score groups keyed by half-points."""
    groups: Dict[int, List[Player]] = {}
    for player in players:
        groups.setdefault(player.half_points, []).append(player)
    return groups


def pair_score_groups(players: Sequence[Player]) -> List[PlayerPair]:
    """Pair an even-sized field within score groups.

    Groups are processed from the highest score down. Inside a group players
    are sorted by rating and paired consecutively; when a group is odd its
    lowest-rated member floats into the next lower group.
    """
    groups = group_by_score(players)
    score_keys = sorted(groups, reverse=True)
    pairings: List[PlayerPair] = []

    for index, score_key in enumerate(score_keys):
        group = sort_by_rating(groups[score_key])
        if not group:
            continue

        pairings.extend(pair_consecutively(group))

        if len(group) % 2 == 1 and index + 1 < len(score_keys):
            floater = group[-1]
            groups[score_keys[index + 1]].append(floater)
            logger.debug(
                f"{floater.id} floats from {score_key / 2} to "
                f"{score_keys[index + 1] / 2}"
            )

    return pairings


def create_swiss_pairings(players: Sequence[Player], round_number: int) -> PairingResult:
    """Create Swiss pairings for a round.

    Args:
        players: Registered players in registration order
        round_number: Round being paired (1-indexed)

    Returns:
        PairingResult with the games and the bye player, if any. Players are
        not modified; the caller flags the bye recipient.
    """
    if round_number <= 1:
        return pair_by_rating(players)

    ordered = _sort_players_for_pairing(players)
    bye_player = None
    if len(ordered) % 2 == 1:
        bye_player = select_bye_player(ordered)
        ordered = [p for p in ordered if p is not bye_player]

    return PairingResult(pairings=pair_score_groups(ordered), bye_player=bye_player)
