"""Result recording and validation for tournaments.

This module handles recording match results with proper validation and error checking.
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

from typing import Optional

from chesspairing.constants import RESULT_BYE
from chesspairing.models.tournament import (
    KnockoutBracket,
    Pairing,
    PlayerRegistry,
    RoundData,
    RoundLedger,
)
from chesspairing.utils import setup_logger
from chesspairing.utils.validation import validate_result

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and validating match results.

    This class is responsible for:
    - Locating the reported pairing in the round ledger
    - Updating player statistics and opponent history
    - Handling bye results
    - Eliminating knockout losers
    - Preventing duplicate result recording

    Every public method returns False instead of raising when the report
    cannot be applied; nothing is mutated in that case.
    """

    def __init__(
        self,
        registry: PlayerRegistry,
        ledger: RoundLedger,
        bracket: KnockoutBracket,
    ) -> None:
        self.registry = registry
        self.ledger = ledger
        self.bracket = bracket

    def _locate_pairing(
        self,
        round_number: int,
        player1_id: str,
        player2_id: Optional[str],
        knockout: bool,
    ) -> Optional[Pairing]:
        """Find the unrecorded pairing a caller is reporting on.

        Returns:
            The pairing, or None (with the reason logged)
        """
        round_data = self.ledger.get_round(round_number)
        if round_data is None:
            logger.error(f"Cannot record result: round {round_number} does not exist")
            return None

        if round_data.is_knockout != knockout:
            expected = "record_knockout_result" if round_data.is_knockout else "record_round_result"
            logger.error(
                f"Round {round_number} is a {round_data.pairing_system} round, "
                f"use {expected}"
            )
            return None

        pairing = round_data.find_pairing(player1_id, player2_id)
        if pairing is None:
            logger.error(
                f"Pairing ({player1_id}, {player2_id or 'BYE'}) not found in "
                f"round {round_number}"
            )
            return None

        if pairing.result_recorded:
            logger.warning(
                f"Result for {pairing} in round {round_number} already recorded"
            )
            return None

        return pairing

    # ========== Swiss / Round Robin ==========

    def record_round_result(
        self,
        round_number: int,
        player1_id: str,
        player2_id: Optional[str],
        result: Optional[str],
    ) -> bool:
        """Record the result of a Swiss or round-robin pairing.

        Args:
            round_number: Round the pairing belongs to (1-indexed)
            player1_id: First player of the pairing
            player2_id: Second player, or None for a bye
            result: "1-0", "0-1" or "0.5-0.5" (ignored for a bye)

        Returns:
            True if recorded, False if the pairing is unknown, already
            recorded or the result is malformed
        """
        pairing = self._locate_pairing(round_number, player1_id, player2_id, knockout=False)
        if pairing is None:
            return False

        if pairing.is_bye:
            return self._record_bye_result(pairing)

        validation = validate_result(result)
        if not validation:
            logger.error(validation.error_message)
            return False

        player1 = self.registry.get(pairing.player1_id)
        player2 = self.registry.get(pairing.player2_id)
        if not player1 or not player2:
            logger.error(f"Cannot find players: {pairing.player1_id} and/or {pairing.player2_id}")
            return False

        half_points1, half_points2 = validation.sanitized_value
        player1.add_game_result(player2, half_points1, half_points2)
        player2.add_game_result(player1, half_points2, half_points1)
        pairing.mark_recorded(result=result)

        logger.debug(f"Recorded round {round_number}: {player1.id} {result} {player2.id}")
        return True

    def _record_bye_result(self, pairing: Pairing) -> bool:
        """Credit a Swiss or round-robin bye: one point and a win."""
        bye_player = self.registry.get(pairing.player1_id)
        if not bye_player:
            logger.error(f"Cannot find bye player: {pairing.player1_id}")
            return False

        bye_player.add_bye_result()
        pairing.mark_recorded(result=RESULT_BYE)
        logger.debug(f"Recorded bye for {bye_player.id} in round {pairing.round_number}")
        return True

    # ========== Knockout ==========

    def record_knockout_result(
        self,
        round_number: int,
        player1_id: str,
        player2_id: Optional[str],
        winner_id: str,
    ) -> bool:
        """Record the winner of a knockout pairing and eliminate the loser.

        Args:
            round_number: Round the pairing belongs to (1-indexed)
            player1_id: First player of the pairing
            player2_id: Second player, or None for a bye
            winner_id: One of the pairing's players

        Returns:
            True if recorded, False otherwise
        """
        pairing = self._locate_pairing(round_number, player1_id, player2_id, knockout=True)
        if pairing is None:
            return False

        if not winner_id or not pairing.involves(winner_id):
            logger.error(f"{winner_id!r} is not a player of {pairing}")
            return False

        if pairing.is_bye:
            return self.resolve_knockout_bye(pairing)

        loser_id = pairing.opponent_of(winner_id)
        winner = self.registry.get(winner_id)
        loser = self.registry.get(loser_id)
        if not winner or not loser:
            logger.error(f"Cannot find players: {winner_id} and/or {loser_id}")
            return False

        winner.add_knockout_win(loser)
        loser.add_knockout_loss(winner)
        self.bracket.eliminate(loser.id)
        pairing.mark_recorded(winner_id=winner_id)

        logger.info(f"Round {round_number}: {winner.id} beats {loser.id}, {loser.id} eliminated")
        return True

    def resolve_knockout_bye(self, pairing: Pairing) -> bool:
        """Advance a knockout bye recipient with a win and a point."""
        bye_player = self.registry.get(pairing.player1_id)
        if not bye_player:
            logger.error(f"Cannot find bye player: {pairing.player1_id}")
            return False

        bye_player.add_knockout_win()
        pairing.mark_recorded(winner_id=bye_player.id)
        logger.debug(f"{bye_player.id} advances with a bye in round {pairing.round_number}")
        return True

    def process_bye_matches(self, round_data: RoundData) -> int:
        """Resolve every unrecorded bye of a knockout round.

        Returns:
            Number of byes resolved
        """
        resolved = 0
        for pairing in round_data.bye_pairings:
            if not pairing.result_recorded and self.resolve_knockout_bye(pairing):
                resolved += 1
        return resolved
