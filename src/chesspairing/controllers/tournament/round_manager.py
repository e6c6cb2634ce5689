"""Round management for tournaments.

This module handles pairing generation for the next round, dispatching to
the requested pairing system and appending the result to the round ledger.
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

from typing import List

from chesspairing.constants import (
    PAIRING_SYSTEMS,
    SYSTEM_KNOCKOUT,
    SYSTEM_ROUND_ROBIN,
    SYSTEM_SWISS,
)
from chesspairing.controllers.tournament.result_recorder import ResultRecorder
from chesspairing.exceptions import (
    ChampionDecidedException,
    EmptyBracketException,
    IncompleteRoundException,
    InsufficientPlayersException,
    TournamentStateException,
    UnknownPairingSystemException,
)
from chesspairing.models.pairing import PairingResult
from chesspairing.models.player import Player
from chesspairing.models.tournament import (
    KnockoutBracket,
    Pairing,
    PlayerRegistry,
    RoundData,
    RoundLedger,
)
from chesspairing.pairing import (
    create_knockout_pairings,
    create_round_robin,
    create_swiss_pairings,
    round_winners,
)
from chesspairing.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Generates rounds and appends them to the ledger.

    This class is responsible for:
    - Checking that a round can be drawn before touching any state
    - Dispatching to Swiss, round-robin or knockout pairing
    - Advancing the knockout bracket between rounds
    - Flagging bye recipients
    """

    def __init__(
        self,
        registry: PlayerRegistry,
        ledger: RoundLedger,
        bracket: KnockoutBracket,
        result_recorder: ResultRecorder,
    ):
        """Initialize the round manager.

        Args:
            registry: Registered players
            ledger: History of generated rounds
            bracket: Active/eliminated partition used by knockout rounds
            result_recorder: Used to credit knockout byes between rounds
        """
        self.registry = registry
        self.ledger = ledger
        self.bracket = bracket
        self.result_recorder = result_recorder

    def create_next_round(self, pairing_system: str) -> RoundData:
        """Generate pairings for the next round.

        Args:
            pairing_system: 'swiss', 'round-robin' or 'knockout'

        Returns:
            The new round, already appended to the ledger

        Raises:
            UnknownPairingSystemException: If the system is not supported
            InsufficientPlayersException: With fewer than two players
            TournamentCompleteException: When a round robin is exhausted
            TournamentStateException: Knockout after a non-knockout round
            IncompleteRoundException: Knockout with unreported games
            ChampionDecidedException: Knockout with a single winner left
            EmptyBracketException: Knockout with nobody left to pair
        """
        if pairing_system not in PAIRING_SYSTEMS:
            raise UnknownPairingSystemException(pairing_system)

        players = self.registry.get_player_list()
        if len(players) < 2:
            raise InsufficientPlayersException(len(players))

        round_number = self.ledger.next_round_number
        logger.info(
            f"Creating {pairing_system} round {round_number} with {len(players)} players"
        )

        if pairing_system == SYSTEM_SWISS:
            result = create_swiss_pairings(players, round_number)
        elif pairing_system == SYSTEM_ROUND_ROBIN:
            result = self._create_round_robin_pairings(players)
        else:
            result = self._create_knockout_pairings(players, round_number)

        if result.bye_player is not None:
            result.bye_player.has_received_bye = True

        round_data = self._build_round(round_number, pairing_system, result)
        self.ledger.append(round_data)

        logger.info(
            f"Round {round_number}: {len(result.pairings)} pairings, "
            f"bye: {result.bye_player_id or 'None'}"
        )
        return round_data

    def _create_round_robin_pairings(self, players: List[Player]) -> PairingResult:
        """Round robin over the current field, indexed by rounds played so far."""
        schedule = create_round_robin(players)
        return schedule.get_round_pairings(self.ledger.current_round_number)

    def _create_knockout_pairings(
        self, players: List[Player], round_number: int
    ) -> PairingResult:
        """Seed or advance the bracket, then pair whoever is still active."""
        if round_number == 1:
            self.bracket.seed(p.id for p in players)
            return create_knockout_pairings(players)

        previous = self.ledger.last_round
        if not previous.is_knockout:
            raise TournamentStateException(
                f"Round {previous.round_number} was a {previous.pairing_system} "
                "round; knockout rounds cannot follow it"
            )

        unresolved = previous.unresolved_pairings
        if unresolved:
            raise IncompleteRoundException(previous.round_number, len(unresolved))

        winners = round_winners(previous)
        if len(winners) == 1:
            raise ChampionDecidedException(winners[0])
        if not winners:
            logger.error(f"Round {previous.round_number} produced no winners")
            raise EmptyBracketException()

        self.result_recorder.process_bye_matches(previous)

        for player_id in self.bracket.keep_only(set(winners)):
            player = self.registry.get(player_id)
            if player is not None:
                player.is_eliminated = True
            logger.warning(
                f"{player_id} did not win round {previous.round_number}, removed from bracket"
            )

        active = [self.registry.get(pid) for pid in self.bracket.active_ids]
        return create_knockout_pairings([p for p in active if p is not None])

    def _build_round(
        self, round_number: int, pairing_system: str, result: PairingResult
    ) -> RoundData:
        is_knockout = pairing_system == SYSTEM_KNOCKOUT
        pairings = [
            Pairing(
                round_number=round_number,
                player1_id=player1.id,
                player2_id=player2.id,
                is_knockout=is_knockout,
            )
            for player1, player2 in result.pairings
        ]
        if result.bye_player is not None:
            pairings.append(
                Pairing(
                    round_number=round_number,
                    player1_id=result.bye_player.id,
                    is_bye=True,
                    is_knockout=is_knockout,
                )
            )
        return RoundData(
            round_number=round_number,
            pairing_system=pairing_system,
            pairings=pairings,
        )
