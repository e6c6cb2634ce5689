"""Main Tournament class - orchestrates all tournament operations.

This is the primary interface for tournament management, coordinating the
player registry, the round ledger and the knockout bracket through the
round manager, result recorder and standings calculator.
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

import dataclasses
from typing import Any, Dict, Iterable, List, Optional

from chesspairing.constants import (
    DEFAULT_PAIRING_SYSTEM,
    DEFAULT_SORT_KEY,
    DEFAULT_TOURNAMENT_NAME,
)
from chesspairing.controllers.tournament import (
    ResultRecorder,
    RoundManager,
    StandingEntry,
    StandingsCalculator,
)
from chesspairing.models.player import Player
from chesspairing.models.tournament import (
    KnockoutBracket,
    Pairing,
    PlayerRegistry,
    RoundData,
    RoundLedger,
    TournamentConfig,
)
from chesspairing.type_hints import PairingSystem, RawCandidate, SortKey
from chesspairing.utils import setup_logger

logger = setup_logger(__name__)


class Tournament:
    """Main tournament management class.

    This class coordinates all tournament operations through specialized managers:
    - PlayerRegistry: owns the participants
    - RoundManager: handles round creation and pairing
    - ResultRecorder: manages result entry and validation
    - StandingsCalculator: ranks players

    Errors raised by ``generate_pairings`` leave every piece of state as it
    was before the call.
    """

    def __init__(
        self,
        name: str = DEFAULT_TOURNAMENT_NAME,
        pairing_system: PairingSystem = DEFAULT_PAIRING_SYSTEM,
        players: Optional[Iterable[RawCandidate]] = None,
    ) -> None:
        """Initialize a new tournament.

        Args
        ----
        name: Tournament name
        pairing_system: Default system ('swiss', 'round-robin', 'knockout')
        players: Optional initial candidates, registered immediately
        """
        self.config = TournamentConfig(name=name, pairing_system=pairing_system)

        self.registry = PlayerRegistry()
        self.ledger = RoundLedger()
        self.bracket = KnockoutBracket()

        self.result_recorder = ResultRecorder(self.registry, self.ledger, self.bracket)
        self.round_manager = RoundManager(
            self.registry, self.ledger, self.bracket, self.result_recorder
        )
        self.standings_calculator = StandingsCalculator()

        if players is not None:
            self.register(players)

    # ========== Properties ==========

    @property
    def name(self) -> str:
        """Get tournament name."""
        return self.config.name

    @name.setter
    def name(self, value: str) -> None:
        self.config.name = value

    @property
    def pairing_system(self) -> str:
        """Get the default pairing system."""
        return self.config.pairing_system

    @property
    def players(self) -> List[Player]:
        """Registered players in registration order."""
        return self.registry.get_player_list()

    @property
    def rounds(self) -> List[RoundData]:
        return list(self.ledger.rounds)

    @property
    def current_round(self) -> int:
        """Number of rounds generated so far (0 before the first round)."""
        return self.ledger.current_round_number

    @property
    def active_players(self) -> List[Player]:
        """Players still in contention in a knockout."""
        return self._lookup(self.bracket.active_ids)

    @property
    def eliminated_players(self) -> List[Player]:
        """Knocked out players in elimination order."""
        return self._lookup(self.bracket.eliminated_ids)

    def _lookup(self, player_ids: Iterable[str]) -> List[Player]:
        players = (self.registry.get(pid) for pid in player_ids)
        return [p for p in players if p is not None]

    # ========== Player Management ==========

    def get_player(self, player_id: str) -> Optional[Player]:
        return self.registry.get(player_id)

    def register(self, candidates: Iterable[RawCandidate]) -> int:
        """Register players, ignoring blank and duplicate ids.

        Args:
            candidates: Bare ids, ``(id, rating)`` pairs, mappings or
                candidate objects

        Returns:
            Number of players actually added

        Raises:
            InvalidPlayerDataException: If a candidate has an unsupported
                shape; nothing is registered in that case
        """
        added = self.registry.register(candidates)
        for player in added:
            self.bracket.add_player(player.id)
        return len(added)

    def clear(self) -> None:
        """Remove every player, round and bracket entry."""
        self.registry.clear()
        self.ledger.clear()
        self.bracket.clear()
        logger.info(f"Tournament '{self.name}' cleared")

    def reset(self) -> None:
        """Restart the tournament with the same players and ratings."""
        self.registry.reset_players()
        self.ledger.clear()
        self.bracket.seed(p.id for p in self.registry)
        logger.info(f"Tournament '{self.name}' reset with {len(self.registry)} players")

    # ========== Round Management ==========

    def generate_pairings(self, system: Optional[PairingSystem] = None) -> List[Pairing]:
        """Generate and record the next round.

        Args:
            system: Pairing system for this round, defaults to the
                tournament's configured system

        Returns:
            Copies of the new round's pairings; the bye, if any, is last

        Raises:
            ChessPairingException: See ``RoundManager.create_next_round``
        """
        system = system or self.config.pairing_system
        round_data = self.round_manager.create_next_round(system)
        self.config.pairing_system = system
        return [dataclasses.replace(p) for p in round_data.pairings]

    def get_round(self, round_number: int) -> Optional[RoundData]:
        """Get data for a specific round (1-indexed), or None."""
        return self.ledger.get_round(round_number)

    def are_all_results_recorded(self, round_number: Optional[int] = None) -> bool:
        """Check whether a round (default: the latest) is fully resolved.

        Returns:
            False when the round does not exist
        """
        if round_number is None:
            round_number = self.current_round
        return self.ledger.is_round_complete(round_number)

    # ========== Result Management ==========

    def record_round_result(
        self,
        round_number: int,
        player1_id: str,
        player2_id: Optional[str],
        result: Optional[str],
    ) -> bool:
        """Record a Swiss or round-robin result such as "1-0" or "0.5-0.5"."""
        return self.result_recorder.record_round_result(
            round_number, player1_id, player2_id, result
        )

    def record_knockout_result(
        self,
        round_number: int,
        player1_id: str,
        player2_id: Optional[str],
        winner_id: str,
    ) -> bool:
        """Record the winner of a knockout pairing."""
        return self.result_recorder.record_knockout_result(
            round_number, player1_id, player2_id, winner_id
        )

    # ========== Standings ==========

    def standings(self, sort_by: SortKey = DEFAULT_SORT_KEY) -> List[StandingEntry]:
        """Ranked snapshot of every player.

        Raises:
            InvalidSortKeyException: If ``sort_by`` is not score, rating or name
        """
        return self.standings_calculator.get_standings(self.registry, sort_by)

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament state to dictionary."""
        return {
            "config": self.config.to_dict(),
            "players": [p.to_dict() for p in self.registry],
            "rounds": self.ledger.to_dict()["rounds"],
            "bracket": self.bracket.to_dict(),
        }

    def __repr__(self) -> str:
        return (
            f"Tournament(name={self.name!r}, players={len(self.registry)}, "
            f"rounds={self.current_round})"
        )
