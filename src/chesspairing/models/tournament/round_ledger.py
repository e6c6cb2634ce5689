"""Append-only history of generated rounds."""

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
from typing import Any, Dict, Iterator, List, Optional

from chesspairing.exceptions import TournamentStateException
from .round_data import RoundData


@dataclass
class RoundLedger:
    """
    Ordered sequence of every round generated so far.

    Rounds are appended, never edited or removed individually; only the
    outcome fields of their pairings change after creation. The ledger is
    consulted by the round manager (what is settled) and by the result
    recorder (where a reported pairing lives).

    Attributes
    ----------
    rounds : list of RoundData
        Rounds in generation order; ``rounds[i].round_number == i + 1``.
    """

    rounds: List[RoundData] = field(default_factory=list)

    @property
    def current_round_number(self) -> int:
        """Number of rounds generated so far (0 before the first round)."""
        return len(self.rounds)

    @property
    def next_round_number(self) -> int:
        return len(self.rounds) + 1

    @property
    def last_round(self) -> Optional[RoundData]:
        return self.rounds[-1] if self.rounds else None

    def get_round(self, round_number: int) -> Optional[RoundData]:
        """Return the round with the given 1-based number, or None."""
        if 1 <= round_number <= len(self.rounds):
            return self.rounds[round_number - 1]
        return None

    def append(self, round_data: RoundData) -> None:
        """Add the next round.

        Raises:
            TournamentStateException: If the round number is out of sequence
        """
        if round_data.round_number != self.next_round_number:
            raise TournamentStateException(
                f"Round {round_data.round_number} cannot follow round "
                f"{self.current_round_number}"
            )
        self.rounds.append(round_data)

    def is_round_complete(self, round_number: int) -> bool:
        """True when every pairing of the round is recorded or a bye."""
        round_data = self.get_round(round_number)
        if round_data is None:
            return False
        return round_data.is_completed

    def clear(self) -> None:
        self.rounds.clear()

    def __iter__(self) -> Iterator[RoundData]:
        return iter(self.rounds)

    def __len__(self) -> int:
        return len(self.rounds)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the ledger to dictionary."""
        return {"rounds": [r.to_dict() for r in self.rounds]}
