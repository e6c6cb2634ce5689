"""Data model for tournament round."""

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
from typing import Any, Dict, List, Optional

from chesspairing.constants import SYSTEM_KNOCKOUT
from .pairing import Pairing


@dataclass
class RoundData:
    """Container for all data related to a single tournament round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed), equal to the round's position in the ledger.
    pairing_system : str
        System that generated the round ("swiss", "round-robin", "knockout").
    pairings : list of Pairing
        Pairings in display order; a bye, if any, comes last.
    """

    round_number: int
    pairing_system: str
    pairings: List[Pairing] = field(default_factory=list)

    @property
    def is_knockout(self) -> bool:
        return self.pairing_system == SYSTEM_KNOCKOUT

    @property
    def is_completed(self) -> bool:
        """Every pairing is recorded or is a bye."""
        return all(p.is_resolved for p in self.pairings)

    @property
    def unresolved_pairings(self) -> List[Pairing]:
        return [p for p in self.pairings if not p.is_resolved]

    @property
    def bye_pairings(self) -> List[Pairing]:
        return [p for p in self.pairings if p.is_bye]

    def find_pairing(
        self, player1_id: str, player2_id: Optional[str]
    ) -> Optional[Pairing]:
        """Locate the pairing reported as ``player1_id`` vs ``player2_id``."""
        for pairing in self.pairings:
            if pairing.matches(player1_id, player2_id):
                return pairing
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round": self.round_number,
            "pairing_system": self.pairing_system,
            "pairings": [p.to_dict() for p in self.pairings],
        }
