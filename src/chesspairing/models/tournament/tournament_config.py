"""TournamentConfig data class."""

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

from dataclasses import dataclass
from typing import Any, Dict

from chesspairing.constants import (
    DEFAULT_PAIRING_SYSTEM,
    DEFAULT_TOURNAMENT_NAME,
    PAIRING_SYSTEMS,
)
from chesspairing.exceptions import UnknownPairingSystemException


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    pairing_system : str
        System used when ``generate_pairings`` is called without one. One of
        "swiss", "round-robin" and "knockout". Updated to the last system used.
    """

    name: str = DEFAULT_TOURNAMENT_NAME
    pairing_system: str = DEFAULT_PAIRING_SYSTEM

    def __post_init__(self) -> None:
        if self.pairing_system not in PAIRING_SYSTEMS:
            raise UnknownPairingSystemException(self.pairing_system)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "pairing_system": self.pairing_system,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", DEFAULT_TOURNAMENT_NAME),
            pairing_system=data.get("pairing_system", DEFAULT_PAIRING_SYSTEM),
        )
