"""Parsing of free-text player lists.

Accepted shapes, one player per line or comma separated::

    Alice 1800
    Carol Ann 1650
    Bob

A trailing all-digit token is taken as the rating; anything else is part of
the name and the player gets the default rating.
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

import re
from typing import List, Optional

from chesspairing.constants import (
    DEFAULT_NUMBERED_PLAYERS,
    DEFAULT_RATING,
    MAX_NUMBERED_PLAYERS,
    NUMBERED_PLAYER_PREFIX,
)
from chesspairing.models.player import RatedCandidate

_SEPARATORS = re.compile(r"[\n,]+")
_RATING_TOKEN = re.compile(r"[0-9]+")


def parse_player_line(line: str) -> Optional[RatedCandidate]:
    """Parse a single "Name [rating]" entry.

    Examples:
        >>> parse_player_line("Carol Ann 1650")
        RatedCandidate(id='Carol Ann', rating=1650)
        >>> parse_player_line("Bob")
        RatedCandidate(id='Bob', rating=1500)
        >>> parse_player_line("   ") is None
        True
    """
    trimmed = line.strip()
    if not trimmed:
        return None

    parts = trimmed.split()
    if len(parts) >= 2 and _RATING_TOKEN.fullmatch(parts[-1]):
        rating = int(parts.pop())
        return RatedCandidate(id=" ".join(parts), rating=rating)
    return RatedCandidate(id=trimmed, rating=DEFAULT_RATING)


def parse_player_input(text: str) -> List[RatedCandidate]:
    """Parse newline or comma separated entries, skipping blanks."""
    candidates = (parse_player_line(chunk) for chunk in _SEPARATORS.split(text))
    return [c for c in candidates if c is not None]


def is_player_count(text: str) -> bool:
    """True when the text is just a number ("250"), i.e. a request for numbered players."""
    return bool(_RATING_TOKEN.fullmatch(text.strip()))


def generate_numbered_players(count: int = DEFAULT_NUMBERED_PLAYERS) -> List[str]:
    """Ids "Player1" .. "PlayerN" for quick test fields.

    Counts below 1 fall back to the default of 100 and counts above 10000 are
    capped at 10000.
    """
    if count < 1:
        count = DEFAULT_NUMBERED_PLAYERS
    count = min(count, MAX_NUMBERED_PLAYERS)
    return [f"{NUMBERED_PLAYER_PREFIX}{i}" for i in range(1, count + 1)]
