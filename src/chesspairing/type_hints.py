"""Type hints used in Chess Pairing."""

from typing import TYPE_CHECKING, Any, Literal, Mapping, Sequence, Tuple, Union

if TYPE_CHECKING:
    from chesspairing.models.player import BareCandidate, Player, RatedCandidate

# Pairing system literals
PairingSystem = Literal["swiss", "round-robin", "knockout"]

# Standings sort key literals
SortKey = Literal["score", "rating", "name"]

# Advisory last-result tags
LastResult = Literal["win", "loss", "draw", "bye"]

# A rating as supplied by the caller, before validation
RawRating = Any

# Anything the registry accepts as a player candidate
Candidate = Union["BareCandidate", "RatedCandidate"]
RawCandidate = Union[
    str,
    Tuple[str, RawRating],
    Sequence[Any],
    Mapping[str, Any],
    "BareCandidate",
    "RatedCandidate",
]

# One game: (player1, player2)
PlayerPair = Tuple["Player", "Player"]
# One game by id: (player1_id, player2_id)
PairingIDs = Tuple[str, str]

#  LocalWords:  PlayerPair PairingIDs
