from chesspairing.models.player.base_player import Player
from chesspairing.models.player.factory import (
    BareCandidate,
    PlayerFactory,
    RatedCandidate,
    create_player,
    normalize_candidate,
    to_candidate,
)

__all__ = [
    "Player",
    "BareCandidate",
    "RatedCandidate",
    "PlayerFactory",
    "create_player",
    "normalize_candidate",
    "to_candidate",
]
