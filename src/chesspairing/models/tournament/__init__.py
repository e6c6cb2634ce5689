from chesspairing.models.tournament.knockout_bracket import KnockoutBracket
from chesspairing.models.tournament.pairing import Pairing
from chesspairing.models.tournament.player_registry import PlayerRegistry
from chesspairing.models.tournament.round_data import RoundData
from chesspairing.models.tournament.round_ledger import RoundLedger
from chesspairing.models.tournament.tournament_config import TournamentConfig

__all__ = [
    "KnockoutBracket",
    "Pairing",
    "PlayerRegistry",
    "RoundData",
    "RoundLedger",
    "TournamentConfig",
]
