from chesspairing.controllers.tournament.result_recorder import ResultRecorder
from chesspairing.controllers.tournament.round_manager import RoundManager
from chesspairing.controllers.tournament.standings_calculator import (
    StandingEntry,
    StandingsCalculator,
)

__all__ = [
    "ResultRecorder",
    "RoundManager",
    "StandingEntry",
    "StandingsCalculator",
]
