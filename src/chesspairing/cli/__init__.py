"""Command-line interface for Chess Pairing."""

from chesspairing.cli.shell import COMMANDS, Colors, TournamentShell

__all__ = ["COMMANDS", "Colors", "TournamentShell"]
