"""Shared utilities for Chess Pairing."""

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

import logging
import os
from typing import Optional, Union

from chesspairing.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_ENV_VAR

PACKAGE_LOGGER_NAME = "chesspairing"


def _configure_package_logger() -> logging.Logger:
    """Attach the single stream handler to the package logger (once)."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
        package_logger.setLevel(
            os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
        )
    return package_logger


def setup_logger(name: str) -> logging.Logger:
    """Return a module logger that reports through the package handler.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Configured logger
    """
    _configure_package_logger()
    return logging.getLogger(name)


def set_log_level(level: Union[int, str]) -> None:
    """Change the verbosity of every Chess Pairing logger."""
    if isinstance(level, str):
        level = level.upper()
    _configure_package_logger().setLevel(level)


def format_score(score: Optional[float]) -> str:
    """Format a score for display with a single decimal ("1.5")."""
    return f"{(score or 0.0):.1f}"


__all__ = ["setup_logger", "set_log_level", "format_score"]
