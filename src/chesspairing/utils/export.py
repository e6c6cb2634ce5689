"""CSV shortlist export of the standings."""

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

import csv
import io
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Sequence, Union

from chesspairing.constants import (
    CSV_HEADERS,
    CSV_STATUS_ACTIVE,
    CSV_STATUS_HEADER,
    SHORTLIST_FILE_EXTENSION,
    SHORTLIST_FILE_PREFIX,
)
from chesspairing.utils import format_score, setup_logger

if TYPE_CHECKING:
    from chesspairing.controllers.tournament import StandingEntry

logger = setup_logger(__name__)


def _format_rating(rating: float) -> str:
    if float(rating).is_integer():
        return str(int(rating))
    return str(rating)


def export_shortlist_csv(
    standings: Sequence["StandingEntry"], knockout: bool = False
) -> str:
    """Render standings as CSV text.

    In knockout mode eliminated players are left out, the survivors are
    re-ranked from 1 and a ``Status`` column is added.

    Args:
        standings: Rows as returned by ``Tournament.standings``
        knockout: Export the knockout shortlist

    Returns:
        CSV with CRLF line endings, header row first
    """
    rows = [s for s in standings if not (knockout and s.is_eliminated)]
    headers: List[str] = list(CSV_HEADERS)
    if knockout:
        headers.append(CSV_STATUS_HEADER)

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\r\n")
    writer.writerow(headers)
    for rank, entry in enumerate(rows, start=1):
        row = [
            rank,
            entry.player_id,
            _format_rating(entry.rating),
            format_score(entry.score),
            entry.wins,
            entry.losses,
            entry.draws,
            entry.games_played,
        ]
        if knockout:
            row.append(CSV_STATUS_ACTIVE)
        writer.writerow(row)
    return buffer.getvalue()


def shortlist_filename(day: Optional[date] = None) -> str:
    """``chess_tournament_shortlist_YYYY-MM-DD.csv`` for ``day`` (default today)."""
    day = day or date.today()
    return f"{SHORTLIST_FILE_PREFIX}{day.isoformat()}{SHORTLIST_FILE_EXTENSION}"


def write_shortlist_csv(
    path: Union[str, Path],
    standings: Sequence["StandingEntry"],
    knockout: bool = False,
) -> Path:
    """Write the shortlist as UTF-8 with a byte order mark.

    A directory ``path`` receives a dated file name.

    Returns:
        Path of the written file
    """
    path = Path(path)
    if path.is_dir():
        path = path / shortlist_filename()

    # newline="" keeps the CRLF terminators written by the csv module
    with open(path, "w", encoding="utf-8-sig", newline="") as f:
        f.write(export_shortlist_csv(standings, knockout=knockout))

    logger.info(f"Shortlist written to {path}")
    return path
