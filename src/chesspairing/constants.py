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

# --- Constants ---
DEFAULT_TOURNAMENT_NAME = "Untitled Tournament"
DEFAULT_RATING = 1500

# Scores are stored as integer half-points (2 x score)
HALF_POINTS_PER_POINT = 2
WIN_HALF_POINTS = 2

# Result strings
RESULT_SEPARATOR = "-"
RESULT_BYE = "1-0"

# Last result tags (advisory only)
LAST_RESULT_WIN = "win"
LAST_RESULT_LOSS = "loss"
LAST_RESULT_DRAW = "draw"
LAST_RESULT_BYE = "bye"

# Pairing systems
SYSTEM_SWISS = "swiss"
SYSTEM_ROUND_ROBIN = "round-robin"
SYSTEM_KNOCKOUT = "knockout"
PAIRING_SYSTEMS = (SYSTEM_SWISS, SYSTEM_ROUND_ROBIN, SYSTEM_KNOCKOUT)
DEFAULT_PAIRING_SYSTEM = SYSTEM_SWISS

# Standings sort keys
SORT_BY_SCORE = "score"
SORT_BY_RATING = "rating"
SORT_BY_NAME = "name"
SORT_KEYS = (SORT_BY_SCORE, SORT_BY_RATING, SORT_BY_NAME)
DEFAULT_SORT_KEY = SORT_BY_SCORE

# Numbered player generation
NUMBERED_PLAYER_PREFIX = "Player"
DEFAULT_NUMBERED_PLAYERS = 100
MAX_NUMBERED_PLAYERS = 10000

# Shortlist export
CSV_HEADERS = ["Rank", "Player Name", "Rating", "Score", "Wins", "Losses", "Draws", "Games"]
CSV_STATUS_HEADER = "Status"
CSV_STATUS_ACTIVE = "Active"
SHORTLIST_FILE_PREFIX = "chess_tournament_shortlist_"
SHORTLIST_FILE_EXTENSION = ".csv"

# Logging
LOG_LEVEL_ENV_VAR = "CHESS_PAIRING_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
