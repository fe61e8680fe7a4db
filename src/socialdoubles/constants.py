# Social Doubles
# Copyright (C) 2025  Social Doubles developers
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

# --- Match format ---
PLAYERS_PER_TEAM = 2
TEAMS_PER_MATCH = 2
PLAYERS_PER_MATCH = PLAYERS_PER_TEAM * TEAMS_PER_MATCH

# Cross pairs between two teams (2 x 2), scales the match-up weight base
OPPONENT_PAIRS_PER_MATCH = PLAYERS_PER_TEAM * PLAYERS_PER_TEAM

# --- Tournament defaults ---
DEFAULT_TOURNAMENT_NAME = "Social Doubles"
DEFAULT_MATCHES_PER_ROUND = 2

# Win ratio reported for a player without any scored match
NEUTRAL_WIN_RATIO = 0.5

# --- Matching solver ---
DEFAULT_SOLVER_TIME_LIMIT = 10.0  # seconds
DEFAULT_SOLVER_SEED = 0
SOLVER_NUM_WORKERS = 1  # single worker keeps CP-SAT deterministic

# --- Simulation ---
DEFAULT_POINTS_TO_WIN = 11

# --- Logging ---
LOG_LEVEL_ENV_VAR = "SOCIALDOUBLES_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
