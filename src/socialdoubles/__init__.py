"""Social Doubles - balanced round scheduling for social doubles play.

Each round the scheduler picks who plays, pairs players into teams and teams
into matches so that playing time, partners and opponents stay evenly spread.
"""

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

from socialdoubles.controllers.tournament import Standing
from socialdoubles.exceptions import (
    InvalidInputException,
    InvalidMatchCountException,
    InvalidScoreException,
    NotFoundException,
    PairingException,
    PlayerNotFoundException,
    RoundNotFoundException,
    SocialDoublesException,
)
from socialdoubles.models import (
    Match,
    Player,
    PlayerStats,
    RoundData,
    RoundInfo,
    Team,
    TournamentConfig,
)
from socialdoubles.pairing import CpSatMatchingSolver, MatchingSolver
from socialdoubles.reporting import BalanceReport, calculate_balance
from socialdoubles.simulation import SimulationConfig, TournamentSimulator
from socialdoubles.tournament import Tournament

__version__ = "0.1.0"

__all__ = [
    "Tournament",
    "TournamentConfig",
    "Player",
    "PlayerStats",
    "Team",
    "Match",
    "RoundData",
    "RoundInfo",
    "Standing",
    "MatchingSolver",
    "CpSatMatchingSolver",
    "BalanceReport",
    "calculate_balance",
    "SimulationConfig",
    "TournamentSimulator",
    "SocialDoublesException",
    "NotFoundException",
    "RoundNotFoundException",
    "PlayerNotFoundException",
    "InvalidInputException",
    "InvalidMatchCountException",
    "InvalidScoreException",
    "PairingException",
]
