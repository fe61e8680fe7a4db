"""TournamentConfig data class."""

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

from dataclasses import dataclass
from typing import Any, Dict

from socialdoubles.constants import (
    DEFAULT_MATCHES_PER_ROUND,
    DEFAULT_SOLVER_SEED,
    DEFAULT_SOLVER_TIME_LIMIT,
    DEFAULT_TOURNAMENT_NAME,
)


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    matches_per_round : int
        Matches scheduled when a round is created without an explicit count,
        typically the number of available courts.
    solver_time_limit : float
        Upper bound in seconds for each matching computation.
    solver_seed : int
        Random seed handed to the matching solver.
    """

    name: str = DEFAULT_TOURNAMENT_NAME
    matches_per_round: int = DEFAULT_MATCHES_PER_ROUND
    solver_time_limit: float = DEFAULT_SOLVER_TIME_LIMIT
    solver_seed: int = DEFAULT_SOLVER_SEED

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "matches_per_round": self.matches_per_round,
            "solver_time_limit": self.solver_time_limit,
            "solver_seed": self.solver_seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", DEFAULT_TOURNAMENT_NAME),
            matches_per_round=data.get("matches_per_round", DEFAULT_MATCHES_PER_ROUND),
            solver_time_limit=data.get("solver_time_limit", DEFAULT_SOLVER_TIME_LIMIT),
            solver_seed=data.get("solver_seed", DEFAULT_SOLVER_SEED),
        )
