"""Random tournament simulation.

Generates a roster, plays a number of rounds with seeded random scores and
returns the resulting tournament. Used by the command line interface and by the
scenario tests to exercise the scheduler over many rounds.
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

import random
from dataclasses import dataclass
from typing import List, Optional

from socialdoubles.constants import (
    DEFAULT_MATCHES_PER_ROUND,
    DEFAULT_POINTS_TO_WIN,
    DEFAULT_SOLVER_SEED,
    DEFAULT_SOLVER_TIME_LIMIT,
)
from socialdoubles.exceptions import InvalidInputException
from socialdoubles.models.tournament import TournamentConfig
from socialdoubles.pairing import MatchingSolver
from socialdoubles.tournament import Tournament
from socialdoubles.type_hints import Score
from socialdoubles.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for the tournament simulator."""

    num_players: int
    num_rounds: int
    matches_per_round: int = DEFAULT_MATCHES_PER_ROUND
    points_to_win: int = DEFAULT_POINTS_TO_WIN
    seed: Optional[int] = None
    # Chance that a player is unavailable for a given round
    absence_rate: float = 0.0
    solver_time_limit: float = DEFAULT_SOLVER_TIME_LIMIT
    solver_seed: int = DEFAULT_SOLVER_SEED


class TournamentSimulator:
    """Plays complete tournaments with random results."""

    def __init__(
        self, config: SimulationConfig, solver: Optional[MatchingSolver] = None
    ):
        if config.num_players < 0 or config.num_rounds < 0:
            raise InvalidInputException("Player and round counts must not be negative")
        if config.points_to_win < 1:
            raise InvalidInputException("points_to_win must be at least 1")
        self.config = config
        self.solver = solver
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )

    def create_tournament(self) -> Tournament:
        """Create an empty tournament with a generated roster."""
        tournament_config = TournamentConfig(
            name=f"Simulated Social Doubles ({self.config.num_players} players)",
            matches_per_round=self.config.matches_per_round,
            solver_time_limit=self.config.solver_time_limit,
            solver_seed=self.config.solver_seed,
        )
        names = [f"Player-{i + 1:03d}" for i in range(self.config.num_players)]
        return Tournament(names, config=tournament_config, solver=self.solver)

    def random_score(self) -> Score:
        """A game to ``points_to_win``, won by either team with equal chance."""
        winner = self.config.points_to_win
        loser = self.random.randint(0, max(0, winner - 2))
        if self.random.random() < 0.5:
            return (winner, loser)
        return (loser, winner)

    def _update_availability(self, tournament: Tournament) -> None:
        for player in tournament.players:
            available = self.random.random() >= self.config.absence_rate
            if player.active != available:
                tournament.set_active(player.id, available)

    def play_round(self, tournament: Tournament) -> int:
        """Create one round and submit random scores for it."""
        if self.config.absence_rate > 0:
            self._update_availability(tournament)

        index = tournament.create_round()
        round_data = tournament.get_round(index)
        scores: List[Score] = [self.random_score() for _ in round_data.matches]
        tournament.submit_scores(index, scores)
        return index

    def run(self) -> Tournament:
        """Play every configured round and return the tournament."""
        tournament = self.create_tournament()
        logger.info(
            f"Simulating {self.config.num_rounds} rounds for "
            f"{self.config.num_players} players, {self.config.matches_per_round} matches each"
        )
        for _ in range(self.config.num_rounds):
            self.play_round(tournament)
        return tournament
