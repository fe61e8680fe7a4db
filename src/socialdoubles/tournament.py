"""Main Tournament class - orchestrates all tournament operations.

This is the primary interface for running a social doubles tournament,
coordinating player selection, team and match formation, result recording
and standings behind a small API.
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

import threading
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from socialdoubles.constants import PLAYERS_PER_MATCH
from socialdoubles.controllers.pairing import MatchBuilder, TeamBuilder, select_players
from socialdoubles.controllers.tournament import (
    ResultRecorder,
    Standing,
    StandingsCalculator,
    StatisticsLedger,
)
from socialdoubles.exceptions import (
    InvalidInputException,
    InvalidMatchCountException,
    PlayerNotFoundException,
    RoundNotFoundException,
)
from socialdoubles.models.player import Player, PlayerStats
from socialdoubles.models.tournament import RoundData, RoundInfo, TournamentConfig
from socialdoubles.pairing import CpSatMatchingSolver, MatchingSolver
from socialdoubles.type_hints import PlayerId, Score
from socialdoubles.utils import setup_logger
from socialdoubles.utils.validation import validate_match_count_strict

logger = setup_logger(__name__)


class Tournament:
    """Main tournament management class.

    This class coordinates all tournament operations through specialized parts:
    - select_players: decides who competes and who pauses
    - TeamBuilder / MatchBuilder: form teams and matches via the matching solver
    - ResultRecorder: commits rounds and scores to the statistics ledger
    - StandingsCalculator: ranks players

    The Tournament owns the roster, the round sequence and the parallel score
    sequence. Round creation and score submission are serialized, so the ledger
    never changes while a round is being built.
    """

    def __init__(
        self,
        player_names: Sequence[str] = (),
        config: Optional[TournamentConfig] = None,
        solver: Optional[MatchingSolver] = None,
    ) -> None:
        """Initialize a new tournament.

        Args
        ----
        player_names: Initial roster, in roster order
        config: Tournament settings; defaults are used if omitted
        solver: Matching capability; a CP-SAT solver is created if omitted
        """
        self.config = config if config is not None else TournamentConfig()

        if solver is None:
            solver = CpSatMatchingSolver(
                time_limit=self.config.solver_time_limit,
                seed=self.config.solver_seed,
            )

        # Roster and history
        self._players: List[Player] = []
        self._rounds: List[RoundData] = []
        self._scores: List[Optional[Tuple[Score, ...]]] = []

        # Specialized parts
        self._ledger = StatisticsLedger()
        self.team_builder = TeamBuilder(solver)
        self.match_builder = MatchBuilder(solver)
        self.result_recorder = ResultRecorder(self._ledger)
        self.standings_calculator = StandingsCalculator()

        self._lock = threading.RLock()

        for name in player_names:
            self.add_player(name)

    # ========== Properties ==========

    @property
    def name(self) -> str:
        """Get tournament name."""
        return self.config.name

    @property
    def players(self) -> Tuple[Player, ...]:
        """Roster entries in roster order."""
        return tuple(self._players)

    @property
    def rounds(self) -> Tuple[RoundData, ...]:
        """Committed rounds in creation order."""
        return tuple(self._rounds)

    @property
    def round_count(self) -> int:
        return len(self._rounds)

    @property
    def active_player_count(self) -> int:
        return sum(1 for player in self._players if player.active)

    @property
    def has_all_scores_submitted(self) -> bool:
        """True when every round has scores (vacuously true without rounds)."""
        return all(scores is not None for scores in self._scores)

    # ========== Roster ==========

    def get_player(self, player_id: PlayerId) -> Player:
        """Get a roster entry by identity.

        Raises:
            PlayerNotFoundException: If no such player exists
        """
        if (
            not isinstance(player_id, int)
            or isinstance(player_id, bool)
            or not 0 <= player_id < len(self._players)
        ):
            raise PlayerNotFoundException(f"Player {player_id!r} does not exist")
        return self._players[player_id]

    def add_player(self, name: str, active: bool = True) -> Player:
        """Append a player to the roster with empty statistics.

        Raises:
            InvalidInputException: If the name is empty or already taken
        """
        name = name.strip() if isinstance(name, str) else ""
        if not name:
            raise InvalidInputException("Player name is required")

        with self._lock:
            if any(player.name == name for player in self._players):
                raise InvalidInputException(f"Player name already taken: {name}")
            player = Player(id=len(self._players), name=name, active=active)
            self._players.append(player)
            self._ledger.register_player(player.id)

        logger.debug(f"Added player {player.id}: {player.name}")
        return player

    def set_active(self, player_id: PlayerId, active: bool) -> None:
        """Mark a player as available or unavailable for upcoming rounds."""
        with self._lock:
            player = replace(self.get_player(player_id), active=active)
            self._players[player_id] = player
        logger.debug(f"Player {player.name} active={active}")

    # ========== Rounds ==========

    def _resolve_match_count(self, match_count: Optional[int]) -> int:
        if match_count is None:
            match_count = self.config.matches_per_round
        try:
            validate_match_count_strict(match_count)
        except InvalidMatchCountException:
            logger.error(f"Invalid match count requested: {match_count!r}")
            raise
        return match_count

    def get_next_round_info(self, match_count: Optional[int] = None) -> RoundInfo:
        """Preview the composition of the next round without creating it.

        Raises:
            InvalidMatchCountException: If match_count is not a positive integer
        """
        match_count = self._resolve_match_count(match_count)
        with self._lock:
            selection = select_players(self._players, match_count, self._ledger.view())
        return RoundInfo(
            match_count=len(selection.competing) // PLAYERS_PER_MATCH,
            active_player_count=len(selection.competing) + len(selection.paused),
            competing_player_count=len(selection.competing),
            paused_player_count=len(selection.paused),
            inactive_player_count=len(selection.inactive),
        )

    def create_round(self, match_count: Optional[int] = None) -> int:
        """Construct, record and append the next round.

        Args:
            match_count: Matches wanted; defaults to ``config.matches_per_round``

        Returns:
            Index of the new round

        Raises:
            InvalidMatchCountException: If match_count is not a positive integer
            PairingException: If the matching solver fails; nothing is recorded
        """
        match_count = self._resolve_match_count(match_count)

        with self._lock:
            ledger = self._ledger.view()
            rounds_played = len(self._rounds)

            selection = select_players(self._players, match_count, ledger)
            teams = self.team_builder.build(selection.competing, rounds_played, ledger)
            matches = self.match_builder.build(teams, rounds_played, ledger)

            round_data = RoundData(
                index=rounds_played,
                matches=tuple(matches),
                paused=selection.paused,
                inactive=selection.inactive,
            )
            index = self.result_recorder.commit_round(round_data, self._rounds)
            self._scores.append(None)

        logger.info(
            f"Created round {index} with {round_data.match_count} matches, "
            f"{len(round_data.paused)} paused, {len(round_data.inactive)} inactive"
        )
        return index

    def _check_round_index(self, index: int) -> None:
        if (
            not isinstance(index, int)
            or isinstance(index, bool)
            or not 0 <= index < len(self._rounds)
        ):
            raise RoundNotFoundException(
                f"Round {index!r} does not exist ({len(self._rounds)} rounds created)"
            )

    def get_round(self, index: int) -> RoundData:
        """Get a committed round.

        Raises:
            RoundNotFoundException: If the index is out of range
        """
        self._check_round_index(index)
        return self._rounds[index]

    def get_scores(self, index: int) -> Optional[Tuple[Score, ...]]:
        """Get the scores submitted for a round, or None while pending.

        Raises:
            RoundNotFoundException: If the index is out of range
        """
        self._check_round_index(index)
        return self._scores[index]

    def submit_scores(self, index: int, scores: Sequence[Sequence[int]]) -> None:
        """Record the scores of every match in a round.

        Submitting again for the same round replaces the earlier scores.

        Args:
            index: Round index
            scores: One ``(team_a_points, team_b_points)`` pair per match

        Raises:
            RoundNotFoundException: If the index is out of range
            InvalidScoreException: If scores do not fit the round
        """
        with self._lock:
            self._check_round_index(index)
            accepted = self.result_recorder.record_round_scores(
                self._rounds[index], scores, previous=self._scores[index]
            )
            self._scores[index] = accepted

        logger.info(f"Submitted scores for round {index}: {list(accepted)}")

    # ========== Statistics ==========

    def get_stats(self, player_id: PlayerId) -> PlayerStats:
        """Snapshot of one player's statistics."""
        with self._lock:
            self.get_player(player_id)
            return self._ledger.stats(player_id)

    def all_stats(self) -> List[PlayerStats]:
        """Snapshots for the whole roster, in roster order."""
        with self._lock:
            return self._ledger.all_stats()

    def standings(self) -> List[Standing]:
        """Current standings over players with at least one scored match."""
        with self._lock:
            return self.standings_calculator.calculate(
                self._players, self._ledger.view()
            )
