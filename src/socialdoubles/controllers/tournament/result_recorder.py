"""Round and score recording for tournaments.

This module turns a constructed round into ledger updates and applies
submitted scores, validating everything before the ledger is touched.
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

from typing import List, Optional, Sequence, Tuple

from socialdoubles.controllers.tournament.statistics_ledger import StatisticsLedger
from socialdoubles.exceptions import InvalidScoreException
from socialdoubles.models.tournament import Match, RoundData
from socialdoubles.type_hints import Score
from socialdoubles.utils import setup_logger
from socialdoubles.utils.validation import validate_round_scores_strict

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles committing rounds and recording match scores.

    This class is responsible for:
    - Counting pauses, matches, partners and opponents for a new round
    - Validating submitted scores against the round
    - Updating wins, losses, draws and points
    - Reverting earlier scores when a round is scored again

    Args:
        ledger: The statistics ledger; the recorder is its only writer
    """

    def __init__(self, ledger: StatisticsLedger):
        self.ledger = ledger

    def commit_round(self, round_data: RoundData, rounds: List[RoundData]) -> int:
        """Record participation for a round and append it to ``rounds``.

        Args:
            round_data: The freshly constructed round
            rounds: The tournament's round sequence

        Returns:
            Index of the committed round
        """
        for player_id in round_data.paused:
            self.ledger.record_pause(player_id)

        for match in round_data.matches:
            for team in match.teams:
                for player in team.players:
                    self.ledger.record_match_participation(
                        player, team.partner_of(player)
                    )
            self._record_opposition(match)

        rounds.append(round_data)
        index = len(rounds) - 1

        logger.debug(
            f"Committed round {index}: {round_data.match_count} matches, "
            f"{len(round_data.paused)} paused, {len(round_data.inactive)} inactive"
        )
        return index

    def _record_opposition(self, match: Match) -> None:
        """Record every cross pair of a match, in both directions."""
        for player in match.team_a.players:
            for opponent in match.team_b.players:
                self.ledger.record_opposition(player, opponent)
                self.ledger.record_opposition(opponent, player)

    def record_round_scores(
        self,
        round_data: RoundData,
        scores: Sequence[Sequence[int]],
        previous: Optional[Sequence[Score]] = None,
    ) -> Tuple[Score, ...]:
        """Apply the scores of every match in a round.

        Args:
            round_data: The round the scores belong to
            scores: One ``(team_a_points, team_b_points)`` pair per match
            previous: Scores submitted earlier for this round, if any; their
                contribution is reverted before the new scores are applied

        Returns:
            The accepted scores as a tuple of pairs

        Raises:
            InvalidScoreException: If the score count does not match the round or
                a score is malformed; the ledger is left untouched
        """
        try:
            validate_round_scores_strict(scores, round_data.match_count)
        except InvalidScoreException:
            logger.error(f"Rejected scores for round {round_data.index}: {scores!r}")
            raise

        accepted = tuple((int(a), int(b)) for a, b in scores)

        if previous is not None:
            logger.warning(
                f"Round {round_data.index} already has scores, overwriting {list(previous)}"
            )
            for match, (a, b) in zip(round_data.matches, previous):
                self._apply_match_score(match, a, b, revert=True)

        for match, (a, b) in zip(round_data.matches, accepted):
            self._apply_match_score(match, a, b)
            logger.debug(f"Recorded {match.team_a.players} {a}-{b} {match.team_b.players}")

        return accepted

    def _apply_match_score(
        self, match: Match, team_a_points: int, team_b_points: int, revert: bool = False
    ) -> None:
        update = self.ledger.revert_score if revert else self.ledger.record_score
        for player in match.team_a.players:
            update(player, team_a_points, team_b_points)
        for player in match.team_b.players:
            update(player, team_b_points, team_a_points)
