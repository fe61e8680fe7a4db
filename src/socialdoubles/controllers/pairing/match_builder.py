"""Match formation that spreads out opponent pairings."""

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

from typing import List, Sequence

from socialdoubles.constants import OPPONENT_PAIRS_PER_MATCH
from socialdoubles.controllers.tournament.statistics_ledger import LedgerView
from socialdoubles.models.tournament import Match, Team
from socialdoubles.pairing import MatchingSolver, require_perfect_matching
from socialdoubles.type_hints import Edge
from socialdoubles.utils import setup_logger

logger = setup_logger(__name__)


def opposition_count(team: Team, other: Team, ledger: LedgerView) -> int:
    """Sum of opponent counts over the four cross pairs of two teams."""
    return sum(
        ledger.opponent_count(p, q) for p in team.players for q in other.players
    )


def match_up_edges(
    teams: Sequence[Team], rounds_played: int, ledger: LedgerView
) -> List[Edge]:
    """Build the complete opponent graph over positions in ``teams``.

    ``weight(T_i, T_j) = 4 * rounds_played - opposition_count(T_i, T_j)``; the
    factor four covers the four cross pairs and keeps every weight non-negative.
    """
    base = OPPONENT_PAIRS_PER_MATCH * rounds_played
    edges = []
    for i in range(len(teams) - 1):
        for j in range(i + 1, len(teams)):
            edges.append((i, j, base - opposition_count(teams[i], teams[j], ledger)))
    return edges


class MatchBuilder:
    """Pairs teams into matches, preferring fresh opponents.

    Args:
        solver: Maximum-weight matching capability
    """

    def __init__(self, solver: MatchingSolver):
        self.solver = solver

    def build(
        self, teams: Sequence[Team], rounds_played: int, ledger: LedgerView
    ) -> List[Match]:
        """Form matches from the teams of this round.

        Raises:
            NoMatchingFoundException: If the solver leaves a team without opponent
        """
        if not teams:
            return []

        edges = match_up_edges(teams, rounds_played, ledger)
        matching = require_perfect_matching(
            self.solver.solve(edges, len(teams)), len(teams)
        )
        matches = [Match(teams[a], teams[b]) for a, b in matching]

        logger.debug(f"Formed {len(matches)} matches")
        return matches
