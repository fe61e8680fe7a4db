"""Team formation that spreads out partner pairings."""

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

from socialdoubles.controllers.tournament.statistics_ledger import LedgerView
from socialdoubles.models.tournament import Team
from socialdoubles.pairing import MatchingSolver, require_perfect_matching
from socialdoubles.type_hints import Edge, PlayerId
from socialdoubles.utils import setup_logger

logger = setup_logger(__name__)


def team_up_edges(
    competing: Sequence[PlayerId], rounds_played: int, ledger: LedgerView
) -> List[Edge]:
    """Build the complete partner graph over positions in ``competing``.

    ``weight(p, q) = rounds_played - partner_count(p, q)``: a pair that never
    partnered gets the highest weight, a pair that partnered in every earlier
    round gets zero.
    """
    edges = []
    for i in range(len(competing) - 1):
        for j in range(i + 1, len(competing)):
            together = ledger.partner_count(competing[i], competing[j])
            edges.append((i, j, rounds_played - together))
    return edges


class TeamBuilder:
    """Pairs competing players into teams, preferring novel partnerships.

    Args:
        solver: Maximum-weight matching capability
    """

    def __init__(self, solver: MatchingSolver):
        self.solver = solver

    def build(
        self, competing: Sequence[PlayerId], rounds_played: int, ledger: LedgerView
    ) -> List[Team]:
        """Form teams from the competing players.

        Args:
            competing: Players on court this round (count divisible by four)
            rounds_played: Rounds created before this one
            ledger: Read access to partner history

        Returns:
            One team per matched pair; every competing player is on exactly one team

        Raises:
            NoMatchingFoundException: If the solver leaves a player without partner
        """
        if not competing:
            return []

        edges = team_up_edges(competing, rounds_played, ledger)
        matching = require_perfect_matching(
            self.solver.solve(edges, len(competing)), len(competing)
        )
        teams = [Team(competing[a], competing[b]) for a, b in matching]

        logger.debug(f"Formed {len(teams)} teams: {[t.players for t in teams]}")
        return teams
