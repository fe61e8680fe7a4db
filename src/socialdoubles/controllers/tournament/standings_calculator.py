"""Standings for the players of a tournament."""

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
from typing import List, Sequence, Tuple

from socialdoubles.controllers.tournament.statistics_ledger import LedgerView
from socialdoubles.models.player import Player, PlayerStats


@dataclass(frozen=True)
class Standing:
    """One line of the standings table."""

    rank: int
    player: Player
    stats: PlayerStats


class StandingsCalculator:
    """Ranks players by performance in scored matches.

    Ordering:
    - Win ratio, draws counting half (higher first)
    - Points difference (higher first)
    - Name, only to keep the table stable; players equal on the first two
      criteria share a rank
    """

    @staticmethod
    def _performance_key(stats: PlayerStats) -> Tuple[float, int]:
        return (-stats.win_ratio, -stats.plus_minus)

    def calculate(
        self, players: Sequence[Player], ledger: LedgerView
    ) -> List[Standing]:
        """Build the standings for ``players``.

        Players without any scored match are left out.

        Args:
            players: Roster entries to rank
            ledger: Read access to player statistics

        Returns:
            Standings ordered best first
        """
        entries = [(player, ledger.stats(player.id)) for player in players]
        entries = [(player, stats) for player, stats in entries if stats.scored_matches]
        entries.sort(key=lambda e: self._performance_key(e[1]) + (e[0].name,))

        standings: List[Standing] = []
        for position, (player, stats) in enumerate(entries):
            if standings and self._performance_key(
                standings[-1].stats
            ) == self._performance_key(stats):
                rank = standings[-1].rank
            else:
                rank = position + 1
            standings.append(Standing(rank=rank, player=player, stats=stats))
        return standings
