"""Balance metrics for a tournament's statistics.

The report summarizes how evenly playing time, partnerships and opposition are
spread across the roster. A well-balanced schedule keeps the spread of matches
and pauses small and avoids repeating a partnership while fresh ones remain.
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

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List

from socialdoubles.models.player import PlayerStats
from socialdoubles.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class BalanceReport:
    """Spread of participation and pairing repetition.

    Attributes
    ----------
    player_count : int
        Number of players the report covers.
    max_matches, min_matches : int
        Largest and smallest number of matches played.
    max_pauses, min_pauses : int
        Largest and smallest number of pauses taken.
    max_partner_count : int
        Most times any two players teamed up.
    max_opponent_count : int
        Most times any two players faced each other.
    distinct_partner_pairs : int
        Unordered pairs that teamed up at least once.
    repeated_partner_pairs : int
        Unordered pairs that teamed up more than once.
    """

    player_count: int = 0
    max_matches: int = 0
    min_matches: int = 0
    max_pauses: int = 0
    min_pauses: int = 0
    max_partner_count: int = 0
    max_opponent_count: int = 0
    distinct_partner_pairs: int = 0
    repeated_partner_pairs: int = 0

    @property
    def match_spread(self) -> int:
        return self.max_matches - self.min_matches

    @property
    def pause_spread(self) -> int:
        return self.max_pauses - self.min_pauses

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["match_spread"] = self.match_spread
        data["pause_spread"] = self.pause_spread
        return data

    def summary(self) -> List[str]:
        """Human readable lines for console output."""
        return [
            f"Players: {self.player_count}",
            f"Matches played: {self.min_matches}-{self.max_matches}",
            f"Pauses taken: {self.min_pauses}-{self.max_pauses}",
            f"Most partnerships between two players: {self.max_partner_count}",
            f"Most meetings as opponents: {self.max_opponent_count}",
            f"Distinct partnerships: {self.distinct_partner_pairs}",
            f"Repeated partnerships: {self.repeated_partner_pairs}",
        ]


def calculate_balance(stats: Iterable[PlayerStats]) -> BalanceReport:
    """Compute a :class:`BalanceReport` from statistics snapshots.

    Args:
        stats: One snapshot per player to include

    Returns:
        The balance report; all values are zero for an empty roster
    """
    stats = list(stats)
    if not stats:
        return BalanceReport()

    # Partner counts are symmetric, so each unordered pair is counted from the
    # lower identity only.
    partner_pairs = {
        (s.player_id, other): count
        for s in stats
        for other, count in s.partners.items()
        if s.player_id < other and count > 0
    }

    report = BalanceReport(
        player_count=len(stats),
        max_matches=max(s.matches for s in stats),
        min_matches=min(s.matches for s in stats),
        max_pauses=max(s.pauses for s in stats),
        min_pauses=min(s.pauses for s in stats),
        max_partner_count=max(
            (count for s in stats for count in s.partners.values()), default=0
        ),
        max_opponent_count=max(
            (count for s in stats for count in s.opponents.values()), default=0
        ),
        distinct_partner_pairs=len(partner_pairs),
        repeated_partner_pairs=sum(1 for c in partner_pairs.values() if c > 1),
    )
    logger.debug(f"Balance report: {report.to_dict()}")
    return report
