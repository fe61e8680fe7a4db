"""Per-player statistics ledger.

The ledger is the only owner of player statistics. It exposes plain counter
updates and never decides anything itself; the round builders read it through a
:class:`LedgerView` and only the result recorder writes to it.
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

from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List

from socialdoubles.exceptions import PlayerNotFoundException
from socialdoubles.models.player import PlayerStats
from socialdoubles.type_hints import PlayerId
from socialdoubles.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class _PlayerRecord:
    """Mutable counters behind a :class:`PlayerStats` snapshot."""

    matches: int = 0
    pauses: int = 0
    partners: Counter = field(default_factory=Counter)
    opponents: Counter = field(default_factory=Counter)
    wins: int = 0
    losses: int = 0
    draws: int = 0
    plus: int = 0
    minus: int = 0


class StatisticsLedger:
    """Owns and updates the statistics of every registered player."""

    def __init__(self, player_ids: Iterable[PlayerId] = ()):
        self._records: Dict[PlayerId, _PlayerRecord] = {}
        for player_id in player_ids:
            self.register_player(player_id)

    def register_player(self, player_id: PlayerId) -> None:
        """Start tracking a player with all counters at zero."""
        if player_id not in self._records:
            self._records[player_id] = _PlayerRecord()

    def _record(self, player_id: PlayerId) -> _PlayerRecord:
        try:
            return self._records[player_id]
        except KeyError:
            raise PlayerNotFoundException(
                f"No statistics for player {player_id}"
            ) from None

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    # ========== Mutations ==========

    def record_pause(self, player_id: PlayerId) -> None:
        self._record(player_id).pauses += 1

    def record_match_participation(
        self, player_id: PlayerId, partner_id: PlayerId
    ) -> None:
        """Count one played match for ``player_id`` teamed up with ``partner_id``."""
        record = self._record(player_id)
        record.matches += 1
        record.partners[partner_id] += 1

    def record_opposition(self, player_id: PlayerId, opponent_id: PlayerId) -> None:
        self._record(player_id).opponents[opponent_id] += 1

    def record_score(
        self, player_id: PlayerId, points_for: int, points_against: int
    ) -> None:
        """Apply one match outcome from the point of view of ``player_id``."""
        self._apply_score(player_id, points_for, points_against, step=1)

    def revert_score(
        self, player_id: PlayerId, points_for: int, points_against: int
    ) -> None:
        """Undo an outcome previously applied with :meth:`record_score`."""
        self._apply_score(player_id, points_for, points_against, step=-1)

    def _apply_score(
        self, player_id: PlayerId, points_for: int, points_against: int, step: int
    ) -> None:
        record = self._record(player_id)
        if points_for > points_against:
            record.wins += step
        elif points_for < points_against:
            record.losses += step
        else:
            record.draws += step
        record.plus += step * points_for
        record.minus += step * points_against

    # ========== Reads ==========

    def match_count(self, player_id: PlayerId) -> int:
        return self._record(player_id).matches

    def pause_count(self, player_id: PlayerId) -> int:
        return self._record(player_id).pauses

    def partner_count(self, player_id: PlayerId, other_id: PlayerId) -> int:
        return self._record(player_id).partners.get(other_id, 0)

    def opponent_count(self, player_id: PlayerId, other_id: PlayerId) -> int:
        return self._record(player_id).opponents.get(other_id, 0)

    def stats(self, player_id: PlayerId) -> PlayerStats:
        """Return an immutable snapshot of a player's statistics."""
        record = self._record(player_id)
        return PlayerStats(
            player_id=player_id,
            matches=record.matches,
            pauses=record.pauses,
            partners=MappingProxyType(dict(record.partners)),
            opponents=MappingProxyType(dict(record.opponents)),
            wins=record.wins,
            losses=record.losses,
            draws=record.draws,
            plus=record.plus,
            minus=record.minus,
        )

    def all_stats(self) -> List[PlayerStats]:
        """Snapshots for every registered player, ordered by identity."""
        return [self.stats(player_id) for player_id in sorted(self._records)]

    def view(self) -> "LedgerView":
        return LedgerView(self)


class LedgerView:
    """Read-only access to a :class:`StatisticsLedger`.

    Handed to the player selector and the team and match builders so that
    round construction can read history but never change it.
    """

    __slots__ = ("_ledger",)

    def __init__(self, ledger: StatisticsLedger):
        self._ledger = ledger

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._ledger

    def match_count(self, player_id: PlayerId) -> int:
        return self._ledger.match_count(player_id)

    def pause_count(self, player_id: PlayerId) -> int:
        return self._ledger.pause_count(player_id)

    def partner_count(self, player_id: PlayerId, other_id: PlayerId) -> int:
        return self._ledger.partner_count(player_id, other_id)

    def opponent_count(self, player_id: PlayerId, other_id: PlayerId) -> int:
        return self._ledger.opponent_count(player_id, other_id)

    def stats(self, player_id: PlayerId) -> PlayerStats:
        return self._ledger.stats(player_id)

    def all_stats(self) -> List[PlayerStats]:
        return self._ledger.all_stats()
