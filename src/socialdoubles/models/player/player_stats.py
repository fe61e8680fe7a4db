"""Read-only statistics snapshot for a single player."""

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

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping

from socialdoubles.constants import NEUTRAL_WIN_RATIO
from socialdoubles.type_hints import PlayerId


def _empty_counts() -> Mapping[PlayerId, int]:
    return MappingProxyType({})


@dataclass(frozen=True)
class PlayerStats:
    """Immutable view of a player's accumulated statistics.

    Snapshots are produced by the statistics ledger; mutating the ledger
    afterwards never changes a snapshot already handed out.

    Attributes
    ----------
    player_id : int
        Identity of the player the statistics belong to.
    matches : int
        Rounds in which the player competed.
    pauses : int
        Rounds in which the player sat out while active.
    partners : Mapping[int, int]
        Sparse partner counts; absent players have partnered zero times.
    opponents : Mapping[int, int]
        Sparse opponent counts; absent players have been opposed zero times.
    wins, losses, draws : int
        Outcomes of scored matches.
    plus, minus : int
        Cumulative points scored and conceded.
    """

    player_id: PlayerId
    matches: int = 0
    pauses: int = 0
    partners: Mapping[PlayerId, int] = field(default_factory=_empty_counts)
    opponents: Mapping[PlayerId, int] = field(default_factory=_empty_counts)
    wins: int = 0
    losses: int = 0
    draws: int = 0
    plus: int = 0
    minus: int = 0

    def partner_count(self, other: PlayerId) -> int:
        """Number of times this player teamed up with ``other``."""
        return self.partners.get(other, 0)

    def opponent_count(self, other: PlayerId) -> int:
        """Number of times this player played against ``other``."""
        return self.opponents.get(other, 0)

    @property
    def scored_matches(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def win_ratio(self) -> float:
        """Share of scored matches won, counting draws as half a win."""
        if self.scored_matches == 0:
            return NEUTRAL_WIN_RATIO
        return (self.wins + self.draws / 2) / self.scored_matches

    @property
    def plus_minus(self) -> int:
        return self.plus - self.minus

    @property
    def play_ratio(self) -> float:
        """Share of the player's rounds spent competing rather than paused."""
        rounds = self.matches + self.pauses
        if rounds == 0:
            return 0.0
        return self.matches / rounds

    def to_dict(self) -> Dict[str, Any]:
        """Serialize statistics to dictionary."""
        return {
            "player_id": self.player_id,
            "matches": self.matches,
            "pauses": self.pauses,
            "partners": dict(self.partners),
            "opponents": dict(self.opponents),
            "wins": self.wins,
            "losses": self.losses,
            "draws": self.draws,
            "plus": self.plus,
            "minus": self.minus,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerStats":
        """Deserialize statistics from dictionary."""
        return cls(
            player_id=int(data["player_id"]),
            matches=data.get("matches", 0),
            pauses=data.get("pauses", 0),
            partners=MappingProxyType(
                {int(k): v for k, v in data.get("partners", {}).items()}
            ),
            opponents=MappingProxyType(
                {int(k): v for k, v in data.get("opponents", {}).items()}
            ),
            wins=data.get("wins", 0),
            losses=data.get("losses", 0),
            draws=data.get("draws", 0),
            plus=data.get("plus", 0),
            minus=data.get("minus", 0),
        )
