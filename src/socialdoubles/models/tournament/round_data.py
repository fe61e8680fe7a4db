"""Data models for tournament rounds."""

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
from typing import Any, Dict, Tuple

from socialdoubles.models.tournament.match import Match
from socialdoubles.type_hints import PlayerId


@dataclass(frozen=True)
class RoundData:
    """Container for all data related to a single committed round.

    Rounds are immutable once created; scores are kept separately by the
    tournament, parallel-indexed to the round sequence.

    Attributes
    ----------
    index : int
        Position of the round in the tournament (0-indexed).
    matches : tuple of Match
        Matches played this round, in court order.
    paused : tuple of int
        Active players who sat out this round.
    inactive : tuple of int
        Players excluded because they were inactive when the round was created.
    """

    index: int
    matches: Tuple[Match, ...] = field(default_factory=tuple)
    paused: Tuple[PlayerId, ...] = field(default_factory=tuple)
    inactive: Tuple[PlayerId, ...] = field(default_factory=tuple)

    @property
    def match_count(self) -> int:
        return len(self.matches)

    @property
    def competing(self) -> Tuple[PlayerId, ...]:
        """Players on court this round, in match order."""
        return tuple(player for match in self.matches for player in match.players)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "index": self.index,
            "matches": [m.to_dict() for m in self.matches],
            "paused": list(self.paused),
            "inactive": list(self.inactive),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundData":
        """Deserialize round data from dictionary."""
        return cls(
            index=data["index"],
            matches=tuple(Match.from_dict(m) for m in data.get("matches", [])),
            paused=tuple(data.get("paused", [])),
            inactive=tuple(data.get("inactive", [])),
        )


@dataclass(frozen=True)
class RoundInfo:
    """Preview of how the next round would be composed."""

    match_count: int
    active_player_count: int
    competing_player_count: int
    paused_player_count: int
    inactive_player_count: int
