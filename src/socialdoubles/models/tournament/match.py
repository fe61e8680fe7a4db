"""Team and match data classes."""

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
from typing import Any, Dict, Tuple

from socialdoubles.type_hints import PlayerId


@dataclass(frozen=True)
class Team:
    """Two distinct players competing together in one match.

    Attributes
    ----------
    player1 : int
        Identity of the first player.
    player2 : int
        Identity of the second player.
    """

    player1: PlayerId
    player2: PlayerId

    def __post_init__(self) -> None:
        if self.player1 == self.player2:
            raise ValueError(f"A team needs two distinct players, got {self.player1}")

    @property
    def players(self) -> Tuple[PlayerId, PlayerId]:
        return (self.player1, self.player2)

    def partner_of(self, player_id: PlayerId) -> PlayerId:
        """Return the teammate of ``player_id``."""
        if player_id == self.player1:
            return self.player2
        if player_id == self.player2:
            return self.player1
        raise ValueError(f"Player {player_id} is not on team {self.players}")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team to dictionary."""
        return {"players": list(self.players)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        """Deserialize team from dictionary."""
        player1, player2 = data["players"]
        return cls(player1=int(player1), player2=int(player2))


@dataclass(frozen=True)
class Match:
    """A contest between two teams.

    Attributes
    ----------
    team_a : Team
        First team; the first number of a submitted score belongs to it.
    team_b : Team
        Second team; the second number of a submitted score belongs to it.
    """

    team_a: Team
    team_b: Team

    @property
    def teams(self) -> Tuple[Team, Team]:
        return (self.team_a, self.team_b)

    @property
    def players(self) -> Tuple[PlayerId, ...]:
        """All four player identities, team A first."""
        return self.team_a.players + self.team_b.players

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {"team_a": self.team_a.to_dict(), "team_b": self.team_b.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        return cls(
            team_a=Team.from_dict(data["team_a"]),
            team_b=Team.from_dict(data["team_b"]),
        )
