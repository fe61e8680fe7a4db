"""A player on the tournament roster."""

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
from typing import Any, Dict

from socialdoubles.type_hints import PlayerId


@dataclass(frozen=True)
class Player:
    """Roster entry for a player.

    Attributes
    ----------
    id : int
        Stable roster position, used as the player's identity everywhere.
    name : str
        Display name.
    active : bool
        Whether the player is available for the next round. Inactive players
        never compete and are listed as inactive in the round record.
    """

    id: PlayerId
    name: str
    active: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {"id": self.id, "name": self.name, "active": self.active}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary."""
        return cls(
            id=int(data["id"]),
            name=data["name"],
            active=data.get("active", True),
        )
