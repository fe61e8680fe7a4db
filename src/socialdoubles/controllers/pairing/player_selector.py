"""Selection of the players who compete in a round."""

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
from typing import Sequence, Tuple

from socialdoubles.constants import PLAYERS_PER_MATCH
from socialdoubles.controllers.tournament.statistics_ledger import LedgerView
from socialdoubles.models.player import Player
from socialdoubles.type_hints import PlayerId
from socialdoubles.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class PlayerSelection:
    """Partition of the roster for one round.

    The three tuples are disjoint and together contain every roster entry.
    """

    competing: Tuple[PlayerId, ...]
    paused: Tuple[PlayerId, ...]
    inactive: Tuple[PlayerId, ...]


def competitor_count(match_count: int, active_count: int) -> int:
    """Number of players needed on court.

    ``match_count`` full matches if enough players are active, otherwise the
    largest multiple of four that the active players can fill.
    """
    wanted = match_count * PLAYERS_PER_MATCH
    if active_count < wanted:
        return active_count - active_count % PLAYERS_PER_MATCH
    return wanted


def select_players(
    roster: Sequence[Player], match_count: int, ledger: LedgerView
) -> PlayerSelection:
    """Split the roster into competing, paused and inactive players.

    Active players with the fewest matches played are preferred. Ties keep
    roster order; the pause count is not consulted.

    Args:
        roster: All players, in roster order
        match_count: Matches wanted this round
        ledger: Read access to the statistics ledger

    Returns:
        PlayerSelection for the round
    """
    active = [player for player in roster if player.active]
    inactive = tuple(player.id for player in roster if not player.active)

    needed = competitor_count(match_count, len(active))
    if needed < match_count * PLAYERS_PER_MATCH:
        logger.warning(
            f"Only {len(active)} active players: scheduling "
            f"{needed // PLAYERS_PER_MATCH} of {match_count} requested matches"
        )

    if needed == len(active):
        return PlayerSelection(
            competing=tuple(player.id for player in active),
            paused=(),
            inactive=inactive,
        )

    ranked = sorted(
        enumerate(active),
        key=lambda item: (ledger.match_count(item[1].id), item[0]),
    )
    competing = tuple(player.id for _, player in ranked[:needed])
    chosen = set(competing)
    paused = tuple(player.id for player in active if player.id not in chosen)

    return PlayerSelection(competing=competing, paused=paused, inactive=inactive)
