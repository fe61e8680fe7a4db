"""Round construction: player selection, team formation and match formation."""

from socialdoubles.controllers.pairing.match_builder import (
    MatchBuilder,
    match_up_edges,
    opposition_count,
)
from socialdoubles.controllers.pairing.player_selector import (
    PlayerSelection,
    competitor_count,
    select_players,
)
from socialdoubles.controllers.pairing.team_builder import TeamBuilder, team_up_edges

__all__ = [
    "PlayerSelection",
    "competitor_count",
    "select_players",
    "TeamBuilder",
    "team_up_edges",
    "MatchBuilder",
    "match_up_edges",
    "opposition_count",
]
