from socialdoubles.models.player.base_player import Player
from socialdoubles.models.player.player_stats import PlayerStats

__all__ = [
    "Player",
    "PlayerStats",
]
