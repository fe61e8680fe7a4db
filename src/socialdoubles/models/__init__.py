"""Data models for Social Doubles."""

from socialdoubles.models.player import Player, PlayerStats
from socialdoubles.models.tournament import (
    Match,
    RoundData,
    RoundInfo,
    Team,
    TournamentConfig,
)

__all__ = [
    "Player",
    "PlayerStats",
    "Team",
    "Match",
    "RoundData",
    "RoundInfo",
    "TournamentConfig",
]
