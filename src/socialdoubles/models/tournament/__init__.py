from socialdoubles.models.tournament.match import Match, Team
from socialdoubles.models.tournament.round_data import RoundData, RoundInfo
from socialdoubles.models.tournament.tournament_config import TournamentConfig

__all__ = [
    "Team",
    "Match",
    "RoundData",
    "RoundInfo",
    "TournamentConfig",
]
