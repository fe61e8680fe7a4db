"""Graph matching backends used to form teams and matches."""

from socialdoubles.pairing.max_weight_matching import (
    CpSatMatchingSolver,
    MatchingSolver,
    require_perfect_matching,
    validate_edges,
)

__all__ = [
    "MatchingSolver",
    "CpSatMatchingSolver",
    "require_perfect_matching",
    "validate_edges",
]
