"""Type hints used in Social Doubles."""

from typing import List, Tuple

# Stable roster position of a player
PlayerId = int

# Points for (team A, team B) of a single match
Score = Tuple[int, int]

# Weighted undirected edge (vertex a, vertex b, weight) over vertices 0..n-1
Edge = Tuple[int, int, int]
# Pair of vertex indices selected by a matching
VertexPair = Tuple[int, int]
Matching = List[VertexPair]

#  LocalWords:  VertexPair
