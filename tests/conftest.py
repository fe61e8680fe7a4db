from functools import lru_cache

import pytest

from socialdoubles.controllers.tournament import StatisticsLedger
from socialdoubles.pairing import validate_edges
from socialdoubles.tournament import Tournament


class BruteForceSolver:
    """Exhaustive maximum-cardinality, maximum-weight matching for small graphs."""

    def __init__(self):
        self.calls = []

    def solve(self, edges, vertex_count=None):
        vertex_count = validate_edges(edges, vertex_count)
        self.calls.append((list(edges), vertex_count))

        weights = {}
        for a, b, weight in edges:
            key = (min(a, b), max(a, b))
            weights[key] = max(weight, weights.get(key, -1))

        @lru_cache(maxsize=None)
        def best(remaining):
            if not remaining:
                return (0, 0, ())
            vertex = min(remaining)
            rest = remaining - {vertex}
            result = best(rest)
            for other in sorted(rest):
                weight = weights.get((vertex, other))
                if weight is None:
                    continue
                size, total, pairs = best(rest - {other})
                candidate = (size + 1, total + weight, ((vertex, other),) + pairs)
                if candidate[:2] > result[:2]:
                    result = candidate
            return result

        return sorted(best(frozenset(range(vertex_count)))[2])


class EmptySolver:
    """Solver that never pairs anything."""

    def solve(self, edges, vertex_count=None):
        return []


@pytest.fixture
def solver():
    return BruteForceSolver()


@pytest.fixture
def ledger():
    return StatisticsLedger(range(10))


@pytest.fixture
def make_tournament(solver):
    def _make(player_count, **kwargs):
        names = [f"P{i:02d}" for i in range(player_count)]
        kwargs.setdefault("solver", solver)
        return Tournament(names, **kwargs)

    return _make


@pytest.fixture
def empty_solver():
    return EmptySolver()
