"""Maximum-weight matching on general graphs.

The round builders only depend on the :class:`MatchingSolver` protocol: given a
weighted undirected edge list over vertices ``0..n-1``, return disjoint vertex
pairs that cover as many vertices as the graph allows and, among those,
maximize the total edge weight.

:class:`CpSatMatchingSolver` implements the protocol with the OR-Tools CP-SAT
solver. Each edge gets a boolean decision variable, each vertex may be covered
by at most one selected edge, and the objective adds a bonus larger than the
sum of all weights to every selected edge so that cardinality always dominates
weight.
"""

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

from collections import defaultdict
from typing import Dict, Optional, Protocol, Sequence

from ortools.sat.python import cp_model

from socialdoubles.constants import (
    DEFAULT_SOLVER_SEED,
    DEFAULT_SOLVER_TIME_LIMIT,
    SOLVER_NUM_WORKERS,
)
from socialdoubles.exceptions import InvalidGraphException, NoMatchingFoundException
from socialdoubles.type_hints import Edge, Matching
from socialdoubles.utils import setup_logger

logger = setup_logger(__name__)


class MatchingSolver(Protocol):
    """Capability contract for maximum-weight (near-)perfect matching."""

    def solve(
        self, edges: Sequence[Edge], vertex_count: Optional[int] = None
    ) -> Matching:
        """Return disjoint ``(a, b)`` vertex pairs with ``a < b``."""
        ...


def validate_edges(edges: Sequence[Edge], vertex_count: Optional[int] = None) -> int:
    """Check an edge list against the solver contract.

    Args:
        edges: Weighted edges ``(a, b, weight)``
        vertex_count: Size of the vertex set; inferred from the edges if None

    Returns:
        The vertex count in effect

    Raises:
        InvalidGraphException: If an edge is malformed, a self loop, out of
            range, or carries a negative or non-integer weight
    """
    for edge in edges:
        if not isinstance(edge, (tuple, list)) or len(edge) != 3:
            raise InvalidGraphException(f"Malformed edge: {edge!r}")
        for vertex in edge[:2]:
            if isinstance(vertex, bool) or not isinstance(vertex, int):
                raise InvalidGraphException(
                    f"Edge {edge!r} has non-integer vertex {vertex!r}"
                )

    if vertex_count is None:
        vertex_count = 1 + max((max(a, b) for a, b, _ in edges), default=-1)
    if vertex_count < 0:
        raise InvalidGraphException(f"Invalid vertex count: {vertex_count}")

    for a, b, weight in edges:
        if a == b:
            raise InvalidGraphException(f"Self loop on vertex {a}")
        if not (0 <= a < vertex_count and 0 <= b < vertex_count):
            raise InvalidGraphException(
                f"Edge ({a}, {b}) outside vertex range 0..{vertex_count - 1}"
            )
        if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
            raise InvalidGraphException(
                f"Edge ({a}, {b}) has invalid weight {weight!r}; "
                "weights must be non-negative integers"
            )
    return vertex_count


def require_perfect_matching(matching: Matching, vertex_count: int) -> Matching:
    """Check that ``matching`` covers every vertex exactly once.

    Raises:
        NoMatchingFoundException: If a vertex is missing, repeated or unknown
    """
    covered = [vertex for pair in matching for vertex in pair]
    if sorted(covered) != list(range(vertex_count)):
        raise NoMatchingFoundException(
            f"Expected a perfect matching over {vertex_count} vertices, "
            f"got {list(matching)}"
        )
    return matching


class CpSatMatchingSolver:
    """Exact maximum-weight maximum-cardinality matching using CP-SAT.

    Args:
        time_limit: Upper bound in seconds for a single solve
        seed: Random seed for the CP-SAT search
    """

    def __init__(
        self,
        time_limit: float = DEFAULT_SOLVER_TIME_LIMIT,
        seed: int = DEFAULT_SOLVER_SEED,
    ):
        self.time_limit = time_limit
        self.seed = seed

    def solve(
        self, edges: Sequence[Edge], vertex_count: Optional[int] = None
    ) -> Matching:
        vertex_count = validate_edges(edges, vertex_count)
        if not edges:
            return []

        # Parallel edges: only the heaviest one can ever be worth selecting
        best: Dict[tuple, int] = {}
        for a, b, weight in edges:
            key = (min(a, b), max(a, b))
            if weight > best.get(key, -1):
                best[key] = weight

        bonus = sum(best.values()) + 1

        model = cp_model.CpModel()
        selected = {
            (a, b): model.new_bool_var(f"edge_{a}_{b}") for (a, b) in best
        }
        incident = defaultdict(list)
        for (a, b), var in selected.items():
            incident[a].append(var)
            incident[b].append(var)
        for vars_at_vertex in incident.values():
            if len(vars_at_vertex) > 1:
                model.add_at_most_one(vars_at_vertex)

        model.maximize(
            sum((weight + bonus) * selected[key] for key, weight in best.items())
        )

        solver = cp_model.CpSolver()
        solver.parameters.max_time_in_seconds = self.time_limit
        solver.parameters.num_workers = SOLVER_NUM_WORKERS
        solver.parameters.random_seed = self.seed
        status = solver.solve(model)

        if status == cp_model.FEASIBLE:
            logger.warning(
                "Matching search stopped after %.1fs without proving optimality",
                self.time_limit,
            )
        elif status != cp_model.OPTIMAL:
            raise NoMatchingFoundException(
                f"CP-SAT matching failed with status: {solver.status_name(status)}"
            )

        matching = sorted(
            key for key, var in selected.items() if solver.boolean_value(var)
        )
        logger.debug(
            "Matched %d of %d vertices over %d edges (objective %d, %.3fs)",
            2 * len(matching),
            vertex_count,
            len(best),
            solver.objective_value,
            solver.wall_time,
        )
        return matching
