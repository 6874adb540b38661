"""Export hex regions as weighted networkx graphs."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Iterable, Sequence, TypeAlias

import networkx as nx

from .config import SearchSettings
from .coords import HexCoordinate
from .costs import CostFunction, entry_cost
from .neighbors import neighbors

logger = logging.getLogger(__name__)

if TYPE_CHECKING:  # pragma: no cover - typing only
    MovementGraph: TypeAlias = nx.DiGraph[HexCoordinate]
else:  # pragma: no cover - runtime alias without subscripting
    MovementGraph: TypeAlias = nx.DiGraph


def build_movement_graph(
    coordinates: Iterable[HexCoordinate],
    cost_of: CostFunction,
    *,
    settings: SearchSettings | None = None,
) -> MovementGraph:
    """Return a directed graph of moves between passable ``coordinates``.

    The edge ``a -> b`` is weighted with the cost of entering ``b``. Tiles are
    kept or dropped under the same ``settings`` the path search would use, so
    the graph charges exactly what :func:`~hexpath.astar.find_path` charges.
    """

    policy = (settings or SearchSettings()).negative_costs
    graph: MovementGraph = nx.DiGraph()
    costs: dict[HexCoordinate, float] = {}
    for coord in coordinates:
        cost = entry_cost(cost_of, coord, policy)
        if cost is None:
            continue
        costs[coord] = float(cost)
        graph.add_node(coord, coord=coord)

    for coord in costs:
        for nxt in neighbors(coord):
            if nxt in costs:
                graph.add_edge(coord, nxt, weight=costs[nxt])

    logger.debug(
        "movement graph built with %d nodes and %d edges",
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )
    return graph


def path_travel_cost(
    path: Sequence[HexCoordinate],
    cost_of: CostFunction,
    *,
    settings: SearchSettings | None = None,
) -> float:
    """Return the total cost of walking ``path``, or ``inf`` if any step is blocked."""

    if len(path) < 2:
        return 0.0
    policy = (settings or SearchSettings()).negative_costs
    total = 0.0
    for coord in path[1:]:
        cost = entry_cost(cost_of, coord, policy)
        if cost is None:
            return math.inf
        total += float(cost)
    return total


__all__ = ["MovementGraph", "build_movement_graph", "path_travel_cost"]
