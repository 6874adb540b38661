from __future__ import annotations

import heapq
import logging
import math
from dataclasses import dataclass

from .config import SearchSettings
from .coords import HexCoordinate
from .costs import CostFunction, entry_cost
from .heuristics import hex_distance
from .neighbors import neighbors

logger = logging.getLogger(__name__)

_DEFAULT_SETTINGS = SearchSettings()


@dataclass(slots=True)
class SearchNode:
    """Per-coordinate bookkeeping owned by a single search call."""

    coordinate: HexCoordinate
    parent: HexCoordinate | None = None
    g_cost: float = math.inf
    h_cost: int = 0

    @property
    def f_cost(self) -> float:
        return self.g_cost + self.h_cost


def find_path(
    start: HexCoordinate,
    goal: HexCoordinate,
    cost_of: CostFunction,
    *,
    settings: SearchSettings | None = None,
) -> list[HexCoordinate]:
    """Return the cheapest path from ``start`` to ``goal``, both ends included.

    ``cost_of`` gives the cost of entering a coordinate, or
    :data:`~hexpath.costs.IMPASSABLE`. An empty list means the goal cannot be
    reached.
    """
    path, _ = find_path_with_cost(start, goal, cost_of, settings=settings)
    return path


def find_path_with_cost(
    start: HexCoordinate,
    goal: HexCoordinate,
    cost_of: CostFunction,
    *,
    settings: SearchSettings | None = None,
) -> tuple[list[HexCoordinate], float]:
    """A* over the six-neighbour hex grid. Returns ``(path, total_cost)`` or ``([], inf)``.

    The frontier is ordered by f-cost, then by h-cost so that nodes believed
    closer to the goal win ties. Improved nodes are pushed again rather than
    re-prioritised; stale heap entries are skipped once their coordinate is
    settled.
    """
    if start == goal:
        return [start], 0.0

    policy = (settings or _DEFAULT_SETTINGS).negative_costs
    logger.debug("searching for a path from %s to %s", start, goal)

    settled: set[HexCoordinate] = set()
    nodes: dict[HexCoordinate, SearchNode] = {}

    start_node = SearchNode(start, g_cost=0, h_cost=hex_distance(start, goal))
    nodes[start] = start_node
    frontier: list[tuple[float, int, int, HexCoordinate]] = []
    push_id = 0
    heapq.heappush(frontier, (start_node.f_cost, start_node.h_cost, push_id, start))

    while frontier:
        _, _, _, coord = heapq.heappop(frontier)
        if coord in settled:
            continue
        current = nodes[coord]
        if coord == goal:
            logger.debug(
                "reached %s after settling %d nodes, cost %s",
                goal,
                len(settled),
                current.g_cost,
            )
            return _retrace(nodes, current), float(current.g_cost)
        settled.add(coord)

        for nxt in neighbors(coord):
            if nxt in settled:
                continue
            move_cost = entry_cost(cost_of, nxt, policy)
            if move_cost is None:
                continue

            node = nodes.get(nxt)
            if node is None:
                node = nodes[nxt] = SearchNode(nxt)

            tentative = current.g_cost + move_cost
            if tentative < node.g_cost:
                node.parent = coord
                node.g_cost = tentative
                node.h_cost = hex_distance(nxt, goal)
                push_id += 1
                heapq.heappush(frontier, (node.f_cost, node.h_cost, push_id, nxt))

    logger.debug("no path from %s to %s after settling %d nodes", start, goal, len(settled))
    return [], math.inf


def _retrace(nodes: dict[HexCoordinate, SearchNode], end: SearchNode) -> list[HexCoordinate]:
    path: list[HexCoordinate] = []
    node: SearchNode | None = end
    while node is not None:
        path.append(node.coordinate)
        node = nodes[node.parent] if node.parent is not None else None
    path.reverse()
    return path
