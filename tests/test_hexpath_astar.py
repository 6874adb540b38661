import math

import pytest

from hexpath import (
    IMPASSABLE,
    CostTable,
    HexCoordinate,
    SearchSettings,
    cost_from_mapping,
    find_path,
    find_path_with_cost,
    generate_hexagon,
    hex_distance,
    is_neighbor,
    path_travel_cost,
    uniform_cost,
)


def bounded(radius: int = 5, **overrides) -> CostTable:
    """Cost 1 inside a hexagon of ``radius`` around the origin, walls outside."""
    costs = {c: 1 for c in generate_hexagon(radius)}
    costs.update(overrides.pop("costs", {}))
    return CostTable(costs=costs, default_cost=IMPASSABLE, **overrides)


def assert_contiguous(path):
    for a, b in zip(path, path[1:]):
        assert is_neighbor(a, b)


def test_start_equals_goal_returns_single_cell():
    def explode(coord):
        raise AssertionError("cost function should not be consulted")

    s = HexCoordinate(4, -4)
    assert find_path(s, s, explode) == [s]
    assert find_path_with_cost(s, s, explode) == ([s], 0)


def test_two_step_corridor():
    corridor = {(0, 0): 1, (1, 0): 1, (2, 0): 1}
    path = find_path(HexCoordinate(0, 0), HexCoordinate(2, 0), cost_from_mapping(corridor))
    assert path == [HexCoordinate(0, 0), HexCoordinate(1, 0), HexCoordinate(2, 0)]


@pytest.mark.parametrize(
    ("start", "goal"),
    [
        (HexCoordinate(0, 0), HexCoordinate(4, 0)),
        (HexCoordinate(0, 0), HexCoordinate(0, 4)),
        (HexCoordinate(2, 1), HexCoordinate(5, -2)),
        (HexCoordinate(0, 0), HexCoordinate(-3, 3)),
    ],
)
def test_straight_line_corridor_is_followed(start, goal):
    steps = hex_distance(start, goal)
    dq = (goal.q - start.q) // steps
    dr = (goal.r - start.r) // steps
    line = {HexCoordinate(start.q + dq * i, start.r + dr * i): 1 for i in range(steps + 1)}

    path = find_path(start, goal, cost_from_mapping(line))
    assert len(path) == steps + 1
    assert path[0] == start and path[-1] == goal
    assert set(path) == set(line)
    assert_contiguous(path)


def test_blocked_detour():
    start = HexCoordinate(0, 0)
    goal = HexCoordinate(2, 0)
    path, cost = find_path_with_cost(start, goal, bounded(blocked={HexCoordinate(1, 0)}))
    assert path[0] == start and path[-1] == goal
    assert HexCoordinate(1, 0) not in path
    assert cost == 3
    assert len(path) == 4
    assert_contiguous(path)


def test_prefers_cheap_long_route_over_expensive_short_one():
    start = HexCoordinate(0, 0)
    goal = HexCoordinate(2, 0)
    cost_of = bounded(costs={HexCoordinate(1, 0): 10})
    path, cost = find_path_with_cost(start, goal, cost_of)
    assert HexCoordinate(1, 0) not in path
    assert cost == 3
    assert path_travel_cost(path, cost_of) == cost


def test_surrounded_goal_is_unreachable():
    goal = HexCoordinate(2, -1)
    cost_of = bounded(blocked=set(goal.neighbors()))
    assert find_path(HexCoordinate(-2, 1), goal, cost_of) == []
    assert find_path_with_cost(HexCoordinate(-2, 1), goal, cost_of) == ([], math.inf)


def test_impassable_goal_is_unreachable():
    goal = HexCoordinate(3, 0)
    assert find_path(HexCoordinate(0, 0), goal, bounded(blocked={goal})) == []


def test_infinite_cost_counts_as_impassable():
    wall = {HexCoordinate(1, 0): math.inf}
    path = find_path(HexCoordinate(0, 0), HexCoordinate(2, 0), bounded(costs=wall))
    assert HexCoordinate(1, 0) not in path
    assert len(path) == 4


@pytest.mark.parametrize("k", [1, 2, 7])
@pytest.mark.parametrize(
    "goal",
    [HexCoordinate(5, 0), HexCoordinate(-3, 6), HexCoordinate(4, 4), HexCoordinate(-2, -2)],
)
def test_uniform_cost_is_optimal(k, goal):
    start = HexCoordinate(0, 0)
    path, cost = find_path_with_cost(start, goal, uniform_cost(k))
    assert cost == k * hex_distance(start, goal)
    assert len(path) == hex_distance(start, goal) + 1
    assert_contiguous(path)


def test_unbounded_search_walks_around_wall():
    # A wall of three cells between start and goal on an otherwise open plane.
    wall = [HexCoordinate(2, -1), HexCoordinate(2, 0), HexCoordinate(2, 1)]
    path, cost = find_path_with_cost(HexCoordinate(0, 0), HexCoordinate(4, 0), uniform_cost(blocked=wall))
    assert not set(path) & set(wall)
    assert cost == len(path) - 1
    # Every route has to cross column q=2 at r <= -2 or r >= 2.
    assert cost == 6
    assert_contiguous(path)


def test_cost_of_entering_start_is_not_charged():
    cost_of = bounded(costs={HexCoordinate(0, 0): 50})
    _, cost = find_path_with_cost(HexCoordinate(0, 0), HexCoordinate(0, 2), cost_of)
    assert cost == 2


def test_negative_cost_treated_as_wall_by_default():
    cost_of = bounded(costs={HexCoordinate(1, 0): -1})
    path, cost = find_path_with_cost(HexCoordinate(0, 0), HexCoordinate(2, 0), cost_of)
    assert HexCoordinate(1, 0) not in path
    assert cost == 3


def test_negative_cost_allowed_when_configured():
    cost_of = bounded(costs={HexCoordinate(1, 0): -1})
    settings = SearchSettings(negative_costs="allow")
    path, cost = find_path_with_cost(HexCoordinate(0, 0), HexCoordinate(2, 0), cost_of, settings=settings)
    assert path == [HexCoordinate(0, 0), HexCoordinate(1, 0), HexCoordinate(2, 0)]
    assert cost == 0


def test_negative_cost_raises_when_configured():
    cost_of = bounded(costs={HexCoordinate(1, 0): -1})
    settings = SearchSettings(negative_costs="error")
    with pytest.raises(ValueError, match="negative movement cost"):
        find_path(HexCoordinate(0, 0), HexCoordinate(2, 0), cost_of, settings=settings)


def test_impassable_cells_are_never_expanded():
    seen = []

    def cost_of(coord):
        seen.append(coord)
        if coord in {HexCoordinate(0, 0), HexCoordinate(1, 0), HexCoordinate(2, 0)}:
            return 1
        return IMPASSABLE

    find_path(HexCoordinate(0, 0), HexCoordinate(2, 0), cost_of)
    # Only the start and (1, 0) are expanded: six lookups each, minus settled cells.
    assert len(seen) == 6 + 5


def recording(costs):
    """Wrap a ``(q, r)`` cost mapping, logging every lookup in order."""
    lookup = cost_from_mapping(costs)
    calls = []

    def cost_of(coord):
        calls.append(coord)
        return lookup(coord)

    return cost_of, calls


def test_equal_f_cost_prefers_node_nearer_the_goal():
    # (1, 0): g=1 h=3 and (0, 1): g=2 h=2 tie on f=4; (0, 1) must expand first.
    cost_of, calls = recording({(1, 0): 1, (0, 1): 2, (0, 2): 1, (0, 3): 1, (2, -1): 1})
    path = find_path(HexCoordinate(0, 0), HexCoordinate(0, 3), cost_of)

    assert calls[:6] == HexCoordinate(0, 0).neighbors()
    # First lookup of the second expansion is the first neighbour of (0, 1).
    assert calls[6] == HexCoordinate(1, 0)
    assert path == [HexCoordinate(0, 0), HexCoordinate(0, 1), HexCoordinate(0, 2), HexCoordinate(0, 3)]


def test_node_reached_again_more_cheaply_is_rerouted():
    # (2, 0) is first reached through (2, -1) at g=4, then through (1, 0) at g=3.
    # The g=4 entry stays in the frontier and must be skipped once (2, 0) settles.
    costs = {(1, -1): 1, (2, -1): 2, (1, 0): 2, (2, 0): 1, (3, 0): 3, (4, -1): 1}
    cost_of, calls = recording(costs)
    path, cost = find_path_with_cost(HexCoordinate(0, 0), HexCoordinate(4, -1), cost_of)

    assert path == [
        HexCoordinate(0, 0),
        HexCoordinate(1, 0),
        HexCoordinate(2, 0),
        HexCoordinate(3, 0),
        HexCoordinate(4, -1),
    ]
    assert cost == 7
    # (3, 0) is only looked up by expanding (2, 0); a second expansion would repeat it.
    assert calls.count(HexCoordinate(3, 0)) == 1


def test_cost_is_reported_as_float():
    s = HexCoordinate(0, 0)
    _, same = find_path_with_cost(s, s, uniform_cost())
    _, cost = find_path_with_cost(s, HexCoordinate(3, 0), uniform_cost(2))
    assert isinstance(same, float) and same == 0.0
    assert isinstance(cost, float) and cost == 6.0
