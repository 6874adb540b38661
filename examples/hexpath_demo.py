import logging

from hexpath import (
    IMPASSABLE,
    CostTable,
    GridShapeSettings,
    HexCoordinate,
    find_path_with_cost,
)

grid = GridShapeSettings(kind="rectangle", width=9, height=9)
start = HexCoordinate(0, 0)
goal = HexCoordinate(5, 2)  # keep within demo bounds

costs = CostTable(
    costs={coord: 1 for coord in grid.coordinates()},
    blocked={HexCoordinate(1, 0), HexCoordinate(2, 1), HexCoordinate(3, 1)},
    default_cost=IMPASSABLE,
)
costs.set_cost(HexCoordinate(1, 1), 3)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    path, total_cost = find_path_with_cost(start, goal, costs)
    print("path:", " -> ".join(str(c) for c in path))
    print("cost:", total_cost)
