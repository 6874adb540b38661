"""Hex-grid coordinate maths and A* path search."""

from .coords import Cube, Direction, HexCoordinate
from .conversions import axial_to_cube, cube_to_axial
from .heuristics import hex_distance, hex_distance_cube
from .neighbors import is_neighbor, neighbor, neighbors, neighbors_within
from .costs import (
    IMPASSABLE,
    CostFunction,
    CostTable,
    cost_from_mapping,
    entry_cost,
    is_impassable,
    uniform_cost,
)
from .config import GridShapeKind, GridShapeSettings, NegativeCostPolicy, SearchSettings
from .astar import find_path, find_path_with_cost
from .shapes import generate_hexagon, generate_rectangle, generate_triangle
from .graph import build_movement_graph, path_travel_cost

__version__ = "0.1.0"

__all__ = [
    "Cube",
    "Direction",
    "HexCoordinate",
    "axial_to_cube",
    "cube_to_axial",
    "hex_distance",
    "hex_distance_cube",
    "is_neighbor",
    "neighbor",
    "neighbors",
    "neighbors_within",
    "IMPASSABLE",
    "CostFunction",
    "CostTable",
    "cost_from_mapping",
    "entry_cost",
    "is_impassable",
    "uniform_cost",
    "GridShapeKind",
    "GridShapeSettings",
    "NegativeCostPolicy",
    "SearchSettings",
    "find_path",
    "find_path_with_cost",
    "generate_hexagon",
    "generate_rectangle",
    "generate_triangle",
    "build_movement_graph",
    "path_travel_cost",
    "__version__",
]
