from __future__ import annotations

from .coords import Cube, HexCoordinate


def hex_distance_cube(a: Cube, b: Cube) -> int:
    return (a - b).length


def hex_distance(a: HexCoordinate, b: HexCoordinate) -> int:
    """Number of single-hex steps between ``a`` and ``b``.

    Half the cube Manhattan distance. Used as the A* heuristic, which stays
    admissible as long as every passable tile costs at least one.
    """
    dq = a.q - b.q
    dr = a.r - b.r
    dz = -dq - dr
    return (abs(dq) + abs(dr) + abs(dz)) // 2
