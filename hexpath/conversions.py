from __future__ import annotations

from .coords import Cube, HexCoordinate


def axial_to_cube(a: HexCoordinate) -> Cube:
    return a.to_cube()


def cube_to_axial(c: Cube) -> HexCoordinate:
    return c.to_axial()
