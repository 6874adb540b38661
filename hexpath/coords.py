"""Value types for pointy-top hex grids in axial and cube form."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


@dataclass(frozen=True, slots=True)
class HexCoordinate:
    """Axial hex-grid coordinate.

    ``q`` runs along the columns and ``r`` along the rows. The third cube
    axis ``z`` is derived on demand and never stored, so equality and hashing
    only ever see ``(q, r)``.
    """

    q: int
    r: int

    @property
    def z(self) -> int:
        return -self.q - self.r

    def to_cube(self) -> Cube:
        return Cube(self.q, self.r, self.z)

    def __add__(self, other: HexCoordinate) -> HexCoordinate:
        if not isinstance(other, HexCoordinate):
            return NotImplemented
        return HexCoordinate(self.q + other.q, self.r + other.r)

    def __sub__(self, other: HexCoordinate) -> HexCoordinate:
        if not isinstance(other, HexCoordinate):
            return NotImplemented
        return HexCoordinate(self.q - other.q, self.r - other.r)

    def __str__(self) -> str:
        return f"({self.q}, {self.r})"

    def distance_to(self, other: HexCoordinate) -> int:
        from .heuristics import hex_distance

        return hex_distance(self, other)

    def is_neighbor(self, other: HexCoordinate) -> bool:
        from .neighbors import is_neighbor

        return is_neighbor(self, other)

    def neighbor(self, direction: Direction) -> HexCoordinate:
        from .neighbors import neighbor

        return neighbor(self, direction)

    def neighbors(self) -> list[HexCoordinate]:
        from .neighbors import neighbors

        return neighbors(self)

    def neighbors_within(self, radius: int) -> list[HexCoordinate]:
        from .neighbors import neighbors_within

        return neighbors_within(self, radius)


@dataclass(frozen=True, slots=True)
class Cube:
    """All three hex axes spelled out; ``q + r + z`` is always zero.

    Unpacks as ``q, r, z``. Differences between cubes are cubes too, and
    :attr:`length` is the step count from the origin.
    """

    q: int
    r: int
    z: int

    def __post_init__(self) -> None:
        if self.q + self.r + self.z:
            raise ValueError(f"cube axes must sum to zero, got ({self.q}, {self.r}, {self.z})")

    def __iter__(self) -> Iterator[int]:
        yield self.q
        yield self.r
        yield self.z

    def __sub__(self, other: Cube) -> Cube:
        if not isinstance(other, Cube):
            return NotImplemented
        return Cube(self.q - other.q, self.r - other.r, self.z - other.z)

    @property
    def length(self) -> int:
        return (abs(self.q) + abs(self.r) + abs(self.z)) // 2

    def to_axial(self) -> HexCoordinate:
        return HexCoordinate(self.q, self.r)


class Direction(Enum):
    """The six edges of a pointy-top hexagon, clockwise from the top right.

    Declaration order is the neighbour enumeration order used everywhere.
    """

    TOP_RIGHT = (1, -1)
    RIGHT = (1, 0)
    BOTTOM_RIGHT = (0, 1)
    BOTTOM_LEFT = (-1, 1)
    LEFT = (-1, 0)
    TOP_LEFT = (0, -1)

    @property
    def dq(self) -> int:
        return self.value[0]

    @property
    def dr(self) -> int:
        return self.value[1]

    @property
    def offset(self) -> HexCoordinate:
        return HexCoordinate(self.dq, self.dr)
