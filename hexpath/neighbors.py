from __future__ import annotations

from .coords import Direction, HexCoordinate

_AXIAL_DIRS: tuple[tuple[int, int], ...] = tuple(d.value for d in Direction)


def neighbor(a: HexCoordinate, direction: Direction) -> HexCoordinate:
    if not isinstance(direction, Direction):
        raise TypeError("direction must be a Direction member")
    return HexCoordinate(a.q + direction.dq, a.r + direction.dr)


def neighbors(a: HexCoordinate) -> list[HexCoordinate]:
    """Return the six adjacent coordinates in :class:`Direction` order."""
    return [HexCoordinate(a.q + dq, a.r + dr) for dq, dr in _AXIAL_DIRS]


def is_neighbor(a: HexCoordinate, b: HexCoordinate) -> bool:
    return (b.q - a.q, b.r - a.r) in _AXIAL_DIRS


def neighbors_within(a: HexCoordinate, radius: int) -> list[HexCoordinate]:
    """Return every coordinate at most ``radius`` steps from ``a``, ``a`` included.

    Scans the axial bounding diamond column by column, so the result holds
    exactly ``3 * radius**2 + 3 * radius + 1`` coordinates. A negative radius
    gives an empty list.
    """
    found: list[HexCoordinate] = []
    for dq in range(-radius, radius + 1):
        for dr in range(max(-radius, -dq - radius), min(radius, -dq + radius) + 1):
            found.append(HexCoordinate(a.q + dq, a.r + dr))
    return found
