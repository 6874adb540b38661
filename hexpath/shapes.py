"""Enumerate the coordinates of common grid outlines around the origin."""

from __future__ import annotations

from .coords import HexCoordinate
from .neighbors import neighbors_within

_ORIGIN = HexCoordinate(0, 0)


def generate_hexagon(radius: int) -> list[HexCoordinate]:
    return neighbors_within(_ORIGIN, radius)


def generate_rectangle(width: int, height: int) -> list[HexCoordinate]:
    # Bounds are inclusive; the outline is a rhombus in pixel space.
    return [HexCoordinate(q, r) for q in range(width + 1) for r in range(height + 1)]


def generate_triangle(size: int) -> list[HexCoordinate]:
    return [HexCoordinate(q, r) for q in range(size + 1) for r in range(size - q + 1)]


__all__ = ["generate_hexagon", "generate_rectangle", "generate_triangle"]
