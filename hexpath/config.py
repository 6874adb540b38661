"""Validated settings models for path searches and grid generation."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .coords import HexCoordinate


class NegativeCostPolicy(str, Enum):
    """How the search reacts when a cost function reports a negative cost."""

    IMPASSABLE = "impassable"
    ALLOW = "allow"
    ERROR = "error"


class SearchSettings(BaseModel):
    """Knobs for :func:`~hexpath.astar.find_path`.

    Negative tile costs break the optimality guarantees of A*. By default
    such tiles are treated as walls; ``allow`` passes them through untouched
    and ``error`` raises :class:`ValueError` on the first one seen.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    negative_costs: NegativeCostPolicy = Field(default=NegativeCostPolicy.IMPASSABLE)


class GridShapeKind(str, Enum):
    """Supported grid outlines."""

    HEXAGON = "hexagon"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"


class GridShapeSettings(BaseModel):
    """Describes the outline of a grid to enumerate.

    Only the fields relevant to ``kind`` are read: ``radius`` for hexagons,
    ``width`` and ``height`` for rectangles, ``size`` for triangles.
    """

    model_config = ConfigDict(extra="forbid")

    kind: GridShapeKind = Field(default=GridShapeKind.HEXAGON)
    radius: int = Field(default=5, ge=0)
    width: int = Field(default=10, ge=0)
    height: int = Field(default=10, ge=0)
    size: int = Field(default=5, ge=0)

    @property
    def cell_count(self) -> int:
        """Number of coordinates :meth:`coordinates` will produce."""

        if self.kind is GridShapeKind.HEXAGON:
            return 3 * self.radius * self.radius + 3 * self.radius + 1
        if self.kind is GridShapeKind.RECTANGLE:
            return (self.width + 1) * (self.height + 1)
        return (self.size + 1) * (self.size + 2) // 2

    def coordinates(self) -> list[HexCoordinate]:
        """Enumerate the grid described by these settings."""

        from .shapes import generate_hexagon, generate_rectangle, generate_triangle

        if self.kind is GridShapeKind.HEXAGON:
            return generate_hexagon(self.radius)
        if self.kind is GridShapeKind.RECTANGLE:
            return generate_rectangle(self.width, self.height)
        return generate_triangle(self.size)


__all__ = [
    "GridShapeKind",
    "GridShapeSettings",
    "NegativeCostPolicy",
    "SearchSettings",
]
