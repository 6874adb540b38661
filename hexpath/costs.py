"""
Movement-cost lookups consumed by the path search.

A cost function maps a coordinate to the cost of *entering* that tile, or to
:data:`IMPASSABLE` when the tile cannot be entered at all. The search never
mutates what it is given and may call the function several times for the
same coordinate, so lookups should be cheap and consistent.

Usage:
    costs = CostTable(costs={HexCoordinate(1, 0): 3}, blocked={HexCoordinate(2, 0)})
    path = find_path(HexCoordinate(0, 0), HexCoordinate(3, 0), costs)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Iterable, Mapping, Sequence

from .config import NegativeCostPolicy
from .coords import HexCoordinate

# --- Types --------------------------------------------------------------------

Cost = int | float
CostFunction = Callable[[HexCoordinate], Cost | None]

# Returned by a cost function for tiles that cannot be entered.
IMPASSABLE = None


def is_impassable(cost: Cost | None) -> bool:
    """Return ``True`` for :data:`IMPASSABLE` and for infinite costs."""

    return cost is IMPASSABLE or cost == math.inf


def entry_cost(
    cost_of: CostFunction,
    coord: HexCoordinate,
    policy: NegativeCostPolicy = NegativeCostPolicy.IMPASSABLE,
) -> Cost | None:
    """Return what it costs to enter ``coord``, or ``None`` if it cannot be entered.

    Negative costs are resolved through ``policy``: dropped as walls, passed
    through, or rejected with :class:`ValueError`.
    """

    cost = cost_of(coord)
    if is_impassable(cost):
        return None
    if cost < 0:
        if policy is NegativeCostPolicy.ERROR:
            raise ValueError(f"negative movement cost {cost} at {coord}")
        if policy is NegativeCostPolicy.IMPASSABLE:
            return None
    return cost


# --- Adapters -----------------------------------------------------------------


@dataclass
class CostTable:
    """
    Table-backed cost function.

    Coordinates in ``blocked`` are impassable regardless of ``costs``; any
    coordinate missing from ``costs`` falls back to ``default_cost``, which
    may itself be :data:`IMPASSABLE` to bound the searchable area.
    """

    costs: dict[HexCoordinate, Cost] = field(default_factory=dict)
    blocked: set[HexCoordinate] = field(default_factory=set)
    default_cost: Cost | None = 1

    def __call__(self, coord: HexCoordinate) -> Cost | None:
        if coord in self.blocked:
            return IMPASSABLE
        return self.costs.get(coord, self.default_cost)

    def block(self, coord: HexCoordinate) -> None:
        self.blocked.add(coord)

    def set_cost(self, coord: HexCoordinate, cost: Cost) -> None:
        self.blocked.discard(coord)
        self.costs[coord] = cost


def cost_from_mapping(
    costs: Mapping[object, Cost | None],
    *,
    default: Cost | None = IMPASSABLE,
) -> CostFunction:
    """Build a cost function from a mapping keyed by coordinates or ``(q, r)`` pairs."""

    lookup: dict[HexCoordinate, Cost | None] = {}
    for key, value in costs.items():
        lookup[_coerce_coord(key)] = value

    def cost_fn(coord: HexCoordinate) -> Cost | None:
        return lookup.get(coord, default)

    return cost_fn


def uniform_cost(cost: Cost = 1, *, blocked: Iterable[HexCoordinate] = ()) -> CostFunction:
    """Return a cost function charging ``cost`` everywhere except ``blocked``."""

    walls = frozenset(blocked)

    def cost_fn(coord: HexCoordinate) -> Cost | None:
        if coord in walls:
            return IMPASSABLE
        return cost

    return cost_fn


def _coerce_coord(value: object) -> HexCoordinate:
    if isinstance(value, HexCoordinate):
        return value
    if (
        isinstance(value, Sequence)
        and not isinstance(value, str)
        and len(value) == 2
        and all(isinstance(part, int) for part in value)
    ):
        return HexCoordinate(value[0], value[1])
    raise TypeError(f"cost keys must be HexCoordinate or (q, r) pairs, got {value!r}")


__all__ = [
    "IMPASSABLE",
    "Cost",
    "CostFunction",
    "CostTable",
    "cost_from_mapping",
    "entry_cost",
    "is_impassable",
    "uniform_cost",
]
