"""Hex corner (vertex) coordinates.

A vertex reuses the axial ``(q, r)`` pair of one of its cells and adds a
*spin* that tells the two corners owned by that pair apart: ``UP`` is the
top corner of cell ``(q, r)`` and ``DOWN`` its bottom corner (pointy-top
reference). Corners of equal spin are never joined by an edge.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, List

from .coordinate import CellCoordinate
from .edge import Edge, EdgeDirection
from . import rounding


class VertexSpin(Enum):
    """Which side of the vertex has two hexagons."""

    UP = "UP"
    DOWN = "DOWN"


class VertexDirection(IntEnum):
    """Corner of a hexagon, clockwise from the top one."""

    UP = 0
    UP_RIGHT = 1
    DOWN_RIGHT = 2
    DOWN = 3
    DOWN_LEFT = 4
    UP_LEFT = 5

    @classmethod
    def from_index(cls, value: int) -> "VertexDirection":
        return cls(value % 6)

    def to_name(self) -> str:
        return self.name

    @classmethod
    def from_name(cls, name: str) -> "VertexDirection":
        try:
            return cls[str(name).upper()]
        except KeyError:
            raise ValueError(f"invalid vertex direction {name!r}") from None


# Vertex offset of each corner relative to cell (0, 0)
_DIRECTION_OFFSETS = {
    VertexDirection.UP: (0, 0, VertexSpin.UP),
    VertexDirection.UP_RIGHT: (1, -1, VertexSpin.DOWN),
    VertexDirection.DOWN_RIGHT: (0, 1, VertexSpin.UP),
    VertexDirection.DOWN: (0, 0, VertexSpin.DOWN),
    VertexDirection.DOWN_LEFT: (-1, 1, VertexSpin.UP),
    VertexDirection.UP_LEFT: (0, -1, VertexSpin.DOWN),
}

# Parity buckets for vertex distance
_SAME, _NS, _SN = 0, 1, 2

# [off_axis][parity][sector]
PARITY_ADJUSTMENTS = (
    # On axis
    (
        (0, 0, 0, 0, 0, 0),    # Same
        (1, 3, 3, 1, -1, -1),  # NS
        (1, -1, -1, 1, 3, 3),  # SN
    ),
    # Off axis
    (
        (0, 0, 0, 0, 0, 0),     # Same
        (1, 3, 1, -1, -1, -1),  # NS
        (-1, -1, -1, 1, 3, 1),  # SN
    ),
)


@dataclass(frozen=True)
class Vertex:
    q: int = 0
    r: int = 0
    spin: VertexSpin = VertexSpin.UP

    @classmethod
    def from_direction(cls, direction: int) -> "Vertex":
        """Corner ``direction`` of cell ``(0, 0)``; any int is accepted mod 6."""
        q, r, spin = _DIRECTION_OFFSETS[VertexDirection.from_index(direction)]
        return cls(q, r, spin)

    @classmethod
    def from_cell(cls, cell: CellCoordinate, spin: VertexSpin) -> "Vertex":
        return cls(cell.q, cell.r, spin)

    @property
    def cell(self) -> CellCoordinate:
        return CellCoordinate(self.q, self.r)

    def adjacent_hexes(self) -> List[CellCoordinate]:
        """The three cells sharing this corner."""
        q, r = self.q, self.r
        if self.spin is VertexSpin.UP:
            return [CellCoordinate(q, r), CellCoordinate(q, r - 1), CellCoordinate(q + 1, r - 1)]
        return [CellCoordinate(q, r), CellCoordinate(q, r + 1), CellCoordinate(q - 1, r + 1)]

    def adjacent_vertices(self) -> List["Vertex"]:
        """The three corners one edge away; always of the opposite spin."""
        q, r = self.q, self.r
        if self.spin is VertexSpin.UP:
            down = VertexSpin.DOWN
            return [Vertex(q + 1, r - 1, down), Vertex(q, r - 1, down), Vertex(q + 1, r - 2, down)]
        up = VertexSpin.UP
        return [Vertex(q, r + 1, up), Vertex(q - 1, r + 2, up), Vertex(q - 1, r + 1, up)]

    def adjacent_edges(self) -> List[Edge]:
        """The three edges meeting at this corner, in canonical form."""
        q, r = self.q, self.r
        if self.spin is VertexSpin.UP:
            return [
                Edge(q + 1, r - 1, EdgeDirection.WEST),
                Edge(q, r, EdgeDirection.NORTH_EAST),
                Edge(q, r, EdgeDirection.NORTH_WEST),
            ]
        return [
            Edge(q, r + 1, EdgeDirection.NORTH_WEST),
            Edge(q, r + 1, EdgeDirection.WEST),
            Edge(q - 1, r + 1, EdgeDirection.NORTH_EAST),
        ]

    def distance(self, other: "Vertex") -> int:
        """Number of edges walked between two corners."""
        if self.q == other.q and self.r == other.r:
            return 0 if self.spin is other.spin else 3

        a, b = self.cell, other.cell
        dist = a.distance(b)
        angle = a.direction(b)

        if self.spin is other.spin:
            parity = _SAME
        elif self.spin is VertexSpin.UP:
            parity = _NS
        else:
            parity = _SN

        sector = int(angle // 60) % 6
        off_axis = int(int(rounding.round_nearest(angle)) % 60 != 0)

        return 2 * dist + PARITY_ADJUSTMENTS[off_axis][parity][sector]

    def to_dict(self) -> Dict[str, Any]:
        return {"q": self.q, "r": self.r, "spin": self.spin.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Vertex":
        missing = {"q", "r", "spin"}.difference(data)
        if missing:
            raise ValueError(f"missing keys: {sorted(missing)}")
        try:
            spin = VertexSpin[str(data["spin"]).upper()]
        except KeyError:
            raise ValueError(f"invalid spin {data['spin']!r}") from None
        return cls(int(data["q"]), int(data["r"]), spin)
