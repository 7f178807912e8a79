"""Hex side (edge) coordinates.

Every side is shared by two cells. To give each physical edge a single key
only the west, north-west and north-east sides of a cell are ever stored;
the other three sides belong to the neighbor across them.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Dict, List

from .coordinate import HEX_DIRECTIONS, CellCoordinate

if TYPE_CHECKING:  # pragma: no cover
    from .vertex import Vertex


class EdgeDirection(IntEnum):
    """Canonical sides; values are indices into ``HEX_DIRECTIONS``."""

    WEST = 3
    NORTH_WEST = 4
    NORTH_EAST = 5


@dataclass(frozen=True)
class Edge:
    q: int
    r: int
    direction: EdgeDirection

    def __post_init__(self) -> None:
        # Reject the mirrored sides (E, SE, SW) so no edge gets two keys
        object.__setattr__(self, "direction", EdgeDirection(self.direction))

    @classmethod
    def from_side(cls, cell: CellCoordinate, side: int) -> "Edge":
        """Canonical edge for ``side`` (``HEX_DIRECTIONS`` index, taken mod 6) of ``cell``."""
        side %= 6
        if side >= 3:
            return cls(cell.q, cell.r, EdgeDirection(side))
        other = cell.neighbor(side)
        return cls(other.q, other.r, EdgeDirection(side + 3))

    @classmethod
    def between(cls, a: CellCoordinate, b: CellCoordinate) -> "Edge":
        """The edge separating two neighboring cells."""
        delta = (b.q - a.q, b.r - a.r)
        try:
            side = HEX_DIRECTIONS.index(delta)
        except ValueError:
            raise ValueError(f"cells {a} and {b} are not adjacent") from None
        return cls.from_side(a, side)

    @property
    def cell(self) -> CellCoordinate:
        return CellCoordinate(self.q, self.r)

    def adjacent_hexes(self) -> List[CellCoordinate]:
        """The two cells this edge separates."""
        return [self.cell, self.cell.neighbor(self.direction)]

    def endpoints(self) -> List["Vertex"]:
        """The two corners at the ends of this edge."""
        from .vertex import Vertex, VertexSpin

        q, r = self.q, self.r
        if self.direction is EdgeDirection.WEST:
            return [Vertex(q, r - 1, VertexSpin.DOWN), Vertex(q - 1, r + 1, VertexSpin.UP)]
        if self.direction is EdgeDirection.NORTH_EAST:
            return [Vertex(q, r, VertexSpin.UP), Vertex(q + 1, r - 1, VertexSpin.DOWN)]
        return [Vertex(q, r - 1, VertexSpin.DOWN), Vertex(q, r, VertexSpin.UP)]

    def to_dict(self) -> Dict[str, Any]:
        return {"q": self.q, "r": self.r, "direction": self.direction.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Edge":
        missing = {"q", "r", "direction"}.difference(data)
        if missing:
            raise ValueError(f"missing keys: {sorted(missing)}")
        try:
            direction = EdgeDirection[str(data["direction"]).upper()]
        except KeyError:
            raise ValueError(f"invalid edge direction {data['direction']!r}") from None
        return cls(int(data["q"]), int(data["r"]), direction)
