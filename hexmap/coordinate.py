"""Axial hex cell coordinates."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple

from .config import ANGLE_PRECISION
from .rounding import snap

if TYPE_CHECKING:  # pragma: no cover
    from .edge import Edge
    from .transform import Transform
    from .vertex import Vertex

SQRT3 = math.sqrt(3.0)

# Neighbor offsets, clockwise from east (pointy-top reference)
HEX_DIRECTIONS: List[Tuple[int, int]] = [
    (+1, 0),   # E
    (0, +1),   # SE
    (-1, +1),  # SW
    (-1, 0),   # W
    (0, -1),   # NW
    (+1, -1),  # NE
]


@dataclass(frozen=True)
class CellCoordinate:
    """A hex cell in axial ``(q, r)`` form.

    The third cube coordinate is implicit: ``s = -q - r``. Instances are
    immutable and hash by value, so they can key the grid's tile mapping.
    """

    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    @property
    def cube(self) -> Tuple[int, int, int]:
        return (self.q, self.r, self.s)

    def __add__(self, other: CellCoordinate) -> CellCoordinate:
        return CellCoordinate(self.q + other.q, self.r + other.r)

    def __sub__(self, other: CellCoordinate) -> CellCoordinate:
        return CellCoordinate(self.q - other.q, self.r - other.r)

    def __mul__(self, k: int) -> CellCoordinate:
        return CellCoordinate(self.q * k, self.r * k)

    __rmul__ = __mul__

    def __neg__(self) -> CellCoordinate:
        return CellCoordinate(-self.q, -self.r)

    def __str__(self) -> str:
        return f"{self.q},{self.r}"

    # ------------------------------------------------------------------
    # Metric
    # ------------------------------------------------------------------

    def distance(self, other: CellCoordinate) -> int:
        """Return the hex distance ``(|dq| + |dr| + |dq + dr|) / 2``."""
        dq = self.q - other.q
        dr = self.r - other.r
        return (abs(dq) + abs(dr) + abs(dq + dr)) // 2

    def direction(self, other: CellCoordinate) -> float:
        """Angle in degrees, ``[0, 360)``, of the vector from ``self`` to ``other``.

        The vector is measured in the pointy-top plane with ``r`` growing
        along +y. Angles that fall on a neighbor axis come out as exact
        multiples of 60. Returns ``0.0`` when both coordinates are equal.
        """
        dq = other.q - self.q
        dr = other.r - self.r
        if dq == 0 and dr == 0:
            return 0.0
        x = SQRT3 * dq + SQRT3 / 2.0 * dr
        y = 3.0 / 2.0 * dr
        angle = math.degrees(math.atan2(y, x))
        if angle < 0.0:
            angle += 360.0
        angle = snap(angle, ANGLE_PRECISION)
        return 0.0 if angle >= 360.0 else angle

    # ------------------------------------------------------------------
    # Neighborhood
    # ------------------------------------------------------------------

    def neighbor(self, direction: int) -> CellCoordinate:
        """Neighbor in ``HEX_DIRECTIONS`` order; ``direction`` is taken mod 6."""
        dq, dr = HEX_DIRECTIONS[direction % 6]
        return CellCoordinate(self.q + dq, self.r + dr)

    def neighbors(self) -> List[CellCoordinate]:
        return [self.neighbor(i) for i in range(6)]

    def ring(self, radius: int) -> List[CellCoordinate]:
        """Cells at exactly ``radius`` steps, walked clockwise from the SW corner."""
        if radius < 0:
            raise ValueError("radius must be >= 0")
        if radius == 0:
            return [self]
        results: List[CellCoordinate] = []
        cell = self + CellCoordinate(*HEX_DIRECTIONS[2]) * radius
        for i in range(6):
            for _ in range(radius):
                results.append(cell)
                cell = cell.neighbor(i + 4)
        return results

    def spiral(self, radius: int) -> List[CellCoordinate]:
        """All cells within ``radius``, ring by ring starting at ``self``."""
        if radius < 0:
            raise ValueError("radius must be >= 0")
        results: List[CellCoordinate] = []
        for k in range(radius + 1):
            results.extend(self.ring(k))
        return results

    def vertices(self) -> List["Vertex"]:
        """The six corners of this cell, in ``VertexDirection`` order."""
        from .vertex import Vertex, VertexDirection

        corners = []
        for d in VertexDirection:
            offset = Vertex.from_direction(d)
            corners.append(Vertex(self.q + offset.q, self.r + offset.r, offset.spin))
        return corners

    def edges(self) -> List["Edge"]:
        """The six sides of this cell in canonical form, clockwise from east."""
        from .edge import Edge

        return [Edge.from_side(self, side) for side in range(6)]

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def rotate(self, steps: int, center: Optional[CellCoordinate] = None) -> CellCoordinate:
        """Rotate by ``steps`` x 60 degrees clockwise around ``center`` (origin by default)."""
        pivot = center if center is not None else CellCoordinate(0, 0)
        q, r = self.q - pivot.q, self.r - pivot.r
        for _ in range(steps % 6):
            q, r = -r, q + r
        return CellCoordinate(q + pivot.q, r + pivot.r)

    def reflect_q(self) -> CellCoordinate:
        """Mirror across the q axis (q kept, r and s swapped)."""
        return CellCoordinate(self.q, self.s)

    def reflect_r(self) -> CellCoordinate:
        return CellCoordinate(self.s, self.r)

    def reflect_s(self) -> CellCoordinate:
        return CellCoordinate(self.r, self.q)

    def apply_transform(self, transform: "Transform") -> CellCoordinate:
        """Return this coordinate mapped through ``transform``."""
        return transform.apply(self)
