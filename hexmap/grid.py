"""The grid: owner of cell, vertex and edge payloads."""
from __future__ import annotations

import copy
import logging
import math
from enum import Enum
from typing import Dict, Generic, Mapping, Optional, Tuple, TypeVar

from .config import DEFAULTS
from .coordinate import SQRT3, CellCoordinate
from .edge import Edge
from .errors import CollectionAccessError
from .shape import Shape
from .storage import DictTileStore, TileStore
from .vertex import Vertex

logger = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V")
E = TypeVar("E")

WorldPos = Tuple[float, float]


class Orientation(Enum):
    """Whether the top of each hexagon is a flat side or a corner."""

    FLAT_TOP = "FLAT_TOP"
    POINTY_TOP = "POINTY_TOP"


class Grid(Generic[T, V, E]):
    """A grid of tiles with world-space conversion helpers.

    ``tiles`` maps :class:`CellCoordinate` to ``T`` through a
    :class:`TileStore`; ``vertices`` and ``edges`` are plain dicts keyed by
    :class:`Vertex` and :class:`Edge`. All three start empty.

    The world space can be anything: a game world, the screen, or the x/y
    plane of a 3-D scene.
    """

    def __init__(
        self,
        orientation: Optional[Orientation] = None,
        hex_size: Optional[float] = None,
        tiles: Optional[TileStore[T]] = None,
    ) -> None:
        if orientation is None:
            orientation = Orientation[DEFAULTS.orientation]
        if hex_size is None:
            hex_size = DEFAULTS.hex_size
        if not hex_size > 0:
            raise ValueError("hex_size must be positive")
        self.orientation = orientation
        self.hex_size = float(hex_size)
        self.tiles: TileStore[T] = tiles if tiles is not None else DictTileStore()
        self.vertices: Dict[Vertex, V] = {}
        self.edges: Dict[Edge, E] = {}

    def __repr__(self) -> str:
        return (
            f"Grid(orientation={self.orientation.name}, hex_size={self.hex_size}, "
            f"tiles={len(self.tiles)}, vertices={len(self.vertices)}, edges={len(self.edges)})"
        )

    # ------------------------------------------------------------------
    # World space
    # ------------------------------------------------------------------

    def world_to_hex(self, worldspace: WorldPos) -> CellCoordinate:
        """Cell containing the world point ``(x, y)``.

        Uses floor-based disambiguation rather than rounding fractional
        axial coordinates, so points near a border land in one cell
        consistently.
        """
        scale = SQRT3 * self.hex_size
        if self.orientation is Orientation.POINTY_TOP:
            x = worldspace[0] / scale
            y = -worldspace[1] / scale
        else:
            y = worldspace[0] / scale
            x = -worldspace[1] / scale

        t = SQRT3 * y + 1.0
        temp1 = math.floor(t + x)
        temp2 = t - x
        temp3 = 2.0 * x + 1.0

        if self.orientation is Orientation.POINTY_TOP:
            qf = (temp1 + temp3) / 3.0
            rf = (temp1 + temp2) / 3.0
        else:
            rf = (temp1 + temp3) / 3.0
            qf = (temp1 + temp2) / 3.0
        return CellCoordinate(int(math.floor(qf)), -int(math.floor(rf)))

    def hex_to_world(self, coord: CellCoordinate) -> WorldPos:
        """World position of the centre of ``coord``."""
        size = self.hex_size
        if self.orientation is Orientation.POINTY_TOP:
            x = size * (SQRT3 * coord.q + SQRT3 / 2.0 * coord.r)
            y = size * (3.0 / 2.0 * coord.r)
        else:
            x = size * (3.0 / 2.0 * coord.q)
            y = size * (SQRT3 / 2.0 * coord.q + SQRT3 * coord.r)
        return x, y

    # ------------------------------------------------------------------
    # Shapes
    # ------------------------------------------------------------------

    def apply_shape(self, shape: Shape[T]) -> "Grid[T, V, E]":
        """Stamp every populated slot of ``shape`` onto ``tiles``.

        Existing entries at the target coordinates are overwritten; empty
        slots neither write nor clear anything.
        """
        written = 0
        for index, value in shape.populated():
            self.tiles[shape.local_to_global(index)] = copy.deepcopy(value)
            written += 1
        logger.debug("apply_shape: wrote %d tiles via %s", written, shape.transform)
        return self

    def extract_shape(self, shape: Shape[T]) -> None:
        """Copy grid payloads into the populated slots of ``shape``.

        A slot whose coordinate holds nothing in the grid becomes ``None``.
        Empty slots are left alone.
        """
        hexes = shape.get_hexes_mut()
        hits = misses = 0
        for index, _ in list(shape.populated()):
            value = self.tiles.get(shape.local_to_global(index))
            if value is None:
                misses += 1
            else:
                hits += 1
            hexes[index] = copy.deepcopy(value)
        logger.debug("extract_shape: %d hits, %d misses via %s", hits, misses, shape.transform)

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    def get_collection(self) -> Mapping[CellCoordinate, T]:
        """Read-only view of the tile collection from the backing store."""
        try:
            return self.tiles.view()
        except CollectionAccessError:
            logger.warning("tile store %r is unreachable", type(self.tiles).__name__)
            raise
