# hexmap/__init__.py
# Hex grid coordinates, topology and shape stamping

from .config import DEFAULTS, GridDefaults
from .coordinate import CellCoordinate, HEX_DIRECTIONS, SQRT3
from .transform import Transform
from .edge import Edge, EdgeDirection
from .vertex import Vertex, VertexDirection, VertexSpin
from .shape import Shape
from .storage import TileStore, DictTileStore
from .grid import Grid, Orientation
from .errors import GridError, CollectionAccessError

__all__ = [
    "DEFAULTS", "GridDefaults",
    "CellCoordinate", "HEX_DIRECTIONS", "SQRT3",
    "Transform",
    "Edge", "EdgeDirection",
    "Vertex", "VertexDirection", "VertexSpin",
    "Shape",
    "TileStore", "DictTileStore",
    "Grid", "Orientation",
    "GridError", "CollectionAccessError",
]
