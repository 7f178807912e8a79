"""Field-by-field dict/JSON interchange for grids.

Payloads are written as-is, so a grid whose payloads are plain JSON values
survives :func:`save_json` / :func:`load_json` unchanged.

    data = grid_to_dict(grid)
    grid = grid_from_dict(data)
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List

from ..coordinate import CellCoordinate
from ..edge import Edge
from ..grid import Grid, Orientation
from ..vertex import Vertex

logger = logging.getLogger(__name__)


def grid_to_dict(grid: Grid) -> Dict[str, Any]:
    """Return a JSON-friendly dictionary describing ``grid``."""
    return {
        "orientation": grid.orientation.name,
        "hex_size": grid.hex_size,
        "tiles": [{"q": c.q, "r": c.r, "value": v} for c, v in grid.tiles.items()],
        "vertices": [dict(k.to_dict(), value=v) for k, v in grid.vertices.items()],
        "edges": [dict(k.to_dict(), value=v) for k, v in grid.edges.items()],
    }


def _records(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    records = data.get(key, [])
    if not isinstance(records, list):
        raise ValueError(f"{key} must be a list, got {type(records).__name__}")
    for rec in records:
        if not isinstance(rec, dict) or "value" not in rec:
            raise ValueError(f"malformed {key} record {rec!r}")
    return records


def grid_from_dict(data: Dict[str, Any]) -> Grid:
    """Build a :class:`Grid` from :func:`grid_to_dict` output."""
    required = {"orientation", "hex_size"}
    missing = required.difference(data)
    if missing:
        raise ValueError(f"missing keys: {sorted(missing)}")
    try:
        orientation = Orientation[str(data["orientation"]).upper()]
    except KeyError:
        raise ValueError(f"invalid orientation {data['orientation']!r}") from None

    grid: Grid = Grid(orientation=orientation, hex_size=float(data["hex_size"]))
    for rec in _records(data, "tiles"):
        if "q" not in rec or "r" not in rec:
            raise ValueError(f"malformed tiles record {rec!r}")
        grid.tiles[CellCoordinate(int(rec["q"]), int(rec["r"]))] = rec["value"]
    for rec in _records(data, "vertices"):
        grid.vertices[Vertex.from_dict(rec)] = rec["value"]
    for rec in _records(data, "edges"):
        grid.edges[Edge.from_dict(rec)] = rec["value"]
    return grid


def save_json(grid: Grid, path: str) -> None:
    data = grid_to_dict(grid)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    logger.debug(
        "save_json: %d tiles, %d vertices, %d edges -> %s",
        len(data["tiles"]), len(data["vertices"]), len(data["edges"]), path,
    )


def load_json(path: str) -> Grid:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    grid = grid_from_dict(data)
    logger.debug("load_json: %r from %s", grid, path)
    return grid
