"""
Grid defaults and tuning knobs.
Safe to tweak without touching the geometry code.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple


@dataclass
class GridDefaults:
    """Values a freshly constructed :class:`~hexmap.grid.Grid` and the
    renderer fall back to when the caller does not pass them explicitly."""

    # Orientation name, resolved against hexmap.grid.Orientation
    orientation: str = "POINTY_TOP"
    hex_size: float = 32.0

    # Rendering
    render_padding: float = 10.0
    render_stroke_width: int = 2
    render_background: Tuple[int, int, int, int] = (221, 221, 221, 255)
    render_outline: Tuple[int, int, int, int] = (0, 0, 0, 255)
    render_label_fill: Tuple[int, int, int, int] = (0, 0, 0, 255)


# Global defaults instance used throughout the package
DEFAULTS = GridDefaults()

# Rounding primitive used by hexmap.rounding: "builtin" uses round(),
# "floor" only needs math.floor (for interpreters without float rounding).
ROUNDING_BACKEND: str = os.environ.get("HEXMAP_ROUNDING_BACKEND", "builtin")

# Decimal places angles are snapped to before sector bucketing
ANGLE_PRECISION: int = 9
