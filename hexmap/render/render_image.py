# render_image.py - outline + label rendering of a grid's populated cells
from __future__ import annotations

import logging
import math
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw

from ..config import DEFAULTS
from ..coordinate import SQRT3
from ..grid import Grid, Orientation

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


def hex_outline(center: Point, hex_size: float, orientation: Orientation) -> List[Point]:
    """Six corner points of a hexagon of circumradius ``hex_size``."""
    cx, cy = center
    short = hex_size * 0.5
    long = short * SQRT3
    if orientation is Orientation.POINTY_TOP:
        return [
            (cx, cy + short * 2.0),
            (cx + long, cy + short),
            (cx + long, cy - short),
            (cx, cy - short * 2.0),
            (cx - long, cy - short),
            (cx - long, cy + short),
        ]
    return [
        (cx + short * 2.0, cy),
        (cx + short, cy + long),
        (cx - short, cy + long),
        (cx - short * 2.0, cy),
        (cx - short, cy - long),
        (cx + short, cy - long),
    ]


def grid_bounds(grid: Grid) -> Tuple[float, float, float, float]:
    """``(min_x, min_y, max_x, max_y)`` of all cell outlines plus padding.

    The box always covers the cell at the origin, so an empty grid still
    yields a drawable area.
    """
    pts = hex_outline((0.0, 0.0), grid.hex_size, grid.orientation)
    for coord in grid.tiles:
        pts.extend(hex_outline(grid.hex_to_world(coord), grid.hex_size, grid.orientation))
    xs = [p[0] for p in pts]
    ys = [p[1] for p in pts]
    pad = DEFAULTS.render_padding
    return min(xs) - pad, min(ys) - pad, max(xs) + pad, max(ys) + pad


def render_grid(grid: Grid, stroke_width: Optional[int] = None) -> Image.Image:
    """Draw the outline and ``q,r`` label of every populated cell."""
    if stroke_width is None:
        stroke_width = DEFAULTS.render_stroke_width
    min_x, min_y, max_x, max_y = grid_bounds(grid)
    img_w = int(math.ceil(max_x - min_x))
    img_h = int(math.ceil(max_y - min_y))

    img = Image.new("RGBA", (img_w, img_h), DEFAULTS.render_background)
    draw = ImageDraw.Draw(img)

    for coord in grid.tiles:
        cx, cy = grid.hex_to_world(coord)
        cx, cy = cx - min_x, cy - min_y
        pts = hex_outline((cx, cy), grid.hex_size, grid.orientation)
        draw.polygon(pts, outline=DEFAULTS.render_outline, width=stroke_width)
        label = str(coord)
        left, top, right, bottom = draw.textbbox((0, 0), label)
        draw.text(
            (cx - (right - left) / 2.0, cy - (bottom - top) / 2.0),
            label,
            fill=DEFAULTS.render_label_fill,
        )

    # Border around the padded box
    draw.rectangle((0, 0, img_w - 1, img_h - 1), outline=DEFAULTS.render_outline, width=1)
    logger.debug("render_grid: %d cells on %dx%d canvas", len(grid.tiles), img_w, img_h)
    return img


def save_render(img: Image.Image, path: str) -> None:
    """Write ``img`` to ``path``; the format follows the file extension.

    I/O failures propagate unchanged.
    """
    img.save(path)
    logger.debug("save_render: wrote %s", path)
