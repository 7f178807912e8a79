# render/__init__.py
# Package init for rendering modules

from .render_image import hex_outline, grid_bounds, render_grid, save_render

__all__ = ["hex_outline", "grid_bounds", "render_grid", "save_render"]
