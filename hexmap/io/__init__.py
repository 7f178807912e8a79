"""
IO package: dict/JSON interchange for grids.
"""

from .json_io import grid_to_dict, grid_from_dict, save_json, load_json

__all__ = ["grid_to_dict", "grid_from_dict", "save_json", "load_json"]
