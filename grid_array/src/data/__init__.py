"""Structured-data helpers for grids."""

from .grid_loader import GridDecodeError, decode_grid, encode_grid, load_grid, save_grid
from .visualization import format_grid, visualize

__all__ = [
    "GridDecodeError",
    "decode_grid",
    "encode_grid",
    "load_grid",
    "save_grid",
    "format_grid",
    "visualize",
]
