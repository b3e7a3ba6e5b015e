"""Immutable rectangular grid container with structured-data helpers."""

from .src.core import Grid
from .src.data import GridDecodeError, decode_grid, encode_grid, load_grid, save_grid

__all__ = ["Grid", "GridDecodeError", "decode_grid", "encode_grid", "load_grid", "save_grid"]
