"""Conversion between :class:`Grid` values and ``numpy`` arrays."""

from __future__ import annotations

from typing import Any

import numpy as np

from .grid import Grid


def _object_array(grid: Grid) -> np.ndarray:
    out = np.empty(grid.shape(), dtype=object)
    for r, row in enumerate(grid.rows):
        for c, cell in enumerate(row):
            out[r, c] = cell
    return out


def to_array(grid: Grid, dtype: Any | None = None) -> np.ndarray:
    """Return ``grid`` as a 2-D array of shape ``(row_count, column_count)``.

    Cells that numpy would unpack into extra dimensions (tuples, lists) are
    kept whole in an ``object`` array when ``dtype`` is ``None`` or ``object``.
    """
    if grid.is_empty:
        return np.empty((0, 0), dtype=dtype if dtype is not None else float)
    if dtype is not None and np.dtype(dtype) != np.dtype(object):
        return np.array(grid.to_list(), dtype=dtype).reshape(grid.shape())
    try:
        arr = np.array(grid.to_list(), dtype=dtype)
    except ValueError:
        return _object_array(grid)
    if arr.shape != grid.shape():
        return _object_array(grid)
    return arr


def from_array(arr: np.ndarray) -> Grid:
    """Build a grid from a 2-D array, converting cells to Python scalars."""
    arr = np.asarray(arr)
    if arr.ndim != 2:
        raise ValueError(f"Expected a 2-D array, got {arr.ndim} dimension(s)")
    return Grid.from_rows(arr.tolist())


__all__ = ["to_array", "from_array"]
