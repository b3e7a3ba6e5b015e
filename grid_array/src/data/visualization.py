"""Visualization utilities."""

from __future__ import annotations

from typing import Any, Callable, Optional

from grid_array.src.core.grid import Grid
from grid_array.src.utils import config_loader


def format_grid(
    grid: Grid,
    separator: Optional[str] = None,
    formatter: Callable[[Any], str] = str,
) -> str:
    """Return ``grid`` as text, one line per row."""
    sep = config_loader.RENDER_SEPARATOR if separator is None else separator
    return "\n".join(sep.join(formatter(cell) for cell in row) for row in grid.rows)


def visualize(grid: Grid) -> None:
    """Pretty-print the grid values."""
    print(format_grid(grid))
