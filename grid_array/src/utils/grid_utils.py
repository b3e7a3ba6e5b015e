"""Grid validation helpers."""

from __future__ import annotations

from typing import Tuple

from grid_array.src.core.grid import Grid


def validate_grid(grid: Grid, expected_shape: Tuple[int, int] | None = None) -> bool:
    """Return ``True`` if ``grid`` is rectangular and matches ``expected_shape``.

    Grids built through the classmethod constructors always pass; a grid
    assembled directly from the dataclass constructor may not.
    """

    if not isinstance(grid, Grid):
        return False

    if expected_shape and grid.shape() != expected_shape:
        return False

    if not grid.rows:
        return grid.column_count == 0

    if grid.column_count != len(grid.rows[0]):
        return False

    for row in grid.rows:
        if len(row) != grid.column_count:
            return False

    return True


__all__ = ["validate_grid"]
