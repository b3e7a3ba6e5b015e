"""Core grid container and normalization helpers."""

from .grid import Grid
from .normalize import (
    delete_at,
    insert_at,
    minimum_row_length,
    normalize_to_rectangle,
    pad_or_truncate,
    truncate_rows,
)

__all__ = [
    "Grid",
    "delete_at",
    "insert_at",
    "minimum_row_length",
    "normalize_to_rectangle",
    "pad_or_truncate",
    "truncate_rows",
]
