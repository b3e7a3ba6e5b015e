"""Immutable two-dimensional grid container."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

from .normalize import delete_at, insert_at, normalize_to_rectangle, pad_or_truncate

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Grid(Generic[T]):
    """Rectangular grid of cells stored as a tuple of row tuples.

    Every mutator returns a new ``Grid`` that shares the untouched row
    tuples with its source. Out-of-range indices never raise: readers
    return ``None`` (or ``default``) and mutators return ``self``.

    Use the classmethod constructors; calling ``Grid(rows, column_count)``
    directly skips normalization.
    """

    rows: Tuple[Tuple[T, ...], ...] = ()
    column_count: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", tuple(tuple(row) for row in self.rows))

    # Construction --------------------------------------------------------

    @classmethod
    def empty(cls) -> "Grid[T]":
        """Return a grid with no rows and no columns."""
        return cls((), 0)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[T]]) -> "Grid[T]":
        """Build a grid from nested rows, truncating ragged rows to the shortest."""
        width, normalized = normalize_to_rectangle(rows)
        return cls(normalized, width)

    @classmethod
    def from_nested_list(cls, lists: List[List[T]]) -> "Grid[T]":
        """Build a grid from a list of lists."""
        return cls.from_rows(lists)

    @classmethod
    def initialize(
        cls, row_count: int, col_count: int, generator: Callable[[int, int], T]
    ) -> "Grid[T]":
        """Return a ``row_count`` x ``col_count`` grid filled by ``generator(r, c)``.

        ``column_count`` is taken from the first generated row, so a request
        for zero rows yields :meth:`empty` whatever ``col_count`` is.
        """
        rows = tuple(
            tuple(generator(r, c) for c in range(max(col_count, 0)))
            for r in range(max(row_count, 0))
        )
        return cls(rows, len(rows[0]) if rows else 0)

    @classmethod
    def fill(cls, row_count: int, col_count: int, value: T) -> "Grid[T]":
        """Return a ``row_count`` x ``col_count`` grid where every cell is ``value``."""
        return cls.initialize(row_count, col_count, lambda _r, _c: value)

    # Queries -------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as ``(row_count, column_count)``."""
        return len(self.rows), self.column_count

    def row(self, index: int) -> Optional[Tuple[T, ...]]:
        """Return the row at ``index`` or ``None`` if out of bounds."""
        if index < 0 or index >= len(self.rows):
            return None
        return self.rows[index]

    def column(self, index: int) -> Tuple[Optional[T], ...]:
        """Return one entry per row: the cell at ``index`` or ``None`` where the row is too short."""
        return tuple(row[index] if 0 <= index < len(row) else None for row in self.rows)

    def get(self, row: int, col: int, default: Any | None = None) -> Any:
        """Return the cell at ``row``, ``col`` or ``default`` if out of bounds."""
        if row < 0 or row >= len(self.rows):
            return default
        cells = self.rows[row]
        if col < 0 or col >= len(cells):
            return default
        return cells[col]

    # Mutation ------------------------------------------------------------

    def set(self, row: int, col: int, value: T) -> "Grid[T]":
        """Return a copy with the cell at ``row``, ``col`` replaced by ``value``."""
        if row < 0 or row >= len(self.rows) or col < 0 or col >= self.column_count:
            logger.debug("set(%d, %d) outside %s; grid unchanged", row, col, self.shape())
            return self
        cells = self.rows[row]
        if col >= len(cells):
            return self
        updated = cells[:col] + (value,) + cells[col + 1 :]
        return Grid(self.rows[:row] + (updated,) + self.rows[row + 1 :], self.column_count)

    def append_row(self, new_row: Sequence[T], filler: T) -> "Grid[T]":
        """Append ``new_row`` padded or truncated to the current column count."""
        return Grid(
            self.rows + (pad_or_truncate(self.column_count, filler, new_row),),
            self.column_count,
        )

    def insert_row(self, index: int, new_row: Sequence[T], filler: T) -> "Grid[T]":
        """Insert ``new_row`` before ``index``; ``index == row_count`` appends."""
        if index < 0 or index > len(self.rows):
            logger.debug("insert_row(%d) outside %s; grid unchanged", index, self.shape())
            return self
        row = pad_or_truncate(self.column_count, filler, new_row)
        return Grid(insert_at(index, row, self.rows), self.column_count)

    def append_column(self, new_column: Sequence[T], filler: T) -> "Grid[T]":
        """Append one cell to every row, taken from ``new_column`` or ``filler``.

        A grid without rows has nothing to extend and is returned unchanged.
        """
        if not self.rows:
            return self
        rows = tuple(
            row + (new_column[i] if i < len(new_column) else filler,)
            for i, row in enumerate(self.rows)
        )
        return Grid(rows, self.column_count + 1)

    def insert_column(self, index: int, new_column: Sequence[T], filler: T) -> "Grid[T]":
        """Insert a column before ``index``; ``index == column_count`` appends."""
        if not self.rows or index < 0 or index > self.column_count:
            logger.debug("insert_column(%d) outside %s; grid unchanged", index, self.shape())
            return self
        rows = tuple(
            insert_at(index, new_column[i] if i < len(new_column) else filler, row)
            for i, row in enumerate(self.rows)
        )
        return Grid(rows, len(rows[0]))

    def delete_row(self, index: int) -> "Grid[T]":
        """Remove the row at ``index``; out-of-range indices are ignored.

        The width is kept unless the last row goes, which leaves an empty grid.
        """
        if index < 0 or index >= len(self.rows):
            logger.debug("delete_row(%d) outside %s; grid unchanged", index, self.shape())
            return self
        rows = delete_at(index, self.rows)
        return Grid(rows, self.column_count if rows else 0)

    def delete_column(self, index: int) -> "Grid[T]":
        """Remove the cell at ``index`` from every row and re-derive the width."""
        rows = tuple(delete_at(index, row) for row in self.rows)
        if all(len(new) == len(old) for new, old in zip(rows, self.rows)):
            logger.debug("delete_column(%d) outside %s; grid unchanged", index, self.shape())
            return self
        return Grid(rows, len(rows[0]) if rows else 0)

    # Mapping -------------------------------------------------------------

    def map(self, transform: Callable[[T], U]) -> "Grid[U]":
        """Return a grid of the same shape with ``transform`` applied to every cell."""
        return self.indexed_map(lambda _r, _c, cell: transform(cell))

    def indexed_map(self, transform: Callable[[int, int, T], U]) -> "Grid[U]":
        """Return a grid with ``transform(r, c, cell)`` applied at every position."""
        rows = tuple(
            tuple(transform(r, c, cell) for c, cell in enumerate(row))
            for r, row in enumerate(self.rows)
        )
        return Grid(rows, self.column_count)

    # Conversion ----------------------------------------------------------

    def to_list(self) -> List[List[T]]:
        """Return the cells as a fresh list of lists."""
        return [list(row) for row in self.rows]

    def __iter__(self) -> Iterator[Tuple[T, ...]]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __repr__(self) -> str:
        return f"Grid(shape={self.shape()})"


__all__ = ["Grid"]
