"""Sequence helpers that establish and preserve grid rectangularity."""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple, TypeVar

T = TypeVar("T")

Rows = Tuple[Tuple[T, ...], ...]


def minimum_row_length(rows: Sequence[Sequence[T]]) -> int:
    """Return the length of the shortest row, or ``0`` when there are no rows."""
    return min((len(row) for row in rows), default=0)


def truncate_rows(limit: int, rows: Sequence[Sequence[T]]) -> Rows:
    """Cut every row longer than ``limit`` down to its first ``limit`` cells.

    Rows that already fit are kept as they are; a row is never lengthened.
    """
    limit = max(limit, 0)
    return tuple(tuple(row) if len(row) <= limit else tuple(row[:limit]) for row in rows)


def normalize_to_rectangle(rows: Iterable[Iterable[T]]) -> Tuple[int, Rows]:
    """Return ``(column_count, rows)`` with every row cut to the shortest one.

    Parameters
    ----------
    rows:
        Raw nested data, possibly ragged. Any iterable of iterables is
        accepted and consumed exactly once.

    Returns
    -------
    tuple
        The common row width and the truncated rows. Cells past the
        shortest row's length are discarded.
    """

    materialized = tuple(tuple(row) for row in rows)
    width = minimum_row_length(materialized)
    return width, truncate_rows(width, materialized)


def pad_or_truncate(target_length: int, filler: T, sequence: Sequence[T]) -> Tuple[T, ...]:
    """Return ``sequence`` resized to exactly ``target_length`` items.

    Long sequences are truncated, short ones are extended with ``filler``.
    """
    target_length = max(target_length, 0)
    items = tuple(sequence)
    if len(items) > target_length:
        return items[:target_length]
    if len(items) < target_length:
        return items + (filler,) * (target_length - len(items))
    return items


def delete_at(index: int, sequence: Sequence[T]) -> Tuple[T, ...]:
    """Remove the element at ``index``; out-of-range indices leave it unchanged."""
    items = tuple(sequence)
    if index < 0 or index >= len(items):
        return items
    return items[:index] + items[index + 1 :]


def insert_at(index: int, value: T, sequence: Sequence[T]) -> Tuple[T, ...]:
    """Place ``value`` at ``index``; ``index == len`` appends, other bad indices are ignored."""
    items = tuple(sequence)
    if index < 0 or index > len(items):
        return items
    return items[:index] + (value,) + items[index:]


__all__ = [
    "minimum_row_length",
    "truncate_rows",
    "normalize_to_rectangle",
    "pad_or_truncate",
    "delete_at",
    "insert_at",
]
