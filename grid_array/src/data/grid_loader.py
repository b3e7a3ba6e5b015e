"""Decode grids from JSON/YAML structured data and write them back."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from grid_array.src.core.grid import Grid
from grid_array.src.core.normalize import normalize_to_rectangle
from grid_array.src.utils import config_loader
from grid_array.src.utils.logger import get_logger

logger = get_logger(__name__)

_SEQUENCE_TYPES = (list, tuple)


class GridDecodeError(ValueError):
    """Raised when structured data does not describe a nested grid."""


def _unwrap(payload: Any) -> Sequence[Any]:
    if isinstance(payload, dict):
        if "rows" not in payload:
            raise GridDecodeError("Mapping payload must contain a 'rows' key")
        payload = payload["rows"]
    if not isinstance(payload, _SEQUENCE_TYPES):
        raise GridDecodeError(f"Expected a sequence of rows, got {type(payload).__name__}")
    return payload


def decode_grid(payload: Any, cell_type: Optional[type | tuple] = None) -> Grid:
    """Return a :class:`Grid` decoded from nested sequence ``payload``.

    Parameters
    ----------
    payload:
        A list of rows, or a mapping holding that list under ``"rows"``.
    cell_type:
        Optional type (or tuple of types) every cell must be an instance of.

    Returns
    -------
    Grid
        The normalized grid. Ragged rows are truncated to the shortest row.

    Raises
    ------
    GridDecodeError
        If ``payload`` is not a nested sequence of the expected cell type.
    """

    rows = _unwrap(payload)
    for r, row in enumerate(rows):
        if not isinstance(row, _SEQUENCE_TYPES):
            raise GridDecodeError(f"Row {r} is a {type(row).__name__}, not a sequence")
        if cell_type is not None:
            for c, cell in enumerate(row):
                if not isinstance(cell, cell_type):
                    raise GridDecodeError(
                        f"Cell ({r}, {c}) has type {type(cell).__name__}, expected {cell_type}"
                    )

    width, normalized = normalize_to_rectangle(rows)
    dropped = sum(len(row) for row in rows) - width * len(rows)
    if dropped:
        logger.warning("ragged grid truncated to width %d; %d cell(s) dropped", width, dropped)
    return Grid(normalized, width)


def encode_grid(grid: Grid) -> List[List[Any]]:
    """Return ``grid`` as nested lists ready for ``json``/``yaml`` dumping."""
    return grid.to_list()


def load_grid(path: str | Path, cell_type: Optional[type | tuple] = None) -> Grid:
    """Load and decode a grid from a ``.json``, ``.yaml`` or ``.yml`` file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        try:
            if path_p.suffix in {".yaml", ".yml"}:
                payload = yaml.safe_load(f)
            elif path_p.suffix == ".json":
                payload = json.load(f)
            else:
                raise ValueError("Unsupported grid format")
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise GridDecodeError(f"Could not parse {path_p}: {exc}") from exc
    return decode_grid(payload, cell_type=cell_type)


def save_grid(grid: Grid, path: str | Path) -> None:
    """Write ``grid`` to ``path`` as JSON or YAML depending on the suffix."""
    path_p = Path(path)
    data: Dict[str, Any] = {"rows": encode_grid(grid)}
    if path_p.suffix in {".yaml", ".yml"}:
        text = yaml.safe_dump(data, default_flow_style=None, sort_keys=False)
    elif path_p.suffix == ".json":
        text = json.dumps(data, indent=config_loader.JSON_INDENT)
    else:
        raise ValueError("Unsupported grid format")
    path_p.write_text(text, encoding="utf-8")


__all__ = ["GridDecodeError", "decode_grid", "encode_grid", "load_grid", "save_grid"]
