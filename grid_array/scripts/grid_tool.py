"""Inspect and edit grid files from the command line."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys
from typing import Any, List

import yaml

from grid_array.src.core.grid import Grid
from grid_array.src.data.grid_loader import GridDecodeError, load_grid, save_grid
from grid_array.src.data.visualization import format_grid
from grid_array.src.utils import config_loader


def parse_value(text: str) -> Any:
    """Interpret a command-line token as a YAML scalar (``"3"`` -> ``3``)."""
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError:
        return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="grid_tool", description="Inspect and edit grid files")
    parser.add_argument("--config", type=Path, help="YAML/JSON settings file")
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Print the grid cells")
    show.add_argument("path", type=Path, help="Grid file (.json/.yaml)")
    show.add_argument("--separator", default=None, help="Cell separator")

    info = sub.add_parser("info", help="Print the grid shape")
    info.add_argument("path", type=Path, help="Grid file (.json/.yaml)")

    for name, help_text in (("delete-row", "Remove a row"), ("delete-column", "Remove a column")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("path", type=Path, help="Grid file (.json/.yaml)")
        cmd.add_argument("index", type=int, help="0-based index to remove")
        cmd.add_argument("--output", type=Path, help="Write the result here instead of printing it")

    for name, help_text in (("append-row", "Append a row"), ("append-column", "Append a column")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("path", type=Path, help="Grid file (.json/.yaml)")
        cmd.add_argument("values", nargs="*", help="Cell values")
        cmd.add_argument("--filler", default=None, help="Value used for missing cells")
        cmd.add_argument("--output", type=Path, help="Write the result here instead of printing it")

    return parser


def apply_command(args: argparse.Namespace, grid: Grid) -> Grid:
    """Return the grid produced by the mutating subcommand in ``args``."""
    if args.command == "delete-row":
        return grid.delete_row(args.index)
    if args.command == "delete-column":
        return grid.delete_column(args.index)
    values: List[Any] = [parse_value(v) for v in args.values]
    filler = config_loader.DEFAULT_FILLER if args.filler is None else parse_value(args.filler)
    if args.command == "append-row":
        return grid.append_row(values, filler)
    return grid.append_column(values, filler)


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.config is not None:
            config_loader.apply_config(config_loader.load_grid_config(args.config))
        grid = load_grid(args.path)
    except (GridDecodeError, ValueError, OSError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    if args.command == "show":
        print(format_grid(grid, separator=args.separator))
        return 0
    if args.command == "info":
        rows, cols = grid.shape()
        print(f"rows: {rows}")
        print(f"columns: {cols}")
        return 0

    result = apply_command(args, grid)
    if args.output is None:
        print(format_grid(result))
        return 0
    try:
        save_grid(result, args.output)
    except (ValueError, OSError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1
    print(f"Grid written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
