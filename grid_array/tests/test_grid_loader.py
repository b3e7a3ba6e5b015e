import json
import logging
from pathlib import Path

import pytest

from grid_array.src.core.grid import Grid
from grid_array.src.data import GridDecodeError, decode_grid, encode_grid, load_grid, save_grid


def test_decode_rectangular_list():
    grid = decode_grid([[1, 2], [3, 4]])
    assert grid == Grid.from_rows([[1, 2], [3, 4]])


def test_decode_rows_mapping():
    grid = decode_grid({"rows": [[1], [2]]})
    assert grid.shape() == (2, 1)


def test_decode_ragged_warns(caplog):
    with caplog.at_level(logging.WARNING):
        grid = decode_grid([[1, 2, 3], [4, 5]])
    assert grid.to_list() == [[1, 2], [4, 5]]
    assert any("truncated" in rec.message for rec in caplog.records)


def test_decode_empty_payload():
    assert decode_grid([]) == Grid.empty()


@pytest.mark.parametrize("payload", ["abc", 3, None, {"cells": []}, [1, 2], [[1], "ab"]])
def test_decode_rejects_non_nested(payload):
    with pytest.raises(GridDecodeError):
        decode_grid(payload)


def test_decode_checks_cell_type():
    assert decode_grid([[1, 2]], cell_type=int).get(0, 1) == 2
    with pytest.raises(GridDecodeError):
        decode_grid([[1, "2"]], cell_type=int)


def test_encode_grid():
    assert encode_grid(Grid.from_rows([(1, 2)])) == [[1, 2]]


def test_load_json_sample(data_dir: Path):
    grid = load_grid(data_dir / "sample_grid.json")
    assert grid.shape() == (2, 3)
    assert grid.get(1, 2) == 6


def test_load_yaml_ragged(data_dir: Path):
    grid = load_grid(data_dir / "ragged_grid.yaml", cell_type=str)
    assert grid.to_list() == [["a", "b"], ["d", "e"], ["f", "g"]]


def test_load_invalid_json(tmp_path: Path):
    path = tmp_path / "bad.json"
    path.write_text("[[1, 2]")
    with pytest.raises(GridDecodeError) as info:
        load_grid(path)
    assert isinstance(info.value.__cause__, json.JSONDecodeError)


def test_load_unsupported_suffix(tmp_path: Path):
    path = tmp_path / "grid.txt"
    path.write_text("1 2")
    with pytest.raises(ValueError, match="Unsupported grid format"):
        load_grid(path)


@pytest.mark.parametrize("name", ["out.json", "out.yaml"])
def test_save_then_load(tmp_path: Path, name: str):
    grid = Grid.from_rows([[1, "x"], [None, 2.5]])
    path = tmp_path / name
    save_grid(grid, path)
    assert load_grid(path) == grid
