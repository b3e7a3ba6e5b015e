from pathlib import Path

import pytest

from grid_array.src.core.grid import Grid


@pytest.fixture
def data_dir() -> Path:
    return Path(__file__).parent / "grid_array" / "tests"


@pytest.fixture
def grid_2x2() -> Grid:
    return Grid.from_rows([[1, 2], [3, 4]])
