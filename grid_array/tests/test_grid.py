from grid_array.src.core.grid import Grid


def test_from_rows_rectangular_roundtrip():
    rows = [[1, 2, 3], [4, 5, 6]]
    grid = Grid.from_rows(rows)
    assert grid.row_count == 2
    assert grid.column_count == 3
    for i, row in enumerate(rows):
        assert grid.row(i) == tuple(row)


def test_from_rows_basic_scenario():
    grid = Grid.from_rows([[1, 2], [3, 4]])
    assert grid.row_count == 2
    assert grid.column_count == 2
    assert grid.get(1, 1) == 4


def test_from_rows_truncates_ragged_input():
    grid = Grid.from_rows([[1, 2], [3, 4, 5]])
    assert grid.to_list() == [[1, 2], [3, 4]]
    assert grid.column_count == 2


def test_from_rows_keeps_cells_below_minimum():
    rows = [[1, 2, 3, 4], [5, 6], [7, 8, 9]]
    grid = Grid.from_rows(rows)
    assert grid.column_count == 2
    for r in range(3):
        assert len(grid.row(r)) == 2
        for c in range(2):
            assert grid.get(r, c) == rows[r][c]


def test_from_nested_list_matches_from_rows():
    assert Grid.from_nested_list([[1], [2]]) == Grid.from_rows(((1,), (2,)))


def test_empty():
    grid = Grid.empty()
    assert grid.is_empty
    assert grid.row_count == 0
    assert grid.column_count == 0
    assert grid.shape() == (0, 0)
    assert Grid.from_rows([]) == grid


def test_initialize_uses_coordinates():
    grid = Grid.initialize(2, 3, lambda r, c: r * 10 + c)
    assert grid.to_list() == [[0, 1, 2], [10, 11, 12]]
    assert grid.column_count == 3


def test_initialize_zero_rows_reports_zero_columns():
    grid = Grid.initialize(0, 4, lambda r, c: 0)
    assert grid == Grid.empty()
    assert grid.column_count == 0


def test_initialize_zero_columns_keeps_rows():
    grid = Grid.initialize(3, 0, lambda r, c: 0)
    assert grid.row_count == 3
    assert grid.column_count == 0
    assert all(row == () for row in grid)


def test_initialize_negative_sizes():
    assert Grid.initialize(-2, -1, lambda r, c: 0) == Grid.empty()


def test_fill():
    assert Grid.fill(2, 2, ".").to_list() == [[".", "."], [".", "."]]


def test_row_out_of_range():
    grid = Grid.from_rows([[1, 2]])
    assert grid.row(-1) is None
    assert grid.row(1) is None


def test_column_lookup():
    grid = Grid.from_rows([[1, 2], [3, 4]])
    assert grid.column(1) == (2, 4)
    assert grid.column(2) == (None, None)
    assert grid.column(-1) == (None, None)


def test_column_on_non_rectangular_grid():
    grid = Grid(((1, 2), (3,)), 2)
    assert grid.column(1) == (2, None)


def test_get_out_of_range():
    grid = Grid.from_rows([[1, 2], [3, 4]])
    assert grid.get(2, 0) is None
    assert grid.get(0, 2) is None
    assert grid.get(-1, 0) is None
    assert grid.get(0, -1, default="missing") == "missing"


def test_rows_are_tuples():
    grid = Grid.from_nested_list([[1, 2]])
    assert isinstance(grid.rows, tuple)
    assert isinstance(grid.rows[0], tuple)


def test_source_lists_are_not_shared():
    source = [[1, 2], [3, 4]]
    grid = Grid.from_nested_list(source)
    source[0][0] = 99
    assert grid.get(0, 0) == 1


def test_iteration_and_len():
    grid = Grid.from_rows([[1], [2], [3]])
    assert len(grid) == 3
    assert list(grid) == [(1,), (2,), (3,)]


def test_repr_shows_shape():
    assert repr(Grid.fill(2, 3, 0)) == "Grid(shape=(2, 3))"


def test_map_identity():
    grid = Grid.from_rows([[1, 2], [3, 4]])
    assert grid.map(lambda x: x) == grid


def test_map_composition():
    grid = Grid.from_rows([[1, 2], [3, 4]])

    def f(x):
        return x * 2

    def g(x):
        return x + 1

    assert grid.map(g).map(f) == grid.map(lambda x: f(g(x)))


def test_map_changes_cell_type():
    grid = Grid.from_rows([[1, 2]]).map(str)
    assert grid.to_list() == [["1", "2"]]
    assert grid.column_count == 2


def test_indexed_map_coordinates():
    grid = Grid.fill(2, 2, 0).indexed_map(lambda r, c, cell: (r, c, cell))
    assert grid.get(1, 0) == (1, 0, 0)
    assert grid.get(0, 1) == (0, 1, 0)


def test_map_on_empty_grid():
    assert Grid.empty().map(str) == Grid.empty()


def test_from_rows_accepts_one_pass_iterables():
    grid = Grid.from_rows(iter([[1, 2]]))
    assert grid.to_list() == [[1, 2]]
    assert grid.column_count == 2
    assert Grid.from_rows(row for row in []) == Grid.empty()
    assert Grid.from_rows((c for c in "ab") for _ in range(2)).to_list() == [["a", "b"], ["a", "b"]]
