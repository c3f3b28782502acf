import numpy as np
import pandas as pd
import pytest

from sudoku_solver.grid.parser import (
    GridFormatError,
    format_line,
    normalize_cell,
    normalize_grid,
    parse_line,
)

from conftest import EASY


def test_normalize_cell():
    assert normalize_cell(None) == 0
    assert normalize_cell(float("nan")) == 0
    assert normalize_cell("") == 0
    assert normalize_cell(".") == 0
    assert normalize_cell(" 7 ") == 7
    assert normalize_cell(np.int64(3)) == 3
    assert normalize_cell(5.0) == 5


@pytest.mark.parametrize("bad", ["x", "10", 10, -1, 2.5, True])
def test_normalize_cell_rejects(bad):
    with pytest.raises(GridFormatError):
        normalize_cell(bad)


def test_parse_line_ignores_whitespace():
    text = "\n".join(EASY[i:i + 9] for i in range(0, 81, 9))
    grid = parse_line(text)
    assert grid[0] == [5, 3, 0, 0, 7, 0, 0, 0, 0]
    assert format_line(grid) == EASY


def test_parse_line_dots_are_empty():
    grid = parse_line(EASY.replace("0", "."))
    assert format_line(grid) == EASY


def test_parse_line_wrong_length():
    with pytest.raises(GridFormatError):
        parse_line(EASY[:-1])


def test_normalize_dataframe_with_blanks():
    rows = [[("" if v == 0 else str(v)) for v in row] for row in parse_line(EASY)]
    df = pd.DataFrame(rows)
    df.iat[0, 2] = None
    grid = normalize_grid(df)

    assert format_line(grid) == EASY
    assert all(type(v) is int for row in grid for v in row)


def test_normalize_grid_returns_fresh_copy():
    source = parse_line(EASY)
    grid = normalize_grid(source)
    grid[0][2] = 4
    assert source[0][2] == 0


@pytest.mark.parametrize(
    "board",
    [
        [[0] * 9 for _ in range(8)],
        [[0] * 8 for _ in range(9)],
        [[0] * 9 for _ in range(8)] + [[0] * 10],
        [0] * 81,
    ],
)
def test_normalize_grid_rejects_bad_shapes(board):
    with pytest.raises(GridFormatError):
        normalize_grid(board)


def test_normalize_grid_reports_position():
    board = [[0] * 9 for _ in range(9)]
    board[2][4] = "z"
    with pytest.raises(GridFormatError, match="row 2, col 4"):
        normalize_grid(board)


def test_grid_format_error_is_value_error():
    assert issubclass(GridFormatError, ValueError)


@pytest.mark.parametrize("bad", [[1, 2], np.array([3]), (4,)])
def test_normalize_cell_rejects_non_scalars(bad):
    with pytest.raises(GridFormatError):
        normalize_cell(bad)


def test_normalize_grid_reports_position_of_list_cell():
    board = np.zeros((9, 9), dtype=object)
    board[3, 5] = [1, 2]
    with pytest.raises(GridFormatError, match="row 3, col 5"):
        normalize_grid(board)
