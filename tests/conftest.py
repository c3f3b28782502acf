# tests/conftest.py
import pytest

from sudoku_solver.grid.parser import parse_line

# Classic 30-given puzzle with a unique solution
EASY = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
EASY_SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"

# Hard puzzle (Inkala); the naive order needs tens of thousands of placements
HARD = "800000000003600000070090200050007000000045700000100030001000068008500010090000400"


def dead_cell_grid():
    """Consistent givens, but cell (1,0) has no legal digit at all."""
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [0, 0, 3, 4, 5, 6, 7, 8, 9]
    grid[1] = [0, 0, 0, 1, 2, 7, 4, 5, 6]
    grid[3][0] = 8
    grid[4][0] = 9
    return grid


@pytest.fixture
def easy_grid():
    return parse_line(EASY)


@pytest.fixture
def solution_grid():
    return parse_line(EASY_SOLUTION)


@pytest.fixture
def dead_grid():
    return dead_cell_grid()
