import pytest

from sudoku_solver.csp.strategies import (
    FirstEmptyStrategy,
    MostConstrainedStrategy,
    get_strategy,
)


def test_first_empty_offers_all_digits(easy_grid):
    sel = FirstEmptyStrategy().select_cell(easy_grid)
    assert sel.cell == (0, 2)
    assert sel.candidates == [1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_no_selection_on_full_grid(solution_grid):
    assert FirstEmptyStrategy().select_cell(solution_grid) is None
    assert MostConstrainedStrategy().select_cell(solution_grid) is None


def test_mcv_picks_dead_cell(dead_grid):
    sel = MostConstrainedStrategy().select_cell(dead_grid)
    assert sel.cell == (1, 0)
    assert sel.candidates == []


def test_mcv_ties_keep_first_in_row_major_order():
    empty = [[0] * 9 for _ in range(9)]
    sel = MostConstrainedStrategy().select_cell(empty)
    assert sel.cell == (0, 0)
    assert sel.candidates == list(range(1, 10))


def test_mcv_picks_fewest_candidates(solution_grid):
    g = solution_grid
    # three blanks with one candidate each; the first in row-major order wins
    g[0][0] = 0
    g[0][1] = 0
    g[5][5] = 0
    sel = MostConstrainedStrategy().select_cell(g)
    assert sel.cell == (0, 0)
    assert sel.candidates == [5]


def test_get_strategy():
    assert get_strategy("naive").name == "naive"
    assert get_strategy(" MCV ").name == "mcv"
    with pytest.raises(ValueError):
        get_strategy("random")
