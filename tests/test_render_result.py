import pandas as pd

from sudoku_solver import solve_board
from sudoku_solver.grid.parser import format_line, parse_line
from sudoku_solver.postprocess.render_result import build_filled_cells, build_result
from sudoku_solver.types import SearchResult

from conftest import EASY, EASY_SOLUTION


def test_filled_cells_only_lists_new_digits():
    before = parse_line(EASY)
    after = parse_line(EASY_SOLUTION)
    cells = build_filled_cells(before, after)

    assert len(cells) == 51
    assert cells[0] == {"row": 0, "col": 2, "digit": 4}


def test_build_result_from_labelled_dataframe():
    df = pd.DataFrame(parse_line(EASY), index=list("ABCDEFGHI"))
    out = build_result(
        original=df,
        original_grid=parse_line(EASY),
        solved_grid=parse_line(EASY_SOLUTION),
        result=SearchResult(solved=True, steps=60, backtracks=9),
        strategy="mcv",
    )

    assert out["shape"] == (9, 9)
    assert out["solved"] is True
    assert out["steps"] == 60
    assert out["backtracks"] == 9
    assert out["strategy"] == "mcv"
    assert format_line(out["solved_board"]) == EASY_SOLUTION


def test_solve_board_from_dataframe():
    df = pd.DataFrame(parse_line(EASY))
    out = solve_board(df, strategy="naive")

    assert out["solved"]
    assert out["strategy"] == "naive"
    assert format_line(out["solved_board"]) == EASY_SOLUTION
    assert len(out["filled_cells"]) == 51
    # the caller's board is left as it was
    assert df.iat[0, 2] == 0


def test_solve_board_unsolvable():
    board = [[0] * 9 for _ in range(9)]
    board[0][0] = 5
    board[0][1] = 5
    out = solve_board(board)

    assert out["solved"] is False
    assert out["filled_cells"] == []
    assert out["steps"] == 0
