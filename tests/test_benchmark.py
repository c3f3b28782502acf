from sudoku_solver.eval.benchmark import compare_strategies

from conftest import EASY


def _easy_rows():
    return [list(EASY[i:i + 9]) for i in range(0, 81, 9)]


def test_compare_strategies_table():
    board = [[int(ch) for ch in row] for row in _easy_rows()]
    df = compare_strategies(board)

    assert list(df.columns) == ["strategy", "solved", "steps", "backtracks", "elapsed_sec"]
    assert list(df["strategy"]) == ["naive", "mcv"]
    assert df["solved"].all()
    assert (df["backtracks"] <= df["steps"]).all()
    assert (df["elapsed_sec"] >= 0).all()
    # the input board is not touched
    assert board[0][2] == 0


def test_compare_single_strategy():
    df = compare_strategies(_easy_rows(), strategies=["mcv"])
    assert len(df) == 1
    assert df.iloc[0]["strategy"] == "mcv"
