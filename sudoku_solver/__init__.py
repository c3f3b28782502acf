# -*- coding: utf-8 -*-
"""
sudoku_solver パッケージの入口となるモジュールです。

api_proto/local_api.py などから:

    from sudoku_solver import solve_board

と呼び出されることを想定しています。

ここでは、盤面（pandas.DataFrame / 二重リストなど）を受け取り、
1. 盤面の正規化と形式チェック
2. バックトラック探索（naive または MCV）
3. 完成盤面の検証
4. 表示用の結果構築
を順番に呼び出します。

探索だけを使いたい場合は ConstraintSolver を直接使ってください。
"""

from __future__ import annotations

from typing import Any, Dict

from .config import DEFAULT_STRATEGY
from .csp.constraints import candidate_values, count_empty_cells, is_placement_valid
from .csp.search import SearchCounter
from .csp.strategies import get_strategy
from .csp.validation import is_valid_solution
from .grid.parser import BoardLike, GridFormatError, normalize_grid, parse_line
from .logging_utils import get_logger
from .postprocess.render_result import build_result
from .solver import ConstraintSolver, solve, solve_with_heuristic
from .types import CellCoord, Grid, SearchResult

__all__ = [
    "ConstraintSolver",
    "SearchCounter",
    "SearchResult",
    "Grid",
    "CellCoord",
    "GridFormatError",
    "solve",
    "solve_with_heuristic",
    "solve_board",
    "is_valid_solution",
    "is_placement_valid",
    "candidate_values",
    "normalize_grid",
    "parse_line",
]

logger = get_logger()


def solve_board(
    board: BoardLike,
    strategy: str = DEFAULT_STRATEGY,
) -> Dict[str, Any]:
    """
    数独を解くメイン関数。

    Parameters
    ----------
    board : pandas.DataFrame, numpy.ndarray or list of lists
        9x9 の盤面。空きマスは 0 / "" / "." / None など。
    strategy : str
        "naive" または "mcv"。

    Returns
    -------
    dict
        solved_board / solved / steps / backtracks / strategy /
        filled_cells / shape を持つ辞書。

    Raises
    ------
    GridFormatError
        盤面の形や値が不正な場合。
    ValueError
        未知の戦略名が渡された場合。
    """
    logger.info("=== solve_board() START (strategy=%s) ===", strategy)

    # 1) 盤面パース（形式チェックはここで済ませる）
    original_grid = normalize_grid(board)
    grid = [row[:] for row in original_grid]
    logger.info("Empty cells: %d", count_empty_cells(grid))

    # 2) 探索
    solver_strategy = get_strategy(strategy)
    result = ConstraintSolver().solve_with(grid, solver_strategy)
    logger.info(
        "Search finished: solved=%s steps=%d backtracks=%d",
        result.solved,
        result.steps,
        result.backtracks,
    )

    # 3) 完成盤面の最終確認（探索とは独立に検証する）
    if result.solved and not is_valid_solution(grid):
        logger.warning("[WARNING] Solver reported success but the grid is invalid!")

    # 4) 結果を構築
    out = build_result(
        original=board,
        original_grid=original_grid,
        solved_grid=grid,
        result=result,
        strategy=solver_strategy.name,
    )

    logger.info("=== solve_board() END ===")
    return out
