# -*- coding: utf-8 -*-
"""
探索戦略どうしの手数・時間を比べるモジュールです（診断用）。

同じ問題を各戦略で解き、steps / backtracks / 所要時間を
pandas.DataFrame にまとめて返します。
"""

from __future__ import annotations

import time
from typing import Iterable

import pandas as pd

from ..config import STRATEGY_MCV, STRATEGY_NAIVE
from ..grid.parser import BoardLike, normalize_grid
from ..logging_utils import get_logger
from ..solver import ConstraintSolver

logger = get_logger()


def compare_strategies(
    board: BoardLike,
    strategies: Iterable[str] = (STRATEGY_NAIVE, STRATEGY_MCV),
) -> pd.DataFrame:
    """
    各戦略で同じ問題を解いて、統計を表にまとめます。

    盤面は戦略ごとに作り直すので、ある戦略の結果が別の戦略に影響することはありません。

    Returns
    -------
    pandas.DataFrame
        列: strategy, solved, steps, backtracks, elapsed_sec
    """
    rows = []
    for name in strategies:
        grid = normalize_grid(board)
        solver = ConstraintSolver()

        t0 = time.perf_counter()
        result = solver.solve_with(grid, name)
        elapsed = time.perf_counter() - t0

        logger.info(
            "[benchmark] %s: solved=%s steps=%d backtracks=%d (%.3fs)",
            name,
            result.solved,
            result.steps,
            result.backtracks,
            elapsed,
        )
        rows.append(
            {
                "strategy": name,
                "solved": result.solved,
                "steps": result.steps,
                "backtracks": result.backtracks,
                "elapsed_sec": elapsed,
            }
        )

    return pd.DataFrame(
        rows, columns=["strategy", "solved", "steps", "backtracks", "elapsed_sec"]
    )
