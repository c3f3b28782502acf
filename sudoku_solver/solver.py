# -*- coding: utf-8 -*-
"""
ConstraintSolver: 数独を総当たりのバックトラックで解くクラスです。

- solve                : 素朴な順序（行優先で最初の空きマス）
- solve_with_heuristic : MCV 順序（候補が最も少ない空きマス）
- is_valid_solution    : 完成盤面のチェック（探索とは独立）

盤面は呼び出し側が持つリストをその場で書き換えます。
解けた場合は解の状態、解けなかった場合は solver が置いた値が
すべて取り消された状態（最初から入っていた数字はそのまま）で戻ります。

入力の形式チェック（9x9 か、0〜9 の整数か）は行いません。
必要なら :func:`sudoku_solver.grid.parser.normalize_grid` を先に通してください。
"""

from __future__ import annotations

from typing import Optional, Union

from .config import STRATEGY_MCV, STRATEGY_NAIVE
from .csp.constraints import find_conflicting_givens, is_placement_valid
from .csp.search import SearchCounter, run_search
from .csp.strategies import SelectionStrategy, get_strategy
from .csp.validation import is_valid_solution
from .logging_utils import get_logger
from .types import Grid, SearchResult

logger = get_logger()


class ConstraintSolver:
    """
    Parameters
    ----------
    counter : SearchCounter, optional
        統計を数えるオブジェクト。省略時は新しく作ります。
        どの solve 系メソッドも、呼び出しの最初にリセットします。
    """

    def __init__(self, counter: Optional[SearchCounter] = None) -> None:
        self.counter = counter if counter is not None else SearchCounter()

    @property
    def steps(self) -> int:
        return self.counter.steps

    @property
    def backtracks(self) -> int:
        return self.counter.backtracks

    def solve(self, grid: Grid) -> SearchResult:
        return self.solve_with(grid, STRATEGY_NAIVE)

    def solve_with_heuristic(self, grid: Grid) -> SearchResult:
        return self.solve_with(grid, STRATEGY_MCV)

    def solve_with(
        self,
        grid: Grid,
        strategy: Union[str, SelectionStrategy],
    ) -> SearchResult:
        """
        指定した戦略で探索します。

        最初から入っている数字どうしが衝突している盤面は、
        どう埋めても解にならないので、探索せずに solved=False を返します。
        """
        if isinstance(strategy, str):
            strategy = get_strategy(strategy)

        self.counter.reset()

        conflicts = find_conflicting_givens(grid)
        if conflicts:
            logger.warning(
                "Givens conflict (%d pairs, first=%s); skipping search.",
                len(conflicts),
                conflicts[0],
            )
            return SearchResult(solved=False, steps=0, backtracks=0)

        return run_search(grid, strategy, self.counter)

    @staticmethod
    def is_placement_valid(grid: Grid, row: int, col: int, value: int) -> bool:
        return is_placement_valid(grid, row, col, value)

    @staticmethod
    def is_valid_solution(grid: Grid) -> bool:
        return is_valid_solution(grid)


def solve(grid: Grid) -> SearchResult:
    """素朴な順序で解きます（呼び出しごとに新しい ConstraintSolver を使います）。"""
    return ConstraintSolver().solve(grid)


def solve_with_heuristic(grid: Grid) -> SearchResult:
    """MCV 順序で解きます（呼び出しごとに新しい ConstraintSolver を使います）。"""
    return ConstraintSolver().solve_with_heuristic(grid)
