# -*- coding: utf-8 -*-
"""
数独のバックトラック探索を行うモジュールです。

ざっくり流れ
------------
1. 戦略（strategy）に「次に埋めるマス」と「試す値の並び」を選んでもらう
2. 空きマスが無ければ解けたので終了
3. 候補が 1 つも無ければ、何も置かずにこの枝は失敗
4. 各値について:
   - is_placement_valid で置けるか確認し、置けるなら仮置き（steps +1）
   - 残りを再帰的に探索し、成功したらそのまま成功を返す（取り消さない）
   - 失敗したら仮置きを取り消して（backtracks +1）次の値へ
5. すべての値がダメなら失敗を返し、呼び出し元でさらに戻る

盤面は 1 つのリストをその場で書き換えます（コピーはしません）。
再帰の深さは空きマスの数（最大 81）までなので、深さ制限は設けていません。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..config import EMPTY, PROGRESS_LOG_INTERVAL
from ..logging_utils import get_logger
from ..types import CellCoord, Grid, SearchResult
from .constraints import is_placement_valid
from .strategies import SelectionStrategy

logger = get_logger()


@dataclass
class SearchCounter:
    """
    探索の統計（仮置き回数・取り消し回数）を数えるクラスです。

    探索ロジックそのものはこの値を使いません。
    差し替えたい場合は on_place / on_backtrack を持つオブジェクトを渡してください。
    """

    steps: int = 0
    backtracks: int = 0

    def reset(self) -> None:
        self.steps = 0
        self.backtracks = 0

    def on_place(self, cell: CellCoord, value: int) -> None:
        self.steps += 1
        if self.steps % PROGRESS_LOG_INTERVAL == 0:
            logger.info(
                "[search] steps = %d, backtracks = %d, last=%s<-%d",
                self.steps,
                self.backtracks,
                cell,
                value,
            )

    def on_backtrack(self, cell: CellCoord, value: int) -> None:
        self.backtracks += 1


def backtrack_search(
    grid: Grid,
    strategy: SelectionStrategy,
    counter: SearchCounter,
) -> bool:
    """
    仮置き → 再帰 → 取り消し による深さ優先探索です。

    Parameters
    ----------
    grid : list of list of int
        探索対象の盤面。その場で書き換えます。
    strategy : SelectionStrategy
        次のマスと試す値の並びを決める戦略。
    counter : SearchCounter
        統計の記録先。

    Returns
    -------
    bool
        解が見つかれば True（盤面は解の状態のまま）。
        見つからなければ False（この呼び出しで置いた値はすべて取り消し済み）。
    """
    selection = strategy.select_cell(grid)
    if selection is None:
        return True  # 空きマスなし = 解けた

    row, col = selection.cell

    # 候補ゼロなら何も置かずに失敗する。
    # このとき backtracks は増やさない
    if not selection.candidates:
        return False

    for value in selection.candidates:
        # MCV の候補は candidate_values で一度チェック済みだが、
        # 仮置きの前の関門はどの戦略でもここ 1 か所にしておく
        if not is_placement_valid(grid, row, col, value):
            continue

        grid[row][col] = value
        counter.on_place((row, col), value)

        if backtrack_search(grid, strategy, counter):
            return True

        # この値では行き止まりだったので取り消して次へ
        grid[row][col] = EMPTY
        counter.on_backtrack((row, col), value)

    return False


def run_search(
    grid: Grid,
    strategy: SelectionStrategy,
    counter: Optional[SearchCounter] = None,
) -> SearchResult:
    """
    探索のエントリポイントです。

    counter は呼び出しの最初に必ずリセットするので、
    前回の呼び出しの数値が混ざることはありません。
    """
    if counter is None:
        counter = SearchCounter()
    counter.reset()

    solved = backtrack_search(grid, strategy, counter)

    logger.debug(
        "[search] strategy=%s solved=%s steps=%d backtracks=%d",
        strategy.name,
        solved,
        counter.steps,
        counter.backtracks,
    )
    return SearchResult(
        solved=solved,
        steps=counter.steps,
        backtracks=counter.backtracks,
    )
