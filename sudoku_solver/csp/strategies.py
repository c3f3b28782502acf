# -*- coding: utf-8 -*-
"""
探索順序（次にどのマスを埋めるか）を決める戦略をまとめたモジュールです。

探索本体（:mod:`.search`）は 1 つだけで、戦略は
「次のマスを選ぶ」「そのマスに試す値を並べる」という 2 点だけを差し替えます。

- FirstEmptyStrategy      : 行優先で最初の空きマス。値は 1〜9 を順に試す
- MostConstrainedStrategy : 候補が最も少ない空きマス（MCV / MRV）
"""

from __future__ import annotations

from typing import Dict, Optional, Protocol, Type

from ..config import DIGITS, EMPTY, GRID_SIZE, STRATEGY_MCV, STRATEGY_NAIVE
from ..types import CellSelection, Grid
from .constraints import candidate_values, find_empty_cell


class SelectionStrategy(Protocol):
    """探索戦略が満たすべきインターフェースです。"""

    name: str

    def select_cell(self, grid: Grid) -> Optional[CellSelection]:
        """
        次に埋めるマスと、試す値の並びを返します。
        空きマスが 1 つも無ければ None（= 解けた）を返します。
        """
        ...


class FirstEmptyStrategy:
    """
    素朴な順序: 行優先で最初に見つかった空きマスを選びます。

    候補は 1〜9 をそのまま返し、置けるかどうかの判定は探索側の
    :func:`~.constraints.is_placement_valid` に任せます。
    マス選びは O(1) 相当で軽い代わりに、枝刈りは弱いです。
    """

    name = STRATEGY_NAIVE

    def select_cell(self, grid: Grid) -> Optional[CellSelection]:
        cell = find_empty_cell(grid)
        if cell is None:
            return None
        return CellSelection(cell=cell, candidates=list(DIGITS))


class MostConstrainedStrategy:
    """
    MCV（Most Constrained Variable）ヒューリスティック:
    置ける数字が最も少ない空きマスを選びます。

    - すべての空きマスについて候補を数え直すので、1 回の選択に
      O(マス数 x 9) かかります。
    - 同数のときは、行優先の走査で先に見つかったマスを優先します
      （統計値を再現可能にするため、この順番は変えないこと）。
    - 候補ゼロのマスが見つかればそれが選ばれ、探索側は
      何も置かずに即座に失敗します。
    """

    name = STRATEGY_MCV

    def select_cell(self, grid: Grid) -> Optional[CellSelection]:
        best: Optional[CellSelection] = None
        min_options = len(DIGITS) + 1

        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                if grid[r][c] != EMPTY:
                    continue
                options = candidate_values(grid, r, c)
                # 「より少ない」ときだけ更新する（同数なら先に見つけた方）
                if len(options) < min_options:
                    min_options = len(options)
                    best = CellSelection(cell=(r, c), candidates=options)

        return best


_STRATEGIES: Dict[str, Type] = {
    STRATEGY_NAIVE: FirstEmptyStrategy,
    STRATEGY_MCV: MostConstrainedStrategy,
}


def get_strategy(name: str) -> SelectionStrategy:
    """
    戦略名から戦略オブジェクトを作ります。

    Raises
    ------
    ValueError
        未知の戦略名が渡された場合。
    """
    key = str(name).strip().lower()
    if key not in _STRATEGIES:
        raise ValueError(
            f"Unknown strategy: {name!r} (expected one of {sorted(_STRATEGIES)})"
        )
    return _STRATEGIES[key]()
