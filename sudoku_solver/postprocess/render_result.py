# -*- coding: utf-8 -*-
"""
探索結果をもとに、呼び出し側へ返す情報を構築するモジュールです。
"""

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

from ..config import EMPTY
from ..types import Grid, SearchResult


def build_filled_cells(
    original_grid: Grid,
    solved_grid: Grid,
) -> List[Dict[str, int]]:
    """
    solver が埋めたマス（元は空きマスだったマス）の一覧を作ります。

    まだ空きマスのままのマスは含めません。
    """
    items: List[Dict[str, int]] = []
    for r, (before, after) in enumerate(zip(original_grid, solved_grid)):
        for c, (v0, v1) in enumerate(zip(before, after)):
            if v0 == EMPTY and v1 != EMPTY:
                items.append({"row": r, "col": c, "digit": int(v1)})
    return items


def build_result(
    original: Any,
    original_grid: Grid,
    solved_grid: Grid,
    result: SearchResult,
    strategy: str,
) -> Dict[str, Any]:
    """
    Parameters
    ----------
    original : pandas.DataFrame or any
        呼び出し側から受け取った元の盤面。DataFrame なら
        index / columns をそのまま引き継ぎます。
    original_grid : list of list of int
        探索前の盤面（正規化済み）。
    solved_grid : list of list of int
        探索後の盤面。
    result : SearchResult
        探索の結果と統計。
    strategy : str
        使った戦略名。
    """
    if isinstance(original, pd.DataFrame):
        solved_df = pd.DataFrame(
            solved_grid,
            index=original.index,
            columns=original.columns,
        )
    else:
        solved_df = pd.DataFrame(solved_grid)

    rows, cols = solved_df.shape

    return {
        "solved_board": solved_df.values.tolist(),  # DataFrameを返さない
        "solved": bool(result.solved),
        "steps": int(result.steps),
        "backtracks": int(result.backtracks),
        "strategy": strategy,
        "filled_cells": build_filled_cells(original_grid, solved_grid),
        "shape": (rows, cols),
    }
