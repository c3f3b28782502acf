# -*- coding: utf-8 -*-
"""
完成した盤面が正しいかどうかを判定するモジュールです。

探索（:mod:`.search`）とは独立しており、どうやって作られた盤面でも判定できます。
盤面は読むだけで、書き換えません。
"""

from __future__ import annotations

from typing import List, Sequence

from ..config import BOX_SIZE, DIGITS, GRID_SIZE
from ..types import Grid

_DIGIT_SET = frozenset(DIGITS)


def get_row(grid: Grid, row: int) -> List[int]:
    return list(grid[row])


def get_column(grid: Grid, col: int) -> List[int]:
    return [grid[r][col] for r in range(GRID_SIZE)]


def get_box(grid: Grid, box: int) -> List[int]:
    """ボックス番号 box (0〜8、左上から行優先) の 9 マスを返します。"""
    start_row = (box // BOX_SIZE) * BOX_SIZE
    start_col = (box % BOX_SIZE) * BOX_SIZE
    return [
        grid[start_row + i][start_col + j]
        for i in range(BOX_SIZE)
        for j in range(BOX_SIZE)
    ]


def is_valid_unit(unit: Sequence[int]) -> bool:
    """
    行・列・ボックスのいずれか 1 つ（ユニット）が 1〜9 の並べ替えになっているか。

    範囲外の値（空きマスの 0 を含む）や重複があれば False です。
    """
    seen = set()
    for v in unit:
        if v not in _DIGIT_SET or v in seen:
            return False
        seen.add(v)
    return len(seen) == len(_DIGIT_SET)


def is_valid_solution(grid: Grid) -> bool:
    """
    盤面全体が正しい解になっているかを判定します。

    9 行・9 列・9 ボックスを順に調べ、最初にダメなユニットが
    見つかった時点で False を返します。
    """
    for i in range(GRID_SIZE):
        if not (
            is_valid_unit(get_row(grid, i))
            and is_valid_unit(get_column(grid, i))
            and is_valid_unit(get_box(grid, i))
        ):
            return False
    return True
