# -*- coding: utf-8 -*-
"""
行・列・ボックスの制約チェックを行うモジュールです。

探索中に値を仮置きする前には、必ず :func:`is_placement_valid` を呼びます。
これが正しさを保証する唯一の関門です。

ここでは範囲チェック（盤面サイズや 0〜9 以外の値）は行いません。
入力の形式チェックは :mod:`sudoku_solver.grid.parser` 側の責任です。
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..config import BOX_SIZE, DIGITS, EMPTY, GRID_SIZE
from ..types import CellCoord, Grid


def box_index(row: int, col: int) -> int:
    """マス (row, col) が属するボックス番号 (0〜8) を返します。"""
    return (row // BOX_SIZE) * BOX_SIZE + (col // BOX_SIZE)


def is_placement_valid(grid: Grid, row: int, col: int, value: int) -> bool:
    """
    grid[row][col] に value を置いても制約に違反しないかを判定します。

    同じ行・同じ列・同じ 3x3 ボックスの「ほかのマス」に value が
    すでに入っていなければ True を返します。盤面は変更しません。

    行 9 マス + 列 9 マス + ボックス 9 マスを別々に走査するので、
    重なるマスは 2 回読みますが、判定結果には影響しません。
    """
    # 行
    for c in range(GRID_SIZE):
        if c != col and grid[row][c] == value:
            return False

    # 列
    for r in range(GRID_SIZE):
        if r != row and grid[r][col] == value:
            return False

    # 3x3 ボックス
    start_row = row - row % BOX_SIZE
    start_col = col - col % BOX_SIZE
    for r in range(start_row, start_row + BOX_SIZE):
        for c in range(start_col, start_col + BOX_SIZE):
            if (r, c) != (row, col) and grid[r][c] == value:
                return False

    return True


def candidate_values(grid: Grid, row: int, col: int) -> List[int]:
    """
    空きマス (row, col) に置ける数字を昇順のリストで返します。

    盤面は探索中に書き換わるので、結果はキャッシュせず毎回計算し直します。
    """
    return [v for v in DIGITS if is_placement_valid(grid, row, col, v)]


def find_empty_cell(grid: Grid) -> Optional[CellCoord]:
    """行優先（左上から右へ、上から下へ）で最初の空きマスを返します。"""
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            if grid[r][c] == EMPTY:
                return r, c
    return None  # 空きマスなし


def count_empty_cells(grid: Grid) -> int:
    return sum(1 for row in grid for v in row if v == EMPTY)


def find_conflicting_givens(grid: Grid) -> List[Tuple[CellCoord, CellCoord]]:
    """
    すでに入っている数字どうしの衝突（同じ行・列・ボックスに同じ数字）を
    すべて列挙します。

    Returns
    -------
    list of ((r1, c1), (r2, c2))
        衝突しているマスの組。行優先で (r1, c1) < (r2, c2) となる向きで、
        各組を 1 回だけ含みます。衝突がなければ空リスト。
    """
    filled = [
        (r, c)
        for r in range(GRID_SIZE)
        for c in range(GRID_SIZE)
        if grid[r][c] != EMPTY
    ]

    conflicts: List[Tuple[CellCoord, CellCoord]] = []
    for i, (r1, c1) in enumerate(filled):
        for r2, c2 in filled[i + 1:]:
            if grid[r1][c1] != grid[r2][c2]:
                continue
            if r1 == r2 or c1 == c2 or box_index(r1, c1) == box_index(r2, c2):
                conflicts.append(((r1, c1), (r2, c2)))

    return conflicts
