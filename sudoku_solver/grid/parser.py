# -*- coding: utf-8 -*-
"""
盤面のセルを内部表現に正規化するモジュールです。

主な役割:
- pandas.DataFrame / numpy 配列 / 二重リストを 9x9 の int リストに変換
- 81 文字の問題文字列の読み書き
- 形（9x9）と値（0〜9）のチェック

solver 本体は形式チェックをしないので、外部から受け取った盤面は
必ずここを通してから渡してください。
"""

from __future__ import annotations

from typing import Any, Union

import numpy as np
import pandas as pd

from ..config import DIGITS, EMPTY, GRID_SIZE
from ..types import Grid

# 空きマスとして扱う文字
EMPTY_MARKS = {"", "0", ".", "-", "_"}

BoardLike = Union[pd.DataFrame, np.ndarray, list]


class GridFormatError(ValueError):
    """盤面の形や値が不正なときに送出される例外です。"""


def normalize_cell(x: Any) -> int:
    """
    個々のセルの値を、内部表現（0〜9 の int）に変換します。

    変換ルール（例）
    ----------------
    - None / NaN / "" / "." / "0" : 空きマス（0）
    - 1〜9 の数値、または "7" のような数字文字列 : その数字
    - それ以外 : GridFormatError
    """
    if x is None:
        return EMPTY

    # リストや配列など、1 マスに複数の値が入っているものは受け付けない
    if np.ndim(x) != 0:
        raise GridFormatError(f"Cell must be a single value: {x!r}")

    # pandas の欠損値（NaN / None / NA）は空きマス扱い
    if not isinstance(x, str) and pd.isna(x):
        return EMPTY

    if isinstance(x, (bool, np.bool_)):
        raise GridFormatError(f"Invalid cell value: {x!r}")

    if isinstance(x, (int, np.integer)):
        v = int(x)
    elif isinstance(x, (float, np.floating)):
        # CSV 経由だと 5.0 のような float になることがある
        if not float(x).is_integer():
            raise GridFormatError(f"Invalid cell value: {x!r}")
        v = int(x)
    else:
        s = str(x).strip()
        if s in EMPTY_MARKS:
            return EMPTY
        if not (s.isascii() and s.isdigit()):
            raise GridFormatError(f"Invalid cell value: {x!r}")
        v = int(s)

    if v != EMPTY and v not in DIGITS:
        raise GridFormatError(f"Cell value out of range 0-9: {x!r}")
    return v


def normalize_grid(board: BoardLike) -> Grid:
    """
    盤面を 9x9 の int の二重リストに変換し、
    各セルを :func:`normalize_cell` によって正規化します。

    Parameters
    ----------
    board : pandas.DataFrame, numpy.ndarray or list of lists
        入力の盤面データ。元のデータは変更しません。

    Returns
    -------
    list of list of int
        新しく作った 9x9 の盤面（探索でそのまま書き換えてよいもの）。

    Raises
    ------
    GridFormatError
        9x9 でない場合や、0〜9 以外の値が含まれる場合。
    """
    if isinstance(board, pd.DataFrame):
        arr = board.to_numpy(dtype=object)
    else:
        if isinstance(board, (list, tuple)) and any(
            not isinstance(row, (list, tuple, np.ndarray)) for row in board
        ):
            raise GridFormatError("Board must be a 2-D grid (list of rows).")
        try:
            arr = np.array(board, dtype=object)
        except ValueError as e:
            # 行ごとに長さが違うと numpy が変換できない
            raise GridFormatError(f"Board is not rectangular: {e}") from e

    if arr.ndim != 2 or arr.shape != (GRID_SIZE, GRID_SIZE):
        raise GridFormatError(
            f"Board must be {GRID_SIZE}x{GRID_SIZE}, got shape {arr.shape}"
        )

    rows, cols = arr.shape
    out = np.empty((rows, cols), dtype=int)

    for i in range(rows):
        for j in range(cols):
            try:
                out[i, j] = normalize_cell(arr[i, j])
            except GridFormatError as e:
                raise GridFormatError(f"row {i}, col {j}: {e}") from e

    # 探索には numpy 配列ではなく Python の int のリストを渡す
    return out.tolist()


def parse_line(text: str) -> Grid:
    """
    81 文字の問題文字列を盤面に変換します。

    "0" または "." が空きマスです。空白・改行は無視します。

    例: "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
    """
    chars = [ch for ch in str(text) if not ch.isspace()]
    if len(chars) != GRID_SIZE * GRID_SIZE:
        raise GridFormatError(
            f"Puzzle string must have {GRID_SIZE * GRID_SIZE} cells, got {len(chars)}"
        )

    rows = [chars[i:i + GRID_SIZE] for i in range(0, len(chars), GRID_SIZE)]
    return normalize_grid(rows)


def format_line(grid: Grid) -> str:
    """盤面を 81 文字の文字列（空きマスは "0"）に変換します。"""
    return "".join("".join(str(v) for v in row) for row in grid)
