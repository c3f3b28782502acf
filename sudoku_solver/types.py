# -*- coding: utf-8 -*-
"""
数独 solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Tuple

# 盤面: 9x9 の整数リスト。0 は空きマス、1〜9 は確定した数字
Grid = List[List[int]]

# グリッド上の座標を表す型 (row, col)
CellCoord = Tuple[int, int]


@dataclass
class SearchResult:
    """
    solve 系の呼び出し 1 回分の結果を表すクラスです。

    Attributes
    ----------
    solved : bool
        解が見つかったかどうか。見つからないことはエラーではなく、
        False という普通の結果として返します。
    steps : int
        仮置きした回数（あとで取り消したものも含む）。
    backtracks : int
        行き止まりになって取り消した回数。常に steps 以下です。
    """

    solved: bool
    steps: int = 0
    backtracks: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CellSelection:
    """
    探索戦略が「次に埋めるマス」として選んだ結果です。

    Attributes
    ----------
    cell : (row, col)
        次に値を仮置きするマス。
    candidates : list of int
        このマスに試す値の並び（試す順番そのもの）。
        空リストなら、そのマスにはもう置ける数字がありません。
    """

    cell: CellCoord
    candidates: List[int] = field(default_factory=list)
