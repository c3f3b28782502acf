# -*- coding: utf-8 -*-
"""
sudoku_solver 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 既定の探索戦略
- 進捗ログを出す間隔
- ログレベル
などを簡単に変更できます。
"""

from __future__ import annotations

import logging
from typing import Tuple

# ==== 盤面関連 =============================================================

# 盤面の一辺のマス数（9x9 固定）
GRID_SIZE: int = 9

# ボックス（3x3 ブロック）の一辺のマス数
BOX_SIZE: int = 3

# 空きマスを表す値
EMPTY: int = 0

# マスに置ける数字（昇順。候補の列挙順もこの順番になります）
DIGITS: Tuple[int, ...] = tuple(range(1, GRID_SIZE + 1))

# ==== 探索関連 =============================================================

# 探索戦略の選択: "naive"（先頭の空きマスから）, "mcv"（候補が最も少ないマスから）
STRATEGY_NAIVE: str = "naive"
STRATEGY_MCV: str = "mcv"
DEFAULT_STRATEGY: str = STRATEGY_MCV

# 何手置くごとに進捗ログを出すか。
# 小さくするとログが増え、探索が少し遅くなります。
PROGRESS_LOG_INTERVAL: int = 100000

# ==== ログ関連 =============================================================

LOG_LEVEL: int = logging.INFO
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
