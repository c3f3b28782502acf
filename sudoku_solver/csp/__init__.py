# -*- coding: utf-8 -*-
"""
sudoku_solver.csp パッケージ

制約充足（CSP）としての数独探索に関する処理をまとめています。

主に以下の役割を持つモジュールから構成されています。
- constraints.py : 行・列・ボックスの制約チェックと候補の計算
- strategies.py  : 次に埋めるマスの選び方（naive / MCV）
- search.py      : 仮置き → 再帰 → 取り消し のバックトラック探索
- validation.py  : 完成盤面の正しさの判定（探索とは独立）
"""
