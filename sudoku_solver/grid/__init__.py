# -*- coding: utf-8 -*-
"""
sudoku_solver.grid パッケージ

盤面（グリッド）の入力に関する処理をまとめたサブパッケージです。
- parser.py : DataFrame / numpy 配列 / 文字列などから内部表現への変換と形式チェック
"""
