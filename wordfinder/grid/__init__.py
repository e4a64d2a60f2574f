# -*- coding: utf-8 -*-
"""
wordfinder.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- parser.py : 行文字列の検証と内部表現（小文字の numpy 配列）への変換
- matrix.py : 向き（行/列）ごとに読み出せる変更不可の Grid クラス
"""

from .matrix import Grid
from .parser import normalize_char, normalize_rows, normalize_word

__all__ = ["Grid", "normalize_char", "normalize_rows", "normalize_word"]
