# -*- coding: utf-8 -*-
"""
wordfinder で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# 走査の向き。
# "rows"    : 各行を左から右へ読む（横方向）
# "columns" : 各列を上から下へ読む（縦方向）
ROWS = "rows"
COLUMNS = "columns"
ORIENTATIONS: Tuple[str, str] = (ROWS, COLUMNS)


@dataclass
class WordScore:
    """
    1 回の検索における、1 単語分の集計結果を表すクラスです。

    Attributes
    ----------
    word : str
        最初に出現したときの表記（前後の空白は除去済み）。結果として返す文字列。
    key : str
        大文字小文字を無視した重複判定用のキー（小文字化済み）。
    score : int
        盤面全体（横 + 縦）での出現回数。
    order : int
        検索語リスト内で最初に出現した位置。同点時の並び順に使います。
    """

    word: str
    key: str
    score: int
    order: int
