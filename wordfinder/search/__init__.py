# -*- coding: utf-8 -*-
"""
wordfinder.search パッケージ

単語の検索と順位付けをまとめたサブパッケージです。
- matcher.py : 行・列の全走査による出現回数のカウント
- ranking.py : 重複除去・スコアリング・上位 N 件の抽出
"""

from .matcher import count_in_lines, count_occurrences
from .ranking import build_score_table, find, rank_words

__all__ = [
    "build_score_table",
    "count_in_lines",
    "count_occurrences",
    "find",
    "rank_words",
]
