# -*- coding: utf-8 -*-
"""
盤面の各行・各列から、単語の出現回数を数えるモジュールです。

- 横方向: 各行を左から右へ
- 縦方向: 各列を上から下へ
の 2 つの向きを、同じ走査ループを向きの引数だけ変えて使い回します。
"""

from __future__ import annotations

from ..grid.matrix import Grid
from ..grid.parser import normalize_word
from ..types import ORIENTATIONS


def _matches_at(grid: Grid, word: str, line_index: int, start: int, orientation: str) -> bool:
    for offset, ch in enumerate(word):
        if grid.char_at(line_index, start + offset, orientation) != ch:
            return False
    return True


def count_in_lines(grid: Grid, word: str, orientation: str) -> int:
    """
    指定した向きのすべての線について、正規化済みの word の出現回数を数えます。

    重なり合う出現も別々に数えます（例: "ananana" の中の "anana" は 2 回）。
    単語が線より長い場合は走査せずに 0 を返します。
    """
    line_length = grid.line_length(orientation)
    last_start = line_length - len(word)
    if last_start < 0:
        return 0  # 線に収まらない

    count = 0
    for line_index in range(grid.line_count(orientation)):
        # 単語長 == 線の長さ（last_start == 0）も調べるので上限は含む
        for start in range(last_start + 1):
            if _matches_at(grid, word, line_index, start, orientation):
                count += 1
    return count


def count_occurrences(grid: Grid, word: str) -> int:
    """
    盤面全体（横 + 縦）での word の出現回数を返します。

    Parameters
    ----------
    grid : Grid
        検索対象の盤面。
    word : str
        検索語。大文字小文字は区別しません（前後の空白は無視）。

    Returns
    -------
    int
        横方向と縦方向の出現回数の合計。空の単語は 0。
    """
    normalized = normalize_word(word)
    if not normalized:
        return 0
    return sum(count_in_lines(grid, normalized, o) for o in ORIENTATIONS)
