# wordfinder/__init__.py
# -*- coding: utf-8 -*-
"""
wordfinder パッケージの入口となるモジュールです。

    from wordfinder import new_grid, find

    grid = new_grid(["abcdc", "fgwio", "chill", "pqnsd", "uvdxy"])
    find(grid, ["cold", "wind", "snow", "chill"])  # -> ["cold", "wind", "chill"]

のように呼び出すことを想定しています。

1. 行文字列の検証と正規化（小文字化）
2. 検索語の重複除去
3. 行・列の全走査による出現回数のカウント
4. 出現回数の降順で上位 10 件を返す
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .config import MAX_RESULTS
from .errors import InvalidInput
from .grid.matrix import Grid
from .search.matcher import count_occurrences
from .search.ranking import find, rank_words

__all__ = [
    "Grid",
    "InvalidInput",
    "WordFinder",
    "count_occurrences",
    "find",
    "new_grid",
    "rank_words",
]


def new_grid(rows: Iterable[str]) -> Grid:
    """
    行文字列のリストから盤面を作ります。

    Raises
    ------
    InvalidInput
        行リストが不正な場合。
    """
    return Grid.from_rows(rows)


class WordFinder:
    """
    盤面と検索をひとまとめにした入口クラスです。

    Examples
    --------
    >>> finder = WordFinder(["abcdc", "fgwio", "chill", "pqnsd", "uvdxy"])
    >>> finder.find(["cold", "wind", "snow", "chill"])
    ['cold', 'wind', 'chill']
    """

    def __init__(self, matrix: Iterable[str]) -> None:
        self.grid = new_grid(matrix)

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def columns(self) -> int:
        return self.grid.columns

    def find(
        self,
        words: Optional[Iterable[str]],
        max_results: int = MAX_RESULTS,
        parallel: Optional[bool] = None,
    ) -> List[str]:
        return find(self.grid, words, max_results=max_results, parallel=parallel)
