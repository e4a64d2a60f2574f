# -*- coding: utf-8 -*-
"""
検索語リストを集計し、出現回数の多い順に並べるモジュールです。

ざっくり流れ
------------
1. 空・空白だけの語や文字列以外の値を読み飛ばす
2. 大文字小文字を無視したキーで重複を除く（最初に出た表記と位置を残す）
3. 各単語の出現回数を数える（必要ならスレッドで並列に）
4. 0 回の単語を除き、出現回数の降順に安定ソートする
5. 先頭から max_results 件を返す
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List, Optional, Tuple

from ..config import (
    MAX_RESULTS, PARALLEL_MAX_WORKERS, PARALLEL_MIN_WORDS, PARALLEL_SCORING,
)
from ..grid.matrix import Grid
from ..grid.parser import normalize_word
from ..logging_utils import get_logger
from ..types import WordScore
from .matcher import count_occurrences

logger = get_logger()


def build_score_table(words: Optional[Iterable[str]]) -> Tuple[Dict[str, WordScore], int]:
    """
    検索語リストから、重複を除いた集計表（スコアは 0 のまま）を作ります。

    Returns
    -------
    table : dict[str, WordScore]
        正規化キー -> WordScore。挿入順は最初に出現した順。
    skipped : int
        読み飛ばした（空・空白だけ・文字列でない）要素の数。
    """
    table: Dict[str, WordScore] = {}
    skipped = 0
    if words is None:
        return table, skipped
    if isinstance(words, str):
        # 文字列 1 本は「1 語だけのリスト」とみなす（1 文字ずつには分けない）
        words = [words]

    for order, raw in enumerate(words):
        if not isinstance(raw, str):
            skipped += 1
            continue
        word = raw.strip()
        if not word:
            skipped += 1
            continue

        key = normalize_word(word)
        if key not in table:
            table[key] = WordScore(word=word, key=key, score=0, order=order)

    return table, skipped


def _score_all(grid: Grid, entries: List[WordScore], parallel: bool) -> List[int]:
    if parallel and len(entries) >= PARALLEL_MIN_WORDS:
        logger.debug("Scoring %d words with %d threads", len(entries), PARALLEL_MAX_WORKERS)
        # map は入力順で結果を返すので、逐次実行と同じ並びになる
        with ThreadPoolExecutor(max_workers=PARALLEL_MAX_WORKERS) as executor:
            return list(executor.map(lambda e: count_occurrences(grid, e.key), entries))
    return [count_occurrences(grid, e.key) for e in entries]


def rank_words(
    grid: Grid,
    words: Optional[Iterable[str]],
    max_results: int = MAX_RESULTS,
    parallel: Optional[bool] = None,
) -> List[WordScore]:
    """
    検索語を出現回数の降順に並べた WordScore のリストを返します。

    同点の場合は、検索語リストで最初に出現した順を保ちます。
    出現回数 0 の単語は含みません。
    """
    if parallel is None:
        parallel = PARALLEL_SCORING

    table, skipped = build_score_table(words)
    entries = list(table.values())

    for entry, score in zip(entries, _score_all(grid, entries, parallel)):
        entry.score = score

    found = [e for e in entries if e.score > 0]
    # sorted は安定ソートなので、同点は order（挿入順）のまま
    found = sorted(found, key=lambda e: -e.score)

    logger.debug(
        "find: %d distinct, %d skipped, %d matched", len(entries), skipped, len(found)
    )
    return found[:max(max_results, 0)]


def find(
    grid: Grid,
    words: Optional[Iterable[str]],
    max_results: int = MAX_RESULTS,
    parallel: Optional[bool] = None,
) -> List[str]:
    """
    盤面に最も多く出現する検索語を、最大 max_results 件返します。

    Parameters
    ----------
    grid : Grid
        検索対象の盤面。
    words : iterable of str
        検索語のリスト。重複・大文字小文字の混在・空文字列を含んでもよい。
    max_results : int, optional
        返す件数の上限（既定は 10）。
    parallel : bool or None, optional
        True ならスレッドで並列に数える。None なら config の PARALLEL_SCORING。

    Returns
    -------
    list of str
        最初に出現したときの表記の単語リスト。見つからなければ空リスト。
    """
    return [e.word for e in rank_words(grid, words, max_results=max_results, parallel=parallel)]
