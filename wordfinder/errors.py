# -*- coding: utf-8 -*-
"""
wordfinder で使う例外をまとめたモジュールです。

盤面の構築時に入力が不正だった場合だけ :class:`InvalidInput` を送出します。
単語検索（find）は例外を出しません。
"""

from __future__ import annotations

from typing import Optional


class InvalidInput(ValueError):
    """
    盤面の行リストが不正なときに送出される例外です。

    Attributes
    ----------
    reason : str
        人が読める形の理由（メッセージ本体）。
    row : int or None
        問題のあった行番号（1 始まり）。行に依存しない場合は None。
    column : int or None
        問題のあった列番号（1 始まり）。列に依存しない場合は None。
    """

    def __init__(
        self,
        reason: str,
        row: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        super().__init__(reason)
        self.reason = reason
        self.row = row
        self.column = column
