# -*- coding: utf-8 -*-
"""
盤面の行文字列を検証し、内部表現に正規化するモジュールです。

主な役割:
- 行リストのサイズ（行数・列数）と形（全行が同じ長さか）を検証
- 各文字がアルファベット（Unicode の文字）かどうかを検証
- 各文字を小文字に正規化して numpy 配列に詰める
"""

from __future__ import annotations

from typing import Iterable, List

import numpy as np

from ..config import MAX_COLUMNS, MAX_ROWS
from ..errors import InvalidInput
from ..logging_utils import get_logger

logger = get_logger()


def normalize_char(ch: str) -> str:
    """
    1 文字を盤面の正規形（小文字）に変換します。

    小文字化で 2 文字以上になる文字（例: "İ" -> "i" + 結合文字）は、
    1 マス 1 文字を保つために先頭の 1 文字（"i"）を使います。
    """
    return ch.lower()[:1] or ch


def normalize_word(word: str) -> str:
    """
    検索語を盤面と同じ正規形に変換します（前後の空白は除去）。

    盤面と同じ :func:`normalize_char` を 1 文字ずつ適用するので、
    盤面のマスと検索語の文字は必ず同じ規則で比較されます。
    """
    return "".join(normalize_char(ch) for ch in word.strip())


def _reject(reason: str, row: int | None = None, column: int | None = None) -> InvalidInput:
    logger.debug("Grid rejected: %s", reason)
    return InvalidInput(reason, row=row, column=column)


def normalize_rows(rows: Iterable[str] | None) -> np.ndarray:
    """
    行文字列のリストを検証し、小文字 1 文字ずつの 2 次元配列に変換します。

    Parameters
    ----------
    rows : iterable of str
        盤面の各行。1 行目の長さが列数になります。
        各行の前後の空白は取り除いてから検証します。

    Returns
    -------
    numpy.ndarray
        shape = (rows, cols)、dtype = "<U1" の 2 次元配列。

    Raises
    ------
    InvalidInput
        - 行が 0 行、または MAX_ROWS を超える
        - 文字列でない行、空行、空白だけの行がある
        - MAX_COLUMNS を超える長さの行がある
        - 1 行目と長さの異なる行がある
        - アルファベット以外の文字を含む行がある
    """
    if rows is None:
        raise _reject("Invalid matrix. Expected a sequence of row strings.")

    if isinstance(rows, str):
        # 文字列 1 本を渡された場合は「1 行の盤面」ではなく誤用とみなす
        raise _reject("Invalid matrix. Expected a sequence of row strings, got a single string.")

    row_list = list(rows)
    rows_count = len(row_list)

    if rows_count == 0:
        raise _reject("Invalid empty matrix. Expected at least 1 row.")
    if rows_count > MAX_ROWS:
        raise _reject(
            f"Invalid rows count {rows_count}. Expected at most {MAX_ROWS} rows."
        )

    cleaned: List[str] = []
    columns_count = 0

    for row_index, raw in enumerate(row_list):
        row_no = row_index + 1

        if not isinstance(raw, str):
            raise _reject(f"Invalid value {raw!r} for row {row_no}. Expected a string.", row=row_no)

        row_string = raw.strip()
        if not row_string:
            raise _reject(f"Invalid empty string for row {row_no}.", row=row_no)

        length = len(row_string)
        if length > MAX_COLUMNS:
            raise _reject(
                f"Invalid length {length} on string '{row_string}' for row {row_no}."
                f" Expected at most {MAX_COLUMNS} characters.",
                row=row_no,
            )

        # 1 行目で列数を決める
        if row_index == 0:
            columns_count = length
        elif length != columns_count:
            raise _reject(
                f"Invalid length {length} on string '{row_string}' for row {row_no}."
                f" Expected {columns_count} characters.",
                row=row_no,
            )

        for column_index, ch in enumerate(row_string):
            if not ch.isalpha():
                raise _reject(
                    f"Invalid character '{ch}' for column {column_index + 1}"
                    f" on string '{row_string}' for row {row_no}. Expected a letter.",
                    row=row_no,
                    column=column_index + 1,
                )

        cleaned.append(row_string)

    cells = np.empty((rows_count, columns_count), dtype="<U1")
    for i, row_string in enumerate(cleaned):
        for j, ch in enumerate(row_string):
            cells[i, j] = normalize_char(ch)

    # 構築後は変更させない
    cells.setflags(write=False)
    return cells
