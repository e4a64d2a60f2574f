# -*- coding: utf-8 -*-
"""
盤面の行リストと検索語リストをファイルなどから読み込むモジュールです。

- 検索語: CSV（'word' 列が必須）または 1 行 1 語のテキスト
- 盤面  : 1 行 1 行のテキスト（行内の空白は無視）、または 1 マス 1 セルの DataFrame

ここで読み込んだ値の検証は行いません。
検証は :func:`wordfinder.new_grid` に任せます。
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import pandas as pd


def _require_file(path: str | Path, label: str) -> Path:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"{label} not found: {p}")
    return p


def load_words(path: str | Path) -> List[str]:
    """
    検索語リストを読み込みます。

    Parameters
    ----------
    path : str or Path
        拡張子が .csv なら 'word' 列を持つ CSV、
        それ以外は 1 行に 1 語ずつ書かれたテキストファイル。

    Returns
    -------
    list of str
        ファイルに書かれた順の検索語。重複や空白だけの語もそのまま返します。
    """
    p = _require_file(path, "Word list")

    if p.suffix.lower() == ".csv":
        # keep_default_na=False: "nan" や "null" という単語を欠損値にしない
        df = pd.read_csv(p, encoding="utf-8-sig", dtype=str, keep_default_na=False)
        if "word" not in df.columns:
            raise ValueError("Word list CSV must have a 'word' column.")
        return df["word"].astype(str).tolist()

    with open(p, "r", encoding="utf-8-sig") as f:
        return [line.rstrip("\r\n") for line in f]


def clean_row(row: str) -> str:
    """行内の空白をすべて取り除きます（"a b c" -> "abc"）。"""
    return "".join(row.split())


def load_grid_rows(path: str | Path) -> List[str]:
    """
    盤面のテキストファイルを読み込み、行文字列のリストを返します。

    空行は読み飛ばし、行内の空白は取り除きます。
    """
    p = _require_file(path, "Grid file")

    rows: List[str] = []
    with open(p, "r", encoding="utf-8-sig") as f:
        for line in f:
            row = clean_row(line)
            if row:
                rows.append(row)
    return rows


def rows_from_dataframe(df: pd.DataFrame) -> List[str]:
    """
    1 マス 1 セルの DataFrame を行文字列のリストに変換します。

    欠損セルは空文字として連結するので、結果の行は短くなり、
    盤面構築時の長さチェックで弾かれます。
    """
    rows: List[str] = []
    n_rows, n_cols = df.shape
    for i in range(n_rows):
        cells = []
        for j in range(n_cols):
            value = df.iat[i, j]
            cells.append("" if pd.isna(value) else str(value).strip())
        rows.append("".join(cells))
    return rows


def tile_rows(rows: Iterable[str], copies: int) -> List[str]:
    """
    各行を copies 回横に連結した行リストを返します。

    小さな盤面を横に並べて大きな盤面を作るときに使います。
    連結の継ぎ目をまたぐ単語も生まれる点に注意してください。
    """
    if copies < 1:
        raise ValueError(f"copies must be >= 1, got {copies}")
    return [clean_row(row) * copies for row in rows]
