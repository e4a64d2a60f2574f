# -*- coding: utf-8 -*-
"""
検証済みの盤面を保持する :class:`Grid` クラスのモジュールです。

「行を左から右へ読む」と「列を上から下へ読む」を
向き（orientation）の引数 1 つで切り替えられるようにしています。
転置したコピーは作らず、:meth:`Grid.char_at` で読む位置を入れ替えます。
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

import numpy as np

from ..logging_utils import get_logger
from ..types import COLUMNS, ORIENTATIONS, ROWS
from .parser import normalize_rows

logger = get_logger()


def _check_orientation(orientation: str) -> None:
    if orientation not in ORIENTATIONS:
        raise ValueError(
            f"Unknown orientation {orientation!r}. Expected one of {ORIENTATIONS}."
        )


class Grid:
    """
    小文字のアルファベットだけで構成された、変更不可の長方形盤面です。

    通常は :meth:`from_rows`（または :func:`wordfinder.new_grid`）で作ります。

    Attributes
    ----------
    rows : int
        行数（1〜MAX_ROWS）。
    columns : int
        列数（1〜MAX_COLUMNS）。全行で同じ。
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: np.ndarray) -> None:
        # cells は normalize_rows() が返した読み取り専用の配列を想定
        self._cells = cells

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Grid":
        """
        行文字列のリストから盤面を作ります。

        Raises
        ------
        InvalidInput
            行リストが不正な場合（詳細は :func:`normalize_rows`）。
        """
        grid = cls(normalize_rows(rows))
        logger.debug("Grid built: %dx%d", grid.rows, grid.columns)
        return grid

    # ------------------------------------------------------------------
    # サイズ
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return int(self._cells.shape[0])

    @property
    def columns(self) -> int:
        return int(self._cells.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        """(行数, 列数) を返します。"""
        return self.rows, self.columns

    def row_count(self) -> int:
        return self.rows

    def column_count(self) -> int:
        return self.columns

    # ------------------------------------------------------------------
    # 向きごとのアクセス
    # ------------------------------------------------------------------
    def line_count(self, orientation: str) -> int:
        """
        指定した向きの「線」の本数を返します。

        "rows" なら行数、"columns" なら列数です。
        """
        _check_orientation(orientation)
        return self.rows if orientation == ROWS else self.columns

    def line_length(self, orientation: str) -> int:
        """
        指定した向きの「線」1 本の長さを返します。

        "rows" なら列数、"columns" なら行数（line_count の逆）です。
        """
        _check_orientation(orientation)
        return self.columns if orientation == ROWS else self.rows

    def char_at(self, line_index: int, position: int, orientation: str) -> str:
        """
        指定した線の position 番目の文字を返します。

        Parameters
        ----------
        line_index : int
            線の番号（"rows" なら行番号、"columns" なら列番号）。0 始まり。
        position : int
            線の中での位置（"rows" なら列番号、"columns" なら行番号）。0 始まり。
        orientation : str
            "rows" または "columns"。
        """
        if orientation == COLUMNS:
            return str(self._cells[position, line_index])
        _check_orientation(orientation)
        return str(self._cells[line_index, position])

    # ------------------------------------------------------------------
    # 表示・比較
    # ------------------------------------------------------------------
    def to_rows(self) -> List[str]:
        """正規化済み（小文字）の行文字列のリストを返します。"""
        return ["".join(row) for row in self._cells.tolist()]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __hash__(self) -> int:
        return hash(tuple(self.to_rows()))

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, columns={self.columns})"
