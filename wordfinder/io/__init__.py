# -*- coding: utf-8 -*-
"""
wordfinder.io パッケージ

盤面と検索語リストの読み込みをまとめたサブパッケージです。
"""

from .loader import clean_row, load_grid_rows, load_words, rows_from_dataframe, tile_rows

__all__ = ["clean_row", "load_grid_rows", "load_words", "rows_from_dataframe", "tile_rows"]
