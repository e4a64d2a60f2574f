# -*- coding: utf-8 -*-
"""
wordfinder 全体で共通して使う設定値をまとめたモジュールです。

ここを編集することで
- 盤面サイズの上限
- 検索結果として返す件数
- 並列スコアリングの有効/無効としきい値
- ログレベル
などを変更できます。
"""

from __future__ import annotations

import os

# ==== 盤面サイズ ===========================================================

# 盤面の最大行数
MAX_ROWS: int = 64

# 盤面の最大列数
MAX_COLUMNS: int = 64

# ==== 検索結果 =============================================================

# find() が返す単語の最大件数
MAX_RESULTS: int = 10

# ==== 並列スコアリング =====================================================

# True にすると、単語数が PARALLEL_MIN_WORDS 以上のときにスレッドで並列に数える。
# 結果の内容・順序は逐次実行と同じになります。
PARALLEL_SCORING: bool = False

# 並列化するときの最小単語数（これ未満なら逐次実行）
PARALLEL_MIN_WORDS: int = 64

# 並列化するときのワーカースレッド数
PARALLEL_MAX_WORKERS: int = 4

# ==== ログ =================================================================

# 環境変数 WORDFINDER_LOG_LEVEL で上書きできます（例: DEBUG）
LOG_LEVEL: str = os.getenv("WORDFINDER_LOG_LEVEL", "INFO")
