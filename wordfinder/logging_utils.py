# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

wordfinder パッケージ内のモジュールは、ここで作る共通 logger を使います。
"""

from __future__ import annotations

import logging

from .config import LOG_LEVEL

# wordfinder パッケージ共通で使うロガー名
LOGGER_NAME = "wordfinder"


def resolve_level(value: str) -> int:
    """
    "DEBUG" や "10" のようなログレベル指定を数値に変換します。

    レベル名でも数値でもない値（例: "basic_format"）は INFO とみなします。
    """
    text = str(value).strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger() -> logging.Logger:
    """
    wordfinder 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準エラー出力に LOG_LEVEL のログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(resolve_level(LOG_LEVEL))

    return logger
