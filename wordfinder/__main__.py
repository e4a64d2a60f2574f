# -*- coding: utf-8 -*-
"""
コマンドラインから単語検索を実行するためのモジュールです。

使い方の例:

    python -m wordfinder grid.txt --words cold wind snow chill
    python -m wordfinder grid.txt --words-file words.csv --top 5 --scores
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import List, Optional

from . import new_grid
from .config import MAX_RESULTS
from .errors import InvalidInput
from .io.loader import load_grid_rows, load_words
from .logging_utils import get_logger
from .search.ranking import rank_words

logger = get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordfinder",
        description="Find the most frequent words in a letter grid (rows and columns).",
    )
    parser.add_argument("grid_file", help="Text file with one grid row per line")

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--words", nargs="+", help="Words to search for")
    source.add_argument("--words-file", help="Word list (.csv with a 'word' column, or one word per line)")

    parser.add_argument("--top", type=int, default=MAX_RESULTS, help=f"Maximum results (default: {MAX_RESULTS})")
    parser.add_argument("--parallel", action="store_true", help="Score words with a thread pool")
    parser.add_argument("--scores", action="store_true", help="Print the occurrence count next to each word")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        rows = load_grid_rows(args.grid_file)
        words = args.words if args.words is not None else load_words(args.words_file)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Failed to load input: %s", e)
        return 1

    try:
        grid = new_grid(rows)
    except InvalidInput as e:
        logger.error("Invalid grid: %s", e)
        return 2

    start = time.perf_counter()
    ranked = rank_words(grid, words, max_results=args.top, parallel=args.parallel or None)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    logger.info(
        "Searching %d words in a %dx%d grid took %.2f ms",
        len(words), grid.rows, grid.columns, elapsed_ms,
    )

    for entry in ranked:
        if args.scores:
            print(f"{entry.word}\t{entry.score}")
        else:
            print(entry.word)
    return 0


if __name__ == "__main__":
    sys.exit(main())
