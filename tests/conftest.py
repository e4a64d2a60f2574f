"""
Shared grids for the wordfinder test suite.
"""

import pytest

from wordfinder import new_grid
from wordfinder.io.loader import clean_row, tile_rows


SAMPLE_ROWS = ["abcdc", "fgwio", "chill", "pqnsd", "uvdxy"]

NON_SQUARE_ROWS = [
    "a b c d c c",
    "f g w i o h",
    "c h i l l i",
    "p q n s d l",
    "u v d x y l",
]

# 12x6 block; "spring" and part of "hot"/"anana" only appear once the block
# is tiled horizontally
LARGE_BLOCK_ROWS = [
    "a b c d c c",
    "o t w b o h",
    "c h i l l i",
    "p q n o d l",
    "u v d w y l",
    "w x F b x c",
    "a b i u h h",
    "r g r r o i",
    "m h e n t l",
    "o h e a t l",
    "g s p r i n",
    "a n a n a n",
]


@pytest.fixture
def sample_grid():
    return new_grid(SAMPLE_ROWS)


@pytest.fixture
def non_square_grid():
    return new_grid([clean_row(r) for r in NON_SQUARE_ROWS])


@pytest.fixture
def large_grid():
    # 10 copies side by side -> 12x60
    return new_grid(tile_rows(LARGE_BLOCK_ROWS, 10))
