"""
Test suite for wordfinder.search.
Tests occurrence counting, deduplication, ranking, and the parallel toggle.
"""

import pytest

from wordfinder import WordFinder, count_occurrences, find, new_grid, rank_words
from wordfinder.search.matcher import count_in_lines
from wordfinder.search.ranking import build_score_table
from wordfinder.types import COLUMNS, ROWS

from conftest import LARGE_BLOCK_ROWS


class TestCountOccurrences:
    """Test the exhaustive row/column scan."""

    def test_horizontal_only(self, sample_grid):
        assert count_in_lines(sample_grid, "chill", ROWS) == 1
        assert count_in_lines(sample_grid, "chill", COLUMNS) == 0
        assert count_occurrences(sample_grid, "chill") == 1

    def test_vertical_only(self, sample_grid):
        assert count_in_lines(sample_grid, "cold", ROWS) == 0
        assert count_in_lines(sample_grid, "cold", COLUMNS) == 1
        assert count_occurrences(sample_grid, "cold") == 1

    def test_case_insensitive(self, sample_grid):
        assert count_occurrences(sample_grid, "WIND") == 1
        assert count_occurrences(sample_grid, "Wind") == 1

    def test_missing_word(self, sample_grid):
        assert count_occurrences(sample_grid, "snow") == 0

    def test_overlapping_matches_count_separately(self):
        grid = new_grid(["ananana"])

        assert count_occurrences(grid, "anana") == 2

    def test_single_start_in_six_letter_line(self):
        grid = new_grid(["ananan"])

        assert count_occurrences(grid, "anana") == 1

    def test_word_as_long_as_line_is_checked(self):
        """The last start position (word length == line length) is scanned."""
        grid = new_grid(["cold", "xxxx"])

        assert count_occurrences(grid, "cold") == 1

    def test_word_longer_than_line(self):
        grid = new_grid(["abc", "def"])

        assert count_in_lines(grid, "abcd", ROWS) == 0
        assert count_in_lines(grid, "abc", COLUMNS) == 0

    def test_single_letter_counts_both_orientations(self):
        grid = new_grid(["ab", "ba"])

        # each "a" cell is seen once as a row and once as a column
        assert count_occurrences(grid, "a") == 4

    def test_empty_word(self, sample_grid):
        assert count_occurrences(sample_grid, "") == 0
        assert count_occurrences(sample_grid, "   ") == 0

    def test_non_letter_word_never_matches(self, sample_grid):
        assert count_occurrences(sample_grid, "ch1ll") == 0


class TestFind:
    """Test deduplication, filtering, and ranking."""

    def test_sample_scenario(self, sample_grid):
        found = find(sample_grid, ["cold", "wind", "snow", "chill"])

        assert set(found) == {"cold", "wind", "chill"}
        assert "snow" not in found

    def test_ties_keep_query_order(self, sample_grid):
        assert find(sample_grid, ["chill", "wind", "cold"]) == ["chill", "wind", "cold"]
        assert find(sample_grid, ["cold", "chill", "wind"]) == ["cold", "chill", "wind"]

    def test_case_insensitive_dedup(self, sample_grid):
        found = find(sample_grid, ["Wind", "wind", "WIND"])

        assert found == ["Wind"]

    def test_non_square_scenario(self, non_square_grid):
        found = find(non_square_grid, ["cold", "Wind", "snow", "cold", "chill"])

        assert len(found) == 3
        assert set(found) == {"cold", "Wind", "chill"}
        assert found[0] == "chill"
        assert count_occurrences(non_square_grid, "chill") == 2

    def test_large_scenario(self, large_grid):
        words = [
            "cold", "Wind", "snow", "cold", "chill",
            "heat", "blow", "fire", "hot", "burn", "warm",
            "spring", "anana",
        ]
        found = find(large_grid, words)

        assert large_grid.shape == (12, 60)
        assert len(found) == 10
        assert "snow" not in found
        assert "spring" not in found
        assert found[:3] == ["chill", "anana", "hot"]
        assert set(found) == set(words) - {"snow", "spring"}

    def test_large_scenario_scores(self, large_grid):
        ranked = rank_words(large_grid, ["chill", "anana", "hot", "spring", "cold"], max_results=10)

        assert [(e.word, e.score) for e in ranked] == [
            ("chill", 30), ("anana", 28), ("hot", 19), ("cold", 10), ("spring", 9),
        ]

    def test_never_more_than_ten(self):
        grid = new_grid(["abcdefghijklm"])
        words = list("abcdefghijklm")

        found = find(grid, words)

        assert found == words[:10]

    def test_max_results_override(self, sample_grid):
        assert find(sample_grid, ["cold", "wind", "chill"], max_results=2) == ["cold", "wind"]
        assert find(sample_grid, ["cold"], max_results=0) == []

    def test_zero_score_words_excluded(self, sample_grid):
        assert find(sample_grid, ["snow", "rain"]) == []

    @pytest.mark.parametrize("words", [[], None, ["", "  ", "\t"]])
    def test_empty_queries(self, sample_grid, words):
        assert find(sample_grid, words) == []

    def test_blank_and_non_string_entries_skipped(self, sample_grid):
        found = find(sample_grid, ["", None, "  ", 42, "cold"])

        assert found == ["cold"]

    def test_single_string_is_one_word(self, sample_grid):
        """A bare string is searched as one word, not one word per letter."""
        assert find(sample_grid, "cold") == ["cold"]
        assert find(sample_grid, "snow") == []

    def test_output_is_trimmed_first_spelling(self, sample_grid):
        assert find(sample_grid, ["  Cold ", "cold"]) == ["Cold"]

    def test_find_is_pure(self, sample_grid):
        words = ["cold", "wind", "chill"]

        first = find(sample_grid, words)
        second = find(sample_grid, words)

        assert first == second
        assert words == ["cold", "wind", "chill"]


class TestScoreTable:
    """Test the first-seen bookkeeping used for tie-breaking."""

    def test_first_seen_order_and_spelling(self):
        table, skipped = build_score_table(["Cold", "", "wind", "COLD"])

        assert list(table) == ["cold", "wind"]
        assert table["cold"].word == "Cold"
        assert table["cold"].order == 0
        assert table["wind"].order == 2
        assert skipped == 1


class TestParallelScoring:
    """Parallel scoring must not change content or order."""

    def test_parallel_matches_sequential(self, large_grid, monkeypatch):
        monkeypatch.setattr("wordfinder.search.ranking.PARALLEL_MIN_WORDS", 1)
        words = ["hot", "cold", "anana", "chill", "fire", "spring", "snow", "warm"]

        sequential = rank_words(large_grid, words, parallel=False)
        parallel = rank_words(large_grid, words, parallel=True)

        assert [(e.word, e.score) for e in parallel] == [(e.word, e.score) for e in sequential]


class TestWordFinder:
    """Test the single-class entry point."""

    def test_rows_and_columns(self):
        finder = WordFinder([r.replace(" ", "") for r in LARGE_BLOCK_ROWS])

        assert finder.rows == 12
        assert finder.columns == 6

    def test_find(self):
        finder = WordFinder(["abcdc", "fgwio", "chill", "pqnsd", "uvdxy"])

        assert finder.find(["cold", "wind", "snow", "chill"]) == ["cold", "wind", "chill"]
