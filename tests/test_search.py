"""
Test suite for the word search engine.

Covers:
- Exact word sets on small hand-built grids
- Cell reuse within a path and backtracking between sibling branches
- Minimum length and prefix handling
- Discovered paths validating against the path validator
"""

import pytest

from src.verifiers import (
    Dictionary,
    Grid,
    Position,
    find_all_words,
    find_word_paths,
    is_adjacent,
    validate_path,
)


# C A T S
# T X Q Z
# J V K W
# Y F M B
CATS_GRID = Grid.from_rows(["CATS", "TXQZ", "JVKW", "YFMB"])

# A B C D
# E F G H
# I J K L
# M N O P
ALPHABET_GRID = Grid.from_rows(["ABCD", "EFGH", "IJKL", "MNOP"])


class TestFindAllWords:
    """Test cases for enumerating the words of a grid."""

    def test_finds_exactly_connected_words(self):
        """CAT, CATS and ACT are all connected and nothing else matches."""
        dictionary = Dictionary.from_words(["CAT", "CATS", "ACT"])
        assert find_all_words(CATS_GRID, dictionary) == {"CAT", "CATS", "ACT"}

    def test_unconnected_word_not_found(self):
        """A dictionary word whose letters do not touch is not found."""
        dictionary = Dictionary.from_words(["CAT", "SAT", "TAB"])
        # S(0,3) is not adjacent to A(0,1); B(3,3) is nowhere near A
        assert find_all_words(CATS_GRID, dictionary) == {"CAT"}

    def test_cell_not_reused_within_path(self):
        """A word needing the same cell twice is not found."""
        dictionary = Dictionary.from_words(["ABA", "ABF"])
        assert find_all_words(ALPHABET_GRID, dictionary) == {"ABF"}

    def test_backtracking_releases_cells_for_siblings(self):
        """Cells used in one branch are available again in the next."""
        dictionary = Dictionary.from_words(["ABF", "AFB", "FAB", "BFA"])
        assert find_all_words(ALPHABET_GRID, dictionary) == {"ABF", "AFB", "FAB", "BFA"}

    def test_duplicate_paths_collapse(self):
        """A word spelled along two different paths appears once."""
        grid = Grid.from_rows(["CAT", "TXX", "XXX"])
        dictionary = Dictionary.from_words(["CAT"])
        words = find_all_words(grid, dictionary)
        assert words == {"CAT"}
        assert isinstance(words, frozenset)

    def test_long_snaking_word(self):
        """Words can turn corners and run the length of the grid."""
        dictionary = Dictionary.from_words(["ABCDHGFE"])
        assert find_all_words(ALPHABET_GRID, dictionary) == {"ABCDHGFE"}

    def test_diagonal_words(self):
        """Diagonal steps count as adjacent."""
        dictionary = Dictionary.from_words(["AFKP", "PKFA", "DGJM"])
        assert find_all_words(ALPHABET_GRID, dictionary) == {"AFKP", "PKFA", "DGJM"}

    def test_empty_dictionary(self):
        """Nothing is found with no words to look for."""
        assert find_all_words(ALPHABET_GRID, Dictionary.from_words([])) == frozenset()

    def test_lowercase_dictionary_words(self):
        """Dictionary words are normalized to uppercase."""
        dictionary = Dictionary.from_words(["cat", "cats"])
        assert find_all_words(CATS_GRID, dictionary) == {"CAT", "CATS"}


class TestMinimumLength:
    """Test cases for the minimum word length."""

    def test_two_letter_words_ignored_by_default(self):
        """Words shorter than three letters are not reported."""
        dictionary = Dictionary.from_words(["AB", "ABC"])
        assert find_all_words(ALPHABET_GRID, dictionary) == {"ABC"}

    def test_custom_min_length(self):
        """min_length lowers or raises the cutoff."""
        dictionary = Dictionary.from_words(["AB", "ABC", "ABCD"])
        assert find_all_words(ALPHABET_GRID, dictionary, min_length=2) == {"AB", "ABC", "ABCD"}
        assert find_all_words(ALPHABET_GRID, dictionary, min_length=4) == {"ABCD"}

    def test_prefix_of_longer_word_still_found(self):
        """A word that is also a prefix of a longer word is reported."""
        dictionary = Dictionary.from_words(["CAT", "CATS"])
        assert {"CAT", "CATS"} <= find_all_words(CATS_GRID, dictionary)


class TestWordPaths:
    """Test cases for the discovering paths exposed by the engine."""

    def test_path_spells_word(self):
        """Each path's letters spell its word."""
        dictionary = Dictionary.from_words(["CAT", "CATS", "ACT"])
        paths = find_word_paths(CATS_GRID, dictionary)
        for word, path in paths.items():
            assert "".join(CATS_GRID.letter_at(p) for p in path) == word

    def test_paths_are_adjacent_and_unique(self):
        """Paths never jump or revisit a cell."""
        dictionary = Dictionary.from_words(["ABCDHGFE", "AFKP", "ABF", "FAB"])
        for path in find_word_paths(ALPHABET_GRID, dictionary).values():
            assert len(set(path)) == len(path)
            for prev, cur in zip(path, path[1:]):
                assert is_adjacent(prev, cur)

    def test_first_path_is_row_major_start(self):
        """The reported path starts from the first cell, in row-major order, that spells the word."""
        grid = Grid.from_rows(["CAT", "TXX", "XXX"])
        paths = find_word_paths(grid, Dictionary.from_words(["CAT"]))
        assert paths["CAT"][0] == Position(0, 0)

    def test_round_trip_through_path_validator(self):
        """Every discovered path passes path validation."""
        dictionary = Dictionary.fallback()
        grid = Grid.from_rows(["TEAS", "RNOP", "DICE", "LOTS"])
        paths = find_word_paths(grid, dictionary)
        assert paths, "expected the fallback list to find words in this grid"
        for word, path in paths.items():
            result = validate_path(grid, path, word)
            assert result.valid is True, f"{word}: {result.reason}"

    def test_found_words_are_in_dictionary(self):
        """Everything found is a dictionary word of at least three letters."""
        dictionary = Dictionary.fallback()
        grid = Grid.from_rows(["TEAS", "RNOP", "DICE", "LOTS"])
        for word in find_all_words(grid, dictionary):
            assert word in dictionary
            assert len(word) >= 3

    @pytest.mark.parametrize("size", [2, 3, 5])
    def test_non_default_grid_sizes(self, size):
        """The search works on any square grid."""
        letters = "ABCDEFGHIJKLMNOPQRSTUVWXY"[:size * size]
        grid = Grid.from_letters(list(letters), size)
        dictionary = Dictionary.from_words(["AB" + letters[size + 1]])
        # A(0,0) -> B(0,1) -> the cell directly below B
        assert find_all_words(grid, dictionary, min_length=3) == {"AB" + letters[size + 1]}
