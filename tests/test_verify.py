"""
Test suite for submission verification and scoring.

Tests all submission outcomes:
- Valid submissions and their scores
- TOO_SHORT, NOT_IN_WORD_SET
- Path failures passed through from the path validator
"""

import pytest

from src.verifiers import Grid, SubmissionResult, score_word, validate_submission


# C A T S
# T X Q Z
# J V K W
# Y F M B
GRID = Grid.from_rows(["CATS", "TXQZ", "JVKW", "YFMB"])
WORD_SET = frozenset({"CAT", "CATS", "ACT"})


class TestValidSubmissions:
    """Test cases for accepted words."""

    def test_three_letter_word(self):
        """A three-letter word scores the base points."""
        result = validate_submission(GRID, [(0, 0), (0, 1), (0, 2)], "CAT", WORD_SET)
        assert isinstance(result, SubmissionResult)
        assert result.valid is True
        assert result.score == 10
        assert result.code is None

    def test_longer_word_scores_more(self):
        """Each extra letter adds to the score."""
        result = validate_submission(GRID, [(0, 0), (0, 1), (0, 2), (0, 3)], "CATS", WORD_SET)
        assert result.valid is True
        assert result.score == 15

    def test_lowercase_submission(self):
        """Submissions are upper-cased before checking."""
        result = validate_submission(GRID, [(0, 1), (0, 0), (1, 0)], " act ", WORD_SET)
        assert result.valid is True
        assert result.word == "ACT"


class TestRejectedSubmissions:
    """Test cases for rejected words."""

    def test_too_short(self):
        """Two-letter words are rejected before anything else."""
        result = validate_submission(GRID, [(0, 0), (0, 1)], "CA", WORD_SET)
        assert result.valid is False
        assert result.code == "TOO_SHORT"
        assert result.score == 0

    def test_not_in_word_set(self):
        """Words outside the puzzle's set are rejected even with a real path."""
        result = validate_submission(GRID, [(1, 0), (0, 1), (0, 0)], "TAC", WORD_SET)
        assert result.valid is False
        assert result.code == "NOT_IN_WORD_SET"

    def test_word_set_checked_before_path(self):
        """An unknown word is reported as such even with a broken path."""
        result = validate_submission(GRID, [], "DOG", WORD_SET)
        assert result.code == "NOT_IN_WORD_SET"

    def test_path_mismatch(self):
        """A known word with a path spelling something else is rejected."""
        result = validate_submission(GRID, [(0, 1), (0, 0), (1, 0)], "CAT", WORD_SET)
        assert result.valid is False
        assert result.code == "WORD_MISMATCH"
        assert result.score == 0

    def test_repeated_cell(self):
        """Path reuse is reported through the submission result."""
        result = validate_submission(GRID, [(0, 0), (0, 1), (0, 0)], "CAT", WORD_SET)
        assert result.code == "REPEATED_CELL"

    def test_non_adjacent(self):
        """Path jumps are reported through the submission result."""
        result = validate_submission(GRID, [(0, 0), (0, 1), (2, 0)], "CAT", WORD_SET)
        assert result.code == "NOT_ADJACENT"


class TestScoring:
    """Test cases for the scoring curve."""

    @pytest.mark.parametrize("word, expected", [
        ("CAT", 10),
        ("CATS", 15),
        ("TRAIN", 20),
        ("SCRAMBLE", 35),
        ("AB", 0),
        ("", 0),
    ])
    def test_score_by_length(self, word, expected):
        """Score depends only on word length."""
        assert score_word(word) == expected

    def test_score_ignores_letters(self):
        """Two words of the same length score the same."""
        assert score_word("ZZZZ") == score_word("CATS")
