"""
Player submission verification.

Validates a submitted word against a stored puzzle:
1. Word length (at least three letters)
2. Membership in the puzzle's precomputed word set
3. Path consistency (bounds, no reused cells, adjacency, spelling)

Valid submissions are scored with ``score_word``.
"""

from typing import AbstractSet, Sequence

from .models import Grid, PositionLike, SubmissionResult
from .path import validate_path
from .scoring import score_word
from .search import MIN_WORD_LENGTH


def validate_submission(
    grid: Grid,
    path: Sequence[PositionLike],
    claimed_word: str,
    word_set: AbstractSet[str],
    min_length: int = MIN_WORD_LENGTH,
) -> SubmissionResult:
    """
    Check a player's word and path against a puzzle.

    Args:
        grid: The puzzle grid, as stored at generation time
        path: Cells the player traced, in order
        claimed_word: The word the player says the path spells
        word_set: All words findable in ``grid``
        min_length: Shortest accepted word

    Returns:
        SubmissionResult with the score for valid words, or the reason
        the submission was rejected
    """
    word = claimed_word.strip().upper()

    if len(word) < min_length:
        return SubmissionResult(
            valid=False,
            word=word,
            code="TOO_SHORT",
            reason=f"Word must be at least {min_length} letters long",
        )

    if word not in word_set:
        return SubmissionResult(
            valid=False,
            word=word,
            code="NOT_IN_WORD_SET",
            reason="Word not possible in current grid",
        )

    path_result = validate_path(grid, path, word)
    if not path_result.valid:
        return SubmissionResult(
            valid=False,
            word=word,
            code=path_result.code,
            reason=path_result.reason,
        )

    return SubmissionResult(
        valid=True,
        word=word,
        score=score_word(word),
        reason="Valid word!",
    )
