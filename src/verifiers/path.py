"""Checks that a submitted path of cells spells the claimed word."""

from typing import List, Sequence, Set

from .models import (
    Grid,
    PathValidationResult,
    Position,
    PositionLike,
    ValidationError,
    is_adjacent,
    to_position,
)


def _invalid(
    word: str,
    path: List[Position],
    code: str,
    message: str,
    index: int | None = None,
) -> PathValidationResult:
    return PathValidationResult(
        valid=False,
        word=word,
        path=path,
        error=ValidationError(code=code, message=message, word=word or None, index=index),
    )


def validate_path(
    grid: Grid,
    path: Sequence[PositionLike],
    claimed_word: str,
) -> PathValidationResult:
    """
    Validate that ``path`` is a legal trail through ``grid`` spelling ``claimed_word``.

    Checks run in order and stop at the first failure:
    1. EMPTY_PATH - the path has no cells
    2. OUT_OF_BOUNDS - a cell lies outside the grid
    3. REPEATED_CELL - a cell is used twice
    4. NOT_ADJACENT - two consecutive cells do not touch
    5. WORD_MISMATCH - the letters along the path are not the claimed word

    Whether the word is in the dictionary is not checked here; callers test
    it against the puzzle's precomputed word set.
    """
    word = claimed_word.strip().upper()
    positions = [to_position(p) for p in path]

    if not positions:
        return _invalid(word, positions, "EMPTY_PATH", "Path is empty")

    for i, position in enumerate(positions):
        if not grid.in_bounds(position):
            return _invalid(
                word, positions, "OUT_OF_BOUNDS",
                f"Position ({position.row}, {position.col}) is outside the {grid.size}x{grid.size} grid",
                index=i,
            )

    seen: Set[Position] = set()
    for i, position in enumerate(positions):
        if position in seen:
            return _invalid(
                word, positions, "REPEATED_CELL",
                f"Position ({position.row}, {position.col}) is used more than once",
                index=i,
            )
        seen.add(position)

    for i in range(1, len(positions)):
        prev, cur = positions[i - 1], positions[i]
        if not is_adjacent(prev, cur):
            return _invalid(
                word, positions, "NOT_ADJACENT",
                f"({prev.row}, {prev.col}) and ({cur.row}, {cur.col}) are not adjacent",
                index=i,
            )

    spelled = "".join(grid.letter_at(p) for p in positions)
    if spelled != word:
        return _invalid(
            word, positions, "WORD_MISMATCH",
            f"Path spells '{spelled}', not '{word}'",
        )

    return PathValidationResult(valid=True, word=word, path=positions)
