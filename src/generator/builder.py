"""
Grid placement under the triplet rule.

Letters are placed row by row; a letter may not become the third identical
letter in a row or column. When a letter order cannot be placed it is
reshuffled a few times, and when a whole multiset keeps failing a fresh
multiset is sampled.
"""

import random
from typing import List, Optional, Sequence

from ..verifiers.models import Grid
from .errors import GenerationBudgetExceededError
from .letters import LetterSampler


def completes_triplet(cells: List[List[str]], row: int, col: int, letter: str) -> bool:
    """True if ``letter`` at (row, col) would end a run of three along a row or column."""
    if col >= 2 and cells[row][col - 1] == letter and cells[row][col - 2] == letter:
        return True
    if row >= 2 and cells[row - 1][col] == letter and cells[row - 2][col] == letter:
        return True
    return False


class GridBuilder(object):
    """Turns sampled letters into a grid that satisfies the triplet rule."""

    def __init__(
        self,
        sampler: LetterSampler,
        size: int = 4,
        max_placement_attempts: int = 10,
        max_resamples: int = 25,
    ) -> None:
        self.sampler = sampler
        self.size = size
        self.max_placement_attempts = max_placement_attempts
        self.max_resamples = max_resamples

    @property
    def rng(self) -> random.Random:
        return self.sampler.rng

    def place(self, letters: Sequence[str]) -> Optional[Grid]:
        """
        Place ``letters`` row-major in their given order.

        Returns:
            The grid, or None if some letter would complete a triplet
        """
        if len(letters) != self.size * self.size:
            raise ValueError(f"Expected {self.size * self.size} letters, got {len(letters)}")

        cells: List[List[str]] = [[] for _ in range(self.size)]
        for index, letter in enumerate(letters):
            row, col = divmod(index, self.size)
            if completes_triplet(cells, row, col, letter):
                return None
            cells[row].append(letter)
        return Grid(cells=cells)

    def arrange(self, letters: Sequence[str]) -> Optional[Grid]:
        """
        Try the given order first, then reshuffled orders of the same letters.

        Returns:
            The first grid that places cleanly, or None after
            ``max_placement_attempts`` orders have failed
        """
        order = list(letters)
        for attempt in range(self.max_placement_attempts):
            if attempt > 0:
                self.rng.shuffle(order)
            grid = self.place(order)
            if grid is not None:
                return grid
        return None

    def build(self) -> Grid:
        """
        Sample letters and place them, resampling when a multiset is unplaceable.

        Raises:
            GenerationBudgetExceededError: If ``max_resamples`` multisets all fail
        """
        for _ in range(self.max_resamples):
            letters = self.sampler.sample(self.size * self.size)
            grid = self.arrange(letters)
            if grid is not None:
                return grid

        raise GenerationBudgetExceededError(
            f"No placeable letter set found after {self.max_resamples} samples"
        )
