"""Exceptions raised while generating puzzles."""


class PuzzleGenerationError(Exception):
    """Base class for failures that leave no puzzle to hand out."""


class SamplerExhaustedError(PuzzleGenerationError):
    """Raised when a letter pool has nothing left to draw from."""


class GenerationBudgetExceededError(PuzzleGenerationError):
    """Raised when no acceptable grid was found within the retry limits."""
