"""Puzzle generation for scrambled squares."""

from .models import (
    GenerationState,
    SamplerConfig,
    PuzzleConfig,
    AttemptRecord,
    Puzzle,
)
from .errors import (
    PuzzleGenerationError,
    SamplerExhaustedError,
    GenerationBudgetExceededError,
)
from .letters import (
    LetterSampler,
    weighted_choice,
    is_vowel,
    VOWELS,
    CONSONANTS,
    LETTER_FREQUENCIES,
)
from .builder import GridBuilder, completes_triplet
from .assembler import PuzzleAssembler, generate_daily_puzzle

__all__ = [
    "GenerationState",
    "SamplerConfig",
    "PuzzleConfig",
    "AttemptRecord",
    "Puzzle",
    "PuzzleGenerationError",
    "SamplerExhaustedError",
    "GenerationBudgetExceededError",
    "LetterSampler",
    "weighted_choice",
    "is_vowel",
    "VOWELS",
    "CONSONANTS",
    "LETTER_FREQUENCIES",
    "GridBuilder",
    "completes_triplet",
    "PuzzleAssembler",
    "generate_daily_puzzle",
]
