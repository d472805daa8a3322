"""Grid search and submission verification for scrambled squares."""

from .verify import validate_submission
from .path import validate_path
from .search import find_all_words, find_word_paths, MIN_WORD_LENGTH
from .scoring import score_word
from .models import (
    Grid,
    Position,
    ValidationError,
    PathValidationResult,
    SubmissionResult,
    is_adjacent,
)
from .parsing import parse_path
from .data import Dictionary, DictionaryLoadError, load_dictionary

__all__ = [
    # Submission checks
    "validate_submission",
    "validate_path",
    "score_word",
    # Search
    "find_all_words",
    "find_word_paths",
    "MIN_WORD_LENGTH",
    # Models
    "Grid",
    "Position",
    "ValidationError",
    "PathValidationResult",
    "SubmissionResult",
    "is_adjacent",
    # Parsing
    "parse_path",
    # Dictionary
    "Dictionary",
    "DictionaryLoadError",
    "load_dictionary",
]
