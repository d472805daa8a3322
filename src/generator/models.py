"""
Pydantic models for puzzle generation.

Configuration for the sampler, builder and assembler, plus the generated
Puzzle itself and the per-attempt records the assembler keeps.
"""

import json
from pathlib import Path
from typing import Dict, FrozenSet, List, Literal, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from ..verifiers.models import Grid


# Assembler pipeline states
GenerationState = Literal["SAMPLING", "BUILDING", "SEARCHING", "ACCEPT", "REJECT"]


class SamplerConfig(BaseModel):
    """Letter sampling rules."""
    min_vowels: int = Field(default=4, ge=0)
    min_consonants: int = Field(default=8, ge=0)
    vowel_decay: float = Field(default=0.5, gt=0, le=1)  # Applied to a vowel's weight after each draw
    consonant_decay: float = Field(default=0.5, gt=0, le=1)
    mixed_decay: float = Field(default=0.7, gt=0, le=1)  # Gentler, the combined pool is broader
    frequencies: Optional[Dict[str, float]] = None  # None means English letter frequencies

    @field_validator("frequencies")
    @classmethod
    def _check_frequencies(cls, value: Optional[Dict[str, float]]) -> Optional[Dict[str, float]]:
        if value is None:
            return value
        normalized: Dict[str, float] = {}
        for letter, weight in value.items():
            key = letter.upper()
            if len(key) != 1 or not ("A" <= key <= "Z"):
                raise ValueError(f"frequency key is not a single letter: {letter!r}")
            if weight < 0:
                raise ValueError(f"frequency for {key} is negative: {weight}")
            normalized[key] = weight
        return normalized


class PuzzleConfig(BaseModel):
    """Configuration for a puzzle generation run."""
    grid_size: int = Field(default=4, ge=2, le=8)
    min_word_count: int = Field(default=10, ge=0)
    min_word_length: int = Field(default=3, ge=1)
    max_attempts: int = Field(default=100, ge=1)  # Full sample-build-search cycles
    max_placement_attempts: int = Field(default=10, ge=1)  # Shuffles per letter multiset
    max_resamples: int = Field(default=25, ge=1)  # Multisets per build
    sampler: SamplerConfig = Field(default_factory=SamplerConfig)
    seed: Optional[int] = None
    dictionary_path: Optional[str] = None
    allow_fallback: bool = False

    @property
    def cell_count(self) -> int:
        return self.grid_size * self.grid_size

    @model_validator(mode="after")
    def _check_minimums_fit(self) -> "PuzzleConfig":
        required = self.sampler.min_vowels + self.sampler.min_consonants
        if required > self.cell_count:
            raise ValueError(
                f"min_vowels + min_consonants ({required}) exceeds "
                f"the {self.cell_count} cells of a {self.grid_size}x{self.grid_size} grid"
            )
        return self


class AttemptRecord(BaseModel):
    """Outcome of one sample-build-search cycle."""
    attempt: int
    grid: Grid
    word_count: int
    accepted: bool


class Puzzle(BaseModel):
    """A generated grid together with every word findable in it."""
    puzzle_id: str
    date: str
    grid: Grid
    words: List[str] = Field(default_factory=list)
    attempts: int = Field(default=1, ge=1)
    seed: Optional[int] = None
    generated_at: str = ""

    @field_validator("words")
    @classmethod
    def _normalize_words(cls, words: List[str]) -> List[str]:
        return sorted({w.strip().upper() for w in words})

    @model_validator(mode="after")
    def _check_no_triplets(self) -> "Puzzle":
        triplets = self.grid.find_triplets()
        if triplets:
            cells = ", ".join(f"({p.row}, {p.col})" for p in triplets)
            raise ValueError(f"grid has three identical letters in a row ending at {cells}")
        return self

    @property
    def word_set(self) -> FrozenSet[str]:
        return frozenset(self.words)

    @property
    def word_count(self) -> int:
        return len(self.words)

    def save(self, path: str | Path) -> Path:
        """Write the puzzle as JSON, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2)
        return path

    @classmethod
    def load(cls, path: str | Path) -> "Puzzle":
        path = Path(path)
        with open(path) as f:
            data = json.load(f)
        return cls(**data)
