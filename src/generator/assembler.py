import random
from datetime import date as date_type, datetime
from typing import Any, Callable, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..verifiers.data import Dictionary
from ..verifiers.search import find_all_words
from .builder import GridBuilder
from .errors import GenerationBudgetExceededError
from .letters import LetterSampler
from .models import AttemptRecord, GenerationState, Puzzle, PuzzleConfig


class PuzzleAssembler(BaseModel):
    """
    Runs the sample, build and search pipeline until a grid has enough words.

    Each attempt moves through SAMPLING -> BUILDING -> SEARCHING and ends in
    ACCEPT or REJECT. A rejected grid is thrown away and the next attempt
    starts again from fresh letters.

    Attributes:
        dictionary: Words to search for (shared, read-only)
        config: Generation limits and sampler settings
        state: Pipeline state of the current attempt
        history: One record per finished attempt
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    dictionary: Dictionary
    config: PuzzleConfig = Field(default_factory=PuzzleConfig)
    state: GenerationState = "SAMPLING"
    history: List[AttemptRecord] = Field(default_factory=list)
    _rng: random.Random = None
    _sampler: LetterSampler = None
    _builder: GridBuilder = None

    def model_post_init(self, __context) -> None:
        """Create the random generator, sampler and grid builder after model creation."""
        self._rng = random.Random(self.config.seed)
        self._sampler = LetterSampler(self.config.sampler, self._rng)
        self._builder = GridBuilder(
            self._sampler,
            size=self.config.grid_size,
            max_placement_attempts=self.config.max_placement_attempts,
            max_resamples=self.config.max_resamples,
        )

    @classmethod
    def create(
        cls,
        dictionary: Dictionary,
        config: Optional[PuzzleConfig] = None,
        **config_kwargs: Any
    ) -> "PuzzleAssembler":
        """
        Factory method to create an assembler.

        Args:
            dictionary: Words to search for
            config: Optional PuzzleConfig instance
            **config_kwargs: Config parameters if config not provided
        """
        if config is None:
            config = PuzzleConfig(**config_kwargs)
        return cls(dictionary=dictionary, config=config)

    @property
    def attempts(self) -> int:
        return len(self.history)

    def generate(
        self,
        puzzle_date: Optional[date_type] = None,
        on_attempt: Optional[Callable[[AttemptRecord], None]] = None,
        verbose: bool = False,
    ) -> Puzzle:
        """
        Generate a puzzle with at least ``config.min_word_count`` words.

        Args:
            puzzle_date: Date the puzzle is for (defaults to today)
            on_attempt: Optional callback called after each attempt
            verbose: If True, print progress to stdout

        Returns:
            The accepted Puzzle

        Raises:
            GenerationBudgetExceededError: If no grid qualifies within
                ``config.max_attempts`` attempts
        """
        config = self.config
        puzzle_date = puzzle_date or datetime.now().date()
        self.history = []

        if verbose:
            print(f"Generating {config.grid_size}x{config.grid_size} puzzle for {puzzle_date.isoformat()}")
            print(f"Dictionary: {len(self.dictionary)} words"
                  + (" (fallback word list)" if self.dictionary.is_fallback else ""))
            print(f"Need at least {config.min_word_count} words, up to {config.max_attempts} attempts")
            print("-" * 40)

        for attempt in range(1, config.max_attempts + 1):
            self.state = "SAMPLING"
            letters = self._sampler.sample(config.cell_count)

            self.state = "BUILDING"
            grid = self._builder.arrange(letters)
            if grid is None:
                # This multiset cannot be placed; draw new ones
                grid = self._builder.build()

            self.state = "SEARCHING"
            words = find_all_words(grid, self.dictionary, config.min_word_length)

            accepted = len(words) >= config.min_word_count
            self.state = "ACCEPT" if accepted else "REJECT"
            record = AttemptRecord(
                attempt=attempt,
                grid=grid,
                word_count=len(words),
                accepted=accepted,
            )
            self.history.append(record)

            if verbose:
                status = "accepted" if accepted else "rejected"
                print(f"Attempt {attempt}: {' '.join(grid.rows())} -> {len(words)} words, {status}")

            if on_attempt:
                on_attempt(record)

            if accepted:
                return Puzzle(
                    puzzle_id=puzzle_date.isoformat(),
                    date=puzzle_date.isoformat(),
                    grid=grid,
                    words=list(words),
                    attempts=attempt,
                    seed=config.seed,
                    generated_at=datetime.now().isoformat(),
                )

        raise GenerationBudgetExceededError(
            f"No grid with at least {config.min_word_count} words "
            f"after {config.max_attempts} attempts"
        )


def generate_daily_puzzle(
    dictionary: Dictionary,
    config: Optional[PuzzleConfig] = None,
    puzzle_date: Optional[date_type] = None,
    seed: Optional[int] = None,
    verbose: bool = False,
) -> Puzzle:
    """
    Generate the puzzle for one day.

    The result is keyed by its ISO date; storing it and resetting the
    previous day's leaderboard is up to the caller.
    """
    config = config or PuzzleConfig()
    if seed is not None:
        config = config.model_copy(update={"seed": seed})
    assembler = PuzzleAssembler.create(dictionary, config)
    return assembler.generate(puzzle_date=puzzle_date, verbose=verbose)
