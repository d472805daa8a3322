import random
from typing import Dict, List, Mapping, Optional, Tuple

from .errors import SamplerExhaustedError
from .models import SamplerConfig


VOWELS: Tuple[str, ...] = ("A", "E", "I", "O", "U")
CONSONANTS: Tuple[str, ...] = (
    "B", "C", "D", "F", "G", "H", "J", "K", "L", "M", "N",
    "P", "Q", "R", "S", "T", "V", "W", "X", "Y", "Z",
)

# Relative letter frequencies in English text (percent, not normalized)
LETTER_FREQUENCIES: Dict[str, float] = {
    "A": 8.2, "B": 1.5, "C": 2.8, "D": 4.3, "E": 13.0, "F": 2.2, "G": 2.0,
    "H": 6.1, "I": 7.0, "J": 0.15, "K": 0.77, "L": 4.0, "M": 2.4, "N": 6.7,
    "O": 7.5, "P": 1.9, "Q": 0.095, "R": 6.0, "S": 6.3, "T": 9.1, "U": 2.8,
    "V": 0.98, "W": 2.4, "X": 0.15, "Y": 2.0, "Z": 0.074
}


def is_vowel(letter: str) -> bool:
    return letter.upper() in VOWELS


def weighted_choice(weights: Mapping[str, float], rng: random.Random) -> str:
    """
    Pick a letter with probability proportional to its weight.

    Draws a point in [0, total) and walks the letters in the mapping's
    order, subtracting each weight until the remainder drops to zero.
    Letters with a non-positive weight are never picked.

    Raises:
        SamplerExhaustedError: If no letter has a positive weight
    """
    candidates = [(letter, weight) for letter, weight in weights.items() if weight > 0]
    if not candidates:
        raise SamplerExhaustedError("Cannot sample from an empty letter pool")

    total = sum(weight for _, weight in candidates)
    remainder = rng.random() * total
    for letter, weight in candidates:
        remainder -= weight
        if remainder <= 0:
            return letter

    # Floating point residue
    return candidates[-1][0]


class LetterSampler(object):
    """
    Draws the letter multiset for one grid.

    Vowels and consonants are drawn first up to their configured minimums,
    then the rest of the cells come from the combined alphabet. Within each
    pool a drawn letter's weight is multiplied by the pool's decay factor so
    the same letter is less likely to come up again.
    """

    def __init__(self, config: Optional[SamplerConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or SamplerConfig()
        self.rng = rng or random.Random()
        self.frequencies: Dict[str, float] = dict(self.config.frequencies or LETTER_FREQUENCIES)

    def _pool(self, letters: Tuple[str, ...]) -> Dict[str, float]:
        return {letter: self.frequencies[letter] for letter in letters if letter in self.frequencies}

    def _draw(self, pool: Dict[str, float], count: int, decay: float) -> List[str]:
        drawn: List[str] = []
        for _ in range(count):
            letter = weighted_choice(pool, self.rng)
            pool[letter] *= decay
            drawn.append(letter)
        return drawn

    def sample(self, cell_count: int) -> List[str]:
        """
        Draw and shuffle ``cell_count`` letters.

        Raises:
            ValueError: If the minimum vowel and consonant counts exceed cell_count
            SamplerExhaustedError: If a pool has no letters to draw from
        """
        config = self.config
        remaining = cell_count - config.min_vowels - config.min_consonants
        if remaining < 0:
            raise ValueError(
                f"Cannot fit {config.min_vowels} vowels and "
                f"{config.min_consonants} consonants into {cell_count} cells"
            )

        letters = self._draw(self._pool(VOWELS), config.min_vowels, config.vowel_decay)
        letters += self._draw(self._pool(CONSONANTS), config.min_consonants, config.consonant_decay)
        letters += self._draw(dict(self.frequencies), remaining, config.mixed_decay)

        # Fisher-Yates, so draw order does not leak into positions
        self.rng.shuffle(letters)
        return letters
