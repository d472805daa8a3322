"""Word scoring policy."""

MIN_SCORING_LENGTH = 3
BASE_POINTS = 10  # Points for a three-letter word
LENGTH_BONUS = 5  # Points per letter beyond three


def score_word(word: str) -> int:
    """
    Points awarded for a found word.

    Three-letter words score BASE_POINTS; every extra letter adds
    LENGTH_BONUS. Words shorter than three letters score nothing.
    """
    length = len(word.strip())
    if length < MIN_SCORING_LENGTH:
        return 0
    return BASE_POINTS + (length - MIN_SCORING_LENGTH) * LENGTH_BONUS
