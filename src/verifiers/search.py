"""
Exhaustive word search over a letter grid.

Starting from every cell, a depth-first walk extends the current path to
each unvisited neighbour (eight directions) while the letters collected so
far are still a prefix of some dictionary word. Every terminal trie node
reached with at least ``min_length`` letters is a found word.
"""

from contextlib import contextmanager
from typing import Dict, FrozenSet, Iterator, List

from .data import Dictionary, TrieNode
from .models import Grid, Position

MIN_WORD_LENGTH = 3


@contextmanager
def _visiting(visited: List[List[bool]], position: Position) -> Iterator[None]:
    """Mark ``position`` as used for the duration of one recursive descent."""
    visited[position.row][position.col] = True
    try:
        yield
    finally:
        visited[position.row][position.col] = False


def find_word_paths(
    grid: Grid,
    dictionary: Dictionary,
    min_length: int = MIN_WORD_LENGTH,
) -> Dict[str, List[Position]]:
    """
    Find every dictionary word reachable in ``grid``.

    Args:
        grid: The grid to search
        dictionary: Words to look for
        min_length: Shortest word length that counts

    Returns:
        Mapping of each found word to the first path that spelled it
    """
    found: Dict[str, List[Position]] = {}
    # Scratch buffer owned by this call only
    visited = [[False] * grid.size for _ in range(grid.size)]
    path: List[Position] = []
    letters: List[str] = []

    def explore(position: Position, node: TrieNode) -> None:
        child = dictionary.step(node, grid.letter_at(position))
        if child is None:
            return

        with _visiting(visited, position):
            path.append(position)
            letters.append(grid.letter_at(position))
            try:
                if child.terminal and len(letters) >= min_length:
                    word = "".join(letters)
                    if word not in found:
                        found[word] = list(path)

                for neighbor in grid.neighbors(position):
                    if not visited[neighbor.row][neighbor.col]:
                        explore(neighbor, child)
            finally:
                path.pop()
                letters.pop()

    for start in grid.positions():
        explore(start, dictionary.root)

    return found


def find_all_words(
    grid: Grid,
    dictionary: Dictionary,
    min_length: int = MIN_WORD_LENGTH,
) -> FrozenSet[str]:
    """The set of dictionary words reachable in ``grid``."""
    return frozenset(find_word_paths(grid, dictionary, min_length))
