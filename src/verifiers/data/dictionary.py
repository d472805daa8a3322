"""
Prefix-trie word dictionary.

The dictionary is built once and then only read, so a single instance can
be shared by any number of concurrent puzzle generations. Word search walks
the trie one letter at a time through ``root`` and ``step`` so that a branch
is abandoned as soon as no word starts with the letters collected so far.
"""

from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional


class DictionaryLoadError(RuntimeError):
    """Raised when a word list is missing, unreadable or empty."""


class TrieNode(object):
    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: Dict[str, "TrieNode"] = {}
        self.terminal = False


def _normalize(word: str) -> str:
    return word.strip().upper()


class Dictionary(object):
    """Read-only set of uppercase words with prefix lookups."""

    def __init__(self, words: Iterable[str], min_length: int = 1, is_fallback: bool = False) -> None:
        self._root = TrieNode()
        self._size = 0
        self.min_length = min_length
        self.is_fallback = is_fallback
        for word in words:
            self._add(_normalize(word))

    def _add(self, word: str) -> None:
        if len(word) < self.min_length or not (word.isascii() and word.isalpha()):
            return
        node = self._root
        for letter in word:
            child = node.children.get(letter)
            if child is None:
                child = TrieNode()
                node.children[letter] = child
            node = child
        if not node.terminal:
            node.terminal = True
            self._size += 1

    @classmethod
    def from_words(cls, words: Iterable[str], min_length: int = 1) -> "Dictionary":
        return cls(words, min_length=min_length)

    @classmethod
    def from_file(cls, path: str | Path, min_length: int = 1) -> "Dictionary":
        """
        Load a word list with one word per line.

        Blank lines and lines containing anything but letters are skipped.

        Raises:
            DictionaryLoadError: If the file is missing, unreadable or holds
                no usable words
        """
        path = Path(path)
        if not path.exists():
            raise DictionaryLoadError(f"Dictionary file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                dictionary = cls(f, min_length=min_length)
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryLoadError(f"Could not read dictionary {path}: {e}") from e

        if len(dictionary) == 0:
            raise DictionaryLoadError(f"Dictionary {path} contains no usable words")
        return dictionary

    @classmethod
    def fallback(cls) -> "Dictionary":
        """
        The small embedded word list.

        This is a degraded mode for demos and smoke tests: it knows only a
        few hundred short common words, so generated puzzles undercount the
        words a real player could find.
        """
        from .fallback import FALLBACK_WORDS

        return cls(FALLBACK_WORDS.split(), is_fallback=True)

    @property
    def root(self) -> TrieNode:
        return self._root

    @staticmethod
    def step(node: TrieNode, letter: str) -> Optional[TrieNode]:
        """Follow one letter down the trie, or None if no word continues."""
        return node.children.get(letter)

    def _find(self, text: str) -> Optional[TrieNode]:
        node: Optional[TrieNode] = self._root
        for letter in _normalize(text):
            node = node.children.get(letter)
            if node is None:
                return None
        return node

    def contains(self, word: str) -> bool:
        node = self._find(word)
        return node is not None and node.terminal

    def has_prefix(self, prefix: str) -> bool:
        """True if at least one word starts with ``prefix``."""
        return self._find(prefix) is not None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        stack = [(self._root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.terminal:
                yield prefix
            for letter in sorted(node.children, reverse=True):
                stack.append((node.children[letter], prefix + letter))


def load_dictionary(
    path: Optional[str | Path] = None,
    allow_fallback: bool = False,
    min_length: int = 1,
) -> Dictionary:
    """
    Load the game dictionary.

    A given ``path`` that fails to load always raises; the embedded word
    list is only used when no path is given and ``allow_fallback`` is set.

    Raises:
        DictionaryLoadError: If the dictionary cannot be loaded
    """
    if path is not None:
        return Dictionary.from_file(path, min_length=min_length)
    if allow_fallback:
        return Dictionary.fallback()
    raise DictionaryLoadError("No dictionary path given and fallback word list not allowed")
