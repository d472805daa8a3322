"""Word dictionary used to score and search grids."""

from .dictionary import Dictionary, DictionaryLoadError, TrieNode, load_dictionary

__all__ = [
    "Dictionary",
    "DictionaryLoadError",
    "TrieNode",
    "load_dictionary",
]
