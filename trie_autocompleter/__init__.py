"""
trie_autocompleter - case-insensitive prefix tree with autocomplete,
plus a rich shell and a textual TUI on top of it.
"""

from .core import (
    Trie,
    TrieNode,
    PrefixResult,
    TrieError,
    InvalidCharacterError,
    WordTooLongError,
    TrieClosedError,
)

__all__ = [
    "Trie",
    "TrieNode",
    "PrefixResult",
    "TrieError",
    "InvalidCharacterError",
    "WordTooLongError",
    "TrieClosedError",
]

__version__ = "0.1.0"
