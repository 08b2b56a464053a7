"""
trie_autocompleter.core

The data structures behind the autocompleter.
Contains:
 - the prefix tree itself (Trie, TrieNode)
 - bounded depth-first collection of matches (Collector, PrefixResult)
 - alphabet folding/validation helpers and the error taxonomy
"""

from .alphabet import ALPHABET_SIZE, MAX_WORD_LENGTH, char_to_index, fold, is_valid_word
from .collector import Collector, PrefixResult, DEFAULT_MAX_RESULTS
from .errors import TrieError, InvalidCharacterError, WordTooLongError, TrieClosedError
from .trie import Trie, TrieNode

__all__ = [
    "ALPHABET_SIZE",
    "MAX_WORD_LENGTH",
    "DEFAULT_MAX_RESULTS",
    "char_to_index",
    "fold",
    "is_valid_word",
    "Collector",
    "PrefixResult",
    "Trie",
    "TrieNode",
    "TrieError",
    "InvalidCharacterError",
    "WordTooLongError",
    "TrieClosedError",
]
