# alphabet.py
# Case-folded Latin alphabet used for trie navigation.
# 'a'/'A' -> 0 ... 'z'/'Z' -> 25. Folding is for traversal only,
# output casing is decided by the collector.

from typing import List

from .errors import InvalidCharacterError, WordTooLongError

ALPHABET_SIZE = 26
MAX_WORD_LENGTH = 255

_ORD_A = ord("a")


def char_to_index(ch: str) -> int:
    """
    Fold a single character to its letter index.
    Returns -1 for anything that is not an ASCII letter.
    """
    if len(ch) != 1 or not ch.isascii() or not ch.isalpha():
        return -1
    return ord(ch.lower()) - _ORD_A


def index_to_char(index: int) -> str:
    """Lowercase letter for a letter index (0-25)."""
    if not 0 <= index < ALPHABET_SIZE:
        raise ValueError(f"letter index out of range: {index}")
    return chr(_ORD_A + index)


def check_length(word: str, limit: int = MAX_WORD_LENGTH) -> None:
    if len(word) > limit:
        raise WordTooLongError(word, limit)


def fold(word: str, limit: int = MAX_WORD_LENGTH) -> List[int]:
    """
    Convert a whole word into its list of letter indices.
    Raises WordTooLongError / InvalidCharacterError on bad input.
    """
    check_length(word, limit)
    out: List[int] = []
    for pos, ch in enumerate(word):
        idx = char_to_index(ch)
        if idx < 0:
            raise InvalidCharacterError(word, pos)
        out.append(idx)
    return out


def is_valid_word(word: str, limit: int = MAX_WORD_LENGTH) -> bool:
    """True if `word` is non-empty, short enough and letters only."""
    return 0 < len(word) <= limit and all(char_to_index(ch) >= 0 for ch in word)
