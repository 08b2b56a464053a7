# errors.py
# Exceptions raised by the trie. Absence of a word is never an error:
# lookups answer False or an empty result instead.


class TrieError(Exception):
    """Base class for everything the trie raises."""


class InvalidCharacterError(TrieError, ValueError):
    """A character outside a-z / A-Z was found in a word or prefix."""

    def __init__(self, word: str, position: int) -> None:
        self.word = word
        self.position = position
        self.char = word[position]
        super().__init__(
            f"Invalid character {self.char!r} at position {position} in {word!r}"
        )


class WordTooLongError(TrieError, ValueError):
    """Input longer than the trie's maximum word length."""

    def __init__(self, word: str, limit: int) -> None:
        self.word = word
        self.limit = limit
        super().__init__(f"Word of length {len(word)} exceeds limit of {limit}")


class TrieClosedError(TrieError, RuntimeError):
    """The trie was torn down and can no longer be used."""
