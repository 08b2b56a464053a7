# collector.py
# Depth-first collection of the live words below a trie node.
# Pre-order, children visited a -> z, so output is lexicographic over the
# folded alphabet. Uses an explicit stack (no recursion).
# collect() is bounded by a result cap and reports when matches were cut off,
# iter_words() is the lazy, uncapped variant.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from .alphabet import index_to_char

if TYPE_CHECKING:
    from .trie import TrieNode

DEFAULT_MAX_RESULTS = 100

CASE_LABEL = "label"
CASE_PATH = "path"
CASE_MODES = (CASE_LABEL, CASE_PATH)


@dataclass(frozen=True)
class PrefixResult:
    """
    Outcome of a prefix enumeration.
    words: matches in a -> z order, at most the collector's cap
    truncated: True when more live matches existed than were returned

    Iteration exists only so `count, words = result` works; it yields the
    count and then the word list, not the words. Loop over `.words`.
    """

    words: List[str] = field(default_factory=list)
    truncated: bool = False

    @property
    def count(self) -> int:
        return len(self.words)

    def as_tuple(self) -> Tuple[int, List[str]]:
        return self.count, self.words

    def __iter__(self):
        return iter(self.as_tuple())

    def __bool__(self) -> bool:
        return bool(self.words)


class Collector:
    """
    Bounded depth-first gatherer.

    case_mode:
      "label" - report each word with the casing first inserted for it
      "path"  - report the walk itself: the seed path as given, then the
                lowercase letters consumed below it
    """

    def __init__(self, max_results: int = DEFAULT_MAX_RESULTS, case_mode: str = CASE_LABEL):
        if max_results < 1:
            raise ValueError("max_results must be a positive integer.")
        if case_mode not in CASE_MODES:
            raise ValueError(f"case_mode must be one of {CASE_MODES}, got {case_mode!r}")
        self.max_results = max_results
        self.case_mode = case_mode

    # traversal ---------------------------------------------------------------
    def walk(self, node: TrieNode, path: str = "") -> Iterator[Tuple[str, TrieNode]]:
        """Yield (accumulated path, node) for every terminal node, pre-order a -> z."""
        stack: List[Tuple[TrieNode, str]] = [(node, path)]
        while stack:
            current, acc = stack.pop()
            if current.is_terminal:
                yield acc, current
            if current.children:
                # reversed so the smallest letter is popped first
                for idx in sorted(current.children, reverse=True):
                    stack.append((current.children[idx], acc + index_to_char(idx)))

    def iter_words(self, node: TrieNode, path: str = "") -> Iterator[str]:
        """Lazy, uncapped stream of words below `node`."""
        use_label = self.case_mode == CASE_LABEL
        for acc, terminal in self.walk(node, path):
            yield terminal.label if use_label else acc

    # bounded collection ------------------------------------------------------
    def resolve_limit(self, limit: Optional[int] = None) -> int:
        """The effective cap: `limit` if given, else max_results. Raises ValueError if < 1."""
        cap = self.max_results if limit is None else limit
        if cap < 1:
            raise ValueError("limit must be a positive integer.")
        return cap

    def collect(self, node: TrieNode, path: str = "", limit: Optional[int] = None) -> PrefixResult:
        """
        Gather at most `limit` (default: the collector cap) words below `node`.
        One extra match is looked for so truncation can be reported.
        """
        cap = self.resolve_limit(limit)

        words: List[str] = []
        for word in self.iter_words(node, path):
            if len(words) >= cap:
                return PrefixResult(words, truncated=True)
            words.append(word)
        return PrefixResult(words, truncated=False)
