# trie.py
# Prefix tree over the case-folded Latin alphabet (a-z, any case on input).
# Supports exact lookup, prefix enumeration (autocomplete), logical delete,
# optional compaction of dead branches and explicit teardown.
# Every walk is iterative, so depth is limited by max_word_length only.

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from .alphabet import MAX_WORD_LENGTH, char_to_index, check_length, fold, is_valid_word
from .collector import CASE_LABEL, DEFAULT_MAX_RESULTS, Collector, PrefixResult
from .errors import InvalidCharacterError, TrieClosedError

logger = logging.getLogger(__name__)


class TrieNode:
    """
    A single node in the Trie.
    children: letter index (0-25) -> TrieNode, missing key means no child
    is_terminal: this path currently ends a live word
    label: casing of the word that first made this node terminal
    payload: optional value attached to the word (last insert wins)
    """

    __slots__ = ("children", "is_terminal", "label", "payload")

    def __init__(self) -> None:
        self.children: Dict[int, TrieNode] = {}
        self.is_terminal = False
        self.label: Optional[str] = None
        self.payload: Any = None

    def __repr__(self) -> str:
        state = f"terminal label={self.label!r}" if self.is_terminal else "intermediate"
        return f"<TrieNode {state} children={len(self.children)}>"


class Trie:
    """
    Trie owning its whole node graph through a single root.

    word_count always equals the number of terminal nodes.
    node_count is the number of live allocated nodes, root included.
    Deleting a word never removes nodes; compact() and teardown() do.
    """

    def __init__(
        self,
        max_results: int = DEFAULT_MAX_RESULTS,
        max_word_length: int = MAX_WORD_LENGTH,
        case_mode: str = CASE_LABEL,
    ) -> None:
        if max_word_length < 1:
            raise ValueError("max_word_length must be a positive integer.")
        self.max_word_length = max_word_length
        self.collector = Collector(max_results=max_results, case_mode=case_mode)
        self._node_count = 0
        self._root: Optional[TrieNode] = self._new_node()
        self._word_count = 0

    # bookkeeping -------------------------------------------------------------
    def _new_node(self) -> TrieNode:
        node = TrieNode()
        self._node_count += 1
        return node

    def _ensure_open(self) -> TrieNode:
        if self._root is None:
            raise TrieClosedError("Trie has been torn down")
        return self._root

    @property
    def root(self) -> TrieNode:
        return self._ensure_open()

    @property
    def word_count(self) -> int:
        return self._word_count

    @property
    def node_count(self) -> int:
        return self._node_count

    @property
    def closed(self) -> bool:
        return self._root is None

    def __len__(self) -> int:
        return self._word_count

    def __repr__(self) -> str:
        if self.closed:
            return "<Trie closed>"
        return f"<Trie words={self._word_count} nodes={self._node_count}>"

    # insertion ---------------------------------------------------------------
    def insert(self, word: str, payload: Any = None) -> bool:
        """
        Insert `word`. Returns True if it became a new live word.

        Characters are folded one at a time while walking; an invalid one
        raises InvalidCharacterError on the spot. Nodes already created for
        the valid part of the word are left in place.
        A duplicate insert (any casing) keeps the original label and counter,
        only the payload is replaced when one is given.
        """
        node = self._ensure_open()
        check_length(word, self.max_word_length)
        if not word:
            return False

        try:
            for pos, ch in enumerate(word):
                idx = char_to_index(ch)
                if idx < 0:
                    logger.warning("Invalid character %r in %r, insert aborted", ch, word)
                    raise InvalidCharacterError(word, pos)
                nxt = node.children.get(idx)
                if nxt is None:
                    nxt = self._new_node()
                    node.children[idx] = nxt
                node = nxt
        except MemoryError:
            logger.critical("Out of memory while inserting %r", word)
            raise

        if node.is_terminal:
            if payload is not None:
                node.payload = payload
            return False

        node.is_terminal = True
        node.label = word
        node.payload = payload
        self._word_count += 1
        logger.debug("Inserted %r (%d words)", word, self._word_count)
        return True

    def insert_many(self, words: Iterable[str]) -> int:
        """Insert each word, skipping (and logging) rejected ones. Returns new-word count."""
        added = 0
        for word in words:
            if not is_valid_word(word, self.max_word_length):
                # a rejected word creates no nodes
                logger.info("Skipped %r: not a letters-only word of 1-%d chars", word, self.max_word_length)
                continue
            if self.insert(word):
                added += 1
        return added

    # lookup ------------------------------------------------------------------
    def _find(self, word: str) -> Optional[TrieNode]:
        """Node for the folded path of `word`, or None if any child is missing."""
        node = self._ensure_open()
        for idx in fold(word, self.max_word_length):
            node = node.children.get(idx)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """Exact (case-insensitive) membership test."""
        if not word:
            self._ensure_open()
            return False
        node = self._find(word)
        return node is not None and node.is_terminal

    def __contains__(self, word: str) -> bool:
        return self.search(word)

    def starts_with(self, prefix: str) -> bool:
        """True if at least one live word has this prefix."""
        node = self._find(prefix)
        if node is None:
            return False
        for _ in self.collector.walk(node, prefix):
            return True
        return False

    def get(self, word: str, default: Any = None) -> Any:
        """Payload stored for a live word, else `default`."""
        node = self._find(word) if word else None
        if node is None or not node.is_terminal:
            return default
        return node.payload

    # prefix enumeration ------------------------------------------------------
    def prefix_search(self, prefix: str, limit: Optional[int] = None) -> PrefixResult:
        """
        Words starting with `prefix`, a -> z, capped at the collector limit.
        An empty prefix gives an empty result; use enumerate_all() for
        every word.
        """
        self.collector.resolve_limit(limit)
        if not prefix:
            self._ensure_open()
            return PrefixResult()
        node = self._find(prefix)
        if node is None:
            return PrefixResult()
        return self.collector.collect(node, prefix, limit)

    def prefix_items(self, prefix: str) -> List[Tuple[str, Any]]:
        """(word, payload) pairs for every live word under `prefix`, uncapped."""
        node = self._find(prefix)
        if node is None:
            return []
        use_label = self.collector.case_mode == CASE_LABEL
        return [
            (terminal.label if use_label else acc, terminal.payload)
            for acc, terminal in self.collector.walk(node, prefix)
        ]

    def iter_prefix(self, prefix: str) -> Iterator[str]:
        """Lazy, uncapped stream of words under `prefix` ("" streams everything)."""
        node = self._find(prefix)
        if node is None:
            return iter(())
        return self.collector.iter_words(node, prefix)

    def __iter__(self) -> Iterator[str]:
        return self.collector.iter_words(self._ensure_open(), "")

    def enumerate_all(self, limit: Optional[int] = None) -> PrefixResult:
        """Every live word, collected straight from the root."""
        self.collector.resolve_limit(limit)
        return self.collector.collect(self._ensure_open(), "", limit)

    # deletion ----------------------------------------------------------------
    def delete(self, word: str) -> bool:
        """
        Logically delete `word`: clear its terminal flag.
        No nodes are removed. Missing words are a no-op returning False.
        """
        if not word:
            self._ensure_open()
            return False
        node = self._find(word)
        if node is None or not node.is_terminal:
            return False
        node.is_terminal = False
        node.label = None
        node.payload = None
        self._word_count -= 1
        logger.debug("Deleted %r (%d words)", word, self._word_count)
        return True

    # structure maintenance ---------------------------------------------------
    def compact(self) -> int:
        """
        Remove non-terminal leaf chains with no terminal descendant.
        Returns the number of nodes released. Membership is unchanged.
        """
        root = self._ensure_open()
        released = 0
        # (node, parent, key, children_done)
        stack: List[Tuple[TrieNode, Optional[TrieNode], int, bool]] = [(root, None, -1, False)]
        while stack:
            node, parent, key, done = stack.pop()
            if not done:
                stack.append((node, parent, key, True))
                for idx, child in node.children.items():
                    stack.append((child, node, idx, False))
                continue
            if parent is not None and not node.is_terminal and not node.children:
                del parent.children[key]
                released += 1

        self._node_count -= released
        if released:
            logger.debug("Compaction released %d nodes", released)
        return released

    def teardown(self, on_release: Optional[Callable[[TrieNode], None]] = None) -> int:
        """
        Release every node, children before their parent, each exactly once.
        Returns the number of nodes released. The trie is unusable afterwards;
        a second call returns 0.
        """
        if self._root is None:
            return 0

        released = 0
        stack: List[Tuple[TrieNode, bool]] = [(self._root, False)]
        while stack:
            node, done = stack.pop()
            if not done:
                stack.append((node, True))
                stack.extend((child, False) for child in node.children.values())
                continue
            if on_release is not None:
                on_release(node)
            node.children = {}
            node.is_terminal = False
            node.label = None
            node.payload = None
            released += 1

        logger.debug("Teardown released %d nodes", released)
        self._root = None
        self._node_count = 0
        self._word_count = 0
        return released

    def __enter__(self) -> "Trie":
        self._ensure_open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()
