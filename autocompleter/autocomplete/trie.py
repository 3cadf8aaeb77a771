"""
Prefix index for autocomplete suggestions.

Each node owns its children keyed by a single character.  A node that
ends a stored term is marked terminal and carries the lowercased term and
its usage frequency.  Given a prefix, the index collects every terminal
node below the prefix, sorts the matches by frequency and returns the
best few.

This is a plain, uncompressed trie sized for small vocabularies (tens to
hundreds of terms).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 5


@dataclass
class TrieNode:
    """Single node in the trie."""

    children: dict[str, "TrieNode"] = field(default_factory=dict)
    is_terminal: bool = False
    term: str = ""
    frequency: int = 0


@dataclass(frozen=True)
class Entry:
    """A (term, frequency) pair copied out of the index."""

    term: str
    frequency: int


def _ranking_key(entry: Entry) -> tuple[int, str]:
    # Frequency descending, then case-insensitive alphabetical
    return (-entry.frequency, entry.term.lower())


def _is_blank(text: Optional[str]) -> bool:
    return not text or not text.strip()


class PrefixIndex:
    """Frequency-ranked prefix trie with top-N retrieval."""

    def __init__(self, max_results: int = DEFAULT_MAX_RESULTS) -> None:
        self._root = TrieNode()
        self._size = 0
        self._max_results = max_results

    @property
    def size(self) -> int:
        """Number of distinct terms stored."""
        return self._size

    @property
    def max_results(self) -> int:
        return self._max_results

    def __len__(self) -> int:
        return self._size

    def __contains__(self, term: object) -> bool:
        if not isinstance(term, str):
            return False
        return self.get_frequency(term) is not None

    def insert(self, term: Optional[str], frequency: int = 1) -> None:
        """
        Insert *term* with *frequency*.

        If the term already exists, its frequency becomes the maximum of
        the old and new values, so re-seeding never lowers a rank.  Empty
        or whitespace-only terms are ignored.  The frequency is stored as
        given, including zero or negative values.
        """
        if _is_blank(term):
            return

        lowered = term.lower()
        node = self._root
        for ch in lowered:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]

        if not node.is_terminal:
            self._size += 1
            node.is_terminal = True
            node.term = lowered
            node.frequency = frequency
        else:
            node.frequency = max(node.frequency, frequency)
        logger.debug("Inserted %r (frequency=%d)", lowered, node.frequency)

    def increment_frequency(self, term: Optional[str], amount: int = 1) -> None:
        """
        Add *amount* to the frequency of *term*.

        A term that is not stored yet is created with frequency *amount*:
        selecting an unknown term registers it.  If the path exists but
        only as a prefix of longer terms, the node is marked terminal with
        frequency *amount*.  Only an already-terminal node is additive.
        """
        if _is_blank(term):
            return

        lowered = term.lower()
        node = self._root
        for ch in lowered:
            child = node.children.get(ch)
            if child is None:
                self.insert(lowered, amount)
                return
            node = child

        if node.is_terminal:
            node.frequency += amount
        else:
            self._size += 1
            node.is_terminal = True
            node.term = lowered
            node.frequency = amount
        logger.debug("Incremented %r by %d (frequency=%d)", lowered, amount, node.frequency)

    def get_frequency(self, term: Optional[str]) -> Optional[int]:
        """Return the stored frequency of *term*, or None if it is not a stored term."""
        if _is_blank(term):
            return None
        node = self._find(term.lower())
        if node is None or not node.is_terminal:
            return None
        return node.frequency

    def search(self, prefix: Optional[str]) -> list[Entry]:
        """
        Return up to ``max_results`` entries whose terms start with *prefix*.

        Every match below the prefix is collected, the full list is sorted
        by frequency descending with ties broken alphabetically, and then
        truncated.  An empty or unknown prefix yields an empty list.
        """
        if _is_blank(prefix):
            return []

        node = self._find(prefix.lower())
        if node is None:
            return []

        matches = list(self._collect(node))
        matches.sort(key=_ranking_key)
        return matches[: self._max_results]

    def get_all_words(self) -> list[Entry]:
        """
        Return every stored term, highest frequency first.

        Equal frequencies keep traversal (insertion) order; unlike
        :meth:`search` there is no alphabetical tie-break.
        """
        entries = list(self._collect(self._root))
        entries.sort(key=lambda e: e.frequency, reverse=True)
        return entries

    def _find(self, path: str) -> Optional[TrieNode]:
        node = self._root
        for ch in path:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def _collect(self, node: TrieNode) -> Iterator[Entry]:
        """Depth-first walk yielding an Entry for each terminal node under *node*.

        Uses an explicit stack so term length is not bounded by the
        interpreter's recursion limit.  Children are pushed in reverse so
        siblings are visited in insertion order.
        """
        stack = [node]
        while stack:
            current = stack.pop()
            if current.is_terminal:
                yield Entry(term=current.term, frequency=current.frequency)
            stack.extend(reversed(list(current.children.values())))
