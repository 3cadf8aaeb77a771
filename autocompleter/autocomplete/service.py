"""
Autocomplete service — the engine consumed by input and display front ends.

Wraps one PrefixIndex, remembers recently selected terms and counts how
often each term was selected.  Not thread-safe: callers sharing one
service across threads must serialize every mutating call.
"""

from __future__ import annotations

import logging
from collections import Counter, deque
from dataclasses import dataclass
from typing import Optional

from autocompleter.autocomplete.trie import Entry, PrefixIndex
from autocompleter.config.settings import AutocompleteSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceStats:
    """Snapshot of the service for statistics displays."""

    total_words: int
    recent_searches: int
    top_selected: list[tuple[str, int]]


class AutocompleteService:
    """Suggest, learn from selections and accept new terms."""

    def __init__(
        self,
        ac_settings: Optional[AutocompleteSettings] = None,
        index: Optional[PrefixIndex] = None,
    ) -> None:
        self._ac = ac_settings or AutocompleteSettings()
        self._index = index if index is not None else PrefixIndex(max_results=self._ac.max_suggestions)
        # Most recent first; appendleft + maxlen drops the oldest entry
        self._history: deque[str] = deque(maxlen=self._ac.history_capacity)
        self._selection_counts: Counter[str] = Counter()

    @property
    def index(self) -> PrefixIndex:
        return self._index

    def get_suggestions(self, prefix: Optional[str]) -> list[Entry]:
        """Return ranked suggestions for *prefix*; blank input gives no suggestions."""
        if not prefix or not prefix.strip():
            return []
        return self._index.search(prefix)

    def select_suggestion(self, term: str) -> None:
        """
        Record that the user committed to *term*.

        Bumps the term's frequency by one (creating the term if needed) and
        pushes it onto the recency log.  Repeated selections are logged
        repeatedly.  Blank terms are ignored.
        """
        if not term or not term.strip():
            return
        self._index.increment_frequency(term, 1)
        self._history.appendleft(term)
        self._selection_counts[term.lower()] += 1
        logger.debug("Selected %r (history=%d)", term, len(self._history))

    def update_frequency(self, term: str, increment: int) -> None:
        """Adjust *term*'s frequency without touching the recency log."""
        if not term or not term.strip():
            return
        self._index.increment_frequency(term, increment)
        self._selection_counts[term.lower()] += increment

    def add_word(self, term: str, frequency: int = 1) -> None:
        """
        Register *term* with a seed *frequency*.

        No bounds checking happens here: zero or negative frequencies are
        stored as given.  Front ends validate user input first.
        """
        self._index.insert(term, frequency)

    def get_search_history(self, limit: Optional[int] = None) -> list[str]:
        """Return up to *limit* recently selected terms, most recent first."""
        if limit is None:
            limit = self._ac.history_display_limit
        return list(self._history)[: max(0, limit)]

    def get_all_words(self) -> list[Entry]:
        """Return every stored term, highest frequency first."""
        return self._index.get_all_words()

    def top_selected(self, limit: Optional[int] = None) -> list[tuple[str, int]]:
        """Most-selected terms as (term, count), ties ordered alphabetically."""
        if limit is None:
            limit = self._ac.top_selected_limit
        ranked = sorted(self._selection_counts.items(), key=lambda kv: (-kv[1], kv[0]))
        return ranked[: max(0, limit)]

    def stats(self) -> ServiceStats:
        return ServiceStats(
            total_words=self._index.size,
            recent_searches=len(self._history),
            top_selected=self.top_selected(),
        )
