"""Tests for the AutocompleteService."""

from __future__ import annotations

import logging

from autocompleter.autocomplete.service import AutocompleteService, ServiceStats
from autocompleter.autocomplete.trie import Entry, PrefixIndex
from autocompleter.config.settings import AutocompleteSettings


class TestGetSuggestions:
    def test_blank_prefix_returns_nothing(self, ap_service: AutocompleteService):
        assert ap_service.get_suggestions("") == []
        assert ap_service.get_suggestions("   ") == []
        assert ap_service.get_suggestions(None) == []

    def test_unknown_prefix_returns_nothing(self, ap_service: AutocompleteService):
        assert ap_service.get_suggestions("xyz") == []

    def test_does_not_mutate(self, ap_service: AutocompleteService):
        before = ap_service.get_all_words()
        ap_service.get_suggestions("ap")
        assert ap_service.get_all_words() == before
        assert ap_service.get_search_history() == []

    def test_respects_max_suggestions_setting(self):
        service = AutocompleteService(ac_settings=AutocompleteSettings(max_suggestions=2))
        for term in ("aa", "ab", "ac"):
            service.add_word(term, 1)
        assert len(service.get_suggestions("a")) == 2


class TestSelectionScenario:
    def test_end_to_end(self, ap_service: AutocompleteService):
        assert ap_service.get_suggestions("ap") == [
            Entry("app", 20),
            Entry("api", 18),
            Entry("apple", 15),
            Entry("apply", 8),
        ]

        ap_service.select_suggestion("apply")

        assert ap_service.get_suggestions("ap") == [
            Entry("app", 20),
            Entry("api", 18),
            Entry("apple", 15),
            Entry("apply", 9),
        ]
        assert ap_service.get_search_history() == ["apply"]

    def test_selecting_unknown_term_creates_it(self, service: AutocompleteService):
        service.select_suggestion("Kiwi")
        assert service.get_suggestions("ki") == [Entry("kiwi", 1)]
        assert service.get_search_history() == ["Kiwi"]

    def test_blank_selection_is_ignored(self, service: AutocompleteService):
        service.select_suggestion("")
        service.select_suggestion("  ")
        assert service.get_search_history() == []
        assert service.get_all_words() == []

    def test_selection_is_logged(self, ap_service: AutocompleteService, caplog):
        with caplog.at_level(logging.DEBUG, logger="autocompleter"):
            ap_service.select_suggestion("app")
        assert "Selected 'app'" in caplog.text


class TestSearchHistory:
    def test_most_recent_first_bounded_to_ten(self, service: AutocompleteService):
        for i in range(60):
            service.select_suggestion(f"term{i:02d}")
        assert service.get_search_history() == [f"term{i:02d}" for i in range(59, 49, -1)]

    def test_capacity_drops_oldest(self, service: AutocompleteService):
        for i in range(60):
            service.select_suggestion(f"term{i:02d}")
        full = service.get_search_history(limit=100)
        assert len(full) == 50
        assert full[0] == "term59"
        assert full[-1] == "term10"

    def test_repeated_selection_is_not_deduplicated(self, ap_service: AutocompleteService):
        ap_service.select_suggestion("app")
        ap_service.select_suggestion("app")
        ap_service.select_suggestion("api")
        assert ap_service.get_search_history() == ["api", "app", "app"]
        assert ap_service.index.get_frequency("app") == 22

    def test_reading_history_does_not_mutate(self, ap_service: AutocompleteService):
        ap_service.select_suggestion("app")
        history = ap_service.get_search_history()
        history.append("junk")
        assert ap_service.get_search_history() == ["app"]

    def test_explicit_limit(self, ap_service: AutocompleteService):
        for term in ("app", "api", "apple"):
            ap_service.select_suggestion(term)
        assert ap_service.get_search_history(2) == ["apple", "api"]
        assert ap_service.get_search_history(0) == []

    def test_small_capacity_setting(self):
        service = AutocompleteService(
            ac_settings=AutocompleteSettings(history_capacity=3, history_display_limit=2)
        )
        for term in ("a", "b", "c", "d"):
            service.select_suggestion(term)
        assert service.get_search_history() == ["d", "c"]
        assert service.get_search_history(10) == ["d", "c", "b"]


class TestAddWord:
    def test_adds_with_frequency(self, service: AutocompleteService):
        service.add_word("mango", 42)
        assert service.get_all_words() == [Entry("mango", 42)]

    def test_default_frequency(self, service: AutocompleteService):
        service.add_word("mango")
        assert service.index.get_frequency("mango") == 1

    def test_keeps_higher_existing_frequency(self, ap_service: AutocompleteService):
        ap_service.add_word("app", 3)
        assert ap_service.index.get_frequency("app") == 20

    def test_no_bounds_checking(self, service: AutocompleteService):
        service.add_word("zero", 0)
        service.add_word("minus", -5)
        service.add_word("huge", 10_000)
        assert service.get_all_words() == [
            Entry("huge", 10_000),
            Entry("zero", 0),
            Entry("minus", -5),
        ]

    def test_does_not_touch_history(self, service: AutocompleteService):
        service.add_word("mango", 2)
        assert service.get_search_history() == []


class TestStatistics:
    def test_update_frequency_skips_history(self, ap_service: AutocompleteService):
        ap_service.update_frequency("apply", 5)
        assert ap_service.index.get_frequency("apply") == 13
        assert ap_service.get_search_history() == []
        assert ap_service.top_selected() == [("apply", 5)]

    def test_top_selected_ordering(self, ap_service: AutocompleteService):
        for term in ("api", "app", "App", "apple", "api", "app"):
            ap_service.select_suggestion(term)
        assert ap_service.top_selected() == [("app", 3), ("api", 2), ("apple", 1)]
        assert ap_service.top_selected(limit=1) == [("app", 3)]

    def test_top_selected_ties_alphabetical(self, service: AutocompleteService):
        for term in ("pear", "fig", "kiwi"):
            service.select_suggestion(term)
        assert service.top_selected() == [("fig", 1), ("kiwi", 1), ("pear", 1)]

    def test_stats_snapshot(self, ap_service: AutocompleteService):
        ap_service.select_suggestion("api")
        ap_service.select_suggestion("banana")
        assert ap_service.stats() == ServiceStats(
            total_words=5,
            recent_searches=2,
            top_selected=[("api", 1), ("banana", 1)],
        )

    def test_get_all_words_delegates(self, ap_service: AutocompleteService):
        assert [e.term for e in ap_service.get_all_words()] == ["app", "api", "apple", "apply"]


class TestConstruction:
    def test_uses_given_empty_index(self):
        index = PrefixIndex(max_results=1)
        service = AutocompleteService(index=index)
        service.add_word("fig", 2)
        assert service.index is index
        assert index.get_frequency("fig") == 2
