"""Autocomplete package — frequency-ranked prefix suggestions."""

from autocompleter.autocomplete.builder import AutocompleteBuilder
from autocompleter.autocomplete.service import AutocompleteService, ServiceStats
from autocompleter.autocomplete.trie import Entry, PrefixIndex

__all__ = [
    "AutocompleteBuilder",
    "AutocompleteService",
    "Entry",
    "PrefixIndex",
    "ServiceStats",
]
