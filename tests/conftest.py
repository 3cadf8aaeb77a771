"""
Shared test fixtures for the autocompleter test suite.

Every test gets fresh engine objects; nothing is shared between tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from autocompleter.autocomplete.service import AutocompleteService
from autocompleter.autocomplete.trie import PrefixIndex
from autocompleter.config.settings import AutocompleteSettings, Settings

# Small corpus used by the end-to-end scenario
AP_VOCABULARY = [("app", 20), ("apple", 15), ("apply", 8), ("api", 18)]


@pytest.fixture
def index() -> PrefixIndex:
    """An empty prefix index."""
    return PrefixIndex()


@pytest.fixture
def ac_settings() -> AutocompleteSettings:
    return AutocompleteSettings()


@pytest.fixture
def service(ac_settings: AutocompleteSettings) -> AutocompleteService:
    """An empty service with default limits."""
    return AutocompleteService(ac_settings=ac_settings)


@pytest.fixture
def ap_service(service: AutocompleteService) -> AutocompleteService:
    """A service seeded with the four "ap" terms."""
    for term, frequency in AP_VOCABULARY:
        service.add_word(term, frequency)
    return service


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a temp directory."""
    s = Settings(project_root=tmp_path)
    s.ensure_dirs()
    return s
