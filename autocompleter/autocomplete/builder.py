"""
Autocomplete service builder.

Creates an AutocompleteService and seeds it with a starter vocabulary of
(term, frequency) pairs.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from autocompleter.autocomplete.service import AutocompleteService
from autocompleter.autocomplete.vocabulary import DEFAULT_VOCABULARY
from autocompleter.config.settings import AutocompleteSettings, get_settings

logger = logging.getLogger(__name__)


class AutocompleteBuilder:
    """Build a seeded AutocompleteService."""

    def __init__(self, ac_settings: Optional[AutocompleteSettings] = None) -> None:
        self._ac = ac_settings or get_settings().autocomplete

    def build(self, vocabulary: Optional[Iterable[tuple[str, int]]] = None) -> AutocompleteService:
        """
        Return a new service seeded through ``add_word``.

        * An explicit *vocabulary* is always used.
        * Otherwise the built-in vocabulary is used when
          ``seed_default_vocabulary`` is enabled, else the service starts empty.
        """
        service = AutocompleteService(ac_settings=self._ac)

        if vocabulary is None:
            vocabulary = DEFAULT_VOCABULARY if self._ac.seed_default_vocabulary else ()

        seeded = 0
        for term, frequency in vocabulary:
            service.add_word(term, frequency)
            seeded += 1

        logger.info(
            "Built autocomplete service: %d seed pairs, %d terms",
            seeded,
            service.index.size,
        )
        return service
