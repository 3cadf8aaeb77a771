"""Starter vocabulary used to seed a fresh autocomplete service."""

from __future__ import annotations

DEFAULT_VOCABULARY: tuple[tuple[str, int], ...] = (
    # Tech
    ("application", 12),
    ("apple", 15),
    ("apply", 8),
    ("app", 20),
    ("api", 18),
    ("algorithm", 7),
    ("array", 10),
    ("abstract", 6),
    # Common
    ("banana", 11),
    ("band", 6),
    ("bandit", 3),
    ("bank", 14),
    ("basketball", 9),
    ("baseball", 7),
    ("battery", 8),
    # Animals & nature
    ("cat", 16),
    ("catalog", 5),
    ("category", 8),
    ("catering", 4),
    ("dog", 13),
    ("dolphin", 6),
    ("dragon", 7),
    # Programming
    ("function", 15),
    ("frontend", 12),
    ("framework", 10),
    ("feature", 11),
    ("factory", 7),
    # Data
    ("data", 17),
    ("database", 14),
    ("dashboard", 9),
    ("delete", 8),
    ("design", 13),
    ("developer", 15),
    # Misc
    ("elephant", 5),
    ("engine", 10),
    ("engineering", 12),
    ("environment", 8),
    ("example", 14),
    ("execute", 6),
    ("export", 9),
)
