"""
Central configuration for the autocompleter.

All tunables live here. Nothing is hardcoded in module code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path


def _project_root() -> Path:
    """Walk up from this file to find the project root (where pyproject.toml lives)."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    # Fallback: two levels up from config/settings.py
    return Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class AutocompleteSettings:
    """Settings for the prefix index and the suggestion service."""

    # Maximum suggestions returned per prefix query
    max_suggestions: int = 5

    # Number of selections remembered in the recency log (oldest evicted)
    history_capacity: int = 50

    # Number of recent selections surfaced by get_search_history()
    history_display_limit: int = 10

    # Number of entries in the "most selected" statistic
    top_selected_limit: int = 5

    # Seed a new service with the built-in starter vocabulary
    seed_default_vocabulary: bool = True

    # Accepted seed frequency for user-registered words. Enforced by the
    # CLI and HTTP front ends; the service itself stores any integer.
    min_seed_frequency: int = 1
    max_seed_frequency: int = 100


@dataclass(frozen=True)
class ApiSettings:
    """Settings for the HTTP front end."""

    host: str = "127.0.0.1"
    port: int = 8000

    # Maximum prefix length accepted by /autocomplete (characters)
    max_prefix_length: int = 200


@dataclass
class Settings:
    """
    Top-level settings container. Aggregates all subsystem settings.

    Usage:
        settings = get_settings()
        print(settings.autocomplete.max_suggestions)
        print(settings.api.port)
    """

    project_root: Path = field(default_factory=_project_root)
    autocomplete: AutocompleteSettings = field(default_factory=AutocompleteSettings)
    api: ApiSettings = field(default_factory=ApiSettings)

    @property
    def data_dir(self) -> Path:
        """Root directory for runtime files."""
        return self.project_root / "data"

    @property
    def logs_dir(self) -> Path:
        """Root directory for log files."""
        return self.data_dir / "logs"

    def ensure_dirs(self) -> None:
        """Create all required runtime directories if they don't exist."""
        self.logs_dir.mkdir(parents=True, exist_ok=True)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Returns the singleton Settings instance.

    Call this instead of constructing Settings() directly so the entire
    application shares one config object.
    """
    settings = Settings()
    settings.ensure_dirs()
    return settings
