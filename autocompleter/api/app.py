"""FastAPI application factory."""

from __future__ import annotations

import threading

from fastapi import FastAPI

from autocompleter import __version__
from autocompleter.api.routes.autocomplete import router as autocomplete_router
from autocompleter.api.routes.health import router as health_router
from autocompleter.autocomplete.builder import AutocompleteBuilder
from autocompleter.autocomplete.service import AutocompleteService
from autocompleter.config.settings import Settings, get_settings


def create_app(
    settings: Settings | None = None,
    service: AutocompleteService | None = None,
) -> FastAPI:
    """
    Build and return a fully wired FastAPI application.

    Seeds an AutocompleteService (unless one is given) and attaches the
    lock that serializes access to it before mounting routes.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Autocompleter API",
        version=__version__,
        description="Frequency-ranked prefix autocomplete",
    )

    # Shared state — accessible via request.app.state in routes
    app.state.settings = settings
    app.state.service = service or AutocompleteBuilder(settings.autocomplete).build()
    # Sync routes run on a thread pool; the engine is not thread-safe
    app.state.service_lock = threading.Lock()

    app.include_router(health_router)
    app.include_router(autocomplete_router)

    return app
