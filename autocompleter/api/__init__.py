"""FastAPI front end for the autocomplete engine."""

from autocompleter.api.app import create_app

__all__ = ["create_app"]
