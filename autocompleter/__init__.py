"""Frequency-ranked prefix autocomplete engine."""

__version__ = "0.1.0"
