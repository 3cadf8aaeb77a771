"""Pydantic response/request models for the API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class EntryResponse(BaseModel):
    """A single (term, frequency) pair."""

    term: str
    frequency: int


class AutocompleteResponse(BaseModel):
    """Autocomplete results."""

    prefix: str
    suggestions: list[EntryResponse]


class SelectRequest(BaseModel):
    """Request body for recording a selection."""

    term: str = Field(..., min_length=1, max_length=200)


class AddWordRequest(BaseModel):
    """Request body for registering a new word."""

    term: str = Field(..., min_length=1, max_length=200)
    frequency: int = 1


class WordListResponse(BaseModel):
    """Whole corpus, highest frequency first."""

    words: list[EntryResponse]
    total: int


class HistoryResponse(BaseModel):
    """Recently selected terms, most recent first."""

    history: list[str]


class SelectedCountResponse(BaseModel):
    term: str
    count: int


class StatsResponse(BaseModel):
    """Engine statistics."""

    total_words: int
    recent_searches: int
    top_words: list[EntryResponse]
    top_selected: list[SelectedCountResponse]


class ErrorResponse(BaseModel):
    """Error envelope: a message, or FastAPI's list of field errors."""

    detail: str | list[dict]
