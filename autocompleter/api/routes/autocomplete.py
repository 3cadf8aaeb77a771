"""Autocomplete API routes: suggestions, selections, vocabulary and history."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, Request

from autocompleter.api.schemas import (
    AddWordRequest,
    AutocompleteResponse,
    EntryResponse,
    ErrorResponse,
    HistoryResponse,
    SelectRequest,
    WordListResponse,
)

router = APIRouter(tags=["autocomplete"])

_VALIDATION_ERROR = {422: {"model": ErrorResponse}}


@router.get("/autocomplete", response_model=AutocompleteResponse, responses=_VALIDATION_ERROR)
def autocomplete(
    request: Request,
    q: str = Query(..., min_length=1, description="Prefix to complete"),
) -> AutocompleteResponse:
    """Return ranked suggestions for a prefix."""
    max_length = request.app.state.settings.api.max_prefix_length
    if len(q) > max_length:
        raise HTTPException(status_code=422, detail=f"Prefix longer than {max_length} characters")

    service = request.app.state.service
    with request.app.state.service_lock:
        suggestions = service.get_suggestions(q)

    return AutocompleteResponse(
        prefix=q,
        suggestions=[EntryResponse(term=s.term, frequency=s.frequency) for s in suggestions],
    )


@router.post("/autocomplete/select", response_model=EntryResponse, responses=_VALIDATION_ERROR)
def select(request: Request, body: SelectRequest) -> EntryResponse:
    """Record a committed suggestion and return the term's new frequency."""
    if not body.term.strip():
        raise HTTPException(status_code=422, detail="Term must not be blank")

    service = request.app.state.service
    with request.app.state.service_lock:
        service.select_suggestion(body.term)
        frequency = service.index.get_frequency(body.term)

    return EntryResponse(term=body.term.lower(), frequency=frequency)


@router.post(
    "/words", response_model=EntryResponse, status_code=201, responses=_VALIDATION_ERROR
)
def add_word(request: Request, body: AddWordRequest) -> EntryResponse:
    """Register a word with a seed frequency."""
    if not body.term.strip():
        raise HTTPException(status_code=422, detail="Term must not be blank")

    ac = request.app.state.settings.autocomplete
    if not ac.min_seed_frequency <= body.frequency <= ac.max_seed_frequency:
        raise HTTPException(
            status_code=422,
            detail=f"Frequency must be between {ac.min_seed_frequency} and {ac.max_seed_frequency}",
        )

    service = request.app.state.service
    with request.app.state.service_lock:
        service.add_word(body.term, body.frequency)
        frequency = service.index.get_frequency(body.term)

    return EntryResponse(term=body.term.lower(), frequency=frequency)


@router.get("/words", response_model=WordListResponse)
def list_words(request: Request) -> WordListResponse:
    """Return every stored word, highest frequency first."""
    service = request.app.state.service
    with request.app.state.service_lock:
        words = service.get_all_words()

    return WordListResponse(
        words=[EntryResponse(term=w.term, frequency=w.frequency) for w in words],
        total=len(words),
    )


@router.get("/history", response_model=HistoryResponse, responses=_VALIDATION_ERROR)
def history(
    request: Request,
    limit: int | None = Query(None, ge=0, description="Max terms to return"),
) -> HistoryResponse:
    """Return recently selected terms, most recent first."""
    capacity = request.app.state.settings.autocomplete.history_capacity
    if limit is not None and limit > capacity:
        raise HTTPException(status_code=422, detail=f"Limit larger than history capacity {capacity}")

    service = request.app.state.service
    with request.app.state.service_lock:
        recent = service.get_search_history(limit)
    return HistoryResponse(history=recent)
