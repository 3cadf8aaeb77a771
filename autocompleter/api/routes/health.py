"""Health and stats routes."""

from __future__ import annotations

from fastapi import APIRouter, Request

from autocompleter.api.schemas import EntryResponse, SelectedCountResponse, StatsResponse

router = APIRouter(tags=["system"])

_TOP_WORDS = 3


@router.get("/health")
def health() -> dict:
    """Simple liveness check."""
    return {"status": "ok"}


@router.get("/stats", response_model=StatsResponse)
def stats(request: Request) -> StatsResponse:
    """Return corpus size, recent activity and the most used terms."""
    service = request.app.state.service
    with request.app.state.service_lock:
        snapshot = service.stats()
        top_words = service.get_all_words()[:_TOP_WORDS]

    return StatsResponse(
        total_words=snapshot.total_words,
        recent_searches=snapshot.recent_searches,
        top_words=[EntryResponse(term=e.term, frequency=e.frequency) for e in top_words],
        top_selected=[
            SelectedCountResponse(term=term, count=count)
            for term, count in snapshot.top_selected
        ],
    )
