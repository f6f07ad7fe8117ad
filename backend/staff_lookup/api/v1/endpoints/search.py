from __future__ import annotations

import logging

from fastapi import APIRouter

from staff_lookup.core.config import settings
from staff_lookup.core.navigation import auto_navigate, resolve
from staff_lookup.models.navigation import Destination
from staff_lookup.models.search import ResolveRequest, SuggestionResponse
from staff_lookup.services.suggestion_service import suggestion_engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


@router.get("/suggestions", response_model=SuggestionResponse)
async def get_suggestions(q: str = ""):
    suggestions = suggestion_engine.compute_suggestions(q)

    destination = None
    if settings.AUTO_NAVIGATE_ON_SINGLE_MATCH:
        destination = auto_navigate(q, suggestions, enabled=True)

    return SuggestionResponse(query=q, suggestions=suggestions, destination=destination)


@router.post("/resolve", response_model=Destination)
async def resolve_search(request: ResolveRequest):
    suggestions = request.suggestions
    if suggestions is None:
        suggestions = suggestion_engine.compute_suggestions(request.query)

    destination = resolve(request.query, suggestions, policy=settings.NAVIGATION_POLICY)
    logger.info("Resolved search query=%r to %s", request.query[:50], destination.kind)
    return destination
