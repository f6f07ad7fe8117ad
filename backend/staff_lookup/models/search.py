"""Request and response bodies for the search endpoints."""

from __future__ import annotations

from pydantic import BaseModel

from staff_lookup.models.employee import Suggestion
from staff_lookup.models.navigation import Destination


class SuggestionResponse(BaseModel):
    query: str
    suggestions: list[Suggestion] = []
    destination: Destination | None = None


class ResolveRequest(BaseModel):
    query: str = ""
    suggestions: list[Suggestion] | None = None


class RosterStatus(BaseModel):
    version: int
    size: int
    available: bool
    error: str | None = None
