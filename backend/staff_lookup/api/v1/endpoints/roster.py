from __future__ import annotations

from fastapi import APIRouter

from staff_lookup.models.search import RosterStatus
from staff_lookup.services.roster_store import roster_store

router = APIRouter(prefix="/roster", tags=["roster"])


@router.get("", response_model=RosterStatus)
async def roster_status():
    return roster_store.status()


@router.post("/refresh", response_model=RosterStatus)
async def refresh_roster():
    await roster_store.refresh()
    return roster_store.status()
