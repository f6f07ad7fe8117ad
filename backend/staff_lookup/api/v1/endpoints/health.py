from __future__ import annotations

from fastapi import APIRouter

from staff_lookup.core.config import settings
from staff_lookup.services.roster_store import roster_store

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    services: dict[str, str] = {}
    source = roster_store.source

    try:
        if source is not None and source.initialized:
            ok = await source.check_connection()
            services["roster_source"] = "ok" if ok else "error"
        else:
            services["roster_source"] = "not_configured"
    except Exception:
        services["roster_source"] = "error"

    snapshot = roster_store.snapshot
    all_ok = all(v in ("ok", "not_configured") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
        "roster": {
            "source": settings.ROSTER_SOURCE,
            "available": snapshot.available,
            "size": len(snapshot),
            "version": snapshot.version,
        },
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
