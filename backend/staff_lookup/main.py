from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from staff_lookup.api.v1.router import api_router
from staff_lookup.core.config import settings
from staff_lookup.services.employee_service import employee_service
from staff_lookup.services.roster_api_client import roster_api_client
from staff_lookup.services.roster_store import roster_store
from staff_lookup.services.suggestion_service import suggestion_engine

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    if settings.ROSTER_SOURCE == "http":
        try:
            await roster_api_client.initialize(settings)
        except Exception:
            logger.exception("Failed to initialize RosterApiClient — continuing without roster API")
    else:
        try:
            await employee_service.initialize(settings)
        except Exception:
            logger.exception("Failed to initialize EmployeeService — continuing without DB")
    suggestion_engine.configure(settings)
    await roster_store.initialize(settings)
    logger.info(
        "Directory ready (source=%s, policy=%s, employees=%d)",
        settings.ROSTER_SOURCE,
        settings.NAVIGATION_POLICY.value,
        len(roster_store.snapshot),
    )
    yield
    await roster_store.close()
    await employee_service.close()
    await roster_api_client.close()


app = FastAPI(
    title="Staff Lookup API",
    description="Employee directory search and navigation",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Staff Lookup API"}
