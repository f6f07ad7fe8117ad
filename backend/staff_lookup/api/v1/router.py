from fastapi import APIRouter

from staff_lookup.api.v1.endpoints import employees, health, roster, search

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router)
api_router.include_router(employees.router)
api_router.include_router(search.router)
api_router.include_router(roster.router)
