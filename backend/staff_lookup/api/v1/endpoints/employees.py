from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from staff_lookup.models.employee import EmployeeDetail, EmployeeSummary
from staff_lookup.services.roster_source import RosterUnavailableError
from staff_lookup.services.roster_store import roster_store
from staff_lookup.services.suggestion_service import suggestion_engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[EmployeeSummary])
async def list_employees(q: str = ""):
    return [record.summary() for record in suggestion_engine.filter_roster(q)]


@router.get("/{identifier}", response_model=EmployeeDetail)
async def get_employee(identifier: str):
    employee = roster_store.snapshot.get(identifier)

    if employee is None and roster_store.source is not None:
        try:
            employee = await roster_store.source.get_employee(identifier)
        except RosterUnavailableError as err:
            logger.warning("Employee lookup for %s failed: %s", identifier, err)
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Employee directory unavailable",
            ) from err
        except Exception as err:
            logger.exception("Failed to get employee %s", identifier)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to retrieve employee",
            ) from err

    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id '{identifier}' not found",
        )

    return employee
