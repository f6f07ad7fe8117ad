"""Cosmos DB employee service (read-only)."""

from __future__ import annotations

import logging
from typing import Any

from azure.cosmos.aio import CosmosClient
from pydantic import ValidationError

from staff_lookup.core.config import Settings
from staff_lookup.models.employee import EmployeeDetail
from staff_lookup.services.roster_source import RosterUnavailableError

logger = logging.getLogger(__name__)

# Cosmos DB field names (with spaces) → Python snake_case attribute names
_FIELD_MAP: list[tuple[str, str]] = [
    ("name", "Employee"),
    ("first_name", "First Name"),
    ("last_name", "Last Name"),
    ("title", "Job Title"),
    ("unit", "Unit"),
    ("manager", "Manager"),
    ("company", "Company"),
    ("phone", "Phone"),
    ("email", "Email"),
    ("office", "Office"),
    ("department", "Department"),
    ("division", "Division"),
    ("location", "Location"),
    ("start_date", "Start"),
]


def _identifier(raw: dict[str, Any]) -> str | None:
    value = raw.get("Employee ID") or raw.get("id")
    if value is None or value == "":
        return None
    return str(value)


class EmployeeService:
    def __init__(self) -> None:
        self.client: CosmosClient | None = None
        self.container: Any = None
        self.initialized: bool = False

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        endpoint = settings.COSMOS_DB_ENDPOINT
        key = settings.COSMOS_DB_KEY
        container_name = settings.COSMOS_DB_EMPLOYEES_CONTAINER

        if not endpoint or not key:
            logger.warning("Cosmos DB credentials missing — service not initialized")
            return

        self.client = CosmosClient(endpoint, key)
        db = self.client.get_database_client(settings.COSMOS_DB_DATABASE)
        self.container = db.get_container_client(container_name)
        self.initialized = True
        logger.info("EmployeeService initialized (container=%s)", container_name)

    async def close(self) -> None:
        if self.client:
            await self.client.close()
            self.client = None
            self.container = None
            self.initialized = False

    async def get_roster(self) -> list[EmployeeDetail]:
        if not self.container:
            raise RosterUnavailableError("Cosmos DB employee container not configured")

        records: list[EmployeeDetail] = []
        skipped = 0
        try:
            async for item in self.container.read_all_items():
                record = self._transform_employee(item)
                if record is None:
                    skipped += 1
                    continue
                records.append(record)
        except Exception as err:
            raise RosterUnavailableError(f"Failed to read employee container: {err}") from err

        if skipped:
            logger.warning("Skipped %d employee documents without an identifier or with invalid fields", skipped)
        logger.info("Fetched %d employees from Cosmos DB", len(records))
        return records

    async def get_employee(self, identifier: str) -> EmployeeDetail | None:
        if not self.container:
            raise RosterUnavailableError("Cosmos DB employee container not configured")

        query = 'SELECT * FROM c WHERE c.id = @identifier OR c["Employee ID"] = @identifier'
        params: list[dict[str, str]] = [{"name": "@identifier", "value": identifier}]

        try:
            async for item in self.container.query_items(
                query=query,
                parameters=params,
                enable_cross_partition_query=True,
            ):
                record = self._transform_employee(item)
                if record is not None:
                    return record
        except Exception as err:
            raise RosterUnavailableError(f"Employee lookup failed: {err}") from err

        return None

    async def check_connection(self) -> bool:
        if not self.container:
            return False
        try:
            query = "SELECT VALUE COUNT(1) FROM c"
            async for _ in self.container.query_items(
                query=query,
                enable_cross_partition_query=True,
            ):
                return True
            return True
        except Exception:
            logger.exception("Cosmos DB connection check failed")
            return False

    def _transform_employee(self, raw: dict[str, Any]) -> EmployeeDetail | None:
        identifier = _identifier(raw)
        if identifier is None:
            return None

        data: dict[str, Any] = {"id": identifier}
        for python_key, cosmos_key in _FIELD_MAP:
            value = raw.get(cosmos_key)
            data[python_key] = str(value) if value is not None else None

        # Fallback: "New Job Title" if "Job Title" is empty
        if not data.get("title"):
            fallback = raw.get("New Job Title")
            data["title"] = str(fallback) if fallback is not None else None

        if not data.get("name") and (data.get("first_name") or data.get("last_name")):
            data["name"] = " ".join(part for part in (data.get("first_name"), data.get("last_name")) if part)

        try:
            return EmployeeDetail(**data)
        except ValidationError:
            logger.warning("Skipping malformed employee document %s", identifier)
            return None


employee_service = EmployeeService()
