from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import quote

import aiohttp
from pydantic import ValidationError

from staff_lookup.core.config import Settings
from staff_lookup.models.employee import EmployeeDetail
from staff_lookup.services.roster_source import RosterUnavailableError

logger = logging.getLogger(__name__)


class RosterApiClient:
    """Reads the employee roster from a REST backend.

    ``GET {base}/employees`` returns either a JSON array of employee objects
    or an object with the array under ``"value"``; ``GET {base}/employees/{id}``
    returns one object or 404.
    """

    def __init__(self) -> None:
        self.initialized = False
        self.base_url = ""
        self.api_key = ""
        self.timeout = 30.0

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.ROSTER_API_URL:
            logger.warning("Roster API URL missing — RosterApiClient not initialized")
            return

        self.base_url = settings.ROSTER_API_URL.rstrip("/")
        self.api_key = settings.ROSTER_API_KEY
        self.timeout = settings.ROSTER_API_TIMEOUT
        self.initialized = True
        logger.info("RosterApiClient initialized (url=%s)", self.base_url)

    async def close(self) -> None:
        self.initialized = False
        self.base_url = ""
        self.api_key = ""

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["api-key"] = self.api_key
        return headers

    async def get_roster(self) -> list[EmployeeDetail]:
        if not self.initialized:
            raise RosterUnavailableError("Roster API not configured")

        url = f"{self.base_url}/employees"
        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, headers=self._headers()) as response:
                    if response.status != 200:
                        error_text = await response.text()
                        raise RosterUnavailableError(f"Roster fetch failed: {response.status} - {error_text}")
                    data = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            raise RosterUnavailableError(f"Roster fetch failed: {err}") from err

        items = data.get("value", []) if isinstance(data, dict) else data
        if not isinstance(items, list):
            raise RosterUnavailableError("Roster fetch returned an unexpected payload")

        records = [record for record in (self._parse_employee(item) for item in items) if record is not None]
        logger.info("Fetched %d employees from roster API", len(records))
        return records

    async def get_employee(self, identifier: str) -> EmployeeDetail | None:
        if not self.initialized:
            raise RosterUnavailableError("Roster API not configured")

        url = f"{self.base_url}/employees/{quote(identifier, safe='')}"
        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, headers=self._headers()) as response:
                    if response.status == 404:
                        return None
                    if response.status != 200:
                        error_text = await response.text()
                        raise RosterUnavailableError(f"Employee lookup failed: {response.status} - {error_text}")
                    data = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            raise RosterUnavailableError(f"Employee lookup failed: {err}") from err

        return self._parse_employee(data)

    async def check_connection(self) -> bool:
        if not self.initialized:
            return False

        try:
            timeout = aiohttp.ClientTimeout(total=10)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.head(f"{self.base_url}/employees", headers=self._headers()) as response:
                    return response.status < 500
        except Exception:
            logger.exception("Roster API connection check failed")
            return False

    def _parse_employee(self, item: Any) -> EmployeeDetail | None:
        if not isinstance(item, dict) or item.get("id") in (None, ""):
            logger.warning("Skipping roster entry without an id")
            return None

        data = {
            key: str(value) if isinstance(value, (int, float)) else value
            for key, value in item.items()
            if value is not None
        }
        try:
            return EmployeeDetail.model_validate(data)
        except ValidationError:
            logger.warning("Skipping malformed roster entry %s", data["id"])
            return None


roster_api_client = RosterApiClient()
