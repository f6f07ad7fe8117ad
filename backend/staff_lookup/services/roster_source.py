"""Common contract for the services that supply the employee roster."""

from __future__ import annotations

from typing import Protocol

from staff_lookup.models.employee import EmployeeDetail


class RosterUnavailableError(Exception):
    pass


class RosterSource(Protocol):
    initialized: bool

    async def get_roster(self) -> list[EmployeeDetail]: ...

    async def get_employee(self, identifier: str) -> EmployeeDetail | None: ...

    async def check_connection(self) -> bool: ...
