from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from staff_lookup.core.roster import RosterSnapshot
from staff_lookup.main import app
from staff_lookup.models.employee import EmployeeDetail
from staff_lookup.services.roster_store import roster_store

SAMPLE_EMPLOYEES: list[dict[str, str]] = [
    {"id": "1001", "name": "Ana Ray", "title": "Engineer", "department": "IT", "location": "Berlin"},
    {"id": "1002", "name": "Ana Rae", "title": "Analyst", "department": "Finance", "location": "Munich"},
    {"id": "2040", "name": "John Doe", "title": "Manager", "department": "Sales", "location": "Hamburg"},
    {"id": "00123", "name": "Maria Lopez", "title": "Designer", "department": "Product", "location": "Berlin"},
    {"id": "JSMI", "name": "Jane Smith", "title": "Consultant", "department": "IT", "location": "Cologne"},
]


def make_records(items: list[dict[str, str]] | None = None) -> list[EmployeeDetail]:
    return [EmployeeDetail(**item) for item in (SAMPLE_EMPLOYEES if items is None else items)]


@pytest.fixture(autouse=True)
def _restore_roster_store():
    original_snapshot = roster_store._snapshot
    original_error = roster_store.last_error
    original_source = roster_store.source
    yield
    roster_store._snapshot = original_snapshot
    roster_store.last_error = original_error
    roster_store.source = original_source


@pytest.fixture
def records() -> list[EmployeeDetail]:
    return make_records()


@pytest.fixture
def roster(records) -> RosterSnapshot:
    return RosterSnapshot(records, version=1)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def loaded_client(client, records):
    roster_store.replace(records)
    return client


@pytest.fixture
async def async_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
