from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

from staff_lookup.models.employee import EmployeeDetail
from staff_lookup.services.roster_api_client import RosterApiClient
from staff_lookup.services.roster_source import RosterUnavailableError
from staff_lookup.services.roster_store import roster_store


def _source(result=None, error: Exception | None = None) -> MagicMock:
    source = MagicMock()
    source.initialized = True
    source.get_employee = AsyncMock(return_value=result, side_effect=error)
    return source


def test_list_employees_full_roster(loaded_client, records):
    response = loaded_client.get("/api/v1/employees")

    assert response.status_code == 200
    data = response.json()
    assert [e["id"] for e in data] == [r.id for r in records]
    assert data[0] == {
        "id": "1001",
        "name": "Ana Ray",
        "title": "Engineer",
        "department": "IT",
        "unit": None,
        "location": "Berlin",
        "email": None,
    }


def test_list_employees_filtered(loaded_client):
    response = loaded_client.get("/api/v1/employees", params={"q": "Ana"})

    assert [e["id"] for e in response.json()] == ["1001", "1002"]


def test_list_employees_filter_without_hits(loaded_client):
    response = loaded_client.get("/api/v1/employees", params={"q": "zzzz"})

    assert response.status_code == 200
    assert response.json() == []


def test_list_employees_roster_unavailable(client):
    response = client.get("/api/v1/employees")

    assert response.status_code == 200
    assert response.json() == []


def test_get_employee_from_roster(loaded_client):
    response = loaded_client.get("/api/v1/employees/00123")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "00123"
    assert data["name"] == "Maria Lopez"


def test_get_employee_falls_back_to_source(loaded_client, monkeypatch):
    source = _source(EmployeeDetail(id="5005", name="New Hire"))
    monkeypatch.setattr(roster_store, "source", source)

    response = loaded_client.get("/api/v1/employees/5005")

    assert response.status_code == 200
    assert response.json()["name"] == "New Hire"
    source.get_employee.assert_awaited_once_with("5005")


def test_get_employee_not_found(loaded_client, monkeypatch):
    monkeypatch.setattr(roster_store, "source", _source(None))

    response = loaded_client.get("/api/v1/employees/2002")

    assert response.status_code == 404
    assert "2002" in response.json()["detail"]


def test_get_employee_source_unavailable(loaded_client, monkeypatch):
    monkeypatch.setattr(roster_store, "source", _source(error=RosterUnavailableError("down")))

    response = loaded_client.get("/api/v1/employees/2002")

    assert response.status_code == 503


def test_get_employee_unexpected_error(loaded_client, monkeypatch):
    monkeypatch.setattr(roster_store, "source", _source(error=RuntimeError("boom")))

    response = loaded_client.get("/api/v1/employees/2002")

    assert response.status_code == 500


def test_get_employee_unconfigured_source(loaded_client):
    response = loaded_client.get("/api/v1/employees/2002")

    assert response.status_code == 503


def test_get_employee_source_timeout(loaded_client, monkeypatch):
    api_client = RosterApiClient()
    api_client.initialized = True
    api_client.base_url = "https://directory.example.com/api"
    monkeypatch.setattr(roster_store, "source", api_client)

    session = MagicMock()
    session.get.side_effect = asyncio.TimeoutError()
    client_session = AsyncMock()
    client_session.__aenter__.return_value = session
    client_session.__aexit__.return_value = None

    with patch("staff_lookup.services.roster_api_client.aiohttp.ClientSession", return_value=client_session):
        response = loaded_client.get("/api/v1/employees/9999")

    assert response.status_code == 503
