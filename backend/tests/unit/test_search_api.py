from __future__ import annotations

import pytest

from staff_lookup.core.config import NavigationPolicy, settings
from staff_lookup.services.roster_store import roster_store
from tests.conftest import make_records


def test_suggestions_for_partial_name(loaded_client):
    response = loaded_client.get("/api/v1/search/suggestions", params={"q": "Ana"})

    assert response.status_code == 200
    data = response.json()
    assert data["query"] == "Ana"
    assert data["suggestions"] == [
        {"id": "1001", "name": "Ana Ray"},
        {"id": "1002", "name": "Ana Rae"},
    ]
    assert data["destination"] is None


def test_suggestions_for_blank_query(loaded_client):
    response = loaded_client.get("/api/v1/search/suggestions", params={"q": "   "})

    assert response.status_code == 200
    assert response.json()["suggestions"] == []


def test_suggestions_without_roster(client):
    response = client.get("/api/v1/search/suggestions", params={"q": "Ana"})

    assert response.status_code == 200
    assert response.json()["suggestions"] == []


def test_suggestions_respect_limit(loaded_client, monkeypatch):
    from staff_lookup.services.suggestion_service import suggestion_engine

    monkeypatch.setattr(suggestion_engine, "limit", 1)
    response = loaded_client.get("/api/v1/search/suggestions", params={"q": "a"})

    assert len(response.json()["suggestions"]) == 1


def test_suggestions_auto_navigate(loaded_client, monkeypatch):
    monkeypatch.setattr(settings, "AUTO_NAVIGATE_ON_SINGLE_MATCH", True)

    single = loaded_client.get("/api/v1/search/suggestions", params={"q": "Lopez"}).json()
    many = loaded_client.get("/api/v1/search/suggestions", params={"q": "Ana"}).json()

    assert single["destination"] == {"kind": "detail", "identifier": "00123"}
    assert many["destination"] == {"kind": "noop"}


def test_suggestions_follow_roster_reload(loaded_client):
    before = loaded_client.get("/api/v1/search/suggestions", params={"q": "Ana"}).json()
    roster_store.replace(make_records([{"id": "3003", "name": "Anand Patel"}]))
    after = loaded_client.get("/api/v1/search/suggestions", params={"q": "Ana"}).json()

    assert len(before["suggestions"]) == 2
    assert after["suggestions"] == [{"id": "3003", "name": "Anand Patel"}]


def test_resolve_exact_name(loaded_client):
    response = loaded_client.post("/api/v1/search/resolve", json={"query": "Maria Lopez"})

    assert response.status_code == 200
    assert response.json() == {"kind": "detail", "identifier": "00123"}


def test_resolve_ambiguous_goes_to_listing(loaded_client):
    response = loaded_client.post("/api/v1/search/resolve", json={"query": "Ana"})

    assert response.json() == {"kind": "listing", "query": "Ana"}


def test_resolve_numeric_identifier(loaded_client):
    response = loaded_client.post("/api/v1/search/resolve", json={"query": "2002"})

    assert response.json() == {"kind": "detail", "identifier": "2002"}


def test_resolve_blank_is_noop(loaded_client):
    response = loaded_client.post("/api/v1/search/resolve", json={"query": "  "})

    assert response.json() == {"kind": "noop"}


def test_resolve_with_client_suggestions(loaded_client):
    response = loaded_client.post(
        "/api/v1/search/resolve",
        json={"query": "ana ray", "suggestions": [{"id": "1001", "name": "Ana Ray"}]},
    )

    assert response.json() == {"kind": "detail", "identifier": "1001"}


def test_resolve_loose_policy(loaded_client, monkeypatch):
    monkeypatch.setattr(settings, "NAVIGATION_POLICY", NavigationPolicy.LOOSE)

    response = loaded_client.post("/api/v1/search/resolve", json={"query": "Lopez"})

    assert response.json() == {"kind": "detail", "identifier": "00123"}


def test_resolve_strict_policy_partial_single_match(loaded_client):
    response = loaded_client.post("/api/v1/search/resolve", json={"query": "Lopez"})

    assert response.json() == {"kind": "listing", "query": "Lopez"}


@pytest.mark.anyio
async def test_resolve_async_client(async_client, records):
    roster_store.replace(records)

    response = await async_client.post("/api/v1/search/resolve", json={"query": "JSMI"})

    assert response.status_code == 200
    assert response.json() == {"kind": "detail", "identifier": "JSMI"}


def test_resolve_long_commit_goes_to_listing(loaded_client):
    query = "x" * 600

    response = loaded_client.post("/api/v1/search/resolve", json={"query": query})

    assert response.status_code == 200
    assert response.json() == {"kind": "listing", "query": query}


def test_resolve_long_numeric_commit_opens_detail(loaded_client):
    query = "7" * 600

    response = loaded_client.post("/api/v1/search/resolve", json={"query": query})

    assert response.status_code == 200
    assert response.json() == {"kind": "detail", "identifier": query}
