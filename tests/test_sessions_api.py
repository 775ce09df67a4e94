"""
Tests for the advisor session HTTP API.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from fotobox_advisor.infrastructure.knowledge.catalog_data import DEFAULT_CATALOG
from fotobox_advisor.infrastructure.knowledge.catalog_store import build_catalog
from fotobox_advisor.infrastructure.store.memory_store import MemorySessionStore
from fotobox_advisor.main import app
from fotobox_advisor.wiring.dependencies import get_session_store


@pytest.fixture
def client():
    store = MemorySessionStore(build_catalog(DEFAULT_CATALOG), session_limit=10)
    app.dependency_overrides[get_session_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


def _start(client: TestClient) -> str:
    response = client.post("/api/v1/sessions")
    assert response.status_code == 201
    return response.json()["session_id"]


def _choose(client: TestClient, session_id: str, step_id: str, value: str) -> dict:
    response = client.post(f"/api/v1/sessions/{session_id}/choose", json={"step_id": step_id, "value": value})
    assert response.status_code == 200, response.text
    return response.json()["step"]


def test_health(client):
    """Test the health endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_session_starts_at_consent(client):
    """Test that a new session shows the consent step and a base-only quote."""
    session_id = _start(client)

    step = client.get(f"/api/v1/sessions/{session_id}").json()["step"]
    assert step["id"] == "privacy"
    assert step["kind"] == "consent"

    quote = client.get(f"/api/v1/sessions/{session_id}/quote").json()
    assert quote["total"] == "350"
    assert quote["currency"] == "EUR"


def test_print_walkthrough_and_quote(client):
    """Test a print session through to the summary."""
    session_id = _start(client)
    _choose(client, session_id, "privacy", "accept")
    _choose(client, session_id, "welcome", "continue")
    _choose(client, session_id, "mode", "digital_and_print")
    _choose(client, session_id, "event", "Hochzeit")
    step = _choose(client, session_id, "guests", "50–120")
    assert step["id"] == "format"
    assert "400 Prints" in step["reply"]
    _choose(client, session_id, "format", "postcard")
    step = _choose(client, session_id, "printpkgs", "200")
    assert step["id"] == "accessories"
    assert step["substep"]["key"] == "props"

    for answer in ("yes", "yes", "no", "no", "no"):
        step = _choose(client, session_id, "accessories", answer)
    assert step["id"] == "summary"

    quote = client.get(f"/api/v1/sessions/{session_id}/quote").json()
    assert quote["total"] == "480"
    included = [line for line in quote["lines"] if line["included"]]
    assert [line["label"] for line in included] == ["Requisiten (inklusive)"]

    summary = client.get(f"/api/v1/sessions/{session_id}/summary").json()
    assert "Event: Hochzeit" in summary["selection"]
    assert "Gesamtsumme: 480.00 €" in summary["prices"]

    step = client.post(f"/api/v1/sessions/{session_id}/advance").json()["step"]
    assert step["is_complete"] is True


def test_navigation_endpoints(client):
    """Test back, enter and reset."""
    session_id = _start(client)
    _choose(client, session_id, "privacy", "accept")
    _choose(client, session_id, "welcome", "continue")
    _choose(client, session_id, "mode", "digital")

    step = client.post(f"/api/v1/sessions/{session_id}/back").json()["step"]
    assert step["id"] == "mode"
    assert [o["value"] for o in step["options"] if o["selected"]] == ["digital"]

    step = client.post(f"/api/v1/sessions/{session_id}/enter", json={"step_id": "event"}).json()["step"]
    assert step["id"] == "event"

    step = client.post(f"/api/v1/sessions/{session_id}/reset").json()["step"]
    assert step["id"] == "privacy"


def test_flow_errors_map_to_status_codes(client):
    """Test 404 for unknown sessions, 409 for out-of-sync calls and 400 for unknown steps."""
    assert client.get("/api/v1/sessions/nope").status_code == 404
    assert client.get("/api/v1/sessions/nope/quote").status_code == 404

    session_id = _start(client)
    response = client.post(
        f"/api/v1/sessions/{session_id}/choose", json={"step_id": "mode", "value": "digital"}
    )
    assert response.status_code == 409

    assert client.post(f"/api/v1/sessions/{session_id}/advance").status_code == 409

    response = client.post(f"/api/v1/sessions/{session_id}/enter", json={"step_id": "nope"})
    assert response.status_code == 400
    response = client.post(f"/api/v1/sessions/{session_id}/enter", json={"step_id": "summary"})
    assert response.status_code == 409


def test_delete_session(client):
    """Test that a discarded session is gone and a second delete is a 404."""
    session_id = _start(client)

    assert client.delete(f"/api/v1/sessions/{session_id}").status_code == 204
    assert client.get(f"/api/v1/sessions/{session_id}").status_code == 404
    assert client.delete(f"/api/v1/sessions/{session_id}").status_code == 404


def test_session_limit_evicts_oldest():
    """Test that the in-memory store drops the oldest session first."""
    store = MemorySessionStore(build_catalog(DEFAULT_CATALOG), session_limit=2)
    first, _ = store.create()
    second, _ = store.create()
    store.get(first)
    third, _ = store.create()

    assert store.get(second) is None
    assert store.get(first) is not None
    assert store.get(third) is not None
    assert len(store) == 2


if __name__ == "__main__":
    pytest.main([__file__])
