"""Endpoint tests for the customer router on a temporary data directory."""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import Customers.store as store_module  # noqa: E402
from Database.db import FrontDeskDB, FrontDeskSettings  # noqa: E402
from Database.deps import get_db  # noqa: E402
from Database.line_format import PersistenceError  # noqa: E402
from api.customer_routes import customer_router  # noqa: E402


@pytest.fixture()
def client_and_db(tmp_path: Path) -> tuple[TestClient, FrontDeskDB]:
    """Create a TestClient backed by a FrontDeskDB in tmp_path."""

    db = FrontDeskDB(FrontDeskSettings(data_dir=tmp_path, total_rooms=15))
    app = FastAPI()
    app.dependency_overrides[get_db] = lambda: db  # type: ignore[assignment]
    app.include_router(customer_router, prefix="/customers")
    return TestClient(app), db


def _build_customer_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "name": "Ada",
        "contact": "+1-555-000",
        "email": "ada@example.com",
    }
    payload.update(overrides)
    return payload


def test_health_check(client_and_db: tuple[TestClient, FrontDeskDB]) -> None:
    client, _ = client_and_db

    response = client.get("/customers/health")

    assert response.status_code == 200
    assert response.json()["message"] == "Customer service is healthy"


def test_add_customer_returns_customer_payload(client_and_db: tuple[TestClient, FrontDeskDB]) -> None:
    client, db = client_and_db

    response = client.post("/customers", json=_build_customer_payload())

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == 201
    assert body["customer"] == {
        "id": 1,
        "name": "Ada",
        "contact": "+1-555-000",
        "email": "ada@example.com",
    }
    assert db.settings.customers_path.read_text(encoding="utf-8") == "1,Ada,+1-555-000,ada@example.com\n"


def test_add_customer_rejects_blank_contact(client_and_db: tuple[TestClient, FrontDeskDB]) -> None:
    client, db = client_and_db

    response = client.post("/customers", json=_build_customer_payload(contact="  "))

    assert response.status_code == 400
    assert "required" in response.json()["detail"]
    assert db.customers.list() == []


def test_list_customers_in_insertion_order(client_and_db: tuple[TestClient, FrontDeskDB]) -> None:
    client, _ = client_and_db
    client.post("/customers", json=_build_customer_payload(name="Zoe"))
    client.post("/customers", json=_build_customer_payload(name="Bob", email=None))

    response = client.get("/customers")

    assert response.status_code == 200
    customers = response.json()["customers"]
    assert [(c["id"], c["name"]) for c in customers] == [(1, "Zoe"), (2, "Bob")]
    assert customers[1]["email"] == ""


def test_get_customer_by_id(client_and_db: tuple[TestClient, FrontDeskDB]) -> None:
    client, _ = client_and_db
    client.post("/customers", json=_build_customer_payload(name="Bob"))

    fetched = client.get("/customers/1")
    missing = client.get("/customers/2")

    assert fetched.status_code == 200
    assert fetched.json()["customer"]["name"] == "Bob"
    assert missing.status_code == 404
    assert "No customer found" in missing.json()["detail"]


def test_delete_customer_returns_confirmation_message(client_and_db: tuple[TestClient, FrontDeskDB]) -> None:
    client, db = client_and_db
    client.post("/customers", json=_build_customer_payload())

    deletion = client.delete("/customers/1")
    again = client.delete("/customers/1")

    assert deletion.status_code == 200
    assert "Customer 1 deleted" in deletion.json()["message"]
    assert again.status_code == 404
    assert db.customers.list() == []


def test_add_customer_reports_storage_failure(
    client_and_db: tuple[TestClient, FrontDeskDB], monkeypatch: pytest.MonkeyPatch
) -> None:
    """Simulate a disk failure while rewriting the customer file."""
    client, db = client_and_db

    def broken_write(*_args: Any, **_kwargs: Any) -> None:
        raise PersistenceError("disk full")

    monkeypatch.setattr(store_module, "write_lines", broken_write)

    response = client.post("/customers", json=_build_customer_payload())

    assert response.status_code == 500
    assert "internal error" in response.json()["detail"]
    assert db.customers.list() == []


def test_add_customer_rejects_line_break(client_and_db: tuple[TestClient, FrontDeskDB]) -> None:
    client, db = client_and_db

    response = client.post("/customers", json=_build_customer_payload(name="Ada\n9"))

    assert response.status_code == 400
    assert "single-line" in response.json()["detail"]
    assert db.customers.list() == []
