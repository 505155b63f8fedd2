from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from jsontables.settings import Settings
from jsontables.store import DocumentStore


@pytest.fixture
def client(db_path) -> TestClient:
    import app as app_module

    settings = Settings(db_path=db_path, indent=None, create_missing=True, debug_log_requests=True)
    return TestClient(app_module.create_app(settings=settings))


def test_app_creates_missing_database(client, db_path):
    r = client.get("/tables")
    assert r.status_code == 200
    assert r.json() == {"tables": ["default"]}
    assert db_path.is_file()


def test_tables_and_records_flow(client, db_path):
    r = client.post("/tables", json={"name": "expenses"})
    assert r.status_code == 201

    r = client.post("/tables/expenses/records", json={"name": "rent", "cost": 100})
    assert r.status_code == 201
    assert r.json() == {"id": "1"}

    r = client.post("/tables/expenses/records", json={"name": "car insurance", "cost": 221})
    assert r.json() == {"id": "2"}

    r = client.post("/tables/expenses/records/1/fields", json={"key": "paid", "value": True})
    assert r.status_code == 201
    assert r.json() == {"name": "rent", "cost": 100, "paid": True}

    r = client.get("/tables/expenses/records/2")
    assert r.json() == {"name": "car insurance", "cost": 221}

    r = client.delete("/tables/expenses/records/2")
    assert r.status_code == 204

    r = client.get("/tables/expenses")
    assert r.json() == {"1": {"name": "rent", "cost": 100, "paid": True}}

    on_disk = json.loads(db_path.read_text(encoding="utf-8"))
    assert on_disk == client.get("/document").json()

    r = client.delete("/tables/expenses")
    assert r.status_code == 204
    assert client.get("/tables").json() == {"tables": ["default"]}


def test_store_errors_map_to_http_status(client):
    r = client.get("/tables/missing")
    assert r.status_code == 404
    assert r.json()["error"] == "TableNotFoundError"

    r = client.post("/tables", json={"name": "default"})
    assert r.status_code == 409
    assert r.json()["error"] == "TableExistsError"

    r = client.get("/tables/default/records/9")
    assert r.status_code == 404
    assert r.json()["error"] == "RecordNotFoundError"

    client.post("/tables/default/records", json={"k": 1})
    r = client.post("/tables/default/records/1/fields", json={"key": "k", "value": 2})
    assert r.status_code == 409
    assert r.json()["error"] == "FieldExistsError"

    r = client.delete("/tables/default/records/5")
    assert r.status_code == 404
    assert r.json()["error"] == "KeyNotFoundError"


def test_empty_database_file_reports_no_document(tmp_path):
    import app as app_module

    p = tmp_path / "empty.json"
    p.write_text("", encoding="utf-8")
    settings = Settings(db_path=p, indent=None, create_missing=False, debug_log_requests=False)
    client = TestClient(app_module.create_app(store=DocumentStore.open(p), settings=settings))

    r = client.get("/tables")
    assert r.status_code == 409
    assert r.json()["error"] == "NoDocumentError"


def test_non_integer_initial_ids_are_rejected_with_422(client):
    r = client.post("/tables", json={"name": "people", "fields": {"a": {}}})
    assert r.status_code == 422
    assert r.json()["error"] == "ParseError"

    assert client.get("/tables/default").json() == {}
