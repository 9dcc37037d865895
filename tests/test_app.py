import logging

from fastapi.testclient import TestClient
from sqlalchemy import inspect

from app.core.logging import PrivacyFilter
from app.db.init_db import init_db, main
from app.db.session import engine
from app.main import create_app


def test_health_and_root(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/").json() == {"message": "Hello World"}


def test_unknown_route_uses_message_body(client):
    resp = client.get("/nowhere")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Not Found"}


def test_unexpected_failure_returns_generic_message(monkeypatch):
    def _explode(db):
        raise RuntimeError("connection string with password=hunter2")

    monkeypatch.setattr("app.services.categories.find_all", _explode)
    with TestClient(create_app(), raise_server_exceptions=False) as test_client:
        resp = test_client.get("/categories")
    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal server error"}
    assert "hunter2" not in resp.text


def test_init_db_creates_tables():
    init_db(drop=True)
    assert {"users", "categories", "products"} <= set(inspect(engine).get_table_names())
    assert main(["--drop"]) == 0


def test_privacy_filter_redacts_credentials():
    record = logging.LogRecord("app", logging.INFO, __file__, 1, "login", None, None)
    record.password = "secret123"
    record.token = "abc"
    assert PrivacyFilter().filter(record)
    assert record.password == "[REDACTED]"
    assert record.token == "[REDACTED]"
