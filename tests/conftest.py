import os
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["AUTO_CREATE_TABLES"] = "true"
os.environ["ENVIRONMENT"] = "test"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["ADMIN_EMAILS"] = '["admin@example.com"]'
os.environ["LOGIN_ROLES"] = '["admin"]'

import app.models  # noqa: E402,F401
from app.db.base import Base  # noqa: E402
from app.db.session import SessionLocal, engine  # noqa: E402
from app.main import create_app  # noqa: E402

ADMIN_EMAIL = "admin@example.com"
SHOPPER_EMAIL = "shopper@example.com"
PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    path = Path("test.db")
    if path.exists():
        path.unlink()


@pytest.fixture()
def client():
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def register_and_login(client, email: str, name: str = "Test User", password: str = PASSWORD) -> dict:
    register = client.post("/user", json={"name": name, "email": email, "password": password})
    assert register.status_code == 201, register.text
    login = client.post("/user/login", json={"email": email, "password": password})
    assert login.status_code == 200, login.text
    token = login.json()["user"]["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def admin_headers(client):
    return register_and_login(client, ADMIN_EMAIL, name="Admin")


@pytest.fixture()
def shopper_headers(client):
    return register_and_login(client, SHOPPER_EMAIL, name="Shopper")


@pytest.fixture()
def category(client, admin_headers):
    resp = client.post(
        "/categories",
        headers=admin_headers,
        json={"name": "Books", "description": "All books"},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()
