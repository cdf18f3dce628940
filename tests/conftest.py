"""
tests/conftest.py -- Shared fixtures.

Every test gets its own in-memory Motor-compatible database
(mongomock-motor) and a throwaway upload directory, wired into a fresh app
through create_app() so no real MongoDB is needed.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.core.config import settings
from app.main import create_app
from app.utils.storage import LocalImageStorage


@pytest.fixture
def db():
    return AsyncMongoMockClient()["test_ecomm"]


@pytest.fixture
def storage(tmp_path) -> LocalImageStorage:
    return LocalImageStorage(str(tmp_path / "uploads"))


@pytest.fixture
def client(db, storage) -> Generator[TestClient, None, None]:
    """TestClient over a fresh app; startup has already bootstrapped the admin."""
    app = create_app(db=db, storage=storage, upload_dir=storage.directory)
    with TestClient(app) as c:
        yield c


def register(client: TestClient, name: str, email: str, password: str = "secret") -> tuple[str, str]:
    """Register a user over HTTP and return (user_id, token)."""
    resp = client.post("/register", json={"name": name, "email": email, "password": password})
    assert resp.status_code == 200, resp.text
    body = resp.json()
    return body["user"]["_id"], body["auth"]


@pytest.fixture
def alice(client: TestClient) -> tuple[str, dict]:
    uid, token = register(client, "Alice", "alice@example.com")
    return uid, {"Authorization": f"Bearer {token}"}


@pytest.fixture
def bob(client: TestClient) -> tuple[str, dict]:
    uid, token = register(client, "Bob", "bob@example.com")
    return uid, {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(client: TestClient) -> dict:
    resp = client.post("/login", json={"email": settings.ADMIN_EMAIL, "password": settings.ADMIN_PASSWORD})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['auth']}"}
