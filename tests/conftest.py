import os

# The module-level app in todo_api.main is built at import time and needs
# a signing key; keep it off the filesystem as well.
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from todo_api.config import Settings
from todo_api.main import create_app
from todo_api.store.sql import SqlRecordStore
from todo_api.utils.tokens import TokenService

TEST_SECRET = "test-secret-key"


@pytest.fixture
def settings():
    return Settings(secret_key=TEST_SECRET, database_url="sqlite://", log_level="WARNING")


@pytest.fixture
def app(settings):
    # fresh in-memory database per test
    return create_app(settings)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db):
    return SqlRecordStore(db)


@pytest.fixture
def tokens(settings):
    return TokenService(settings)


@pytest.fixture
def login_as(client):
    """Register (if needed) and log in through the API, returning the token."""

    def _login(username, password):
        client.post("/auth/register", json={"username": username, "password": password})
        r = client.post("/auth/login", json={"username": username, "password": password})
        assert r.status_code == 200, r.text
        return r.json()["data"]

    return _login
