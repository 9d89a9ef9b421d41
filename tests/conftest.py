# /tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.db.store import Store
from app.main import create_app
from app.services.database_service import DatabaseService


@pytest.fixture
def store(tmp_path):
    """A fresh, connected SQLite store in a temporary directory for each test."""
    test_store = Store(f"sqlite:///{tmp_path / 'collab.db'}").connect()
    test_store.create_all()
    yield test_store
    test_store.close()


@pytest.fixture
def db_service(store):
    with store.session_scope() as session:
        yield DatabaseService(session)


@pytest.fixture
def make_client(tmp_path):
    """
    Builds a TestClient around a freshly created app. Keyword arguments
    override individual Settings fields.
    """
    clients = []

    def _make(**overrides):
        settings = Settings(database_url=f"sqlite:///{tmp_path / 'api.db'}", **overrides)
        client = TestClient(create_app(settings))
        client.__enter__()  # runs the lifespan, which connects the store
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    return make_client()
