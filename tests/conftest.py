import pytest
from fastapi.testclient import TestClient

from spending_store.main import app
from spending_store.store import create_store, get_store


@pytest.fixture
def store():
    return create_store()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
