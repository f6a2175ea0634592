import pytest
from fastapi.testclient import TestClient

from main import app, get_history_store
from services.history_store import QueryHistoryStore


@pytest.fixture
def store(tmp_path):
    return QueryHistoryStore(tmp_path / "history.json", history_limit=10, favorites_limit=5)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_history_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
