import pytest
from fastapi.testclient import TestClient

from src.api.main import app
from src.config import Settings, get_settings


@pytest.fixture
def settings():
    return Settings(max_results=100, chunk_size=4)


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
