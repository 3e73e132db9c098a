"""Shared fixtures for the test suite."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient

from marketdesk.api.config import ServerConfig
from marketdesk.api.main import create_app
from marketdesk.settings_store import SettingsStore


@pytest.fixture
def tmp_store(tmp_path):
    """SettingsStore backed by a settings.json in tmp_path."""
    return SettingsStore(tmp_path / "settings.json")


@pytest.fixture
def mock_response():
    """Factory for mock httpx responses."""
    def _make(status_code=200, json_data=None, text=""):
        resp = MagicMock()
        resp.status_code = status_code
        resp.json.return_value = json_data if json_data is not None else {}
        resp.text = text
        return resp
    return _make


@pytest.fixture
def mock_session():
    """RequestSession stand-in whose get() is an AsyncMock."""
    session = MagicMock()
    session.get = AsyncMock(return_value=None)
    session.close = AsyncMock()
    return session


@pytest.fixture
def make_client(tmp_store, mock_session, tmp_path):
    """Factory: TestClient for an app with the given environment."""
    def _make(env=None, **kwargs):
        server_config = ServerConfig(env=env or {})
        server_config.STATIC_DIR = tmp_path / "static"
        server_config.STATIC_DIR.mkdir(exist_ok=True)
        app = create_app(
            server_config=server_config,
            store=kwargs.get("store", tmp_store),
            session=kwargs.get("session", mock_session),
            scorer=kwargs.get("scorer"),
        )
        return TestClient(app)
    return _make


@pytest.fixture
def client(make_client):
    """TestClient with no provider credentials configured."""
    return make_client()
