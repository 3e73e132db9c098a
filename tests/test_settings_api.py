"""Tests for /api/settings and /api/health."""

import inspect

import pytest
from unittest.mock import MagicMock

from marketdesk.api import main


class TestSettingsEndpoints:
    def test_get_empty(self, client):
        assert client.get("/api/settings").json() == {"ok": True, "data": {}}

    def test_round_trip(self, client):
        post = client.post("/api/settings", json={"finnhubKey": "abc"})
        assert post.status_code == 200
        assert post.json() == {"ok": True, "data": {"finnhubKey": "abc"}}
        assert client.get("/api/settings").json()["data"]["finnhubKey"] == "abc"

    def test_unknown_fields_dropped(self, client):
        client.post("/api/settings", json={"finnhubKey": "abc", "admin": True, "port": 1})
        assert client.get("/api/settings").json()["data"] == {"finnhubKey": "abc"}

    def test_merge_is_additive(self, client):
        client.post("/api/settings", json={"aliases": {"X": ["Y"]}})
        client.post("/api/settings", json={"finnhubKey": "k"})
        data = client.get("/api/settings").json()["data"]
        assert data == {"aliases": {"X": ["Y"]}, "finnhubKey": "k"}

    def test_empty_body_keeps_document(self, client):
        client.post("/api/settings", json={"newsApiKey": "n"})
        assert client.post("/api/settings", json={}).json() == {"ok": True, "data": {"newsApiKey": "n"}}

    def test_values_stored_as_sent(self, client):
        resp = client.post("/api/settings", json={"finnhubKey": 123, "aliases": {"X": "Y"}, "rogue": 1})
        assert resp.status_code == 200
        assert resp.json() == {"ok": True, "data": {"finnhubKey": 123, "aliases": {"X": "Y"}}}

    def test_non_string_credential_ignored(self, make_client, tmp_store, mock_session):
        make_client().post("/api/settings", json={"finnhubKey": 123})
        make_client().get("/api/quote", params={"symbol": "XAUUSD"})
        mock_session.get.assert_not_called()

    @pytest.mark.parametrize("body", [[1, 2], "text", 5, None])
    def test_non_object_body_is_empty_update(self, client, body):
        client.post("/api/settings", json={"newsApiKey": "n"})
        resp = client.post("/api/settings", json=body)
        assert resp.status_code == 200
        assert resp.json() == {"ok": True, "data": {"newsApiKey": "n"}}

    def test_missing_body_is_empty_update(self, client):
        resp = client.post("/api/settings")
        assert resp.status_code == 200
        assert resp.json() == {"ok": True, "data": {}}

    def test_invalid_json_renders_error(self, client):
        resp = client.post("/api/settings", content=b"{not json", headers={"Content-Type": "application/json"})
        assert resp.status_code == 400
        assert "error" in resp.json()

    def test_persisted_to_store_file(self, client, tmp_store):
        client.post("/api/settings", json={"fxFactoryRss": "http://feed"})
        assert tmp_store.read() == {"fxFactoryRss": "http://feed"}

    def test_write_failure_500(self, make_client):
        store = MagicMock()
        store.write.return_value = False
        resp = make_client(store=store).post("/api/settings", json={"finnhubKey": "abc"})
        assert resp.status_code == 500
        assert resp.json() == {"ok": False, "error": "failed to write settings"}


class TestHealth:
    def test_reports_configured_providers(self, make_client, tmp_store):
        tmp_store.write({"newsApiKey": "secret-news-key"})
        body = make_client(env={"FINNHUB_KEY": "secret-finnhub-key"}).get("/api/health").json()
        assert body["status"] == "healthy"
        assert body["providers"] == {
            "finnhub": True,
            "newsapi": True,
            "fxfactory": False,
            "tradingeconomics": False,
        }

    def test_never_leaks_keys(self, make_client, tmp_store):
        tmp_store.write({"newsApiKey": "secret-news-key"})
        text = make_client(env={"FINNHUB_KEY": "secret-finnhub-key"}).get("/api/health").text
        assert "secret" not in text


def test_static_assets_served(make_client, tmp_path):
    client = make_client()
    (tmp_path / "static" / "index.html").write_text("<h1>desk</h1>")
    resp = client.get("/")
    assert resp.status_code == 200
    assert "desk" in resp.text


def test_api_routes_win_over_static(make_client):
    assert make_client().get("/api/settings").json()["ok"] is True


class TestSettingsIO:
    def test_settings_handlers_run_in_threadpool(self):
        assert not inspect.iscoroutinefunction(main.get_settings)
        assert not inspect.iscoroutinefunction(main.update_settings)

    @pytest.mark.parametrize("path, params", [
        ("/api/quote", {"symbol": "XAUUSD"}),
        ("/api/news", {"symbol": "XAUUSD"}),
        ("/api/econ", {}),
        ("/api/health", {}),
    ])
    def test_async_endpoints_read_store_off_loop(self, make_client, monkeypatch, path, params):
        offloaded = []

        async def record(func, *args, **kwargs):
            offloaded.append(func.__name__)
            return func(*args, **kwargs)

        monkeypatch.setattr(main, "run_in_threadpool", record)
        assert make_client().get(path, params=params).status_code == 200
        assert offloaded == ["read"]
