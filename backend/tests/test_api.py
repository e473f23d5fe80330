"""HTTP surface: health, OAuth, describe and execute endpoints."""

from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from clio_adapter.config import settings
from clio_adapter.main import app
from clio_adapter.routers import node as node_router
from clio_adapter.services.clio_client import ClioClient
from clio_adapter.services.credentials import ClioCredentials

from conftest import ok


@pytest.fixture
def api():
    return TestClient(app)


@pytest.fixture
def stub_clio(monkeypatch):
    """Route the execute endpoint's Clio calls to ``handler``."""

    def install(handler):
        creds = ClioCredentials(access_token="token")
        monkeypatch.setattr(
            node_router,
            "get_client",
            lambda: ClioClient(creds, transport=httpx.MockTransport(handler)),
        )

    return install


def test_health(api):
    resp = api.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


class TestAuth:
    def test_auth_requires_client_id(self, api, monkeypatch):
        monkeypatch.setattr(settings, "clio_client_id", "")
        assert api.get("/api/clio/auth").status_code == 500

    def test_auth_url_follows_region(self, api, monkeypatch):
        monkeypatch.setattr(settings, "clio_client_id", "abc")
        monkeypatch.setattr(settings, "clio_region", "eu")

        resp = api.get("/api/clio/auth")

        assert resp.status_code == 200
        body = resp.json()
        assert body["region"] == "eu"
        assert body["auth_url"].startswith("https://eu.app.clio.com/oauth/authorize?")

    def test_callback_error(self, api):
        resp = api.get("/api/clio/callback", params={"error": "access_denied"})
        assert resp.status_code == 400

    def test_callback_requires_code(self, api):
        assert api.get("/api/clio/callback").status_code == 400

    def test_status(self, api, monkeypatch):
        monkeypatch.setattr(settings, "clio_access_token", "abcdefgh12345678")
        monkeypatch.setattr(settings, "clio_refresh_token", "")

        body = api.get("/api/clio/status").json()

        assert body["has_access_token"] is True
        assert body["has_refresh_token"] is False
        assert body["access_token_preview"] == "abcdefgh…5678"


def test_describe(api):
    body = api.get("/api/clio/describe").json()

    assert body["node"]["name"] == "clio"
    assert len(body["node"]["resources"]) == 16
    assert body["trigger"]["name"] == "clioTrigger"
    assert body["credential"]["name"] == "clioOAuth2Api"


class TestExecute:
    def test_returns_items_under_json_key(self, api, stub_clio):
        stub_clio(lambda request: ok([{"id": 1, "name": "Family Law"}]))

        resp = api.post(
            "/api/clio/execute",
            json={"resource": "practiceAreas", "operation": "listPracticeAreas", "items": [{"parameters": {"limit": 5}}]},
        )

        assert resp.status_code == 200
        assert resp.json() == {"items": [{"json": {"id": 1, "name": "Family Law"}, "paired_item": 0}]}

    def test_unknown_resource_is_400(self, api, stub_clio):
        stub_clio(lambda request: ok())

        resp = api.post("/api/clio/execute", json={"resource": "invoices", "operation": "list"})

        assert resp.status_code == 400
        assert "Unknown resource" in resp.json()["detail"]

    def test_missing_parameter_is_400(self, api, stub_clio):
        stub_clio(lambda request: ok())

        resp = api.post("/api/clio/execute", json={"resource": "matters", "operation": "getMatter", "items": [{}]})

        assert resp.status_code == 400

    def test_clio_error_is_502(self, api, stub_clio):
        stub_clio(lambda request: httpx.Response(500, text="boom"))

        resp = api.post(
            "/api/clio/execute",
            json={"resource": "matters", "operation": "getMatter", "items": [{"parameters": {"matterId": 1}}]},
        )

        assert resp.status_code == 502

    def test_continue_on_fail(self, api, stub_clio):
        stub_clio(lambda request: httpx.Response(500, text="boom"))

        resp = api.post(
            "/api/clio/execute",
            json={
                "resource": "matters",
                "operation": "getMatter",
                "items": [{"parameters": {"matterId": 1}}],
                "continue_on_fail": True,
            },
        )

        assert resp.status_code == 200
        [output] = resp.json()["items"]
        assert "boom" in output["json"]["error"]
        assert output["paired_item"] == 0


def test_run_serves_app_with_uvicorn(monkeypatch):
    import uvicorn

    from clio_adapter import main

    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))
    monkeypatch.setattr(settings, "port", 8123)

    main.run()

    [(target, kwargs)] = calls
    assert target is app
    assert kwargs["port"] == 8123
    assert kwargs["host"] == settings.host
