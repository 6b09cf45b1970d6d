from __future__ import annotations

import json

import pytest
import requests
from fastapi.testclient import TestClient

from jira_portal.core import relay
from jira_portal.core.config import MSG_INVALID_CREDENTIALS, MSG_MISSING_CREDENTIALS, RelaySettings
from jira_portal.relay.server import create_app

TOKEN = "tok-abcdef"
PAYLOAD = {"email": "me@example.com", "domain": "https://foo.atlassian.net/", "apiToken": TOKEN}


@pytest.fixture
def stub_remote(monkeypatch, fake_http):
    """Route the relay's outbound session to a canned response."""

    def _install(status_code=200, text="", error=None):
        http = fake_http(status_code, text, error=error)
        monkeypatch.setattr(relay.requests, "Session", lambda: http)
        return http

    return _install


def test_healthz_ok():
    with TestClient(create_app()) as client:
        response = client.get("/healthz")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


def test_authenticate_success(stub_remote):
    http = stub_remote(200, json.dumps({"accountId": "123"}))
    with TestClient(create_app()) as client:
        r = client.post("/jira-authenticate", json=PAYLOAD)
    assert r.status_code == 200
    assert r.json() == {"ok": True, "myself": {"accountId": "123"}}
    assert http.calls[0]["url"] == "https://foo.atlassian.net/rest/api/3/myself"


@pytest.mark.parametrize(
    "body",
    [
        {"email": "me@example.com", "domain": "foo.atlassian.net"},
        {"email": "", "domain": "foo.atlassian.net", "apiToken": TOKEN},
        {"email": "me@example.com", "domain": "  ", "apiToken": TOKEN},
        {"email": 1, "domain": "foo.atlassian.net", "apiToken": TOKEN},
        {},
    ],
)
def test_authenticate_missing_credentials(stub_remote, body):
    http = stub_remote(200, "{}")
    with TestClient(create_app()) as client:
        r = client.post("/jira-authenticate", json=body)
    assert r.status_code == 400
    assert r.json() == {"error": MSG_MISSING_CREDENTIALS}
    assert http.calls == []


def test_authenticate_malformed_json(stub_remote):
    http = stub_remote(200, "{}")
    with TestClient(create_app()) as client:
        r = client.post(
            "/jira-authenticate",
            content=f'{{"apiToken": "{TOKEN}", ',
            headers={"Content-Type": "application/json"},
        )
    assert r.status_code == 400
    assert r.json() == {"error": MSG_MISSING_CREDENTIALS}
    assert TOKEN not in r.text
    assert http.calls == []


def test_authenticate_unauthorized(stub_remote):
    stub_remote(401, json.dumps({"errorMessages": ["Client must be authenticated"]}))
    with TestClient(create_app()) as client:
        r = client.post("/jira-authenticate", json=PAYLOAD)
    assert r.status_code == 401
    assert r.json() == {"error": MSG_INVALID_CREDENTIALS}


def test_authenticate_forbidden(stub_remote):
    stub_remote(403, json.dumps({"errorMessages": ["You do not have permission"]}))
    with TestClient(create_app()) as client:
        r = client.post("/jira-authenticate", json=PAYLOAD)
    assert r.status_code == 403
    assert r.json() == {"error": "Authentication failed (Status 403): You do not have permission"}


def test_authenticate_network_error(stub_remote):
    stub_remote(error=requests.ConnectionError("Connection refused"))
    with TestClient(create_app()) as client:
        r = client.post("/jira-authenticate", json=PAYLOAD)
    assert r.status_code == 500
    assert "Network error while connecting" in r.json()["error"]
    assert TOKEN not in r.text


def test_settings_timeout_reaches_outbound_call(stub_remote):
    http = stub_remote(200, "{}")
    with TestClient(create_app(RelaySettings(timeout=2.5))) as client:
        client.post("/jira-authenticate", json=PAYLOAD)
    assert http.calls[0]["timeout"] == 2.5


def test_request_log_omits_secrets(stub_remote, caplog):
    stub_remote(200, "{}")
    with caplog.at_level("DEBUG"):
        with TestClient(create_app()) as client:
            client.post("/jira-authenticate", json=PAYLOAD)
    assert "POST /jira-authenticate - 200" in caplog.text
    assert TOKEN not in caplog.text
    assert "me@example.com" not in caplog.text


def test_authenticate_malformed_domain_is_network_error():
    body = dict(PAYLOAD, domain="foo..atlassian.net")
    with TestClient(create_app()) as client:
        r = client.post("/jira-authenticate", json=body)
    assert r.status_code == 500
    assert r.json()["error"].startswith("Network error while connecting to Jira: ")
