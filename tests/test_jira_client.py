from types import SimpleNamespace

import pytest
import requests

from jira_portal.core.jira_client import JiraAPI, ProjectFetchError
from jira_portal.core.auth import build_auth_header
from jira_portal.core.models import Session


class DummyAPI(JiraAPI):
    def __init__(self, http):
        self.server = "https://example.atlassian.net"
        self.client = SimpleNamespace(_session=http)


def _session():
    return Session(
        email="me@example.com",
        domain="example.atlassian.net",
        api_token="tok",
        auth_header=build_auth_header("me@example.com", "tok"),
    )


def test_client_sends_session_header():
    api = JiraAPI(_session())
    assert api.server == "https://example.atlassian.net"
    headers = api.client._session.headers
    assert headers["Authorization"] == build_auth_header("me@example.com", "tok")
    assert headers["Accept"] == "application/json"


def test_search_projects_returns_values(fake_http):
    http = fake_http(200, json_body={"values": [{"id": "1", "key": "OBS"}], "isLast": True})
    api = DummyAPI(http)
    assert api.search_projects() == [{"id": "1", "key": "OBS"}]
    call = http.calls[0]
    assert call["url"] == "https://example.atlassian.net/rest/api/3/project/search"
    assert call["params"] == {"expand": "lead,description,insight"}


def test_search_projects_without_values(fake_http):
    assert DummyAPI(fake_http(200, json_body={"total": 0})).search_projects() == []


def test_unauthorized_means_expired_session(fake_http):
    with pytest.raises(ProjectFetchError, match="Session expired or invalid Jira credentials."):
        DummyAPI(fake_http(401, text="")).search_projects()


def test_other_status(fake_http):
    with pytest.raises(ProjectFetchError) as info:
        DummyAPI(fake_http(503, text="")).search_projects()
    assert str(info.value) == "Failed to fetch projects. (Status 503)"
    assert info.value.status == 503


def test_transport_error_surfaced_as_is(fake_http):
    with pytest.raises(ProjectFetchError, match="boom"):
        DummyAPI(fake_http(error=requests.ConnectionError("boom"))).search_projects()


def _adapter_returning(status_code: int, body: str):
    def send(self, request, **kwargs):
        resp = requests.Response()
        resp.status_code = status_code
        resp._content = body.encode()
        resp.headers["Content-Type"] = "application/json"
        resp.url = request.url
        resp.request = request
        return resp

    return send


@pytest.mark.parametrize(
    "status,message",
    [
        (401, "Session expired or invalid Jira credentials."),
        (503, "Failed to fetch projects. (Status 503)"),
    ],
)
def test_status_mapping_through_jira_session(monkeypatch, status, message):
    monkeypatch.setattr(requests.adapters.HTTPAdapter, "send", _adapter_returning(status, '{"errorMessages": []}'))
    with pytest.raises(ProjectFetchError) as info:
        JiraAPI(_session()).search_projects()
    assert str(info.value) == message
    assert info.value.status == status


def test_values_through_jira_session(monkeypatch):
    monkeypatch.setattr(
        requests.adapters.HTTPAdapter, "send", _adapter_returning(200, '{"values": [{"id": "1", "key": "OBS"}]}')
    )
    assert JiraAPI(_session()).search_projects() == [{"id": "1", "key": "OBS"}]


def test_malformed_domain_raises_fetch_error():
    session = Session(
        email="me@example.com",
        domain="foo..atlassian.net",
        api_token="tok",
        auth_header=build_auth_header("me@example.com", "tok"),
    )
    with pytest.raises(ProjectFetchError):
        JiraAPI(session).search_projects()
