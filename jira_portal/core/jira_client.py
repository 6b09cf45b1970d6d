"""Jira API client wrapper used by the dashboard once a Session exists."""

from __future__ import annotations

from typing import Any

import requests
import urllib3
from jira import JIRA, JIRAError

from .config import (
    JIRA_PROJECT_SEARCH_PATH,
    JIRA_REST_API_VERSION,
    MSG_PROJECTS_FAILED,
    MSG_PROJECTS_FAILED_GENERIC,
    MSG_SESSION_EXPIRED,
    PROJECT_SEARCH_EXPAND,
)
from .models import Session


class ProjectFetchError(RuntimeError):
    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


def _status_message(status: int) -> str:
    if status == 401:
        return MSG_SESSION_EXPIRED
    return MSG_PROJECTS_FAILED.format(status=status)


class JiraAPI:
    def __init__(self, session: Session):
        self.server = session.server
        # No retries and no server-info probe; the Session's header is sent as-is.
        self.client = JIRA(
            server=self.server,
            options={"server": self.server, "rest_api_version": JIRA_REST_API_VERSION},
            get_server_info=False,
            max_retries=0,
        )
        self.client._session.headers.update(
            {"Authorization": session.auth_header, "Accept": "application/json"}
        )

    def search_projects(self, expand: list[str] | None = None) -> list[dict[str, Any]]:
        """Single page of ``/project/search``; large project sets are not paged."""
        session = getattr(self.client, "_session", None)
        if session is None:
            raise RuntimeError("JIRA session unavailable")
        url = f"{self.server}{JIRA_PROJECT_SEARCH_PATH}"
        params = {"expand": ",".join(expand or PROJECT_SEARCH_EXPAND)}
        try:
            resp = session.get(url, params=params)
        except JIRAError as exc:
            raise ProjectFetchError(_status_message(exc.status_code or 0), exc.status_code) from exc
        except (requests.RequestException, urllib3.exceptions.HTTPError, ValueError) as exc:
            raise ProjectFetchError(str(exc) or MSG_PROJECTS_FAILED_GENERIC) from exc
        if resp.status_code >= 400:
            raise ProjectFetchError(_status_message(resp.status_code), resp.status_code)
        try:
            data = resp.json()
        except ValueError as exc:
            raise ProjectFetchError(MSG_PROJECTS_FAILED_GENERIC) from exc
        values = data.get("values") if isinstance(data, dict) else None
        return values if isinstance(values, list) else []
