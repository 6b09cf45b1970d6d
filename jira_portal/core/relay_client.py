"""Client side of the credential relay: submit the sign-in form, build a Session."""

from __future__ import annotations

import logging
from typing import Any

import requests

from .auth import build_auth_header, has_all_fields, normalize_domain
from .config import (
    MSG_FILL_ALL_FIELDS,
    MSG_RELAY_STATUS_ERROR,
    MSG_RELAY_UNREACHABLE,
    RELAY_AUTH_PATH,
)
from .models import Credentials, Session

logger = logging.getLogger(__name__)


class AuthenticationError(RuntimeError):
    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        self.status = status

    @property
    def kind(self) -> str:
        """Coarse category for the sign-in form: input, credentials, or other."""
        if self.status == 400:
            return "input"
        if self.status == 401:
            return "credentials"
        return "other"


def authenticate(
    email: str,
    domain: str,
    api_token: str,
    *,
    relay_url: str,
    http: requests.Session | None = None,
) -> Session:
    if not has_all_fields(email, domain, api_token):
        raise AuthenticationError(MSG_FILL_ALL_FIELDS, status=400)

    credentials = Credentials(email=email, domain=domain, api_token=api_token)
    url = relay_url.rstrip("/") + RELAY_AUTH_PATH
    client = http or requests
    try:
        resp = client.post(
            url,
            json=credentials.to_payload(),
            headers={"Content-Type": "application/json"},
        )
    except requests.RequestException as exc:
        logger.warning("Relay unreachable at %s: %s", url, exc.__class__.__name__)
        raise AuthenticationError(MSG_RELAY_UNREACHABLE) from exc

    try:
        body: Any = resp.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    if not 200 <= resp.status_code < 300:
        message = body.get("error") or MSG_RELAY_STATUS_ERROR.format(status=resp.status_code)
        raise AuthenticationError(str(message), status=resp.status_code)

    myself = body.get("myself")
    return Session(
        email=email,
        domain=normalize_domain(domain),
        api_token=api_token,
        auth_header=build_auth_header(email, api_token),
        myself=myself if isinstance(myself, dict) else {},
    )
