"""Credential verification against Jira's ``/myself`` endpoint.

Every outcome is returned as a :class:`RelaySuccess` or :class:`RelayFailure`
value; nothing raised by the outbound call escapes this module. No request
field is written to the log.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import requests
import urllib3

from .auth import build_auth_header, has_all_fields, normalize_domain, redact
from .config import (
    JIRA_MYSELF_PATH,
    MSG_AUTH_FAILED_GENERIC,
    MSG_AUTH_FAILED_STATUS,
    MSG_INVALID_CREDENTIALS,
    MSG_MISSING_CREDENTIALS,
    MSG_NETWORK_ERROR,
    RelaySettings,
)
from .models import RelayFailure, RelayResult, RelaySuccess

logger = logging.getLogger(__name__)


def myself_url(domain: str) -> str:
    return f"https://{normalize_domain(domain)}{JIRA_MYSELF_PATH}"


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        return None


def extract_error_message(text: str) -> str:
    """First entry of Jira's ``errorMessages`` list, else the generic phrase."""
    body = _parse_json(text)
    if not isinstance(body, dict):
        return MSG_AUTH_FAILED_GENERIC
    messages = body.get("errorMessages")
    if not isinstance(messages, list) or not messages:
        return MSG_AUTH_FAILED_GENERIC
    first = messages[0]
    if isinstance(first, str) and first.strip():
        return first
    return MSG_AUTH_FAILED_GENERIC


def verify_credentials(
    email: Any,
    domain: Any,
    api_token: Any,
    *,
    settings: RelaySettings | None = None,
    session: requests.Session | None = None,
) -> RelayResult:
    if not has_all_fields(email, domain, api_token):
        return RelayFailure(400, MSG_MISSING_CREDENTIALS, kind="invalid_request")

    settings = settings or RelaySettings()
    http = session or requests.Session()
    url = myself_url(domain)
    headers = {
        "Authorization": build_auth_header(email, api_token),
        "Accept": "application/json",
    }
    host = normalize_domain(domain)
    try:
        resp = http.get(url, headers=headers, timeout=settings.timeout)
        text = resp.text
    except (requests.RequestException, urllib3.exceptions.HTTPError, ValueError) as exc:
        # urllib3 parse errors on malformed hosts are not wrapped by requests
        error = redact(str(exc) or exc.__class__.__name__, api_token)
        logger.warning("Jira verification for %s failed before a response: %s", host, exc.__class__.__name__)
        return RelayFailure(500, MSG_NETWORK_ERROR.format(error=error), kind="network_failure")
    finally:
        if session is None:
            http.close()

    status = resp.status_code
    if 200 <= status < 300:
        body = _parse_json(text)
        logger.info("Jira verification for %s succeeded", host)
        return RelaySuccess(myself=body if isinstance(body, dict) else {})

    logger.info("Jira verification for %s rejected with status %s", host, status)
    if status == 401:
        return RelayFailure(401, MSG_INVALID_CREDENTIALS, kind="remote_unauthorized")
    message = redact(extract_error_message(text), api_token)
    return RelayFailure(
        status,
        MSG_AUTH_FAILED_STATUS.format(status=status, message=message),
        kind="remote_rejected",
    )
