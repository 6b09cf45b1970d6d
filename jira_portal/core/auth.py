"""Credential helpers shared by the relay and the Streamlit client."""

from __future__ import annotations

import base64
import re

_SCHEME_RE = re.compile(r"^https?://", flags=re.IGNORECASE)


def normalize_domain(domain: str) -> str:
    """Strip a leading ``http(s)://`` and a single trailing ``/``.

    >>> normalize_domain("https://foo.atlassian.net/")
    'foo.atlassian.net'
    """
    text = _SCHEME_RE.sub("", domain.strip())
    if text.endswith("/"):
        text = text[:-1]
    return text


def build_auth_header(email: str, api_token: str) -> str:
    raw = f"{email}:{api_token}".encode()
    return "Basic " + base64.b64encode(raw).decode("ascii")


def has_all_fields(*values) -> bool:
    """True when every value is a string with non-whitespace content."""
    return all(isinstance(v, str) and v.strip() for v in values)


def redact(text: str, secret: str | None) -> str:
    if not secret:
        return text
    return text.replace(secret, "***")
