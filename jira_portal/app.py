"""Application entry point: page registry and router."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import pytz
import streamlit as st

from jira_portal.core.config import DEFAULT_RELAY_URL, DEFAULT_TIMEZONE, SETTINGS, ClientSettings
from jira_portal.core.models import Session
from jira_portal.visual.theme import apply_theme

logger = logging.getLogger(__name__)

PAGES = {}

SESSION_KEY = "jira_session"
SETTINGS_KEY = "client_settings"
SIGN_IN_PAGE = "Sign In"
PROJECTS_PAGE = "Projects"


def register_page(label):
    def decorator(func):
        PAGES[label] = func
        return func

    return decorator


def current_session() -> Session | None:
    session = st.session_state.get(SESSION_KEY)
    return session if isinstance(session, Session) else None


def client_settings() -> ClientSettings:
    settings = st.session_state.get(SETTINGS_KEY)
    return settings if isinstance(settings, ClientSettings) else SETTINGS


def settings_from_secrets(secrets: Mapping) -> ClientSettings:
    """Build ClientSettings from `[relay] RELAY_URL` and `[client] TIMEZONE` secrets."""
    relay = secrets.get("relay", {}) or {}
    client = secrets.get("client", {}) or {}
    relay_url = relay.get("RELAY_URL") or secrets.get("RELAY_URL") or DEFAULT_RELAY_URL
    timezone = client.get("TIMEZONE") or secrets.get("TIMEZONE") or DEFAULT_TIMEZONE
    if timezone not in pytz.all_timezones_set:
        logger.warning("Unknown timezone %r; using %s", timezone, DEFAULT_TIMEZONE)
        timezone = DEFAULT_TIMEZONE
    return ClientSettings(relay_url=relay_url, timezone=timezone)


def sign_in(session: Session) -> None:
    st.session_state[SESSION_KEY] = session


def sign_out() -> None:
    st.session_state.pop(SESSION_KEY, None)


def select_page(signed_in: bool) -> str:
    return PROJECTS_PAGE if signed_in else SIGN_IN_PAGE


def main():
    st.sidebar.title("Jira Projects")
    apply_theme(client_settings().theme)
    if not PAGES:
        st.write("No pages registered yet.")
        return
    session = current_session()
    page = select_page(session is not None)
    if session is not None:
        st.sidebar.caption(f"Signed in as {session.display_name} ({session.domain})")
    handler = PAGES.get(page)
    if handler is None:
        st.error(f"Page '{page}' is not registered.")
        return
    handler()


if __name__ == "__main__":
    main()
