"""Convenience launcher for the Streamlit app.

Usage:
  python -m jira_portal.relay        # credential relay on http://127.0.0.1:8000
  streamlit run run_dashboard.py

Automatically imports every module in ``jira_portal/pages`` so each page
decorated with ``@register_page`` registers itself without manual edits here.
The relay location (``[relay] RELAY_URL``) and display timezone
(``[client] TIMEZONE``) come from ``.streamlit/secrets.toml``
and fall back to the local defaults.
"""

import logging
from importlib import import_module
from pathlib import Path

import streamlit as st

from jira_portal.app import SETTINGS_KEY, main, settings_from_secrets
from jira_portal.core.config import ClientSettings

st.set_page_config(page_title="Jira Projects", layout="wide")

logger = logging.getLogger(__name__)


def _load_client_settings():
    """Read relay and timezone overrides from Streamlit secrets once per browser session."""
    if SETTINGS_KEY in st.session_state:
        return
    try:
        settings = settings_from_secrets(st.secrets)
    except FileNotFoundError:
        settings = ClientSettings()
    st.session_state[SETTINGS_KEY] = settings


_load_client_settings()

PAGES_DIR = Path(__file__).parent / "jira_portal" / "pages"
for py in sorted(PAGES_DIR.glob("[!_]*.py")):
    mod_name = f"jira_portal.pages.{py.stem}"
    try:
        import_module(mod_name)
    except ImportError as e:  # pragma: no cover
        logger.error("Failed importing page %s: %s", mod_name, e)

if __name__ == "__main__":
    main()
