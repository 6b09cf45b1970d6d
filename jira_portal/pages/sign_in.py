"""Sign-in page: collect Jira credentials and verify them through the relay."""

from __future__ import annotations

import streamlit as st

from jira_portal.app import SIGN_IN_PAGE, client_settings, register_page, sign_in
from jira_portal.core.config import JIRA_API_TOKEN_URL
from jira_portal.core.relay_client import AuthenticationError, authenticate


@register_page(SIGN_IN_PAGE)
def sign_in_page():
    st.title("Sign in to Jira Dashboard")

    with st.form("jira-sign-in", clear_on_submit=False):
        email = st.text_input("Jira Email", placeholder="your@email.com")
        domain = st.text_input("Jira Domain", placeholder="your-domain.atlassian.net")
        token = st.text_input("API Token", type="password", placeholder="Jira API Token")
        st.caption(f"[Get your Jira API token]({JIRA_API_TOKEN_URL})")
        submitted = st.form_submit_button("Sign in", type="primary")

    if not submitted:
        return

    try:
        with st.spinner("Signing in..."):
            session = authenticate(email, domain, token, relay_url=client_settings().relay_url)
    except AuthenticationError as exc:
        if exc.kind == "input":
            st.warning(exc.message)
        else:
            st.error(exc.message)
        return

    sign_in(session)
    st.rerun()
