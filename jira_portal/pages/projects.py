"""Projects page: list the signed-in user's Jira projects as a card grid."""

from __future__ import annotations

import logging

import streamlit as st

from jira_portal.app import PROJECTS_PAGE, client_settings, current_session, register_page, sign_out
from jira_portal.core.config import MSG_NO_PROJECTS, MSG_PROJECTS_FAILED_GENERIC
from jira_portal.core.jira_client import JiraAPI, ProjectFetchError
from jira_portal.core.service import ProjectService
from jira_portal.visual.cards import render_project_grid

logger = logging.getLogger(__name__)


def _logout_button(key: str) -> None:
    if st.button("Logout", key=key):
        sign_out()
        st.rerun()


@register_page(PROJECTS_PAGE)
def projects_page():
    session = current_session()
    if session is None:
        st.info("Sign in to view your projects.")
        return

    header, action = st.columns([5, 1])
    with header:
        st.title("Your Jira Projects")
    with action:
        _logout_button("logout-header")

    settings = client_settings()
    try:
        with st.spinner("Loading your Jira projects..."):
            service = ProjectService(JiraAPI(session), timezone=settings.timezone)
            projects = service.fetch_projects()
    except ProjectFetchError as exc:
        logger.error("Project search failed for %s: %s", session.domain, exc)
        st.error(str(exc) or MSG_PROJECTS_FAILED_GENERIC)
        _logout_button("logout-error")
        return

    if not projects:
        st.write(MSG_NO_PROJECTS)
        return

    summary = service.summarize(projects)
    c1, c2, c3 = st.columns(3)
    c1.metric("Projects", summary.total)
    c2.metric("Active", summary.active)
    c3.metric("Archived", summary.archived)

    grid_tab, table_tab = st.tabs(["Grid", "Table"])
    with grid_tab:
        render_project_grid(projects, per_row=settings.cards_per_row, timezone=settings.timezone)
    with table_tab:
        table = service.projects_frame(projects)
        st.dataframe(
            table,
            hide_index=True,
            column_config={
                "avatar_url": st.column_config.ImageColumn("Avatar", width="small"),
                "updated": st.column_config.DatetimeColumn("Updated", format="YYYY-MM-DD HH:mm"),
            },
        )
