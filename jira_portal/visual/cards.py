"""Project card rendering for the Streamlit grid view."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from html import escape

import pytz
import streamlit as st

from jira_portal.core.config import DEFAULT_TIMEZONE, NOT_AVAILABLE
from jira_portal.core.models import ProjectModel


def format_lead(project: ProjectModel) -> str:
    name = project.lead_name or NOT_AVAILABLE
    email = project.lead_email or NOT_AVAILABLE
    return f"Lead: {name} ({email})"


def format_updated(updated: datetime | None, timezone: str = DEFAULT_TIMEZONE) -> str:
    if updated is None:
        return "Updated: n/a"
    local = updated.astimezone(pytz.timezone(timezone))
    return f"Updated: {local.strftime('%Y-%m-%d %H:%M')}"


def card_html(project: ProjectModel, timezone: str = DEFAULT_TIMEZONE) -> str:
    avatar = ""
    if project.avatar_url:
        avatar = (
            f'<img class="project-avatar" src="{escape(project.avatar_url, quote=True)}" '
            f'alt="{escape(project.name, quote=True)} avatar" width="48" height="48"/>'
        )
    project_type = escape(project.project_type or "")
    return (
        '<div class="project-card">'
        f"{avatar}"
        '<div class="project-info">'
        f'<div class="project-title">{escape(project.name)} '
        f'<span class="project-key">{escape(project.key)}</span></div>'
        f'<div class="project-type">{project_type}</div>'
        f'<div class="project-lead">{escape(format_lead(project))}</div>'
        '<div class="project-status">'
        f"<span>Status: {project.status}</span> "
        f'<span class="project-updated">{escape(format_updated(project.updated, timezone))}</span>'
        "</div></div></div>"
    )


def render_project_grid(projects: Sequence[ProjectModel], per_row: int = 3, timezone: str = DEFAULT_TIMEZONE):
    per_row = max(1, per_row)
    for start in range(0, len(projects), per_row):
        row = projects[start : start + per_row]
        cols = st.columns(per_row)
        for col, project in zip(cols, row):
            with col:
                st.markdown(card_html(project, timezone), unsafe_allow_html=True)
