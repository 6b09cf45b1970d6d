"""Light/dark theme toggle kept in session state."""

from __future__ import annotations

import streamlit as st

from jira_portal.core.config import THEMES

THEME_KEY = "theme"

_PALETTES = {
    "light": {"bg": "#ffffff", "card": "#f6f8fa", "text": "#172b4d", "muted": "#5e6c84", "accent": "#0052cc"},
    "dark": {"bg": "#1d2125", "card": "#22272b", "text": "#c7d1db", "muted": "#8c9bab", "accent": "#579dff"},
}


def next_theme(current: str) -> str:
    return "dark" if current == "light" else "light"


def toggle_label(current: str) -> str:
    return "🌙 Dark" if current == "light" else "☀️ Light"


def theme_css(theme: str) -> str:
    p = _PALETTES.get(theme, _PALETTES["light"])
    return f"""
<style>
.stApp {{ background-color: {p['bg']}; color: {p['text']}; }}
.project-card {{ display: flex; gap: 12px; padding: 12px; margin-bottom: 12px;
  border-radius: 8px; background: {p['card']}; color: {p['text']}; }}
.project-title {{ font-weight: 600; }}
.project-key {{ margin-left: 6px; color: {p['accent']}; font-size: 0.85em; }}
.project-type, .project-lead, .project-status {{ color: {p['muted']}; font-size: 0.85em; }}
.project-updated {{ margin-left: 8px; }}
</style>
"""


def flip_theme(state=None) -> str:
    """Toggle button on_click callback; flips the stored theme ahead of the rerun."""
    state = st.session_state if state is None else state
    state[THEME_KEY] = next_theme(state.get(THEME_KEY, THEMES[0]))
    return state[THEME_KEY]


def apply_theme(default: str = THEMES[0]) -> str:
    if THEME_KEY not in st.session_state:
        st.session_state[THEME_KEY] = default
    current = st.session_state[THEME_KEY]
    st.sidebar.button(toggle_label(current), help=f"Switch to {next_theme(current)} mode", on_click=flip_theme)
    st.markdown(theme_css(current), unsafe_allow_html=True)
    return current
