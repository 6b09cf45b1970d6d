"""Mapping raw Jira project JSON into ProjectModel instances."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict
from typing import Any

import pandas as pd

from .config import AVATAR_SIZE
from .models import ProjectModel


def _text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_dt(val):
    if not val:
        return None
    ts = pd.to_datetime(val, utc=True, errors="coerce")
    if ts is None or pd.isna(ts):
        return None
    return ts.to_pydatetime()


def _updated_value(raw: dict[str, Any]):
    # Jira exposes the last update either top-level or under the insight expand
    updated = raw.get("updated")
    if updated:
        return updated
    insight = raw.get("insight") or {}
    if isinstance(insight, dict):
        return insight.get("lastIssueUpdateTime")
    return None


def map_project(raw: dict[str, Any]) -> ProjectModel:
    lead = raw.get("lead") or {}
    avatars = raw.get("avatarUrls") or {}
    project_type = _text(raw.get("projectTypeKey"))
    return ProjectModel(
        id=str(raw.get("id") or ""),
        key=str(raw.get("key") or ""),
        name=str(raw.get("name") or ""),
        project_type=project_type.upper() if project_type else None,
        lead_name=_text(lead.get("displayName")) if isinstance(lead, dict) else None,
        lead_email=_text(lead.get("emailAddress")) if isinstance(lead, dict) else None,
        archived=bool(raw.get("archived")),
        updated=parse_dt(_updated_value(raw)),
        avatar_url=_text(avatars.get(AVATAR_SIZE)) if isinstance(avatars, dict) else None,
        description=_text(raw.get("description")),
    )


def projects_to_dataframe(projects: Iterable[ProjectModel]) -> pd.DataFrame:
    records = []
    for project in projects:
        row = asdict(project)
        row["status"] = project.status
        records.append(row)
    return pd.DataFrame.from_records(records)
