"""ProjectService: fetches the signed-in user's projects and shapes them for the grid."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

import pandas as pd
import pytz

from .column_config import get_columns
from .config import DEFAULT_TIMEZONE
from .jira_client import JiraAPI
from .mappers import map_project, projects_to_dataframe
from .models import ProjectModel

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ProjectSummary:
    total: int = 0
    active: int = 0
    archived: int = 0
    by_type: dict[str, int] = field(default_factory=dict)


class ProjectService:
    def __init__(self, api: JiraAPI, timezone: str = DEFAULT_TIMEZONE):
        self.api = api
        self._tz = pytz.timezone(timezone)

    def fetch_projects(self) -> list[ProjectModel]:
        raw = self.api.search_projects()
        projects = [map_project(item) for item in raw if isinstance(item, dict)]
        logger.debug("Fetched %s projects from %s", len(projects), self.api.server)
        return projects

    def projects_frame(
        self,
        projects: Sequence[ProjectModel] | None = None,
        columns: Sequence[str] | None = None,
    ) -> pd.DataFrame:
        if projects is None:
            projects = self.fetch_projects()
        cols = list(columns or get_columns("table"))
        df = projects_to_dataframe(projects)
        if df.empty:
            return pd.DataFrame(columns=cols)
        if "updated" in df.columns:
            updated = pd.to_datetime(df["updated"], utc=True, errors="coerce")
            df["updated"] = updated.dt.tz_convert(self._tz)
        present = [c for c in cols if c in df.columns]
        out = df[present]
        if "name" in present:
            out = out.sort_values("name", key=lambda s: s.str.casefold(), kind="stable")
        return out.reset_index(drop=True)

    @staticmethod
    def summarize(projects: Sequence[ProjectModel]) -> ProjectSummary:
        archived = sum(1 for p in projects if p.archived)
        types = Counter(p.project_type or "UNKNOWN" for p in projects)
        return ProjectSummary(
            total=len(projects),
            active=len(projects) - archived,
            archived=archived,
            by_type=dict(sorted(types.items())),
        )
