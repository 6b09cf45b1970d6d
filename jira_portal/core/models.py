"""Domain data models: credentials, relay outcomes, sessions, and projects."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal

FailureKind = Literal["invalid_request", "remote_unauthorized", "remote_rejected", "network_failure"]


@dataclass(slots=True)
class Credentials:
    email: str
    domain: str
    api_token: str = field(repr=False)

    def to_payload(self) -> dict[str, str]:
        """Wire shape of the relay request body."""
        return {"email": self.email, "domain": self.domain, "apiToken": self.api_token}


@dataclass(slots=True)
class RelaySuccess:
    myself: dict[str, Any] = field(default_factory=dict)

    ok = True

    def to_payload(self) -> dict[str, Any]:
        return {"ok": True, "myself": self.myself}


@dataclass(slots=True)
class RelayFailure:
    status: int
    message: str
    kind: FailureKind = "remote_rejected"

    ok = False

    def to_payload(self) -> dict[str, str]:
        return {"error": self.message}


RelayResult = RelaySuccess | RelayFailure


@dataclass(slots=True)
class Session:
    """In-memory record of a verified Jira identity.

    Lives in ``st.session_state`` only; cleared on logout and lost on reload.
    """

    email: str
    domain: str
    api_token: str = field(repr=False)
    auth_header: str = field(repr=False)
    myself: dict[str, Any] = field(default_factory=dict)

    @property
    def display_name(self) -> str:
        name = self.myself.get("displayName") if isinstance(self.myself, dict) else None
        return name or self.email

    @property
    def server(self) -> str:
        return f"https://{self.domain}"


@dataclass(slots=True)
class ProjectModel:
    id: str
    key: str
    name: str
    project_type: str | None
    lead_name: str | None
    lead_email: str | None
    archived: bool
    updated: datetime | None
    avatar_url: str | None
    description: str | None = None

    @property
    def status(self) -> str:
        return "Archived" if self.archived else "Active"
