"""Central configuration: remote API paths, user-facing messages, and settings."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

# =============================================================================
# Jira REST API
# =============================================================================
JIRA_REST_API_VERSION = "3"
JIRA_MYSELF_PATH = "/rest/api/3/myself"
JIRA_PROJECT_SEARCH_PATH = "/rest/api/3/project/search"
PROJECT_SEARCH_EXPAND: Sequence[str] = ("lead", "description", "insight")
JIRA_API_TOKEN_URL = "https://id.atlassian.com/manage/api-tokens"
# Card and table timestamps; override with `[client] TIMEZONE` in secrets
DEFAULT_TIMEZONE = "UTC"

# =============================================================================
# Relay
# =============================================================================
RELAY_AUTH_PATH = "/jira-authenticate"
DEFAULT_RELAY_HOST = "127.0.0.1"
DEFAULT_RELAY_PORT = 8000
DEFAULT_RELAY_URL = f"http://{DEFAULT_RELAY_HOST}:{DEFAULT_RELAY_PORT}"

# Environment overrides read by ``python -m jira_portal.relay``
ENV_RELAY_HOST = "JIRA_PORTAL_HOST"
ENV_RELAY_PORT = "JIRA_PORTAL_PORT"
ENV_RELAY_TIMEOUT = "JIRA_PORTAL_TIMEOUT"

# =============================================================================
# Messages
# =============================================================================
# Relay responses (returned to the client as {"error": ...})
MSG_MISSING_CREDENTIALS = "Missing credentials."
MSG_INVALID_CREDENTIALS = "Invalid credentials. Please check your email, domain, and API token."
MSG_AUTH_FAILED_GENERIC = "Authentication failed."
MSG_AUTH_FAILED_STATUS = "Authentication failed (Status {status}): {message}"
MSG_NETWORK_ERROR = "Network error while connecting to Jira: {error}"
MSG_INTERNAL_ERROR = "Internal server error"

# Client-side messages (sign-in form and project grid)
MSG_FILL_ALL_FIELDS = "Please fill in all fields."
MSG_RELAY_STATUS_ERROR = "Network or authentication error (status {status})."
MSG_RELAY_UNREACHABLE = "Failed to connect to server. Please check your network or try again."
MSG_SESSION_EXPIRED = "Session expired or invalid Jira credentials."
MSG_PROJECTS_FAILED = "Failed to fetch projects. (Status {status})"
MSG_PROJECTS_FAILED_GENERIC = "Failed to load projects."
MSG_NO_PROJECTS = "No projects found for this account."

# =============================================================================
# Project grid
# =============================================================================
AVATAR_SIZE = "48x48"
NOT_AVAILABLE = "N/A"

PROJECT_TABLE_COLUMNS: Sequence[str] = (
    "avatar_url",
    "key",
    "name",
    "project_type",
    "lead_name",
    "lead_email",
    "status",
    "updated",
    "description",
)

# Number of cards rendered per row in the grid view
GRID_CARDS_PER_ROW = 3

THEMES: Sequence[str] = ("light", "dark")


@dataclass(slots=True)
class RelaySettings:
    host: str = DEFAULT_RELAY_HOST
    port: int = DEFAULT_RELAY_PORT
    # None keeps the HTTP library's default (no explicit timeout)
    timeout: float | None = None


@dataclass(slots=True)
class ClientSettings:
    relay_url: str = DEFAULT_RELAY_URL
    cards_per_row: int = GRID_CARDS_PER_ROW
    theme: str = THEMES[0]
    timezone: str = DEFAULT_TIMEZONE


SETTINGS = ClientSettings()
