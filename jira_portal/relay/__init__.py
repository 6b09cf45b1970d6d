"""HTTP relay that verifies Jira credentials on behalf of the dashboard."""

from jira_portal.relay.server import create_app

__all__ = ["create_app"]
