from __future__ import annotations

import argparse
import logging
import os

import uvicorn

from jira_portal.core.config import (
    DEFAULT_RELAY_HOST,
    DEFAULT_RELAY_PORT,
    ENV_RELAY_HOST,
    ENV_RELAY_PORT,
    ENV_RELAY_TIMEOUT,
    RelaySettings,
)
from jira_portal.relay.server import create_app


def build_settings(argv: list[str] | None = None) -> tuple[RelaySettings, str]:
    parser = argparse.ArgumentParser(
        prog="python -m jira_portal.relay",
        description="Serve the Jira credential relay (POST /jira-authenticate).",
    )
    parser.add_argument("--host", default=os.environ.get(ENV_RELAY_HOST) or DEFAULT_RELAY_HOST)
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get(ENV_RELAY_PORT) or DEFAULT_RELAY_PORT),
    )
    env_timeout = os.environ.get(ENV_RELAY_TIMEOUT)
    parser.add_argument(
        "--timeout",
        type=float,
        default=float(env_timeout) if env_timeout else None,
        help="Seconds to wait for Jira (default: no explicit timeout).",
    )
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    return RelaySettings(host=args.host, port=args.port, timeout=args.timeout), args.log_level


def main(argv: list[str] | None = None) -> None:
    settings, log_level = build_settings(argv)
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
