from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from jira_portal.core.config import MSG_INTERNAL_ERROR, MSG_MISSING_CREDENTIALS, RELAY_AUTH_PATH, RelaySettings
from jira_portal.core.relay import verify_credentials

logger = logging.getLogger(__name__)


class AuthenticateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str | None = None
    domain: str | None = None
    api_token: str | None = Field(default=None, alias="apiToken", repr=False)


def create_app(settings: RelaySettings | None = None) -> FastAPI:
    app = FastAPI(title="Jira Portal Relay", version="0.1.0")
    app.state.relay_settings = settings or RelaySettings()

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        # Method, path and status only; request bodies carry secrets.
        logger.info("%s %s - %s", request.method, request.url.path, response.status_code)
        return response

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed or mistyped bodies are treated like missing fields; the
        # validation details would echo the submitted values back.
        return JSONResponse(status_code=400, content={"error": MSG_MISSING_CREDENTIALS})

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled relay error: %s", exc.__class__.__name__)
        return JSONResponse(status_code=500, content={"error": MSG_INTERNAL_ERROR})

    @app.post(RELAY_AUTH_PATH)
    def jira_authenticate(payload: AuthenticateRequest, request: Request) -> JSONResponse:
        result = verify_credentials(
            payload.email,
            payload.domain,
            payload.api_token,
            settings=request.app.state.relay_settings,
        )
        status_code = 200 if result.ok else result.status
        return JSONResponse(status_code=status_code, content=result.to_payload())

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    return app
