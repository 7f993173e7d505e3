"""FastAPI application for the docsite API."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from docsite.config import SignupSettings, load_signup_settings
from docsite.exceptions import FetchError
from docsite.utils.logging_config import get_logger
from server.routers import newsletter
from server.server_config import UPSTREAM_UNAVAILABLE_MESSAGE

logger = get_logger(__name__)


def create_app(settings: SignupSettings | None = None) -> FastAPI:
    """Build the application.

    Settings are resolved once here; without explicit settings they are read
    from the environment and a missing secret stops startup.

    Raises:
        ConfigurationError: If required settings are missing from the environment.
    """
    app = FastAPI(title="docsite", docs_url=None, redoc_url=None)
    app.state.signup_settings = settings or load_signup_settings()
    app.include_router(newsletter.router)
    app.add_exception_handler(FetchError, _fetch_error_handler)
    return app


async def _fetch_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Upstream request failed", extra={"path": request.url.path, "error": str(exc)})
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"message": UPSTREAM_UNAVAILABLE_MESSAGE})
