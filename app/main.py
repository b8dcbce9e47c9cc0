from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.errors import NotFoundEndpoint
from app.logging_config import configure_logging
from app.routers.users import router as users_router
from app.settings import Settings, get_settings
from app.user_registry import UserRegistry

logger = logging.getLogger("user_registry")

APP_VERSION = "1.0.0"

INVALID_BODY_MESSAGE = "Request body must be a JSON object"

_ENDPOINTS = (
    ("POST", "/api/users", "Create user"),
    ("GET", "/api/users/{id}", "Get user"),
    ("GET", "/api/users", "List all users"),
)

_ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

_WILDCARD_HOSTS = {"", "0.0.0.0", "::"}


def _browsable_url(s: Settings) -> str:
    host = "localhost" if s.host in _WILDCARD_HOSTS else s.host
    return f"http://{host}:{s.port}"


@asynccontextmanager
async def _lifespan(app: FastAPI):
    s: Settings = app.state.settings
    logger.info("Server running on %s", _browsable_url(s))
    logger.info("Available endpoints:")
    for method, path, desc in _ENDPOINTS:
        logger.info("  %s %s - %s", method, path, desc)
    yield


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected request body: %s", exc.errors())
    return JSONResponse({"error": INVALID_BODY_MESSAGE}, status_code=400)


def create_app(*, registry: Optional[UserRegistry] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build an application with its own registry.

    Tests call this per test to get isolated state; `app` below is the
    process-wide instance served by uvicorn.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    # Only the user routes are served; docs are off so unknown paths stay 404.
    app = FastAPI(
        title="User Registry API",
        version=APP_VERSION,
        lifespan=_lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.registry = registry if registry is not None else UserRegistry()

    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    app.include_router(users_router)

    # Registered last: anything the routers above did not fully match, including
    # unsupported methods on known paths.
    @app.api_route("/{full_path:path}", methods=_ALL_METHODS, include_in_schema=False)
    def not_found(full_path: str):
        raise HTTPException(status_code=NotFoundEndpoint.status_code, detail=NotFoundEndpoint.message)

    return app


app = create_app()
