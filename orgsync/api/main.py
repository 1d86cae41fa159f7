"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, orgsync.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from orgsync.api.error_handling import (
    format_validation_errors,
    status_for_exception,
    to_http_exception,
)
from orgsync.boundary.db import Database
from orgsync.boundary.wealthbox import WealthboxClient
from orgsync.configs import Settings, get_settings
from orgsync.core.exceptions import OrgSyncException
from orgsync.observability.logger import configure_logging
from orgsync.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import (
    auth_router,
    health_router,
    integrations_router,
    organizations_router,
    users_router,
)

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Connects the database and builds the Wealthbox client on startup;
    releases both on shutdown.
    """
    database: Database = app.state.database
    await database.connect()
    if app.state.wealthbox_client is None:
        app.state.wealthbox_client = WealthboxClient.from_settings(app.state.settings.wealthbox)
    logger.info("Application started", extra={"environment": app.state.settings.environment})

    try:
        yield
    finally:
        await app.state.wealthbox_client.aclose()
        await database.dispose()
        logger.info("Application stopped")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed requests with 400 and the first error message."""
    message = format_validation_errors(exc.errors())
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "error": message},
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": message})


async def domain_exception_handler(request: Request, exc: OrgSyncException) -> JSONResponse:
    """Translate domain errors raised outside decorated endpoints."""
    http_exc = to_http_exception(exc)
    return JSONResponse(
        status_code=status_for_exception(exc),
        content={"detail": http_exc.detail},
        headers=http_exc.headers,
    )


def create_app(
    settings: Settings | None = None,
    database: Database | None = None,
    wealthbox_client: WealthboxClient | None = None,
) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Application settings (loaded from the environment if None)
        database: Database resource (built from settings if None); connected
            and disposed by the lifespan
        wealthbox_client: Wealthbox client (built from settings at startup if None)

    Returns:
        FastAPI: Configured application instance with all routers registered

    Raises:
        ConfigurationError: If required settings such as AUTH_JWT_SECRET are missing
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="OrgSync API",
        description="Account, organization and Wealthbox contact management",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.database = database or Database.from_settings(settings.database)
    app.state.wealthbox_client = wealthbox_client

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(OrgSyncException, domain_exception_handler)

    # Register all routers under /api
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(auth_router, prefix=API_PREFIX)
    app.include_router(organizations_router, prefix=API_PREFIX)
    app.include_router(users_router, prefix=API_PREFIX)
    app.include_router(integrations_router, prefix=API_PREFIX)

    return app


def run() -> None:
    """Start the API server with uvicorn using ServerSettings."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.server.host,
        port=settings.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
