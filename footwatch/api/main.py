"""
FastAPI application with assembled routers.

Builds the app, wires long-lived collaborators onto ``app.state`` and
launches uvicorn.

Dependencies: fastapi, httpx, uvicorn, footwatch.api.routers, footwatch.boundary
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from footwatch import __version__
from footwatch.api.errors import register_exception_handlers
from footwatch.boundary.db.connection import (
    build_async_engine,
    build_session_factory,
    create_all_tables,
)
from footwatch.boundary.device_auth import DeviceAuthenticator
from footwatch.boundary.identity import HeaderIdentityResolver, IdentityResolver
from footwatch.boundary.ml.model_client import PredictionModelClient
from footwatch.configs import Settings, get_settings
from footwatch.observability.logger import configure_logging
from footwatch.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import admin, health, predict, reports, sensor, sessions

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Opens the database engine and the model HTTP client on startup and
    releases both on shutdown.
    """
    settings: Settings = app.state.settings

    # Startup
    engine = build_async_engine(settings.database)
    if settings.database.create_tables_on_startup:
        await create_all_tables(engine)
    http_client = httpx.AsyncClient(transport=app.state.model_transport)

    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.model_client = PredictionModelClient(settings.prediction, http_client)
    logger.info(
        "Application started",
        extra={
            "environment": settings.environment,
            "model_enabled": app.state.model_client.enabled,
            "device_ingest_enabled": app.state.device_authenticator.configured,
        },
    )

    yield

    # Shutdown
    await http_client.aclose()
    await engine.dispose()
    logger.info("Application stopped")


def create_app(
    settings: Settings | None = None,
    identity_resolver: IdentityResolver | None = None,
    model_transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Settings to run with (environment settings when None)
        identity_resolver: Caller identity source (request headers when None)
        model_transport: httpx transport for the model client (network when None)

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Footwatch API",
        description="Foot-pressure monitoring sessions, device ingestion and risk reports",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.identity_resolver = identity_resolver or HeaderIdentityResolver(settings.identity)
    app.state.device_authenticator = DeviceAuthenticator(settings.device.ingest_secret)
    app.state.model_transport = model_transport

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware (last added runs first)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    register_exception_handlers(app)

    # Register all routers with the versioned prefix
    for router_module in (health, sessions, sensor, predict, reports, admin):
        app.include_router(router_module.router, prefix=settings.api_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    configure_logging(get_settings().log_level)
    uvicorn.run(
        "footwatch.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
