"""
Dependency injection container.

Factory functions for FastAPI dependencies. Long-lived collaborators
(settings, session factory, model client, identity resolver, device
authenticator) are built once by the application factory and read from
``app.state``; request-scoped ones (database session, stores, services)
are built per request from them.

Dependencies: fastapi, sqlalchemy, footwatch.application, footwatch.boundary
System role: DI container for service injection
"""

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from footwatch.application.services import (
    AnalyticsService,
    IngestionService,
    PredictionService,
    ReportService,
    SampleService,
    SessionService,
)
from footwatch.boundary.db.CRUD import ReportCRUD, SampleCRUD, SessionCRUD
from footwatch.boundary.identity import CallerIdentity
from footwatch.configs import Settings


async def get_async_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection with automatic cleanup.

    Creates a new async database session for each request and ensures it's
    closed after the route completes. Anything a service did not commit is
    rolled back on close.

    Yields:
        AsyncSession: Async SQLAlchemy database session (scoped to request lifetime)
    """
    SessionFactory = request.app.state.session_factory
    async with SessionFactory() as session:
        yield session


def get_current_user(request: Request) -> CallerIdentity:
    """
    Resolve the authenticated caller.

    Raises:
        UnauthenticatedError: If the request carries no user identity
    """
    return request.app.state.identity_resolver.resolve(request.headers)


def get_session_service(db: AsyncSession = Depends(get_async_db)) -> SessionService:
    """
    Get session service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        SessionService: Session manager bound to this request's store
    """
    return SessionService(sessions=SessionCRUD(db))


def get_sample_service(db: AsyncSession = Depends(get_async_db)) -> SampleService:
    """
    Get sample service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        SampleService: Session-scoped sample service
    """
    return SampleService(
        session_service=SessionService(sessions=SessionCRUD(db)),
        samples=SampleCRUD(db),
    )


def get_ingestion_service(
    request: Request,
    db: AsyncSession = Depends(get_async_db),
) -> IngestionService:
    """
    Get device ingestion gateway instance.

    Args:
        request: Incoming request (device authenticator lives on app.state)
        db: Async database session (injected via Depends)

    Returns:
        IngestionService: Device gateway
    """
    return IngestionService(
        authenticator=request.app.state.device_authenticator,
        samples=SampleCRUD(db),
    )


def get_prediction_service(
    request: Request,
    db: AsyncSession = Depends(get_async_db),
) -> PredictionService:
    """
    Get prediction pipeline instance.

    Args:
        request: Incoming request (model client lives on app.state)
        db: Async database session (injected via Depends)

    Returns:
        PredictionService: Prediction pipeline with the shared model client
    """
    settings: Settings = request.app.state.settings
    return PredictionService(
        session_service=SessionService(sessions=SessionCRUD(db)),
        samples=SampleCRUD(db),
        reports=ReportCRUD(db),
        model_client=request.app.state.model_client,
        history_samples=settings.prediction.history_samples,
    )


def get_report_service(db: AsyncSession = Depends(get_async_db)) -> ReportService:
    """
    Get report service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        ReportService: Report listing and submission service
    """
    return ReportService(
        session_service=SessionService(sessions=SessionCRUD(db)),
        reports=ReportCRUD(db),
    )


def get_analytics_service(db: AsyncSession = Depends(get_async_db)) -> AnalyticsService:
    """Get admin analytics service instance."""
    return AnalyticsService(sessions=SessionCRUD(db), reports=ReportCRUD(db))
