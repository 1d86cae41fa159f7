"""
Dependency injection container.

Factory functions for FastAPI dependencies. Process-wide resources (settings,
database, Wealthbox client) live on ``app.state``; services are built per
request around the request's session.

Dependencies: orgsync.configs, orgsync.application, orgsync.boundary
System role: DI container for service injection
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from orgsync.application.services import (
    AuthService,
    IntegrationService,
    OrganizationService,
    UserService,
)
from orgsync.boundary.db import get_async_db
from orgsync.boundary.wealthbox import WealthboxClient
from orgsync.configs import Settings


def get_settings_dependency(request: Request) -> Settings:
    """Get the settings the application was built with."""
    return request.app.state.settings


def get_wealthbox_client(request: Request) -> WealthboxClient:
    """Get the shared Wealthbox client."""
    return request.app.state.wealthbox_client


def get_auth_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> AuthService:
    """
    Get auth service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        AuthService: Service for registration, login and token resolution
    """
    return AuthService(db=db, settings=settings.auth)


def get_user_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> UserService:
    """Get user administration service instance."""
    return UserService(db=db, settings=settings.auth)


def get_organization_service(
    db: AsyncSession = Depends(get_async_db),
) -> OrganizationService:
    """Get organization service instance."""
    return OrganizationService(db=db)


def get_integration_service(
    db: AsyncSession = Depends(get_async_db),
    wealthbox_client: WealthboxClient = Depends(get_wealthbox_client),
) -> IntegrationService:
    """
    Get integration service instance.

    Args:
        db: Async database session (injected via Depends)
        wealthbox_client: Shared Wealthbox client (injected via Depends)

    Returns:
        IntegrationService: Service for integration configs and contact sync
    """
    return IntegrationService(db=db, wealthbox_client=wealthbox_client)
