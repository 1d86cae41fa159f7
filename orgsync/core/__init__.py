"""
Core business logic module.

Contains the exception hierarchy, credential primitives and the
authorization policy.
"""

from orgsync.core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    OrgSyncException,
    PermissionDeniedError,
    ValidationError,
    WealthboxAPIError,
)

__all__ = [
    "OrgSyncException",
    "ConfigurationError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "ExternalServiceError",
    "WealthboxAPIError",
]
