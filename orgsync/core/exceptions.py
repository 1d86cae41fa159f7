"""
Exception hierarchy for the orgsync application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class OrgSyncException(Exception):
    """Base exception for all orgsync application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(OrgSyncException):
    """Raised at startup when required settings are missing or invalid."""

    pass


class ValidationError(OrgSyncException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ConflictError(OrgSyncException):
    """Raised when a uniqueness rule would be violated (duplicate email, name)."""

    pass


class AuthenticationError(OrgSyncException):
    """Raised when credentials or a bearer token cannot be verified."""

    pass


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token is malformed or its signature does not verify."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("Unauthorized: Invalid token", details)


class TokenExpiredError(AuthenticationError):
    """Raised when a bearer token is past its expiry."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("Unauthorized: Token expired", details)


class PermissionDeniedError(OrgSyncException):
    """Raised when the authorization policy rejects an action."""

    def __init__(
        self,
        action: str,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize permission error.

        Args:
            action: Capability that was checked (e.g. "organization:update")
            message: Optional message override
            details: Additional context
        """
        details = details or {}
        details["action"] = action
        self.action = action
        super().__init__(message or "Permission denied", details)


class NotFoundError(OrgSyncException):
    """Base class for missing resources."""

    resource = "Resource"

    def __init__(
        self,
        resource_id: Any = None,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if resource_id is not None:
            details["id"] = resource_id
        super().__init__(message or f"{self.resource} not found", details)


class UserNotFoundError(NotFoundError):
    """Raised when a user cannot be found."""

    resource = "User"


class OrganizationNotFoundError(NotFoundError):
    """Raised when an organization cannot be found."""

    resource = "Organization"


class IntegrationConfigNotFoundError(NotFoundError):
    """Raised when a caller has no configuration for an integration type."""

    resource = "Integration configuration"


class ContactNotFoundError(NotFoundError):
    """Raised when a synced Wealthbox contact cannot be found."""

    resource = "Contact"


class ExternalServiceError(OrgSyncException):
    """Raised when a third-party API call fails."""

    def __init__(
        self,
        message: str,
        service: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if service:
            details["service"] = service
        super().__init__(message, details)


class WealthboxAPIError(ExternalServiceError):
    """Raised when fetching contacts from Wealthbox fails for any reason."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("Failed to fetch Wealthbox users", "wealthbox", details)
