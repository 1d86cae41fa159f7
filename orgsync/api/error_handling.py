"""
API error handling utilities.

Provides a decorator for consistent error handling across API endpoints
and the formatting used for request validation failures.
"""

import functools
import logging
from typing import Any, Callable, Sequence, TypeVar

from fastapi import HTTPException, status

from orgsync.core.exceptions import (
    AuthenticationError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    OrgSyncException,
    PermissionDeniedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

INTERNAL_ERROR_MESSAGE = "Internal server error"

_STATUS_BY_EXCEPTION: tuple[tuple[type[OrgSyncException], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ExternalServiceError, status.HTTP_502_BAD_GATEWAY),
)


def status_for_exception(exc: OrgSyncException) -> int:
    """Map a domain exception to its HTTP status (500 when unmapped)."""
    for exc_type, status_code in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def to_http_exception(exc: OrgSyncException) -> HTTPException:
    """Build the HTTPException for a domain exception and log it."""
    status_code = status_for_exception(exc)
    if status_code >= 500:
        logger.error(
            "Service operation failed",
            extra={"error_type": type(exc).__name__, "details": exc.details},
        )
    else:
        logger.warning(
            "Request rejected",
            extra={
                "status_code": status_code,
                "error_type": type(exc).__name__,
                "error": exc.message,
            },
        )

    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    detail = exc.message if status_code < 500 or isinstance(exc, ExternalServiceError) else INTERNAL_ERROR_MESSAGE
    return HTTPException(status_code=status_code, detail=detail, headers=headers)


def handle_service_errors(func: F) -> F:
    """
    Decorator to handle domain errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with context
    - Mapping domain exceptions to HTTP status codes
    - Hiding internal failure details behind a generic 500
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except OrgSyncException as e:
            raise to_http_exception(e) from e

        except Exception as e:
            logger.exception(
                "Unexpected failure in API operation",
                extra={"endpoint": func.__name__, "error_type": type(e).__name__},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=INTERNAL_ERROR_MESSAGE,
            ) from e

    return wrapper  # type: ignore


def format_validation_errors(errors: Sequence[dict[str, Any]]) -> str:
    """
    Reduce pydantic error records to one readable message.

    Custom validator messages are returned as written; other errors are
    prefixed with the offending field.
    """
    if not errors:
        return "Invalid request"

    error = errors[0]
    ctx_error = (error.get("ctx") or {}).get("error")
    if error.get("type") == "value_error" and ctx_error is not None:
        return str(ctx_error)

    field = ".".join(
        str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")
    )
    message = error.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message
