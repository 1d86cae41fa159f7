"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: orgsync.boundary.db
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from orgsync.boundary.db import Database, get_database

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse)
async def health_check_db(database: Database = Depends(get_database)) -> HealthResponse:
    """Database health check."""
    try:
        await database.ping()
    except Exception as e:
        logger.error("Database health check failed", extra={"error_type": type(e).__name__})
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database unavailable",
        ) from e
    return HealthResponse(status="healthy", message="Database connection OK")
