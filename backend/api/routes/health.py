"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.config import Settings, get_settings
from ..dependencies import get_container

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=settings.app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check() -> ReadinessResponse:
    """
    Readiness check endpoint.

    Runs a trivial query against the users table. The status stays 200
    either way; ``status`` reports whether the store answered.
    """
    try:
        get_container().user_repository.ping()
    except Exception as e:
        logger.warning(f"Readiness check failed: {e}")
        return ReadinessResponse(status="degraded", database="unavailable")
    return ReadinessResponse(status="ready", database="connected")
