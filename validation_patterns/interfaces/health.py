"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Returns application status and version.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from validation_patterns.core.config import settings

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
    environment: str


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, version and environment.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="ok", version=settings.version, environment=settings.environment
    )
