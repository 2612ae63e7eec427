"""Health check API routes.

Provides REST API endpoints for health monitoring and readiness checks.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from fastapi import APIRouter
from pydantic import BaseModel, Field

from citation_service import __version__


# =============================================================================
# Router Configuration
# =============================================================================

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


# =============================================================================
# Enums and Constants
# =============================================================================

class HealthStatus(str, Enum):
    """Health status enum."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


SERVICE_NAME = "citation-service"
SERVICE_VERSION = __version__


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Response model for health check.

    Attributes:
        status: Overall service status
        service: Service name
        version: Service version
        timestamp: Check timestamp (ISO format)
        uptime_seconds: Service uptime in seconds
    """

    status: HealthStatus = Field(
        default=HealthStatus.HEALTHY,
        description="Overall service status",
    )
    service: str = Field(
        default=SERVICE_NAME,
        description="Service name",
    )
    version: str = Field(
        default=SERVICE_VERSION,
        description="Service version",
    )
    timestamp: str = Field(
        default_factory=lambda: datetime.now(UTC).isoformat(),
        description="Check timestamp",
    )
    uptime_seconds: float | None = Field(
        default=None,
        description="Service uptime in seconds",
    )


class ReadinessResponse(BaseModel):
    """Response model for readiness check."""

    ready: bool = Field(
        default=True,
        description="Whether service is ready",
    )
    checks: dict[str, bool] = Field(
        default_factory=dict,
        description="Individual check results",
    )


class LivenessResponse(BaseModel):
    """Response model for liveness check."""

    alive: bool = Field(
        default=True,
        description="Whether service is alive",
    )
    timestamp: str = Field(
        default_factory=lambda: datetime.now(UTC).isoformat(),
        description="Check timestamp",
    )


# =============================================================================
# Service Start Time
# =============================================================================

_service_start_time: datetime | None = None


def set_service_start_time(start_time: datetime | None = None) -> None:
    """Set the service start time for uptime calculation.

    Args:
        start_time: Service start time, defaults to now
    """
    global _service_start_time
    _service_start_time = start_time or datetime.now(UTC)


def get_uptime_seconds() -> float | None:
    """Get service uptime in seconds.

    Returns:
        Uptime in seconds, or None if start time not set
    """
    if _service_start_time is None:
        return None

    delta = datetime.now(UTC) - _service_start_time
    return delta.total_seconds()



# =============================================================================
# API Endpoints
# =============================================================================

@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns the health status of the service.",
)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status=HealthStatus.HEALTHY,
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
        timestamp=datetime.now(UTC).isoformat(),
        uptime_seconds=get_uptime_seconds(),
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness check",
    description="Returns whether the service is ready to accept traffic.",
)
async def readiness_check() -> ReadinessResponse:
    """Kubernetes-style readiness probe."""
    checks = {
        "started": _service_start_time is not None,
    }

    return ReadinessResponse(
        ready=all(checks.values()),
        checks=checks,
    )


@router.get(
    "/live",
    response_model=LivenessResponse,
    summary="Liveness check",
    description="Returns whether the service is alive.",
)
async def liveness_check() -> LivenessResponse:
    """Kubernetes-style liveness probe."""
    return LivenessResponse(
        alive=True,
        timestamp=datetime.now(UTC).isoformat(),
    )


__all__ = [
    "HealthResponse",
    "HealthStatus",
    "LivenessResponse",
    "ReadinessResponse",
    "get_uptime_seconds",
    "router",
    "set_service_start_time",
]
