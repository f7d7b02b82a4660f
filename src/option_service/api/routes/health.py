"""Health check endpoints for Kubernetes probes."""
import asyncio
import logging
import time
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from fastapi import APIRouter, Response, status
from pydantic import BaseModel, Field

from option_service.domain.models import utcnow
from option_service.infrastructure.database.connection import db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


# ===== Schemas =====


class HealthStatus(str, Enum):
    """Health status enumeration."""
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


class ComponentHealth(BaseModel):
    """Health status of a single component."""
    name: str = Field(..., description="Component name")
    status: HealthStatus = Field(..., description="Component health status")
    latency_ms: Optional[float] = Field(None, description="Response latency in milliseconds")
    details: Optional[Dict] = Field(None, description="Additional component details")
    error: Optional[str] = Field(None, description="Error message if unhealthy")


class LivenessResponse(BaseModel):
    """Liveness probe response."""
    status: str = Field("alive", description="Liveness status")
    timestamp: datetime = Field(default_factory=utcnow)


class ReadinessResponse(BaseModel):
    """Readiness probe response."""
    status: str = Field(..., description="Readiness status")
    timestamp: datetime = Field(default_factory=utcnow)
    components: List[ComponentHealth] = Field(default_factory=list)


# ===== Health Check Helpers =====


async def check_database_health(timeout: float = 5.0) -> ComponentHealth:
    """
    Check database connectivity.

    Args:
        timeout: Maximum time to wait for check in seconds

    Returns:
        ComponentHealth with database status
    """
    start_time = time.perf_counter()

    if not db.is_connected:
        return ComponentHealth(
            name="database",
            status=HealthStatus.UNHEALTHY,
            error="Database not connected"
        )

    try:
        async with asyncio.timeout(timeout):
            healthy = await db.health_check()
    except TimeoutError:
        logger.error(f"Database health check timed out after {timeout}s")
        return ComponentHealth(
            name="database",
            status=HealthStatus.UNHEALTHY,
            error=f"Health check timed out after {timeout}s"
        )

    if not healthy:
        return ComponentHealth(
            name="database",
            status=HealthStatus.UNHEALTHY,
            error="Database query failed"
        )

    return ComponentHealth(
        name="database",
        status=HealthStatus.HEALTHY,
        latency_ms=round((time.perf_counter() - start_time) * 1000, 2),
        details=db.get_pool_stats(),
    )


# ===== Endpoints =====


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_probe():
    """
    Kubernetes liveness probe.

    Always returns 200 if the process is alive.
    """
    return LivenessResponse(status="alive")


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_probe(response: Response):
    """
    Kubernetes readiness probe.

    Returns 503 until the database answers.
    """
    database = await check_database_health()

    if database.status != HealthStatus.HEALTHY:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return ReadinessResponse(status="not_ready", components=[database])

    return ReadinessResponse(status="ready", components=[database])
