# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel

from app.dependencies import DatabaseDep
from lib.mongo_client import DocumentStore, DocumentStoreError

router = APIRouter()

VERSION = "1.0.0"


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    database: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=request.app.state.settings.ENVIRONMENT,
        version=VERSION,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(database: DatabaseDep):
    """
    Readiness check endpoint.

    Pings MongoDB; reports "degraded" instead of failing when it is down.
    """
    try:
        await DocumentStore.ping(database)
        db_status = "healthy"
    except DocumentStoreError as e:
        db_status = f"unhealthy: {e.message[:50]}"

    return ReadinessResponse(
        status="ready" if db_status == "healthy" else "degraded",
        database=db_status,
        timestamp=_now(),
    )
