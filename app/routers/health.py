# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy import text

from app.config import settings
from app.dependencies import DbDep
from core.services import BrandService, MobileService

logger = logging.getLogger(__name__)

router = APIRouter()

API_VERSION = "1.0.0"


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


class ChecksResponse(BaseModel):
    """Individual service checks."""
    database: str
    ai: str


class CatalogCounts(BaseModel):
    brands: int = 0
    mobiles: int = 0


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    checks: ChecksResponse
    catalog: CatalogCounts
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
def health_check():
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=API_VERSION,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
def readiness_check(db: DbDep):
    """
    Readiness check endpoint.

    Checks database connectivity and reports catalog size. AI is
    reported but never blocks readiness; every AI feature has a
    fallback or a 503.
    """
    checks = ChecksResponse(database="unknown", ai="disabled")
    catalog = CatalogCounts()

    try:
        db.execute(text("SELECT 1"))
        checks.database = "healthy"
        catalog = CatalogCounts(
            brands=BrandService.count(db),
            mobiles=MobileService.count(db),
        )
    except Exception as e:
        logger.warning(f"Database readiness check failed: {e}")
        checks.database = f"unhealthy: {str(e)[:50]}"

    if settings.ai_enabled:
        checks.ai = "configured"

    return ReadinessResponse(
        status="ready" if checks.database == "healthy" else "degraded",
        checks=checks,
        catalog=catalog,
        timestamp=_now(),
    )
