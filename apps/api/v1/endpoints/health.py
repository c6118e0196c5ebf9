"""
Health check endpoints.

Used for monitoring and load balancer health checks.
"""
from datetime import datetime
import platform

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.infrastructure.database.pool import ConnectionPool

from apps.api.deps import get_pool

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns system health status.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "service": "storefront",
        "python_version": platform.python_version(),
    }


@router.get("/health/ready")
async def readiness_check(pool: ConnectionPool = Depends(get_pool)):
    """
    Readiness check endpoint.

    Ready once a pooled database connection answers.
    """
    database_ok = await pool.ping()
    return JSONResponse(
        status_code=200 if database_ok else 503,
        content={
            "status": "ready" if database_ok else "not_ready",
            "timestamp": datetime.utcnow().isoformat(),
            "checks": {
                "api": "ok",
                "database": "ok" if database_ok else "unavailable",
            },
        },
    )
