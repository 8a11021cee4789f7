"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /api/health/ always returns 200 if process is up (liveness)
    - GET /api/health/ready reports the store and its current user count

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness gates traffic
"""

from fastapi import APIRouter, Depends, status

from apicrud.api.dependencies import get_user_store
from apicrud.core.user_store import UserStore

SERVICE_NAME = "apicrud"
SERVICE_VERSION = "1.0.0"

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/ready")
async def readiness_check(store: UserStore = Depends(get_user_store)):
    """Readiness probe — the in-memory store is always reachable once built."""
    return {
        "status": "ready",
        "checks": {"store": "healthy"},
        "users": len(store),
    }
