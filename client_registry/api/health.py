"""
Health Check Endpoints.

Provides liveness and readiness checks.

Endpoints:
- /health: Liveness check (process running)
- /health/ready: Readiness check (client store attached)
"""

from typing import Any

from fastapi import APIRouter, HTTPException, Request

from client_registry.core.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/health")
async def health_check() -> dict[str, str]:
    """
    Liveness check.

    Returns 200 if the process is running. No dependency checks.
    """
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(request: Request) -> dict[str, Any]:
    """
    Readiness check.

    Returns 200 with the number of stored clients once the store is
    attached to the application, 503 otherwise.
    """
    store = getattr(request.app.state, "client_store", None)
    if store is None:
        logger.warning("Readiness check failed", extra={"reason": "store not initialized"})
        raise HTTPException(status_code=503, detail="Client store not initialized")

    return {"status": "ready", "clients": len(store)}
