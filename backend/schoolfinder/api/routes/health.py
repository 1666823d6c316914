"""Health & Readiness Probes — welcome endpoint and database readiness.

Invariants:
    - GET / always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 if the database is unreachable (readiness)
"""

import logging
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

WELCOME_MESSAGE = "Welcome to School Management API"


@router.get("/", status_code=status.HTTP_200_OK)
async def welcome():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"success": True, "message": WELCOME_MESSAGE}


@router.get("/health/ready")
async def readiness_check(request: Request):
    """Readiness probe — includes database connectivity."""
    db_manager = getattr(request.app.state, "db_manager", None)
    db_ok = await db_manager.health_check() if db_manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
