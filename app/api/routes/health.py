"""
Health check endpoints.
"""

import logging

from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

from app.db.database import ping_db

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "message": "Wellness Sessions API is running"}


@router.get("/ready")
async def readiness_check():
    """
    Readiness check - verify all critical services are available.
    Used by orchestration systems (K8s, Docker, etc.)
    """
    checks = {"api": "ready"}

    try:
        await ping_db()
        checks["database"] = "ready"
    except (SQLAlchemyError, OSError):
        logger.exception("Database readiness check failed")
        checks["database"] = "unavailable"

    all_ready = all(v == "ready" for v in checks.values())

    return {
        "status": "ready" if all_ready else "not_ready",
        "checks": checks,
    }
