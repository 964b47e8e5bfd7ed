"""
Health check routes for monitoring and service discovery.
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text

from app.api.deps import SessionDep, guard
from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", dependencies=[Depends(guard("health:check"))])
def health_check() -> dict:
    """Basic health check with service name and version."""
    return {
        "status": "healthy",
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
    }


@router.get("/health/db", dependencies=[Depends(guard("health:db"))])
def database_health_check(session: SessionDep) -> dict:
    """Verify database connectivity by executing a simple query."""
    try:
        result = session.connection().execute(text("SELECT 1")).scalar()
        return {
            "status": "healthy",
            "database": "ok",
            "result": int(result) if result is not None else 1,
        }
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return {
            "status": "unhealthy",
            "database": "error",
        }
