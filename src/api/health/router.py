"""Health check endpoints for monitoring."""

from fastapi import APIRouter

from src.utils.settings.app import AppSettings

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    """Liveness plus the running API version."""
    return {
        "status": "ok",
        "service": "admin-console-api",
        "version": AppSettings().API_VERSION,
    }


@router.get("/liveness")
async def liveness_check():
    """Simple liveness check - indicates if service is running."""
    return {"status": "alive", "service": "admin-console-api"}
