"""Health check endpoints for monitoring."""

from fastapi import APIRouter, HTTPException, Request
from loguru import logger

from ..core.registry import get_service_factory
from ..core.services import PostService

router = APIRouter()


@router.get("")
async def health():
    """Basic health check endpoint."""
    return {"status": "ok"}


@router.get("/ready")
async def readiness_check(request: Request):
    """Kubernetes-style readiness check."""
    post_service = get_service_factory(PostService)(request.state.db)
    if not await post_service.health_check():
        logger.error("Readiness check failed: post storage unavailable")
        raise HTTPException(
            status_code=503,
            detail={"ready": False, "error": "post storage unavailable"},
        )
    return {"ready": True}


@router.get("/live")
async def liveness_check():
    """Kubernetes-style liveness check."""
    return {"alive": True}
