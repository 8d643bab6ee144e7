"""API router initialization."""

from fastapi import APIRouter

from .health import router as health_router
from .metrics import router as metrics_router

router = APIRouter()
router.include_router(health_router, prefix="/health", tags=["health"])

__all__ = ["router", "metrics_router"]
