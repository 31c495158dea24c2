"""
API Routes Module.

Combines the route modules into a single router for the name search API.
"""
from fastapi import APIRouter

from .health import router as health_router
from .names import router as names_router

# Combined router that includes all sub-routers
router = APIRouter()

router.include_router(health_router)
router.include_router(names_router)

__all__ = ["router"]
